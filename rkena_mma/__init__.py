"""
RKENA MMA Championship
======================
Arcade MMA fighter vs a scripted AI opponent.
"""

__version__ = "1.0.0"
