"""
AI System Module
"""

from rkena_mma.ai.controller import AIController, AIMovementMemory

__all__ = ['AIController', 'AIMovementMemory']
