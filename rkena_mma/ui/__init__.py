"""
UI System Module
"""

from rkena_mma.ui.hud import HUD, HealthBar, StaminaBar
from rkena_mma.ui.menu import MenuSystem, MainMenu, ResultScreen

__all__ = [
    'HUD', 'HealthBar', 'StaminaBar',
    'MenuSystem', 'MainMenu', 'ResultScreen',
]
