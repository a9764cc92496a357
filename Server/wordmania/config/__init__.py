"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules, keyboard layout and colour tables
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    MAX_ATTEMPTS, WORD_LENGTH, DELETE_KEY, ENTER_KEY, DELETE_ALIASES,
    KEYBOARD_ROWS, LETTER_COLORS, KEY_COLORS
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'MAX_ATTEMPTS', 'WORD_LENGTH', 'DELETE_KEY', 'ENTER_KEY', 'DELETE_ALIASES',
    'KEYBOARD_ROWS', 'LETTER_COLORS', 'KEY_COLORS'
]
