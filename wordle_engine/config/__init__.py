"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: runtime configuration (environment-based)
- game_settings.py: Game rules and constants
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    WORD_LENGTH, MAX_ROUNDS, EMPTY_CELL, ALPHABET, DEFAULT_WORD,
    is_playable_word, validate_word_list_integrity, get_word_statistics
)

__all__ = [
    # Runtime configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'WORD_LENGTH', 'MAX_ROUNDS', 'EMPTY_CELL', 'ALPHABET', 'DEFAULT_WORD',
    'is_playable_word', 'validate_word_list_integrity', 'get_word_statistics'
]
