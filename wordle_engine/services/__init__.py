"""
Services Package

Contains all game logic and service classes.
"""

from .round_engine import RoundEngine, score_guess
from .word_source import WordSource, StaticWordSource, FileWordSource, choose_word
from .round_service import (
    RoundService, create_round_service, get_round_service, initialize_round_service
)

__all__ = [
    'RoundEngine', 'score_guess',
    'WordSource', 'StaticWordSource', 'FileWordSource', 'choose_word',
    'RoundService', 'create_round_service', 'get_round_service', 'initialize_round_service'
]
