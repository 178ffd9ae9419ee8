"""
Data Models Package

Contains all data models and schemas used throughout the engine.
"""

from .game import (
    MatchClass, RoundPhase, RoundStatus, RoundState,
    pack_code, match_class, occurrence_rank
)

__all__ = [
    'MatchClass', 'RoundPhase', 'RoundStatus', 'RoundState',
    'pack_code', 'match_class', 'occurrence_rank'
]
