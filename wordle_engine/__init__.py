"""
Wordle Rules Engine Package

Scoring and round state machine for a Wordle-style guessing game. Rendering
is left to whatever front-end embeds the engine; it drives a RoundService
(or a bare RoundEngine) and draws the RoundState snapshots it gets back.
"""

from .config import Config
from .exceptions import (
    WordleEngineError, InvalidStateError, GridEditError, WordSourceUnavailableError
)
from .models import MatchClass, RoundPhase, RoundStatus, RoundState
from .services import (
    RoundEngine, RoundService, score_guess, choose_word,
    create_round_service, get_round_service, initialize_round_service
)

__all__ = [
    'Config',
    'WordleEngineError', 'InvalidStateError', 'GridEditError', 'WordSourceUnavailableError',
    'MatchClass', 'RoundPhase', 'RoundStatus', 'RoundState',
    'RoundEngine', 'RoundService', 'score_guess', 'choose_word',
    'create_round_service', 'get_round_service', 'initialize_round_service'
]
