"""
Game Data Models

Contains all round-related data structures and enums.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict, Optional, Tuple


class MatchClass(IntEnum):
    """
    Outcome of scoring one guessed letter.

    Ordered so that a better outcome compares greater, which is what the
    letter hint aggregation relies on.
    """
    UNCALCULATED = 0
    ABSENT = 1
    PRESENT = 2
    CORRECT = 3
    ERROR = 4


CODE_BASE = 5


def pack_code(match_class: MatchClass, occurrence_rank: int = 0) -> int:
    """Build a correction code from its match class and occurrence rank."""
    return int(match_class) + CODE_BASE * occurrence_rank


def match_class(code: int) -> MatchClass:
    """Match class stored in the low part of a correction code."""
    return MatchClass(code % CODE_BASE)


def occurrence_rank(code: int) -> int:
    """Extra copies of the letter in the answer (display emphasis only)."""
    return code // CODE_BASE


class RoundPhase(Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class RoundStatus:
    """
    Tagged round status.

    ``attempt`` is the 0-based index of the most recently submitted guess
    for IN_PROGRESS and WON, and None for NOT_STARTED and LOST.
    """
    phase: RoundPhase
    attempt: Optional[int] = None

    @classmethod
    def not_started(cls) -> "RoundStatus":
        return cls(RoundPhase.NOT_STARTED)

    @classmethod
    def in_progress(cls, attempt: int) -> "RoundStatus":
        return cls(RoundPhase.IN_PROGRESS, attempt)

    @classmethod
    def won(cls, attempt: int) -> "RoundStatus":
        return cls(RoundPhase.WON, attempt)

    @classmethod
    def lost(cls) -> "RoundStatus":
        return cls(RoundPhase.LOST)

    @property
    def is_active(self) -> bool:
        """True while guesses are still accepted."""
        return self.phase in (RoundPhase.NOT_STARTED, RoundPhase.IN_PROGRESS)

    @property
    def is_over(self) -> bool:
        return not self.is_active

    def __str__(self) -> str:
        if self.attempt is None:
            return self.phase.value
        return f"{self.phase.value}({self.attempt})"


@dataclass(frozen=True)
class RoundState:
    """Read-only snapshot of a round for renderers and tests."""
    round_id: Optional[str]
    status: RoundStatus
    guesses: Tuple[str, ...]
    score_grid: Tuple[Tuple[int, ...], ...]
    letter_hints: Dict[str, MatchClass]
    cursor: Optional[Tuple[int, int]] = None
    answer: Optional[str] = None  # Only included once the round is lost
