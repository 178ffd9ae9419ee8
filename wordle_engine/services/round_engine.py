"""
Round Engine

Contains the rules of a single round: the guess grid, per-letter scoring,
the aggregated letter hints and the win/loss state machine.
"""

from typing import Dict, List, Optional, Tuple
from ..config.game_settings import WORD_LENGTH, MAX_ROUNDS, EMPTY_CELL, ALPHABET, is_playable_word
from ..exceptions import GridEditError, InvalidStateError
from ..models.game import (
    CODE_BASE, MatchClass, RoundPhase, RoundState, RoundStatus, match_class
)


def score_guess(answer: str, guess: str) -> Tuple[int, ...]:
    """
    Score a guess against the answer, one correction code per column.

    Each letter starts as ABSENT. A letter found anywhere in the answer is
    raised to PRESENT, or CORRECT when it also sits in the same column, and
    every extra copy of the letter in the answer adds CODE_BASE to the code.

    Guessed copies of a letter are not capped by the number of copies in the
    answer: against SPEED every E in ERASE scores at least PRESENT.
    """
    codes = []
    for i, letter in enumerate(guess):
        code = int(MatchClass.ABSENT)
        if letter in answer:
            code += 1 + int(answer[i] == letter) + CODE_BASE * (answer.count(letter) - 1)
        codes.append(code)
    return tuple(codes)


class RoundEngine:
    """
    State machine for one round.

    The engine owns the answer, a MAX_ROUNDS x WORD_LENGTH guess grid, the
    matching score grid, the round status and the letter hints. Letters are
    written into the current row with place_letter()/erase_letter() and the
    row is scored by submit_guess().
    """

    def __init__(self, answer: str):
        assert is_playable_word(answer) and answer.isupper(), \
            f"Answer must be {WORD_LENGTH} uppercase letters, got {answer!r}"

        self._answer = answer
        self._guesses: List[List[str]] = [[EMPTY_CELL] * WORD_LENGTH for _ in range(MAX_ROUNDS)]
        self._scores: List[List[int]] = [[0] * WORD_LENGTH for _ in range(MAX_ROUNDS)]
        self._status = RoundStatus.not_started()
        self._letter_hints: Dict[str, MatchClass] = {
            letter: MatchClass.UNCALCULATED for letter in ALPHABET
        }

    # ------------------------------------------------------------------
    # Read access

    @property
    def answer(self) -> str:
        return self._answer

    @property
    def status(self) -> RoundStatus:
        return self._status

    @property
    def is_over(self) -> bool:
        return self._status.is_over

    @property
    def attempts_used(self) -> int:
        """Number of rows submitted so far."""
        phase = self._status.phase
        if phase == RoundPhase.NOT_STARTED:
            return 0
        if phase == RoundPhase.LOST:
            return MAX_ROUNDS
        return self._status.attempt + 1

    @property
    def current_row(self) -> Optional[int]:
        """Row the next guess is written into, or None once the round is over."""
        if self._status.is_over:
            return None
        return self.attempts_used

    @property
    def guesses(self) -> Tuple[str, ...]:
        return tuple(''.join(row) for row in self._guesses)

    @property
    def score_grid(self) -> Tuple[Tuple[int, ...], ...]:
        return tuple(tuple(row) for row in self._scores)

    @property
    def letter_hints(self) -> Dict[str, MatchClass]:
        return dict(self._letter_hints)

    def row_is_complete(self, row: int) -> bool:
        return EMPTY_CELL not in self._guesses[row]

    def snapshot(self, round_id: Optional[str] = None,
                 cursor: Optional[Tuple[int, int]] = None) -> RoundState:
        """Copy of the whole round; the answer is only revealed once lost."""
        return RoundState(
            round_id=round_id,
            status=self._status,
            guesses=self.guesses,
            score_grid=self.score_grid,
            letter_hints=self.letter_hints,
            cursor=cursor,
            answer=self._answer if self._status.phase == RoundPhase.LOST else None
        )

    # ------------------------------------------------------------------
    # Grid editing

    def _check_editable(self, row: int, col: Optional[int] = None) -> None:
        if self._status.is_over:
            raise InvalidStateError(f"Round is already over ({self._status})")
        if row != self.current_row:
            raise GridEditError(f"Row {row} is not the current row {self.current_row}")
        if col is not None and not 0 <= col < WORD_LENGTH:
            raise GridEditError(f"Column {col} is outside 0..{WORD_LENGTH - 1}")

    def place_letter(self, row: int, col: int, letter: str) -> None:
        """Write one letter into the current row."""
        self._check_editable(row, col)
        if not (isinstance(letter, str) and len(letter) == 1
                and letter.isascii() and letter.isalpha()):
            raise GridEditError(f"Not a single letter: {letter!r}")

        self._guesses[row][col] = letter.upper()

    def erase_letter(self, row: int, col: int) -> None:
        """Reset one cell of the current row to the empty glyph."""
        self._check_editable(row, col)
        self._guesses[row][col] = EMPTY_CELL

    def erase_last(self, row: int) -> Optional[int]:
        """
        Clear the right-most filled cell of the current row.

        Returns:
            The cleared column, or None if the row was already empty
        """
        self._check_editable(row)
        for col in reversed(range(WORD_LENGTH)):
            if self._guesses[row][col] != EMPTY_CELL:
                self._guesses[row][col] = EMPTY_CELL
                return col
        return None

    # ------------------------------------------------------------------
    # Submission

    def submit_guess(self) -> Tuple[int, ...]:
        """
        Score the current row and advance the round.

        Returns:
            The correction codes of the submitted row

        Raises:
            InvalidStateError: If the round is already won or lost
        """
        if self._status.is_over:
            raise InvalidStateError(f"Guess made on a finished round ({self._status})")

        current = self.attempts_used
        assert self.row_is_complete(current), f"Row {current} is not fully populated"

        codes = self._make_correction(current)

        if all(match_class(code) == MatchClass.CORRECT for code in codes):
            self._status = RoundStatus.won(current)
        elif current == MAX_ROUNDS - 1:
            self._status = RoundStatus.lost()
        else:
            self._status = RoundStatus.in_progress(current)

        return codes

    def _make_correction(self, row: int) -> Tuple[int, ...]:
        guess = ''.join(self._guesses[row])
        codes = score_guess(self._answer, guess)

        for col, (letter, code) in enumerate(zip(guess, codes)):
            self._scores[row][col] = code
            self._letter_hints[letter] = max(self._letter_hints[letter], match_class(code))

        return codes
