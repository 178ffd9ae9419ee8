"""
Round Service

Driver-facing facade around RoundEngine. Keeps the input cursor, turns
key presses into grid edits, submits complete rows and logs round events.
"""

import random
import uuid
from typing import Optional, Tuple
from ..config import Config
from ..config.game_settings import WORD_LENGTH, MAX_ROUNDS
from ..exceptions import InvalidStateError
from ..models.game import RoundPhase, RoundState, match_class
from ..utils.game_logger import game_logger
from .round_engine import RoundEngine
from .word_source import WordSource, FileWordSource, choose_word


class RoundService:
    """
    Runs one round at a time for a single player.

    This class handles:
    - Answer selection through a word source
    - Cursor movement inside the current guess row
    - Submission of complete rows and end-of-round detection
    - Read-only snapshots for whatever renders the board
    """

    def __init__(self,
                 word_source: WordSource,
                 rng: Optional[random.Random] = None,
                 fallback_word: str = Config.FALLBACK_WORD,
                 strict_word_source: bool = Config.STRICT_WORD_SOURCE):
        self.word_source = word_source
        self.rng = rng or random.Random()
        self.fallback_word = fallback_word
        self.strict_word_source = strict_word_source

        self.round_id: Optional[str] = None
        self.engine: Optional[RoundEngine] = None
        self.cursor = [0, 0]  # [row, column]; column == WORD_LENGTH means the row is full

    def new_round(self, answer: Optional[str] = None) -> str:
        """
        Starts a new round, replacing any previous one.

        Args:
            answer: Fixed answer, normally left out so the word source picks one

        Returns:
            str: Unique round ID
        """
        if answer is None:
            answer = choose_word(self.word_source, self.rng,
                                 fallback=self.fallback_word, strict=self.strict_word_source)

        self.engine = RoundEngine(answer.upper())
        self.round_id = str(uuid.uuid4())
        self.cursor = [0, 0]

        game_logger.log_round_event(self.round_id, 'round_started',
                                    word_length=WORD_LENGTH, max_rounds=MAX_ROUNDS)
        return self.round_id

    def _require_engine(self) -> RoundEngine:
        if self.engine is None:
            raise InvalidStateError("No round has been started")
        return self.engine

    @property
    def is_over(self) -> bool:
        return self._require_engine().is_over

    def type_letter(self, letter: str) -> bool:
        """
        Writes a letter at the cursor and moves the cursor right.

        Returns:
            bool: False if the input was ignored (round over or row full)
        """
        engine = self._require_engine()
        row, col = self.cursor
        if engine.is_over or col >= WORD_LENGTH:
            return False

        engine.place_letter(row, col, letter)
        self.cursor[1] = min(col + 1, WORD_LENGTH)
        game_logger.log_user_action('type_letter', self.round_id, row=row, col=col)
        return True

    def backspace(self) -> bool:
        """Moves the cursor left and clears the cell it lands on."""
        engine = self._require_engine()
        if engine.is_over:
            return False

        row = self.cursor[0]
        col = max(self.cursor[1] - 1, 0)
        engine.erase_letter(row, col)
        self.cursor[1] = col
        game_logger.log_user_action('backspace', self.round_id, row=row, col=col)
        return True

    def select_column(self, col: int) -> bool:
        """Moves the cursor to another cell of the current row."""
        engine = self._require_engine()
        if engine.is_over or not 0 <= col < WORD_LENGTH:
            return False

        self.cursor[1] = col
        return True

    def submit(self) -> Optional[Tuple[int, ...]]:
        """
        Submits the current row once every cell holds a letter.

        Returns:
            The row's correction codes, or None if the row is incomplete

        Raises:
            InvalidStateError: If the round is already won or lost
        """
        engine = self._require_engine()
        row = self.cursor[0]

        try:
            if not engine.is_over and not engine.row_is_complete(row):
                return None
            codes = engine.submit_guess()
        except InvalidStateError as e:
            game_logger.log_error(e, 'submit', self.round_id)
            raise

        self.cursor = [min(row + 1, MAX_ROUNDS - 1), 0]

        status = engine.status
        game_logger.log_round_event(
            self.round_id, 'guess_submitted',
            attempt=row,
            match_classes=[int(match_class(code)) for code in codes],
            status=str(status)
        )
        if status.phase == RoundPhase.WON:
            game_logger.log_round_event(self.round_id, 'round_won', attempts=status.attempt + 1)
        elif status.phase == RoundPhase.LOST:
            game_logger.log_round_event(self.round_id, 'round_lost', answer=engine.answer)

        return codes

    def get_round_state(self) -> RoundState:
        """Returns the current round state (answer only once lost)."""
        return self._require_engine().snapshot(self.round_id, tuple(self.cursor))

    def get_result_message(self) -> str:
        """End-of-round text, empty while the round is running."""
        engine = self._require_engine()
        status = engine.status
        if status.phase == RoundPhase.WON:
            return f"You have won in {status.attempt + 1} tries!"
        if status.phase == RoundPhase.LOST:
            return f"You have lost! The word was {engine.answer}."
        return ""


def create_round_service(config_class=Config) -> RoundService:
    """
    Builds a RoundService from a configuration class.

    Args:
        config_class: Configuration class to use

    Returns:
        RoundService reading answers from the configured word list
    """
    return RoundService(
        FileWordSource(config_class.WORD_LIST_PATH),
        rng=random.Random(config_class.RANDOM_SEED),
        fallback_word=config_class.FALLBACK_WORD,
        strict_word_source=config_class.STRICT_WORD_SOURCE
    )


# Global service instance
_round_service = None


def get_round_service() -> Optional[RoundService]:
    """Get the global round service instance."""
    return _round_service


def initialize_round_service(config_class=Config) -> RoundService:
    """Initialize the global round service instance."""
    global _round_service
    _round_service = create_round_service(config_class)
    return _round_service
