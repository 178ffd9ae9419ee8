"""
Word Source Service

Supplies the secret answer for a new round. A word source only has to
produce a list of candidate words; choose_word() filters it, picks one
uniformly at random and falls back to a default word when the source fails.
"""

import json
import random
from pathlib import Path
from typing import Iterable, List, Optional
from ..config.game_settings import DEFAULT_WORD, is_playable_word
from ..exceptions import WordSourceUnavailableError
from ..utils.game_logger import game_logger


class WordSource:
    """Base class for answer providers."""

    def load_words(self) -> List[str]:
        """
        Returns the raw candidate words.

        Raises:
            WordSourceUnavailableError: If the words cannot be read
        """
        raise NotImplementedError

    def playable_words(self) -> List[str]:
        """Uppercased candidates that are five ASCII letters long."""
        return [word.strip().upper() for word in self.load_words()
                if isinstance(word, str) and is_playable_word(word.strip())]


class StaticWordSource(WordSource):
    """Word source backed by an in-memory list."""

    def __init__(self, words: Iterable[str]):
        self.words = list(words)

    def load_words(self) -> List[str]:
        return list(self.words)


class FileWordSource(WordSource):
    """
    Word source backed by a file.

    ``.json`` files must contain an array of words; any other file is read
    as plain text with one word per line.
    """

    def __init__(self, path):
        self.path = Path(path)

    def load_words(self) -> List[str]:
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                if self.path.suffix.lower() == '.json':
                    words = json.load(f)
                    if not isinstance(words, list):
                        raise ValueError("JSON file must contain an array of words")
                else:
                    words = f.read().splitlines()
        except (OSError, ValueError) as e:
            # json.JSONDecodeError and UnicodeDecodeError are ValueErrors
            raise WordSourceUnavailableError(f"Cannot read word list {self.path}: {e}") from e

        return words


def choose_word(source: WordSource,
                rng: Optional[random.Random] = None,
                fallback: str = DEFAULT_WORD,
                strict: bool = False) -> str:
    """
    Pick the answer for a new round.

    Args:
        source: Where candidate words come from
        rng: Random generator, the module-level one when omitted
        fallback: Answer used when the source fails
        strict: Raise instead of falling back

    Returns:
        str: An uppercase five-letter word

    Raises:
        WordSourceUnavailableError: Only in strict mode
    """
    rng = rng or random
    try:
        words = source.playable_words()
        if not words:
            raise WordSourceUnavailableError("Word source has no five-letter words")
    except WordSourceUnavailableError as e:
        if strict:
            game_logger.log_error(e, 'choose_word')
            raise
        game_logger.log_warning('choose_word', str(e), fallback=fallback)
        return fallback.upper()

    return rng.choice(words)
