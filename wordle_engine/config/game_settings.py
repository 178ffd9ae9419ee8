"""
Game Configuration Constants Module

Fixed rules of a round: board dimensions, the empty-cell glyph, the
alphabet hints are tracked over, and the last-resort answer. Also holds
the word list integrity checks used by the word sources.
"""

from typing import Dict, Final, Iterable, List

WORD_LENGTH: Final[int] = 5
"""Letters per guess and per answer."""

MAX_ROUNDS: Final[int] = 6
"""
Maximum number of guess attempts allowed per round.
Type: Final[int] - Immutable to prevent accidental modification
"""

EMPTY_CELL: Final[str] = '·'
"""Glyph held by guess cells that have not been written yet."""

ALPHABET: Final[str] = 'ABCDEFGHIJKLMNOPQRSTUVWXYZ'

DEFAULT_WORD: Final[str] = 'HELLO'
"""Answer used when the word source cannot produce one."""


def is_playable_word(word: str) -> bool:
    """True for a WORD_LENGTH string of ASCII letters, any case."""
    return (
        isinstance(word, str)
        and len(word) == WORD_LENGTH
        and word.isascii()
        and word.isalpha()
    )


def validate_word_list_integrity(words: List[str]) -> bool:
    """
    Validates the integrity and consistency of a word list.

    This function performs validation to ensure:
    1. Length validation: All words must be exactly 5 characters
    2. Character validation: Only alphabetic characters allowed
    3. Uniqueness validation: No duplicate entries
    4. Format validation: Consistent uppercase formatting

    Args:
        words: Word list to check

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not words:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(words):
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")

        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.isupper():
            raise ValueError(f"Word at index {index} '{word}' is not in uppercase format")

    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if words.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


def get_word_statistics(words: Iterable[str]) -> Dict:
    """
    Analyzes a word list and returns statistical information.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words in the list
            - avg_vowel_count: Average vowels per word
            - letter_frequency: Distribution of letters across all words
            - most_common_letters: Top five letters by frequency
    """
    words = list(words)
    if not words:
        return {"error": "Word list is empty"}

    vowels = set('AEIOU')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in words)

    letter_frequency: Dict[str, int] = {}
    for word in words:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(words),
        "avg_vowel_count": round(total_vowels / len(words), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }
