"""
Engine Exceptions

Errors raised by the rules engine and its collaborators.
"""


class WordleEngineError(Exception):
    """Base class for all engine errors."""


class InvalidStateError(WordleEngineError):
    """Operation attempted on a round that is already won or lost."""


class GridEditError(WordleEngineError):
    """Write or erase outside the current guess row, or with a bad letter."""


class WordSourceUnavailableError(WordleEngineError):
    """The word source could not produce an answer."""
