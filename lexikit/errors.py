"""
Exception types raised by lexikit.

Only a handful of failures are specific to this package; everything else
(missing config files, bad matrix shapes, out-of-range arguments) is
reported with the built-in exception types.
"""

from __future__ import annotations


class LexikitError(Exception):
    """Base class for all lexikit-specific errors."""


class StemError(LexikitError):
    """Raised when a word cannot be stemmed."""


class NonAsciiInputError(StemError, ValueError):
    """
    Raised when a word handed to the stemmer contains a character outside
    the 0-127 ASCII range.

    Parameters
    ----------
    word : str
        The rejected word.
    """

    def __init__(self, word: str) -> None:
        self.word = word
        super().__init__(
            f"Only supports English words with ASCII characters, got: {word!r}"
        )


class SentimentTermExistsError(LexikitError, KeyError):
    """Raised when adding a lexicon term that is already present."""

    def __init__(self, term: str) -> None:
        self.term = term
        super().__init__(f"Term already exists: {term!r}")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return self.args[0]
