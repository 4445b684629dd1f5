"""
Guess Validation - Checks a guess before it is scored.

Validates that:
1. The guess has the game's word length
2. It contains only ASCII letters
3. It is a dictionary word

Each failure is reported on its own; the first failing check wins.
"""

from __future__ import annotations
from enum import Enum
from typing import Container


class GuessError(Enum):
    """Reasons a guess is rejected."""
    WRONG_LENGTH = "wrong_length"
    NOT_ALPHABETIC = "not_alphabetic"
    NOT_IN_DICTIONARY = "not_in_dictionary"


def is_word(text: str) -> bool:
    """True if text is non-empty and made only of ASCII letters."""
    return text.isascii() and text.isalpha()


def validate_guess(
    guess: str,
    word_length: int,
    words: Container[str],
) -> GuessError | None:
    """
    Validate a guess.

    Returns the GuessError for the first failed check, None if valid.
    `words` must do case-insensitive membership (see WordList).
    """
    if len(guess) != word_length:
        return GuessError.WRONG_LENGTH
    if not is_word(guess):
        return GuessError.NOT_ALPHABETIC
    if guess not in words:
        return GuessError.NOT_IN_DICTIONARY
    return None
