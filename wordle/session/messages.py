"""
Messages - All text shown to the player.
"""

from __future__ import annotations

from ..engine_core.validation import GuessError

WELCOME = "Welcome to Wordle!"
CORRECT = "Correct!"


def last_attempt_prompt(word_length: int) -> str:
    return f"Enter a {word_length} letter word (last attempt):"


def prompt(word_length: int, attempts_remaining: int) -> str:
    return f"Enter a {word_length} letter word ({attempts_remaining} attempts remaining):"


def guess_error(error: GuessError, word_length: int) -> str:
    if error == GuessError.WRONG_LENGTH:
        return f"Words must be {word_length} letters long - try again."
    if error == GuessError.NOT_ALPHABETIC:
        return "Words must contain only letters - try again."
    return "Word not found in the dictionary - try again."


def reveal(answer: str) -> str:
    return f'Bad luck - the word is "{answer}".'
