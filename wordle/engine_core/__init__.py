"""
Engine Core - Pure game rules.

The engine is the stateless part of the game:
1. Scores a guess against the answer
2. Validates a guess before it is scored
"""

from .scorer import score, classify, LetterMark, PLACEHOLDER
from .validation import validate_guess, GuessError

__all__ = [
    "score",
    "classify",
    "LetterMark",
    "PLACEHOLDER",
    "validate_guess",
    "GuessError",
]
