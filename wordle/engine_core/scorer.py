"""
Scorer - Classifies each letter of a guess against the answer.

The hint string has one symbol per position:
- Uppercase letter: correct letter in the correct position
- Lowercase letter: letter present elsewhere in the answer
- '-': letter absent, or already fully accounted for

Scoring runs in two passes so repeated letters are credited only as many
times as the answer contains them:
1. Exact matches are marked and consumed on both sides
2. Remaining guess letters claim the leftmost unconsumed answer letter
"""

from __future__ import annotations
from enum import Enum

PLACEHOLDER = "-"


class LetterMark(Enum):
    """Classification of one hint position."""
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"


def score(guess: str, answer: str) -> str:
    """
    Score a guess against the answer.

    Comparison is case-insensitive. Neither argument is modified.

    Raises ValueError if the words differ in length.
    """
    if len(guess) != len(answer):
        raise ValueError(
            f"Guess length {len(guess)} does not match answer length {len(answer)}"
        )

    # None marks a consumed letter
    g: list[str | None] = list(guess.lower())
    a: list[str | None] = list(answer.lower())
    hint = [PLACEHOLDER] * len(g)

    for i in range(len(g)):
        if g[i] == a[i]:
            hint[i] = guess[i].upper()
            g[i] = None
            a[i] = None

    for i, letter in enumerate(g):
        if letter is None:
            continue
        for j in range(len(a)):
            if a[j] == letter:
                hint[i] = letter
                a[j] = None
                break

    return "".join(hint)


def classify(hint: str) -> list[LetterMark]:
    """Decode a hint string into per-position marks."""
    marks = []
    for symbol in hint:
        if symbol == PLACEHOLDER:
            marks.append(LetterMark.ABSENT)
        elif symbol.isupper():
            marks.append(LetterMark.CORRECT)
        else:
            marks.append(LetterMark.PRESENT)
    return marks
