"""
Dictionary Loader - Reads the word file used by a game.

The loader:
- Splits the file on whitespace
- Keeps ASCII alphabetic words of exactly the game's length
- Collapses duplicates case-insensitively, first spelling wins
- Builds an immutable WordList once, before the session starts
"""

from __future__ import annotations
import logging
import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator

from ..engine_core.validation import is_word

logger = logging.getLogger(__name__)


class DictionaryError(Exception):
    """Raised when a dictionary cannot supply words."""

    def __init__(self, source: str, reason: str):
        self.source = source
        self.reason = reason
        super().__init__(f"Dictionary {source!r}: {reason}")


@dataclass(frozen=True)
class WordList:
    """
    The words a game may use.

    Membership is case-insensitive. Order follows the source file,
    which keeps seeded answer selection reproducible.
    """
    word_length: int
    words: tuple[str, ...] = ()
    _index: frozenset[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "_index", frozenset(w.lower() for w in self.words))

    @classmethod
    def from_words(cls, words: Iterable[str], word_length: int) -> WordList:
        """Build a WordList, filtering and deduplicating `words`."""
        kept: list[str] = []
        seen: set[str] = set()
        for word in words:
            if len(word) != word_length or not is_word(word):
                continue
            key = word.lower()
            if key in seen:
                continue
            seen.add(key)
            kept.append(word)
        return cls(word_length=word_length, words=tuple(kept))

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        return word.lower() in self._index


def load_words(source: str | Path, word_length: int) -> WordList:
    """
    Load the words of `word_length` letters from a dictionary file.

    Raises DictionaryError if the file cannot be read.
    """
    path = Path(source)
    try:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            tokens = [token for line in f for token in line.split()]
    except OSError as e:
        raise DictionaryError(str(source), "cannot be opened") from e

    words = WordList.from_words(tokens, word_length)
    logger.debug(
        "Loaded %d %d-letter words from %s (%d tokens)",
        len(words), word_length, path, len(tokens),
    )
    return words


def choose_answer(words: WordList, rng: random.Random) -> str:
    """
    Pick the answer uniformly from `words`.

    The caller owns the random source; seed it for reproducible games.
    Raises DictionaryError if there is nothing to pick.
    """
    if not words:
        raise DictionaryError(
            "<word list>", f"contains no {words.word_length} letter words"
        )
    return rng.choice(words.words)
