"""
Pytest fixtures for Wordle tests.
"""

import pytest

from ..dictionary import WordList
from ..session import Session


WORDS = [
    "crane", "slate", "speed", "erase", "eerie", "mango",
    "tango", "adieu", "hello", "lemon", "level", "belle",
]


@pytest.fixture
def word_list() -> WordList:
    """Five-letter word list covering the scenarios under test."""
    return WordList.from_words(WORDS, 5)


@pytest.fixture
def make_session(word_list):
    """Factory for sessions with a fixed answer."""

    def _make(answer: str = "crane", max_attempts: int = 6) -> Session:
        return Session(answer=answer, words=word_list, max_attempts=max_attempts)

    return _make


@pytest.fixture
def dictionary_file(tmp_path):
    """A dictionary file with noise the loader must skip."""
    path = tmp_path / "words"
    path.write_text(
        "crane\nSLATE\ncrane\nCrane\nab\nca-ne\ncranes\n"
        "mango tango\n  adieu  \ncafé\n",
        encoding="utf-8",
    )
    return path
