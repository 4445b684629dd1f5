"""
Dictionary Module - Word lists and answer selection.

The dictionary is read once per game and never reloaded.
"""

from .loader import WordList, DictionaryError, load_words, choose_answer

__all__ = [
    "WordList",
    "DictionaryError",
    "load_words",
    "choose_answer",
]
