"""
Tests for dictionary loading and answer selection.
"""

import random

import pytest

from ..dictionary import WordList, DictionaryError, load_words, choose_answer


class TestLoadWords:
    """Tests for reading a dictionary file."""

    def test_keeps_alphabetic_words_of_length(self, dictionary_file):
        words = load_words(dictionary_file, 5)
        assert list(words) == ["crane", "SLATE", "mango", "tango", "adieu"]

    def test_other_lengths(self, dictionary_file):
        assert list(load_words(dictionary_file, 2)) == ["ab"]
        assert list(load_words(dictionary_file, 6)) == ["cranes"]

    def test_no_matching_words(self, dictionary_file):
        words = load_words(dictionary_file, 9)
        assert len(words) == 0
        assert not words

    def test_missing_file(self, tmp_path):
        with pytest.raises(DictionaryError) as exc:
            load_words(tmp_path / "missing", 5)
        assert exc.value.reason == "cannot be opened"

    def test_directory_is_unreadable(self, tmp_path):
        with pytest.raises(DictionaryError):
            load_words(tmp_path, 5)


class TestWordList:
    """Tests for membership and filtering."""

    def test_membership_case_insensitive(self, dictionary_file):
        words = load_words(dictionary_file, 5)
        assert "slate" in words
        assert "CRANE" in words
        assert "MaNgO" in words
        assert "pushy" not in words

    def test_non_string_not_member(self, word_list):
        assert 5 not in word_list

    def test_from_words_filters(self):
        words = WordList.from_words(["abc", "ABC", "a1c", "abcd", "xyz"], 3)
        assert words.words == ("abc", "xyz")
        assert words.word_length == 3

    def test_immutable(self, word_list):
        with pytest.raises(AttributeError):
            word_list.words = ()


class TestChooseAnswer:
    """Tests for answer selection."""

    def test_seeded_choice_is_reproducible(self, word_list):
        first = choose_answer(word_list, random.Random(42))
        second = choose_answer(word_list, random.Random(42))
        assert first == second
        assert first in word_list

    def test_single_word(self):
        words = WordList.from_words(["mango"], 5)
        assert choose_answer(words, random.Random()) == "mango"

    def test_every_word_reachable(self, word_list):
        rng = random.Random(7)
        picked = {choose_answer(word_list, rng) for _ in range(500)}
        assert picked == set(word_list)

    def test_empty_list_rejected(self):
        with pytest.raises(DictionaryError):
            choose_answer(WordList(word_length=5), random.Random())
