"""Tests for loading and querying the word list."""

import pytest

from conftest import WORDS
from wordmania.config import Config
from wordmania.services.word_source import (
    WordListError,
    WordSource,
    get_word_statistics,
    load_word_source,
    validate_word_list_integrity,
)


class TestWordSource:

    def test_normalizes_words(self):
        source = WordSource(["  Crane", "ALLOW\r", "", "crane"])
        assert source.words == ["crane", "allow"]
        assert len(source) == 2
        assert source.word_length == 5

    def test_membership_is_case_insensitive(self):
        source = WordSource(WORDS)
        assert "allow" in source
        assert source.contains("LLAMA")
        assert "zzzzz" not in source

    def test_random_word_uses_rand_index(self):
        calls = []

        def pick_last(count):
            calls.append(count)
            return count - 1

        source = WordSource(WORDS, rand_index=pick_last)
        assert source.random_word() == WORDS[-1]
        assert calls == [len(WORDS)]

    def test_default_random_word_comes_from_list(self):
        source = WordSource(WORDS)
        assert source.random_word() in WORDS

    @pytest.mark.parametrize("words", [[], ["", "  "], ["crane", "cat"], ["cr4ne"]])
    def test_invalid_lists_raise(self, words):
        with pytest.raises(WordListError):
            WordSource(words)

    def test_words_must_match_board_width(self):
        with pytest.raises(WordListError):
            WordSource(["planet", "stream"])


class TestLoadWordSource:

    def test_loads_newline_delimited_file(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("allow\nllama\n\ncrane\n", encoding="utf-8")

        source = load_word_source(path)

        assert source.words == ["allow", "llama", "crane"]

    def test_missing_file_is_fatal(self, tmp_path):
        with pytest.raises(WordListError):
            load_word_source(tmp_path / "missing.txt")

    def test_file_of_six_letter_words_is_fatal(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("planet\nstream\n", encoding="utf-8")
        with pytest.raises(WordListError):
            load_word_source(path)

    def test_empty_file_is_fatal(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("\n\n", encoding="utf-8")
        with pytest.raises(WordListError):
            load_word_source(path)

    def test_bundled_word_list(self):
        source = load_word_source(Config.WORD_LIST_PATH)
        assert len(source) > 100
        assert source.word_length == 5
        assert "allow" in source


class TestWordListHelpers:

    def test_validate_accepts_clean_list(self):
        assert validate_word_list_integrity(["allow", "llama"])

    def test_validate_checks_expected_length(self):
        assert validate_word_list_integrity(["planet"], word_length=6)
        with pytest.raises(WordListError):
            validate_word_list_integrity(["planet"])

    def test_validate_rejects_uppercase(self):
        with pytest.raises(WordListError):
            validate_word_list_integrity(["ALLOW"])

    def test_statistics(self):
        stats = get_word_statistics(["allow", "llama"])
        assert stats["total_words"] == 2
        assert stats["letter_frequency"]["l"] == 4
        assert stats["most_common_letters"][0] == ("l", 4)
        assert stats["avg_vowel_count"] == 2.0

    def test_statistics_on_empty_list(self):
        assert "error" in get_word_statistics([])
