"""
Tests for word data and validation.

Tests:
- Rule order and reason codes
- Case-insensitive, idempotent validation
- Length change rule
- Slang and profanity handling
"""

import pytest

from ..lexicon import (
    ReasonCode,
    ValidationOptions,
    WordData,
    load_bundled_word_data,
    mask_word,
    read_word_list,
    validate_word,
)


class TestWordData:
    """Tests for the immutable lexicon."""

    def test_words_are_normalized(self):
        data = WordData.from_words([" cat ", "Bat", ""])
        assert data.enable_words == frozenset({"CAT", "BAT"})
        assert data.has_word("cat")

    def test_slang_counts_as_word(self, word_data):
        assert word_data.has_word("yeet")
        assert not word_data.in_primary("yeet")
        assert word_data.is_slang("YEET")

    def test_random_word_by_length(self, word_data, utilities):
        word = word_data.random_word_by_length(4, utilities.rng)
        assert word in word_data.enable_words
        assert len(word) == 4

    def test_random_word_missing_length(self, word_data):
        assert word_data.random_word_by_length(12) is None
        assert word_data.random_words_by_length(12, count=3) == []

    def test_read_word_list_skips_comments(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("# header\ncat\n\n  dog  \n", encoding="utf-8")
        assert read_word_list(path) == ["cat", "dog"]

    def test_bundled_lexicon_loads(self):
        data = load_bundled_word_data()
        assert data.has_word("WORD")
        assert data.word_count > 100


class TestValidationRules:
    """Tests for rule order (first failure wins)."""

    @pytest.mark.parametrize("word", ["", "   ", None])
    def test_empty_word(self, word_data, word):
        result = validate_word(word, word_data)
        assert not result.is_valid
        assert result.reason == ReasonCode.EMPTY_WORD
        assert result.user_message == "word cannot be empty"

    def test_bot_bypasses_everything_else(self, word_data):
        result = validate_word("xq", word_data, ValidationOptions(is_bot=True))
        assert result.is_valid
        assert result.word == "XQ"

    def test_bot_still_rejects_empty(self, word_data):
        result = validate_word("", word_data, ValidationOptions(is_bot=True))
        assert result.reason == ReasonCode.EMPTY_WORD

    def test_invalid_characters(self, word_data):
        result = validate_word("c4t", word_data)
        assert result.reason == ReasonCode.INVALID_CHARACTERS
        assert result.user_message == "only letters allowed"

    def test_too_short_checked_before_dictionary(self, word_data):
        result = validate_word("at", word_data)
        assert result.reason == ReasonCode.TOO_SHORT

    def test_length_check_can_be_disabled(self, word_data):
        result = validate_word("at", word_data, ValidationOptions(check_length=False))
        assert result.reason == ReasonCode.NOT_IN_DICTIONARY

    def test_not_in_dictionary(self, word_data):
        result = validate_word("zzz", word_data)
        assert result.reason == ReasonCode.NOT_IN_DICTIONARY
        assert result.user_message == "not a word"

    def test_valid_word(self, word_data):
        result = validate_word("cats", word_data)
        assert result.is_valid
        assert result.reason is None
        assert result.word == "CATS"


class TestLengthChange:
    """Tests for the one-letter length change rule."""

    @pytest.mark.parametrize(
        "previous, word, too_large",
        [
            ("CAT", "CATS", False),
            ("CATS", "CAT", False),
            ("CAT", "BAT", False),
            ("CAT", "CARTS", True),
            ("LETTERS", "CAT", True),
        ],
    )
    def test_length_change(self, word_data, previous, word, too_large):
        result = validate_word(word, word_data, ValidationOptions(previous_word=previous))
        assert (result.reason == ReasonCode.LENGTH_CHANGE_TOO_LARGE) == too_large

    def test_length_change_ignored_without_length_check(self, word_data):
        options = ValidationOptions(previous_word="CAT", check_length=False)
        assert validate_word("CARTS", word_data, options).is_valid


class TestNormalization:
    """Tests for case handling."""

    @pytest.mark.parametrize("word", ["cat", "CAT", "Cat", "  cAt ", "zzz", "c4t", "at"])
    def test_case_insensitive_and_idempotent(self, word_data, word):
        first = validate_word(word, word_data)
        assert first == validate_word(word.upper(), word_data)
        assert first == validate_word(first.word, word_data)


class TestSlangAndProfanity:
    """Tests for slang switch and display masking."""

    def test_slang_allowed_by_default(self, word_data):
        assert validate_word("yeet", word_data).is_valid

    def test_slang_rejected_when_disabled(self, word_data):
        result = validate_word("yeet", word_data, ValidationOptions(allow_slang=False))
        assert result.reason == ReasonCode.NOT_IN_DICTIONARY

    def test_profanity_stays_valid_but_masked(self, word_data):
        result = validate_word("darn", word_data)
        assert result.is_valid
        assert result.display_override == mask_word("DARN")
        assert result.display_override != "DARN"
        assert len(result.display_override) == 4

    def test_clean_word_has_no_override(self, word_data):
        assert validate_word("cat", word_data).display_override is None
