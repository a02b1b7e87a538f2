"""
Word Validation - Decides whether a word may be played.

Rules are checked in order and the first failure wins:
1. Empty word
2. Bots bypass every remaining rule
3. Only letters A-Z
4. At least 3 letters (when length checks are on)
5. Length changes by at most one letter from the previous word
6. Word is in the lexicon (or accepted slang)

Validation never raises for bad input. Failures come back as a
ValidationResult carrying a reason code and a short user message.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
import re

from .word_data import WordData, normalize_word


MIN_WORD_LENGTH = 3
MAX_LENGTH_CHANGE = 1

_LETTERS_ONLY = re.compile(r"^[A-Z]+$")
_MASK_SYMBOLS = "!@#$%^&*"


class ReasonCode(str, Enum):
    """Machine-readable reasons a word or move was rejected."""
    EMPTY_WORD = "EMPTY_WORD"
    INVALID_CHARACTERS = "INVALID_CHARACTERS"
    TOO_SHORT = "TOO_SHORT"
    LENGTH_CHANGE_TOO_LARGE = "LENGTH_CHANGE_TOO_LARGE"
    NOT_IN_DICTIONARY = "NOT_IN_DICTIONARY"
    ALREADY_USED = "ALREADY_USED"
    GAME_NOT_ACTIVE = "GAME_NOT_ACTIVE"
    INVALID_MOVE = "INVALID_MOVE"
    LOCKED_LETTER_REMOVED = "LOCKED_LETTER_REMOVED"


USER_MESSAGES: dict[ReasonCode, str] = {
    ReasonCode.EMPTY_WORD: "word cannot be empty",
    ReasonCode.INVALID_CHARACTERS: "only letters allowed",
    ReasonCode.TOO_SHORT: "too short",
    ReasonCode.LENGTH_CHANGE_TOO_LARGE: "illegal action",
    ReasonCode.NOT_IN_DICTIONARY: "not a word",
    ReasonCode.ALREADY_USED: "already played",
    ReasonCode.GAME_NOT_ACTIVE: "game is not in progress",
    ReasonCode.INVALID_MOVE: "one add and one remove per turn",
    ReasonCode.LOCKED_LETTER_REMOVED: "locked letters must stay",
}


@dataclass(frozen=True)
class ValidationOptions:
    """Options for validate_word."""
    is_bot: bool = False
    previous_word: str | None = None
    allow_slang: bool = True
    check_length: bool = True


@dataclass(frozen=True)
class ValidationResult:
    """
    Outcome of validating a word.

    `word` is always the normalized (trimmed, uppercase) form.
    `display_override` is set for profane words so a UI can mask them;
    it never affects validity.
    """
    is_valid: bool
    word: str
    reason: ReasonCode | None = None
    user_message: str | None = None
    display_override: str | None = None

    @classmethod
    def ok(cls, word: str, display_override: str | None = None) -> ValidationResult:
        return cls(is_valid=True, word=word, display_override=display_override)

    @classmethod
    def failure(cls, word: str, reason: ReasonCode) -> ValidationResult:
        return cls(
            is_valid=False,
            word=word,
            reason=reason,
            user_message=USER_MESSAGES[reason],
        )


def mask_word(word: str) -> str:
    """Replace every letter with a cycling symbol."""
    return "".join(_MASK_SYMBOLS[i % len(_MASK_SYMBOLS)] for i in range(len(word)))


def validate_word(
    word: str | None,
    word_data: WordData,
    options: ValidationOptions | None = None,
) -> ValidationResult:
    """
    Validate a word against the lexicon and the game's shape rules.

    Args:
        word: Raw input (any case, may have surrounding whitespace)
        word_data: Lexicon to check membership against
        options: Bot bypass, previous word, slang and length switches

    Returns:
        ValidationResult (never raises for bad input)
    """
    options = options or ValidationOptions()

    if word is None:
        return ValidationResult.failure("", ReasonCode.EMPTY_WORD)

    normalized = normalize_word(word)

    if not normalized:
        return ValidationResult.failure(normalized, ReasonCode.EMPTY_WORD)

    if options.is_bot:
        return ValidationResult.ok(normalized)

    if not _LETTERS_ONLY.match(normalized):
        return ValidationResult.failure(normalized, ReasonCode.INVALID_CHARACTERS)

    if options.check_length and len(normalized) < MIN_WORD_LENGTH:
        return ValidationResult.failure(normalized, ReasonCode.TOO_SHORT)

    if options.check_length and options.previous_word:
        previous = normalize_word(options.previous_word)
        if abs(len(normalized) - len(previous)) > MAX_LENGTH_CHANGE:
            return ValidationResult.failure(
                normalized, ReasonCode.LENGTH_CHANGE_TOO_LARGE
            )

    in_primary = normalized in word_data.enable_words
    in_slang = normalized in word_data.slang_words
    if not in_primary and not (options.allow_slang and in_slang):
        return ValidationResult.failure(normalized, ReasonCode.NOT_IN_DICTIONARY)

    display_override = None
    if normalized in word_data.profanity_words:
        display_override = mask_word(normalized)

    return ValidationResult.ok(normalized, display_override=display_override)


def is_valid_dictionary_word(word: str, word_data: WordData) -> bool:
    """Membership check only (primary lexicon or slang)."""
    return word_data.has_word(word)
