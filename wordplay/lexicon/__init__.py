"""
Lexicon - Word data and validation.

Provides:
- WordData: immutable, injectable word sets
- validate_word: rule-ordered validation with reason codes
"""

from .word_data import WordData, normalize_word, read_word_list, load_bundled_word_data
from .validation import (
    ReasonCode,
    ValidationOptions,
    ValidationResult,
    validate_word,
    is_valid_dictionary_word,
    mask_word,
    USER_MESSAGES,
)

__all__ = [
    "WordData",
    "normalize_word",
    "read_word_list",
    "load_bundled_word_data",
    "ReasonCode",
    "ValidationOptions",
    "ValidationResult",
    "validate_word",
    "is_valid_dictionary_word",
    "mask_word",
    "USER_MESSAGES",
]
