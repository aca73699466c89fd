"""
Word shape checks and letter/bitmask helpers.

A word is a plain lowercase str of exactly WORD_LENGTH letters a-z. Letters
are addressed by index 0..25 so that sets of letters fit in one int bitmask.
"""

from __future__ import annotations

from boundle.errors import InvalidWordError

WORD_LENGTH = 5
ALPHABET = "abcdefghijklmnopqrstuvwxyz"
ALL_LETTERS = (1 << len(ALPHABET)) - 1  # bitmask with all 26 letters set


def letter_index(ch: str) -> int:
    return ord(ch) - ord("a")


def letter_bit(ch: str) -> int:
    return 1 << letter_index(ch)


def mask_to_letters(mask: int) -> str:
    """Bitmask -> sorted letters, e.g. 0b101 -> 'ac'."""
    return "".join(ch for i, ch in enumerate(ALPHABET) if mask & (1 << i))


def parse_word(text: str) -> str:
    """
    Case-fold `text` and check it is exactly five ASCII letters.

    Raises InvalidWordError (carrying the original text) otherwise.
    No surrounding whitespace is stripped here; loaders do that.
    """
    if not isinstance(text, str):
        raise InvalidWordError(repr(text), "not a string")
    if not text.isascii():
        raise InvalidWordError(text, "not an ASCII word")
    if len(text) != WORD_LENGTH:
        raise InvalidWordError(text, "not a five-letter word")
    w = text.lower()
    if not all(ch in ALPHABET for ch in w):
        raise InvalidWordError(text, "not all ASCII letters")
    return w


def is_word(text: str) -> bool:
    try:
        parse_word(text)
    except InvalidWordError:
        return False
    return True
