"""
Feedback for a single (guessed, actual) pair.

Conventions (value of each LetterFeedback member):
  - 'G'  : EXACT   = correct letter in the correct position
  - 'Y'  : PRESENT = letter occurs elsewhere in the actual word
  - '-'  : ABSENT  = letter not present (or present fewer times than guessed)

Algorithm (exact pass, then sort-and-merge):
  1) Mark every position whose letters match as EXACT.
  2) Collect the leftover guessed letters (with their positions) and the
     leftover actual letters, sort both, and sweep them with two pointers.
     Each equal pair consumes one actual occurrence and marks the guessed
     position PRESENT. Whatever is not consumed stays ABSENT.

Repeated letters therefore never receive more EXACT+PRESENT marks than the
actual word holds. Among repeated guessed letters the lowest positions are
matched first, because (letter, position) tuples sort by position within a
letter.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Tuple

from boundle.errors import InvalidFeedbackError
from boundle.engine.words import WORD_LENGTH


class LetterFeedback(str, Enum):
    EXACT = "G"
    PRESENT = "Y"
    ABSENT = "-"


WordFeedback = Tuple[LetterFeedback, ...]

ALL_EXACT: WordFeedback = (LetterFeedback.EXACT,) * WORD_LENGTH


def feedback(guessed: str, actual: str) -> WordFeedback:
    """
    Compute the per-position feedback for `guessed` against `actual`.

    Both words must already be valid (see parse_word).

    Examples:
      format_feedback(feedback("brood", "proxy")) -> "-GG--"
      format_feedback(feedback("sassy", "glass")) -> "YY-G-"
    """
    result: List[LetterFeedback] = [LetterFeedback.ABSENT] * WORD_LENGTH
    remaining_guess: List[Tuple[str, int]] = []
    remaining_actual: List[str] = []

    for i, (g, a) in enumerate(zip(guessed, actual)):
        if g == a:
            result[i] = LetterFeedback.EXACT
        else:
            remaining_guess.append((g, i))
            remaining_actual.append(a)

    remaining_guess.sort()
    remaining_actual.sort()

    i = j = 0
    while i < len(remaining_guess) and j < len(remaining_actual):
        letter, pos = remaining_guess[i]
        if letter < remaining_actual[j]:
            i += 1
        elif letter > remaining_actual[j]:
            j += 1
        else:
            result[pos] = LetterFeedback.PRESENT
            i += 1
            j += 1

    return tuple(result)


def format_feedback(fb: Iterable[LetterFeedback]) -> str:
    return "".join(lf.value for lf in fb)


def parse_feedback(text: str) -> WordFeedback:
    """
    Parse a pattern such as "-G--Y" (case-insensitive) into a WordFeedback.
    """
    if len(text) != WORD_LENGTH:
        raise InvalidFeedbackError(text, f"expected {WORD_LENGTH} characters, got {len(text)}")
    out: List[LetterFeedback] = []
    for ch in text.upper():
        try:
            out.append(LetterFeedback(ch))
        except ValueError:
            raise InvalidFeedbackError(text, f"unexpected character {ch!r}") from None
    return tuple(out)


def score(guess: str, answer: str) -> str:
    """Pattern string for (guess, answer), e.g. score("raise", "crane") -> "YY--G"."""
    return format_feedback(feedback(guess, answer))
