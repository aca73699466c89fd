"""
Positional Letter Frequency presort.

Idea:
  Build a 5 x 26 histogram of which letters occur at which position across the
  candidate list. Score each word by sum(hist[pos][word[pos]]) and sort by
  descending score.

Used to order candidates before the branch-and-bound search so strong guesses
are evaluated first and the pruning bound tightens early. The order never
changes which guess wins, only how fast the search gets there.
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from boundle.engine import WORD_LENGTH, WordArray
from boundle.engine.words import ALPHABET
from .base import BaseSolver, register


def positional_histogram(words: WordArray | Sequence[str]) -> np.ndarray:
    arr = WordArray.wrap(words)
    hist = np.zeros((WORD_LENGTH, len(ALPHABET)), dtype=np.int64)
    for pos in range(WORD_LENGTH):
        hist[pos] = np.bincount(arr.letters[:, pos], minlength=len(ALPHABET))
    return hist


def heuristic_scores(words: WordArray | Sequence[str]) -> np.ndarray:
    arr = WordArray.wrap(words)
    if not len(arr):
        return np.zeros(0, dtype=np.int64)
    hist = positional_histogram(arr)
    return hist[np.arange(WORD_LENGTH), arr.letters.astype(np.intp)].sum(axis=1)


def presort(words: Sequence[str]) -> List[str]:
    """Words by descending positional score; ties keep their input order."""
    arr = WordArray.wrap(words)
    scores = heuristic_scores(arr)
    order = np.argsort(-scores, kind="stable")
    return [arr[i] for i in order]


@register
class PositionalFreqSolver(BaseSolver):
    id = "positional_freq"
    name = "Positional Letter Frequency"
    version = "2.0.0"

    def next_guess(self, state: dict) -> str:
        candidates: List[str] = state["candidates"]
        if not candidates:
            raise ValueError("no candidates to guess from")
        return presort(candidates)[0]
