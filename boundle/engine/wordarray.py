from __future__ import annotations

from typing import Iterable, Iterator, List

import numpy as np

from boundle.engine.words import ALPHABET, WORD_LENGTH, letter_index


class WordArray:
    """
    Read-only numpy view of a candidate list.

      letters : (n, 5) uint8, letter index at each position
      counts  : (n, 26) uint8, occurrences of each letter in the word

    Built once per search so every possibility test over the whole list is a
    handful of vectorized lookups instead of a Python loop per word.
    """

    def __init__(self, words: Iterable[str]):
        self.words: List[str] = list(words)
        n = len(self.words)
        self.letters = np.zeros((n, WORD_LENGTH), dtype=np.uint8)
        self.counts = np.zeros((n, len(ALPHABET)), dtype=np.uint8)
        for row, w in enumerate(self.words):
            for pos, ch in enumerate(w):
                li = letter_index(ch)
                self.letters[row, pos] = li
                self.counts[row, li] += 1
        self.letters.setflags(write=False)
        self.counts.setflags(write=False)

    @classmethod
    def wrap(cls, words) -> "WordArray":
        """Return `words` unchanged if it already is a WordArray."""
        return words if isinstance(words, cls) else cls(words)

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

    def __getitem__(self, i: int) -> str:
        return self.words[i]

    def __repr__(self) -> str:
        return f"WordArray(n={len(self.words)})"
