"""
Constraint state accumulated from (guess, feedback) pairs.

Two pieces of knowledge are tracked:
  - position_candidates : per position, a 26-bit mask of letters still allowed
  - letter_count_bounds : per letter, a half-open range [lo, hi) bounding how
                          many times it occurs in the solution

A word is possible iff every letter sits in an allowed slot and every letter
with a non-default range occurs an in-range number of times.

Repeated letters make feedback tricky: one guess can mark the same letter
ABSENT at one position and EXACT or PRESENT at another. The ABSENT then says
"no occurrences beyond the ones already confirmed", so it caps the count
rather than removing the letter outright. With k confirmed occurrences the
count is then exactly k.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

import numpy as np

from boundle.errors import ContradictoryFeedbackError, InvalidFeedbackError
from boundle.engine.scoring import LetterFeedback, WordFeedback
from boundle.engine.wordarray import WordArray
from boundle.engine.words import ALL_LETTERS, ALPHABET, WORD_LENGTH, letter_bit, \
    letter_index, mask_to_letters

# No information about a letter: it occurs anywhere from 0 to 5 times.
DEFAULT_COUNT: Tuple[int, int] = (0, WORD_LENGTH + 1)
ABSENT_COUNT: Tuple[int, int] = (0, 1)

_SHIFTS = np.arange(len(ALPHABET), dtype=np.int64)

History = Iterable[Tuple[str, WordFeedback]]


class ConstraintState:
    def __init__(self):
        self.position_candidates: List[int] = [ALL_LETTERS] * WORD_LENGTH
        self.letter_count_bounds: List[Tuple[int, int]] = [DEFAULT_COUNT] * len(ALPHABET)

    def copy(self) -> "ConstraintState":
        new = ConstraintState.__new__(ConstraintState)
        new.position_candidates = list(self.position_candidates)
        new.letter_count_bounds = list(self.letter_count_bounds)
        return new

    # ---- update ----

    def update(self, guessed: str, fb: WordFeedback) -> None:
        """
        Fold one (guess, feedback) pair into this state, in place.

        Runs a single propagation pass over the letters of `guessed`; it is
        not iterated to a fixpoint. Later guesses keep tightening the state.

        Raises ContradictoryFeedbackError when the feedback cannot be
        reconciled with what is already known.
        """
        if len(fb) != WORD_LENGTH:
            raise InvalidFeedbackError(repr(fb), f"expected {WORD_LENGTH} results")

        # Step 1: EXACT pins the slot; PRESENT and ABSENT evict the letter from it.
        seen = 0
        for pos, (ch, lf) in enumerate(zip(guessed, fb)):
            bit = letter_bit(ch)
            if lf == LetterFeedback.EXACT:
                # empty if an earlier guess already ruled `ch` out here
                self.position_candidates[pos] &= bit
            else:
                self.position_candidates[pos] &= ~bit
            seen |= bit

        # Step 2: count bounds from this guess alone.
        for ch in set(guessed):
            hits = 0
            missed = False
            for g, lf in zip(guessed, fb):
                if g != ch:
                    continue
                if lf == LetterFeedback.ABSENT:
                    missed = True
                else:
                    hits += 1
            lo, hi = self.letter_count_bounds[letter_index(ch)]
            lo = max(lo, hits)
            if missed:
                hi = min(hi, hits + 1)
            self.letter_count_bounds[letter_index(ch)] = (lo, hi)

        # Step 3: reconcile counts with the slot masks for every touched letter.
        for li in range(len(ALPHABET)):
            bit = 1 << li
            if not seen & bit:
                continue
            pinned = sum(1 for m in self.position_candidates if m == bit)
            admitting = sum(1 for m in self.position_candidates if m & bit)
            lo, hi = self.letter_count_bounds[li]
            lo = max(lo, pinned)
            hi = min(hi, admitting + 1)
            if lo >= hi:
                raise ContradictoryFeedbackError(
                    f"letter {ALPHABET[li]!r} has empty count range [{lo}, {hi}) "
                    f"after {guessed!r}; state: {self!r}"
                )
            self.letter_count_bounds[li] = (lo, hi)

            if (lo, hi) == ABSENT_COUNT:
                self.position_candidates = [m & ~bit for m in self.position_candidates]
            elif hi - lo == 1 and admitting == lo:
                # every slot that can still hold the letter must hold it
                self.position_candidates = [bit if m & bit else m
                                            for m in self.position_candidates]

        for pos, m in enumerate(self.position_candidates):
            if not m:
                raise ContradictoryFeedbackError(
                    f"position {pos} has no letters left after {guessed!r}; state: {self!r}"
                )

    def then(self, guessed: str, fb: WordFeedback) -> "ConstraintState":
        """Like update(), but returns a new state and leaves this one untouched."""
        new = self.copy()
        new.update(guessed, fb)
        return new

    # ---- queries ----

    def is_possible(self, word: str) -> bool:
        for ch, m in zip(word, self.position_candidates):
            if not m & letter_bit(ch):
                return False
        for li, bounds in enumerate(self.letter_count_bounds):
            if bounds == DEFAULT_COUNT:
                continue
            lo, hi = bounds
            if not lo <= word.count(ALPHABET[li]) < hi:
                return False
        return True

    def possible_mask(self, words: WordArray) -> np.ndarray:
        """Boolean array, True where the word at that row is possible."""
        ok = np.ones(len(words), dtype=bool)
        for pos, m in enumerate(self.position_candidates):
            if m == ALL_LETTERS:
                continue
            allowed = ((m >> _SHIFTS) & 1).astype(bool)
            ok &= allowed[words.letters[:, pos]]
        for li, bounds in enumerate(self.letter_count_bounds):
            if bounds == DEFAULT_COUNT:
                continue
            lo, hi = bounds
            c = words.counts[:, li]
            ok &= (c >= lo) & (c < hi)
        return ok

    def count_possible(self, words: WordArray) -> int:
        return int(np.count_nonzero(self.possible_mask(words)))

    def partition(self, words: Sequence[str]) -> Tuple[List[str], List[str]]:
        """Split `words` into (possible, impossible), preserving order in both."""
        possible: List[str] = []
        impossible: List[str] = []
        for w in words:
            (possible if self.is_possible(w) else impossible).append(w)
        return possible, impossible

    def allowed_letters(self, pos: int) -> str:
        return mask_to_letters(self.position_candidates[pos])

    def count_bounds(self, letter: str) -> Tuple[int, int]:
        return self.letter_count_bounds[letter_index(letter)]

    def is_default(self) -> bool:
        return (all(m == ALL_LETTERS for m in self.position_candidates)
                and all(b == DEFAULT_COUNT for b in self.letter_count_bounds))

    def __eq__(self, other) -> bool:
        if not isinstance(other, ConstraintState):
            return NotImplemented
        return (self.position_candidates == other.position_candidates
                and self.letter_count_bounds == other.letter_count_bounds)

    def __repr__(self) -> str:
        slots = [mask_to_letters(m) for m in self.position_candidates]
        counts = {ALPHABET[li]: b for li, b in enumerate(self.letter_count_bounds)
                  if b != DEFAULT_COUNT}
        return f"ConstraintState(position_candidates={slots}, letter_count_bounds={counts})"


def state_from_history(history: History) -> ConstraintState:
    state = ConstraintState()
    for guess, fb in history:
        state.update(guess, fb)
    return state


def filter_candidates(words: Iterable[str], history: History) -> List[str]:
    """
    Keep only the words consistent with every (guess, feedback) in `history`.

    Order is preserved as in `words`.
    """
    possible, _ = state_from_history(history).partition(list(words))
    return possible
