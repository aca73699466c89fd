"""
One solving session: the no-information state, then one update per
(guess, feedback) pair.

    NoInformation -> (guess, fb) -> state_1 -> (guess, fb) -> state_2 -> ...

The session ends when one candidate is left (solved) or, with an
inconsistent history, when none is (NoCandidatesError).
"""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from boundle.engine import ConstraintState, WordFeedback, parse_feedback, parse_word
from boundle.errors import NoCandidatesError
from boundle.solvers.presort import presort as presort_words
from boundle.solvers.search import SearchResult, find_best_guess

logger = logging.getLogger(__name__)


class Session:
    def __init__(self, words: Sequence[str], *, presort: bool = True, prune: bool = True):
        if not words:
            raise NoCandidatesError("empty word list")
        self.words: List[str] = presort_words(words) if presort else list(words)
        self.prune = prune
        self.state = ConstraintState()
        self.candidates: List[str] = list(self.words)
        self.history: List[Tuple[str, WordFeedback]] = []

    @property
    def solved(self) -> bool:
        return len(self.candidates) == 1

    def apply(self, guess: str, fb: WordFeedback | str) -> List[str]:
        """
        Record one guess and its feedback; returns the narrowed candidates.

        `fb` may be a pattern string such as "-G--Y".
        """
        guess = parse_word(guess)
        if isinstance(fb, str):
            fb = parse_feedback(fb)
        # nothing is committed until the new state leaves at least one word
        state = self.state.then(guess, fb)
        logger.debug(f"state after round {len(self.history) + 1}: {state!r}")
        candidates, _ = state.partition(self.candidates)
        if not candidates:
            raise NoCandidatesError(
                f"no words remaining after {len(self.history) + 1} guess(es); state: {state!r}"
            )

        self.state = state
        self.candidates = candidates
        self.history.append((guess, fb))
        return self.candidates

    def recommend(self) -> SearchResult:
        return find_best_guess(self.state, self.candidates, prune=self.prune)

    def solver_state(self) -> dict:
        """State dict in the shape BaseSolver.next_guess expects."""
        return {
            "turn": len(self.history) + 1,
            "history": list(self.history),
            "constraints": self.state,
            "candidates": self.candidates,
        }
