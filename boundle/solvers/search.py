"""
Best-guess search with branch-and-bound pruning.

Main idea:
  - Narrow the word list to the candidates still possible under the state.
  - For each candidate guess (in list order), compute its expected quality
    and keep the best.
  - With pruning on, evaluation of a guess stops as soon as it provably cannot
    beat the best found so far (see quality.expected_quality_bounded).

Tie-break:
  - Strict '>': the first candidate in list order reaching the maximum wins.
    A pruned run returns the same word and the same quality as an exhaustive one.

Presorting the list (see presort.py) makes the bound bite early; it does not
change the answer.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from boundle.engine import ConstraintState, WordArray
from boundle.errors import NoCandidatesError
from .base import BaseSolver, register
from .quality import expected_quality, expected_quality_bounded

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    word: str
    quality: Optional[float]     # None when only one candidate was left
    candidates: List[str] = field(repr=False)
    evaluated: int = 0           # guesses scored to completion
    rejected: int = 0            # guesses abandoned by the bound


def find_best_guess(state: ConstraintState, words: Sequence[str], *,
                    prune: bool = True) -> SearchResult:
    """
    Pick the candidate with the highest expected quality.

    Raises NoCandidatesError when `state` rules out every word.
    """
    candidates, _ = state.partition(words)
    if not candidates:
        raise NoCandidatesError(f"no words remaining out of {len(words)}; state: {state!r}")
    if len(candidates) == 1:
        return SearchResult(word=candidates[0], quality=None, candidates=candidates)

    arr = WordArray(candidates)
    best_word = candidates[0]
    best_quality: Optional[float] = None
    evaluated = rejected = 0

    for guessed in arr:
        if prune and best_quality is not None:
            q = expected_quality_bounded(state, guessed, arr, best_quality)
            if q is None:
                rejected += 1
                continue
        else:
            q = expected_quality(state, guessed, arr)
        evaluated += 1
        logger.debug(f"word = {guessed} quality = {q:.6f}")
        if best_quality is None or q > best_quality:
            best_word, best_quality = guessed, q

    logger.info(f"best guess {best_word} quality={best_quality:.6f} "
                f"({len(candidates)} candidates, {evaluated} evaluated, {rejected} rejected)")
    return SearchResult(word=best_word, quality=best_quality, candidates=candidates,
                        evaluated=evaluated, rejected=rejected)


@register
class BranchBoundSolver(BaseSolver):
    id = "branch_bound"
    name = "Expected Fraction Eliminated (branch-and-bound)"
    version = "1.0.0"

    PRUNE = True

    def __init__(self):
        super().__init__()
        # (candidates, result) for the no-information state; every game starts there
        self._opening: Optional[Tuple[Tuple[str, ...], SearchResult]] = None

    def _search(self, constraints: ConstraintState, candidates: List[str]) -> SearchResult:
        if not constraints.is_default():
            return find_best_guess(constraints, candidates, prune=self.PRUNE)

        key = tuple(candidates)
        if self._opening is None or self._opening[0] != key:
            self._opening = (key, find_best_guess(constraints, candidates, prune=self.PRUNE))
        return self._opening[1]

    def next_guess(self, state: dict) -> str:
        res = self._search(state["constraints"], state["candidates"])
        # a cached opening still counts toward every game that plays it
        self.stats["evaluated"] += res.evaluated
        self.stats["rejected"] += res.rejected
        return res.word


@register
class ExhaustiveSolver(BranchBoundSolver):
    id = "exhaustive"
    name = "Expected Fraction Eliminated (exhaustive)"
    version = "1.0.0"

    PRUNE = False
