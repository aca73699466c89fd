"""
Guess quality: how much of the candidate list a guess eliminates.

Idea:
  For a post-guess state with R of T candidates still possible,
      quality = (T - R) / (T - 1)
  which is 0 when nothing is eliminated and 1 when exactly one word is left.

  The expected quality of a guess g averages that over every candidate w taken
  as the hidden answer:
      E[q | g] = (1/T) * sum_w quality(state.then(g, feedback(g, w)))

Bounded evaluation:
  Each term is at most 1, so after i of n terms with partial sum S the final
  sum cannot exceed S + (n - i). If that is already below lower_bound * n the
  guess cannot reach lower_bound and evaluation stops early. Both evaluators
  accumulate terms in the same order with plain float addition, so a bounded
  evaluation that runs to completion returns exactly the unbounded value.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from boundle.engine import ConstraintState, WordArray, feedback

logger = logging.getLogger(__name__)


def quality(state: ConstraintState, candidates: WordArray | Sequence[str]) -> float:
    """
    Fraction of `candidates` eliminated by `state`, rescaled to [0, 1].

    Undefined for one candidate or fewer; raises ValueError.
    """
    words = WordArray.wrap(candidates)
    total = len(words)
    if total <= 1:
        raise ValueError(f"quality needs at least 2 candidates; got {total}")
    remaining = state.count_possible(words)
    return (total - remaining) / (total - 1)


def _hypothesis_quality(state: ConstraintState, guessed: str, actual: str,
                        words: WordArray) -> float:
    new_state = state.then(guessed, feedback(guessed, actual))
    assert new_state.is_possible(actual), (
        f"propagation dropped the actual word: state={state!r} guessed={guessed} "
        f"actual={actual} new_state={new_state!r}"
    )
    return quality(new_state, words)


def expected_quality(state: ConstraintState, guessed: str,
                     candidates: WordArray | Sequence[str]) -> float:
    """Mean quality of `guessed` over every candidate as the hidden answer."""
    words = WordArray.wrap(candidates)
    total = 0.0
    for actual in words:
        total += _hypothesis_quality(state, guessed, actual, words)
    return total / len(words)


def expected_quality_bounded(state: ConstraintState, guessed: str,
                             candidates: WordArray | Sequence[str],
                             lower_bound: float) -> Optional[float]:
    """
    expected_quality(), or None as soon as the result provably falls below
    `lower_bound`.
    """
    words = WordArray.wrap(candidates)
    n = len(words)
    minimum = lower_bound * n
    total = 0.0
    for i, actual in enumerate(words):
        total += _hypothesis_quality(state, guessed, actual, words)
        if total + (n - i - 1) < minimum:
            logger.debug(f"word = {guessed} early reject after {i + 1} of {n}")
            return None
    return total / n
