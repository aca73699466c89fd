"""
Harness core primitives.

- replay_trace: replay hand-authored (guess, feedback) pairs and record the
                recommendation after each step.
- run_case:     self-play one puzzle (one hidden answer) with a given solver.
- run_batch:    run many puzzles in sequence (optionally a sample prefix).
- Enforces the puzzle's 6-turn limit at the harness layer.

These functions are UI-agnostic so they can be reused by the CLI apps, a
notebook, or tests without changes.
"""

from __future__ import annotations
import time
from typing import Dict, Iterable, List, Sequence, Tuple, Union

from boundle.engine import WordFeedback, feedback, format_feedback, ALL_EXACT
from .session import Session

# Single source of truth for the turn budget.
WORDLE_MAX_TURNS = 6

Trace = Sequence[Tuple[str, Union[WordFeedback, str]]]


def _assert_wordle_turns(max_turns: int) -> None:
    """Guardrail: prevent accidental runs with >6 turns."""
    if max_turns != WORDLE_MAX_TURNS:
        raise ValueError(f"max_turns must be {WORDLE_MAX_TURNS}; got {max_turns}")


def replay_trace(
        trace: Trace,
        *,
        words: Sequence[str],
        presort: bool = True,
        prune: bool = True,
) -> List[Dict]:
    """
    Replay `trace` from the no-information state.

    Returns one dict per step with keys:
        round, guess, pattern, recommended, quality, remaining, time_ms

    Raises NoCandidatesError if the trace eliminates every word, and
    ContradictoryFeedbackError if its feedback cannot all be true at once.
    """
    session = Session(words, presort=presort, prune=prune)
    steps: List[Dict] = []
    for rnd, (guess, fb) in enumerate(trace, start=1):
        session.apply(guess, fb)
        t0 = time.perf_counter_ns()
        res = session.recommend()
        dt = (time.perf_counter_ns() - t0) / 1_000_000.0
        steps.append({
            "round": rnd,
            "guess": session.history[-1][0],
            "pattern": format_feedback(session.history[-1][1]),
            "recommended": res.word,
            "quality": res.quality,
            "remaining": len(res.candidates),
            "time_ms": dt,
        })
    return steps


def run_case(
        solver,
        answer: str,
        *,
        words: Sequence[str],
        max_turns: int = WORDLE_MAX_TURNS,
        seed: int | None = None,
        presort: bool = True,
) -> Dict:
    """
    Play one game until the solver finds `answer` or the turn budget runs out.

    Args:
        solver:   an object implementing BaseSolver with next_guess(state)
        answer:   the hidden word for this case (must be in `words`)
        words:    the word list (candidate universe)
        max_turns: must be 6 (enforced)
        seed:     RNG seed handed to solver.reset

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float),
            history (list[(guess, pattern)]), answer (str),
            pool (list[int]: candidates left before each guess),
            evaluated, rejected (int: search work, from solver.stats)
    """
    _assert_wordle_turns(max_turns)
    solver.reset(words=words, seed=seed)
    session = Session(words, presort=presort)

    history: List[Tuple[str, str]] = []
    pool: List[int] = []
    total_ms = 0.0

    def result(success: bool, guesses: int) -> Dict:
        stats = getattr(solver, "stats", {})
        return {
            "success": success, "guesses": guesses, "time_ms": total_ms,
            "history": history, "answer": answer, "pool": pool,
            "evaluated": stats.get("evaluated", 0), "rejected": stats.get("rejected", 0),
        }

    for turn in range(1, WORDLE_MAX_TURNS + 1):
        pool.append(len(session.candidates))
        t0 = time.perf_counter_ns()
        guess = solver.next_guess(session.solver_state())
        total_ms += (time.perf_counter_ns() - t0) / 1_000_000.0

        fb = feedback(guess, answer)
        history.append((guess, format_feedback(fb)))
        if fb == ALL_EXACT:
            return result(True, turn)
        session.apply(guess, fb)

    return result(False, WORDLE_MAX_TURNS)


def run_batch(
        solver,
        answers: Iterable[str],
        *,
        words: Sequence[str],
        max_turns: int = WORDLE_MAX_TURNS,
        seed: int | None = None,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases back-to-back. If `sample` is provided, only the first K
    answers are used to speed up quick experiments.

    Each case's seed is derived from the base seed (seed + index).
    """
    _assert_wordle_turns(max_turns)
    pool = list(answers)
    if sample is not None:
        pool = pool[:sample]

    out: List[Dict] = []
    for idx, ans in enumerate(pool, start=1):
        case_seed = None if seed is None else (seed + idx)
        r = run_case(solver, ans, words=words, max_turns=max_turns, seed=case_seed)
        r["solver_id"] = solver.id
        out.append(r)
    return out
