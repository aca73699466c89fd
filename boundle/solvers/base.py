from __future__ import annotations
import random
from collections import Counter
from typing import Dict, List, Type

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    """
    A solver picks the next guess from the session state it is handed:

      state = {
        "turn":        1-based turn number,
        "history":     list of (guess, WordFeedback) so far,
        "constraints": ConstraintState after that history,
        "candidates":  words still possible under "constraints",
      }

    `stats` counts search work over the current game; reset() clears it.
    Solvers that do not search leave it empty.
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.words: List[str] = []
        self.rng = random.Random()
        self.stats: Counter = Counter()

    def reset(self, *, words: List[str], seed: int | None = None) -> None:
        self.words = list(words)
        self.stats.clear()
        if seed is not None:
            self.rng.seed(seed)

    def next_guess(self, state: dict) -> str:
        raise NotImplementedError("Override in subclass")
