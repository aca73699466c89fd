from .core import WORDLE_MAX_TURNS, replay_trace, run_case, run_batch
from .io import write_csv, write_replay_csv, write_manifest
from .session import Session

__all__ = ["WORDLE_MAX_TURNS", "replay_trace", "run_case", "run_batch", "write_csv",
           "write_replay_csv", "write_manifest", "Session"]
