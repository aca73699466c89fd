"""
Report files for replay and self-play runs.

Game rows (write_csv) put the search work of each game next to its guesses:
  - evaluated / rejected: guesses scored in full / cut off by the bound,
                          summed over every search the solver ran that game
  - pool_i:               how many candidates the i-th guess was picked from
Replay rows (write_replay_csv) hold one replayed step each.

Patterns are written as "'-GYY-" so spreadsheets read them as text instead of
a formula.
"""

from __future__ import annotations

import csv
import datetime as dt
import json
import subprocess
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Sequence

GAME_FIELDS = ["solver", "answer", "success", "guesses", "evaluated", "rejected", "time_ms"]
TURN_FIELDS = ["guess", "patt", "pool"]
STEP_FIELDS = ["trace", "round", "guess", "pattern", "recommended", "quality",
               "remaining", "time_ms"]


def _as_text(patt: str) -> str:
    return "'" + patt if patt else patt


def _write_rows(path: str, fields: Sequence[str], rows: Iterable[Dict]) -> str:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=list(fields), restval="")
        w.writeheader()
        w.writerows(rows)
    return str(p)


def _game_row(r: Dict) -> Dict:
    row = {
        "solver": r.get("solver_id", "?"),
        "answer": r["answer"],
        "success": r["success"],
        "guesses": r["guesses"],
        "evaluated": r.get("evaluated", 0),
        "rejected": r.get("rejected", 0),
        "time_ms": round(float(r["time_ms"]), 3),
    }
    pools = r.get("pool", [])
    for i, (guess, patt) in enumerate(r.get("history", []), start=1):
        row[f"guess_{i}"] = guess
        row[f"patt_{i}"] = _as_text(patt)
        if i <= len(pools):
            row[f"pool_{i}"] = pools[i - 1]
    return row


def write_csv(results: List[Dict], path: str, max_turns: int) -> str:
    """
    One row per self-play game (see harness.run_case).

    Columns: solver, answer, success, guesses, evaluated, rejected, time_ms,
    then guess_i, patt_i, pool_i for i = 1..max_turns. Turns a game did not
    reach stay blank. Returns the path written.
    """
    fields = list(GAME_FIELDS)
    for i in range(1, max_turns + 1):
        fields += [f"{name}_{i}" for name in TURN_FIELDS]
    return _write_rows(path, fields, (_game_row(r) for r in results))


def _step_rows(traces: List[List[Dict]]) -> Iterator[Dict]:
    for t, steps in enumerate(traces, start=1):
        for s in steps:
            yield {
                "trace": t,
                "round": s["round"],
                "guess": s["guess"],
                "pattern": _as_text(s["pattern"]),
                "recommended": s["recommended"],
                # blank once a single word is left; there is nothing to rank
                "quality": "" if s["quality"] is None else round(s["quality"], 6),
                "remaining": s["remaining"],
                "time_ms": round(float(s["time_ms"]), 3),
            }


def write_replay_csv(traces: List[List[Dict]], path: str) -> str:
    """One row per step of each trace returned by harness.replay_trace."""
    return _write_rows(path, STEP_FIELDS, _step_rows(traces))


def write_manifest(manifest: Dict, path: str) -> str:
    """Dump `manifest` as indented JSON; paths and other odd values go through str()."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(manifest, indent=2, default=str), encoding="utf-8")
    return str(p)


def timestamp_id() -> str:
    """UTC run id for file names, e.g. 20250820T024121Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """Short hash of HEAD, suffixed "-dirty" with uncommitted changes; 'unknown' outside git."""
    try:
        out = subprocess.run(
            ["git", "describe", "--always", "--dirty"],
            check=True, capture_output=True, text=True,
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
    return out.stdout.strip() or "unknown"
