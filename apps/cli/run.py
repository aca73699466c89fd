# apps/cli/run.py
"""
CLI entry point for self-play benchmarks.

This script:
  1) Validates the word list (prints counts + SHA).
  2) Loads the list and instantiates the requested solver.
  3) Plays every (or a sampled subset of) word as the hidden answer with a
     live progress indicator and writes:
       - CSV:  per-case results, search work, guess/pattern/pool columns
       - JSON: manifest with config, word-list hash, git commit, etc.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path
from typing import Sequence

from tqdm import tqdm

from boundle.datasets import DEFAULT_WORDS_PATH, load_words, pretty_summary, validate_wordlist
from boundle.errors import BoundleError
from boundle.harness import WORDLE_MAX_TURNS, run_case
from boundle.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from boundle.solvers import create_solver, get_solver_ids


def main(argv: Sequence[str] | None = None) -> int:
    """
    Parse CLI args, validate the word list, run the batch with progress, and write outputs.
    """
    solver_choices = ", ".join(get_solver_ids())

    ap = argparse.ArgumentParser(description="boundle - run self-play benchmarks")
    ap.add_argument("--solver", default="branch_bound",
                    help=f"solver id (one of: {solver_choices})")
    ap.add_argument("--words", default=str(DEFAULT_WORDS_PATH),
                    help="path to the five-letter word list")
    ap.add_argument("--sample", type=int,
                    help="run only a subset of answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="log search summaries to stderr")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                        stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")

    # 1) Validate the word list and print a one-liner summary
    rep = validate_wordlist(args.words)
    print(pretty_summary(rep))

    try:
        words = load_words(args.words)
        solver = create_solver(args.solver)
    except (BoundleError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # 2) Choose cases (deterministic sample by seed)
    rng = random.Random(args.seed)
    if args.sample and args.sample < len(words):
        pool = list(words)
        rng.shuffle(pool)
        cases = pool[: args.sample]
    else:
        cases = list(words)

    total = len(cases)

    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    results = []
    start = time.time()
    last_print = 0.0

    iterator = tqdm(cases, ncols=80, desc="Running", unit="game") if mode == "bar" else cases

    # 3) Run batch with live progress
    try:
        for idx, ans in enumerate(iterator, 1):
            r = run_case(solver, ans, words=words, seed=args.seed + idx)
            r["solver_id"] = solver.id
            results.append(r)

            if mode == "plain":
                now = time.time()
                if (now - last_print >= 1.0) or (idx == total):
                    elapsed = now - start
                    rate = (idx / elapsed) if elapsed > 0 else 0.0
                    remaining = (total - idx) / rate if rate > 0 else 0.0
                    pct = 100.0 * idx / max(1, total)
                    sys.stderr.write(
                        f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                    )
                    sys.stderr.flush()
                    last_print = now
    except BoundleError as e:
        print(f"\nError: {e}", file=sys.stderr)
        return 1

    if mode == "plain":
        sys.stderr.write("\n"); sys.stderr.flush()

    # 4) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_turns=WORDLE_MAX_TURNS)
    solved = sum(1 for r in results if r["success"])
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "num_cases": len(results),
        "num_solved": solved,
        "evaluated": sum(r["evaluated"] for r in results),
        "rejected": sum(r["rejected"] for r in results),
        "solver_id": solver.id,
    }
    write_manifest(manifest, str(manifest_path))

    print(f"Solved {solved}/{len(results)}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
