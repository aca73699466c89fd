# apps/cli/replay.py
"""
Replay hand-authored (guess, feedback) traces and print the recommended next
guess and the remaining candidate count after every step.

Traces are written as comma-separated guess:pattern pairs, where the pattern
uses G (exact), Y (present) and - (absent):

    python -m apps.cli.replay --trace "raise:-G---,bacon:-G--Y"

Without --trace, the built-in example traces are replayed. Per-candidate
search diagnostics go to stderr with -v.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Sequence, Tuple

from boundle.datasets import DEFAULT_WORDS_PATH, load_words, pretty_summary, validate_wordlist
from boundle.engine import ConstraintState
from boundle.errors import BoundleError, InvalidFeedbackError
from boundle.harness import replay_trace, write_replay_csv
from boundle.solvers import find_best_guess
from boundle.solvers.presort import presort

logger = logging.getLogger("boundle.replay")

DEFAULT_TRACES: List[List[Tuple[str, str]]] = [
    [("raise", "-G---"), ("bacon", "-G--Y"), ("vaunt", "-G-YY"), ("tawny", "GG-YG")],
    [("rates", "-G---"), ("manly", "-GG--"), ("danio", "-GGG-")],
    [("tares", "-YY-Y"), ("snark", "G-YY-")],
    [("tares", "--YYY"), ("prose", "-Y-YG")],
    [("saner", "----Y"), ("court", "-Y-Y-"), ("brood", "-GG--")],
    [("sales", "-----"), ("count", "-G-GG")],
    [("raise", "G----"), ("rotor", "GGYG-")],
]


def parse_trace(text: str) -> List[Tuple[str, str]]:
    """'raise:-G---,bacon:-G--Y' -> [('raise', '-G---'), ('bacon', '-G--Y')]"""
    out: List[Tuple[str, str]] = []
    for item in text.split(","):
        item = item.strip()
        if not item:
            continue
        guess, sep, patt = item.partition(":")
        if not sep:
            raise InvalidFeedbackError(item, "expected guess:pattern")
        out.append((guess.strip(), patt.strip()))
    return out


def _configure_logging(verbose: int) -> None:
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, stream=sys.stderr,
                        format="%(levelname)s %(name)s: %(message)s")


def main(argv: Sequence[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="boundle - replay guess/feedback traces")
    ap.add_argument("--words", default=str(DEFAULT_WORDS_PATH),
                    help="path to the five-letter word list")
    ap.add_argument("--trace", action="append", default=[],
                    help="comma-separated guess:pattern pairs (repeatable)")
    ap.add_argument("--no-presort", action="store_true",
                    help="search candidates in file order instead of heuristic order")
    ap.add_argument("--initial", action="store_true",
                    help="also print the best opening guess (slow on large lists)")
    ap.add_argument("--csv", help="write per-step results to this CSV file")
    ap.add_argument("-v", "--verbose", action="count", default=0,
                    help="-v for per-search summaries, -vv for per-candidate scores")
    args = ap.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        rep = validate_wordlist(args.words)
        logger.info(pretty_summary(rep))
        words = load_words(args.words)
        logger.info(f"Loaded {len(words)} words")

        traces = [parse_trace(t) for t in args.trace] if args.trace else DEFAULT_TRACES

        if args.initial:
            ordered = list(words) if args.no_presort else presort(words)
            print(f"Initial Guess: {find_best_guess(ConstraintState(), ordered).word}")

        results = []
        for trace in traces:
            steps = replay_trace(trace, words=words, presort=not args.no_presort)
            for s in steps:
                print(f"Recommended Guess: {s['recommended']}")
                print(f"Remaining words: {s['remaining']}")
            results.append(steps)
    except BoundleError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.csv:
        print(f"Wrote: {write_replay_csv(results, args.csv)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
