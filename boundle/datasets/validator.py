"""
Word-list validator for boundle.

What this module does:
- Inspect a five-letter word list without failing on the first bad line.
- Count valid words, invalid lines and duplicates; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

load_words() is the strict loader the solver uses; this module is the
report you print before a run so a bad list is obvious at a glance.

Typical use:
    from boundle.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("boundle/datasets/data/words_5.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from boundle.engine import is_word
from .io import is_skipped


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class WordListReport:
    """Diagnostics and metadata for one word list."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered
    first_invalid: List[str] = field(default_factory=list)  # up to 5 offending lines
    passed: bool = False
    issues: List[str] = field(default_factory=list)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _scan(path: Path) -> Tuple[List[str], List[str]]:
    """
    Split the file's lines into (valid_words, invalid_lines).

    Rules mirror load_words(): blanks and '#' comments are skipped, everything
    else must be five ASCII letters after stripping.
    """
    valid: List[str] = []
    invalid: List[str] = []
    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            if is_skipped(raw):
                continue
            w = raw.strip()
            if is_word(w):
                valid.append(w.lower())
            else:
                invalid.append(w)
    return valid, invalid


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(path: str) -> Dict:
    """
    Validate a five-letter word list.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordListReport schema) with:
          - counts, SHA-256, duplicate/invalid diagnostics
          - `passed` boolean (strict: requires non-empty and no invalid lines)
          - `issues` (list of strings) to surface any problems
    """
    p = Path(path)
    if not p.exists():
        rep = WordListReport(path, False, 0, "", 0, 0,
                             issues=[f"word list not found: {path}"])
        return asdict(rep)

    words, invalid = _scan(p)
    rep = WordListReport(
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=len(set(words)),
        invalid_lines=len(invalid),
        first_invalid=invalid[:5],
    )

    if rep.count == 0:
        rep.issues.append("word list contains 0 valid words")
    if invalid:
        rep.issues.append(f"word list has {len(invalid)} invalid line(s), e.g. {invalid[:5]}")
    # Duplicates are harmless to the solver but usually a preprocessing slip
    if rep.count != rep.unique_count:
        rep.issues.append(f"word list contains {rep.count - rep.unique_count} duplicate(s)")

    rep.passed = rep.count > 0 and not invalid
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        words=2315 (uniq=2315, invalid=0, sha=abc123...) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"words={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_lines']}, sha={sha}) | {status}"
    )
