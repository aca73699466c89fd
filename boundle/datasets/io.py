from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from boundle.engine import parse_word
from boundle.errors import InvalidWordError, LoadError

logger = logging.getLogger(__name__)

# Bundled sample list, used as the CLI default.
DEFAULT_WORDS_PATH = Path(__file__).resolve().parent / "data" / "words_5.txt"


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises LoadError if the file is missing or unreadable.
    """
    p = Path(p)
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise LoadError(f"cannot read word list {p}: {e}") from e
    return [ln.rstrip("\r\n") for ln in text.splitlines()]


def is_skipped(line: str) -> bool:
    """Blank lines and '#' comments carry no word."""
    s = line.strip()
    return not s or s.startswith("#")


def load_words(p: Path | str) -> List[str]:
    """
    Load a five-letter word list, one word per line.

    Blank lines and lines starting with '#' are skipped. Every other line,
    stripped of surrounding whitespace, must be five ASCII letters (any case);
    words come back lowercased, in file order.

    Raises:
      LoadError        : missing/unreadable file, or no words in it
      InvalidWordError : first offending line, with its line number
    """
    words: List[str] = []
    for lineno, line in enumerate(read_lines(p), start=1):
        if is_skipped(line):
            continue
        text = line.strip()
        try:
            words.append(parse_word(text))
        except InvalidWordError as e:
            raise InvalidWordError(text, f"line {lineno} of {p}: {e.reason}") from e
    if not words:
        raise LoadError(f"word list {p} contains no words")
    logger.debug(f"loaded {len(words)} words from {p}")
    return words
