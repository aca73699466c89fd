from .validator import validate_wordlist, pretty_summary
from .io import DEFAULT_WORDS_PATH, load_words, read_lines

__all__ = ["validate_wordlist", "pretty_summary", "DEFAULT_WORDS_PATH", "load_words", "read_lines"]
