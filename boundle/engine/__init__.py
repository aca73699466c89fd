from .words import WORD_LENGTH, parse_word, is_word
from .scoring import LetterFeedback, WordFeedback, ALL_EXACT, feedback, format_feedback, \
    parse_feedback, score
from .constraints import ConstraintState, filter_candidates, state_from_history
from .wordarray import WordArray

__all__ = [
    "WORD_LENGTH", "parse_word", "is_word",
    "LetterFeedback", "WordFeedback", "ALL_EXACT", "feedback", "format_feedback",
    "parse_feedback", "score",
    "ConstraintState", "filter_candidates", "state_from_history",
    "WordArray",
]
