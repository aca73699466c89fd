"""
Error types raised by boundle.

All of them derive from BoundleError so a CLI can report any failure with a
single except clause. None of them is transient; callers should not retry.
"""

from __future__ import annotations


class BoundleError(Exception):
    """Base class for every error raised by this package."""


class LoadError(BoundleError):
    """The word source is missing, unreadable, or contains no words."""


class InvalidWordError(BoundleError, ValueError):
    """Text that is not exactly five ASCII letters."""

    def __init__(self, text: str, reason: str = "not a five-letter word"):
        self.text = text
        self.reason = reason
        super().__init__(f"invalid word {text!r}: {reason}")


class InvalidFeedbackError(BoundleError, ValueError):
    """A feedback pattern that is not five of 'G', 'Y', '-'."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"invalid feedback {pattern!r}: {reason}")


class NoCandidatesError(BoundleError):
    """Every word has been eliminated by the feedback seen so far."""


class ContradictoryFeedbackError(BoundleError):
    """Constraint propagation reached an empty letter set or count range."""
