"""Exceptions raised by the engine and reported by the CLI."""

from __future__ import annotations


class WordleError(Exception):
    """Base class for all solver errors."""


class MalformedRecordError(WordleError, ValueError):
    def __init__(self, line_number: int, line: str, reason: str) -> None:
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"malformed feedback record at line {line_number} ({line!r}): {reason}")


class NoCandidatesError(WordleError, ValueError):
    """The feedback rules eliminated every word, so there is nothing to score."""


class WordListError(WordleError, OSError):
    """The word list could not be read, or held no usable words."""
