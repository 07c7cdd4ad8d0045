"""
outcomes.py

Enumerates every feedback a guess could theoretically receive.

For a guess of length L there are 3**L outcomes (243 for L=5). Outcome `i`
is `int_to_pattern(i)`: position 0 is the most significant base-3 digit, so
outcome 0 is all ABSENT and outcome 242 is all EXACT. Each Feedback Set
carries the guess's own letters, which is what the rule filter needs; no
hidden word or candidate pool is involved.
"""

from __future__ import annotations

from functools import lru_cache
from typing import List, Tuple

from wordle_engine.config import N_SIGNALS, WORD_LENGTH
from wordle_engine.feedback import FeedbackSet, int_to_pattern, make_feedback, validate_word


def all_outcomes(guess: str, word_length: int = WORD_LENGTH) -> List[FeedbackSet]:
    validate_word(guess, word_length, "guess")
    return [make_feedback(guess, p) for p in signal_patterns(word_length)]


# one entry per word length; the letters are attached per guess
@lru_cache(maxsize=None)
def signal_patterns(word_length: int) -> Tuple[Tuple[int, ...], ...]:
    """All base-3 signal patterns of `word_length`, in code order."""
    return tuple(tuple(int_to_pattern(i, word_length)) for i in range(N_SIGNALS ** word_length))
