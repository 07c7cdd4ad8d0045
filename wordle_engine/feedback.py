"""
Feedback model for Wordle.

A guess played against a hidden word yields one signal per position:

- ABSENT  (grey)   letter not in the word, or all its occurrences already used
- PRESENT (yellow) letter occurs elsewhere in the word
- EXACT   (green)  letter occurs at this exact position

Duplicate handling (two-pass rule)
----------------------------------
1) EXACT PASS: every position where guess and word agree is marked EXACT and
   consumes one unit of that letter's budget (its count in the hidden word).
2) PRESENT PASS: left to right over the remaining positions, a letter with
   budget left is PRESENT and consumes one unit; otherwise it is ABSENT.

So guessing a letter twice when the word holds it once gives one coloured
signal and one grey, never two coloured ones.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import List, Sequence, Tuple

from wordle_engine.config import ALPHABET_SIZE, N_SIGNALS, WORD_LENGTH


class Signal(IntEnum):
    ABSENT = 0
    PRESENT = 1
    EXACT = 2


@dataclass(frozen=True)
class Rule:
    """One position of a Feedback Set: `letter` at `position` got `signal`."""

    position: int
    letter: str
    signal: Signal


FeedbackSet = Tuple[Rule, ...]


def _li(c: str) -> int:
    """Map a lowercase letter to 0..25."""
    return ord(c) - 97


def validate_word(word: str, word_length: int = WORD_LENGTH, name: str = "word") -> None:
    """Raise unless `word` is a lowercase alphabetic string of `word_length`."""
    if not isinstance(word, str):
        raise TypeError(f"{name} must be a string")
    if len(word) != word_length:
        raise ValueError(f"{name} must be length {word_length}, got {word!r}")
    if not word.isascii() or not word.isalpha():
        raise ValueError(f"{name} must be alphabetic, got {word!r}")
    if not word.islower():
        raise ValueError(f"{name} must be lowercase, got {word!r}")


def evaluate(true_word: str, guess: str) -> FeedbackSet:
    """
    Compute the feedback a player sees after guessing `guess` when the hidden
    word is `true_word`.

    e.g. evaluate("drink", "snare") ->
        (s ABSENT, n PRESENT, a ABSENT, r PRESENT, e ABSENT)
    """
    validate_word(true_word, len(true_word), "true_word")
    validate_word(guess, len(true_word), "guess")

    pattern = [Signal.ABSENT] * len(guess)
    budget = [0] * ALPHABET_SIZE
    for ch in true_word:
        budget[_li(ch)] += 1

    # Pass 1: exact matches consume their budget first
    for i, (g, t) in enumerate(zip(guess, true_word)):
        if g == t:
            pattern[i] = Signal.EXACT
            budget[_li(g)] -= 1

    # Pass 2: left to right, present while budget remains
    for i, g in enumerate(guess):
        if pattern[i] == Signal.EXACT:
            continue
        if budget[_li(g)] > 0:
            pattern[i] = Signal.PRESENT
            budget[_li(g)] -= 1

    return make_feedback(guess, pattern)


def make_feedback(guess: str, pattern: Sequence[int]) -> FeedbackSet:
    """Pair the letters of `guess` with `pattern`, one Rule per position."""
    if len(pattern) != len(guess):
        raise ValueError("pattern and guess must have the same length")
    return tuple(Rule(i, ch, Signal(s)) for i, (ch, s) in enumerate(zip(guess, pattern)))


def equivalent(a: Sequence[Rule], b: Sequence[Rule]) -> bool:
    """True iff both Feedback Sets agree on position, letter and signal everywhere."""
    if len(a) != len(b):
        return False
    return all(x == y for x, y in zip(a, b))


def signals(rules: Sequence[Rule]) -> List[int]:
    return [int(r.signal) for r in rules]


def pattern_to_int(pattern: Sequence[int]) -> int:
    """
    Encode a base-3 pattern [p0, p1, ...] into a single integer.

    Position 0 is the most significant digit, so for length 5 the result is in
    [0, 242] and [2, 2, 2, 2, 2] maps to 242.
    """
    if not isinstance(pattern, (list, tuple)):
        raise TypeError("pattern must be a list or tuple of integers in {0,1,2}")
    value = 0
    for p in pattern:
        if not isinstance(p, int) or p not in (0, 1, 2):
            raise ValueError("pattern elements must be integers in {0,1,2}")
        value = value * N_SIGNALS + p
    return value


def int_to_pattern(code: int, word_length: int = WORD_LENGTH) -> List[int]:
    """Inverse of `pattern_to_int`."""
    if not isinstance(code, int) or code < 0 or code >= N_SIGNALS ** word_length:
        raise ValueError(f"code must be an integer in [0, {N_SIGNALS ** word_length - 1}]")
    out = [0] * word_length
    for i in range(word_length - 1, -1, -1):
        code, out[i] = divmod(code, N_SIGNALS)
    return out
