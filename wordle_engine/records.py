"""
records.py

Reads guess/feedback records from a text stream.

Each record is two lines:

    snare
     n r

line 1 holds the guessed letters, line 2 one symbol per letter, right-padded
with spaces to the word length:
  - ' ' = ABSENT  (grey)
  - '.' = PRESENT (yellow)
  - anything else = EXACT (green)

A stream that ends after a letters line drops that partial record.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List

from wordle_engine.config import WORD_LENGTH
from wordle_engine.errors import MalformedRecordError
from wordle_engine.feedback import FeedbackSet, Rule, Signal


@dataclass(frozen=True)
class GuessRecord:
    word: str
    rules: FeedbackSet


def parse_match_symbol(ch: str) -> Signal:
    if ch == ".":
        return Signal.PRESENT
    if ch == " ":
        return Signal.ABSENT
    return Signal.EXACT


def format_match_symbols(rules: Iterable[Rule]) -> str:
    """Inverse of the signal line: ' ', '.', or the letter itself."""
    out = []
    for r in rules:
        if r.signal == Signal.ABSENT:
            out.append(" ")
        elif r.signal == Signal.PRESENT:
            out.append(".")
        else:
            out.append(r.letter)
    return "".join(out)


def parse_record(letters: str, matches: str, line_number: int, *, word_length: int = WORD_LENGTH) -> GuessRecord:
    """
    Build the Feedback Set for one record.

    `line_number` is the 1-based line of `letters`; the signal line follows it.
    """
    if len(letters) < word_length:
        raise MalformedRecordError(
            line_number, letters, f"guess has {len(letters)} letters, expected {word_length}"
        )
    matches = matches.ljust(word_length)
    if len(matches) < len(letters):
        raise MalformedRecordError(
            line_number + 1, matches, f"signal line is shorter than the guess {letters!r}"
        )
    word = letters[:word_length]
    rules = tuple(Rule(i, word[i], parse_match_symbol(matches[i])) for i in range(word_length))
    return GuessRecord(word, rules)


def read_records(stream: Iterable[str], *, word_length: int = WORD_LENGTH) -> List[GuessRecord]:
    """Parse every complete (letters, signals) pair in `stream`."""
    lines = (line.rstrip("\r\n") for line in stream)
    records: List[GuessRecord] = []
    line_number = 0
    for letters in lines:
        line_number += 1
        matches = next(lines, None)
        if matches is None:
            break
        records.append(parse_record(letters.strip().lower(), matches, line_number, word_length=word_length))
        line_number += 1
    return records


def flatten_rules(records: Iterable[GuessRecord]) -> List[Rule]:
    """All rules of all records, in input order."""
    rules: List[Rule] = []
    for record in records:
        rules.extend(record.rules)
    return rules
