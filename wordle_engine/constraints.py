"""
constraints.py

Checks words against accumulated feedback rules and filters candidate words.

Two readings of an ABSENT rule are supported:

- "lenient" (default): the word must not contain the letter anywhere. This
  rejects valid words when the same guess also marked that letter
  EXACT/PRESENT at another position (e.g. guessing "eerie" against "there").
- "counted": within one guess, an ABSENT letter that also got EXACT/PRESENT
  signals fixes the letter's count to the number of those signals, and the
  ABSENT position may not hold the letter.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, List, Sequence

from wordle_engine.config import ABSENT_RULES
from wordle_engine.feedback import FeedbackSet, Rule, Signal


def satisfies(word: str, rule: Rule) -> bool:
    """Check a single rule with the lenient ABSENT reading."""
    in_word = rule.letter in word
    exact_pos = word[rule.position] == rule.letter

    if rule.signal == Signal.ABSENT:
        return not in_word
    if rule.signal == Signal.EXACT:
        return exact_pos
    return in_word and not exact_pos


def group_feedback(rules: Iterable[Rule]) -> List[FeedbackSet]:
    """
    Split a flat rule sequence into Feedback Sets.

    Positions within a guess increase, so a new set starts whenever a rule's
    position does not exceed the previous one.
    """
    groups: List[FeedbackSet] = []
    current: List[Rule] = []
    for r in rules:
        if current and r.position <= current[-1].position:
            groups.append(tuple(current))
            current = []
        current.append(r)
    if current:
        groups.append(tuple(current))
    return groups


def satisfies_counted(word: str, feedback: Sequence[Rule]) -> bool:
    """Check one Feedback Set with the counted ABSENT reading."""
    required: Counter = Counter()
    capped = set()
    for r in feedback:
        at_pos = word[r.position] == r.letter
        if r.signal == Signal.EXACT:
            if not at_pos:
                return False
            required[r.letter] += 1
        elif r.signal == Signal.PRESENT:
            if at_pos:
                return False
            required[r.letter] += 1
        else:
            if at_pos:
                return False
            capped.add(r.letter)

    counts = Counter(word)
    for letter, k in required.items():
        if counts[letter] < k:
            return False
    # grey next to green/yellow of the same letter: no further copies exist
    for letter in capped:
        if counts[letter] != required[letter]:
            return False
    return True


def filter_candidates(words: Sequence[str], rules: Sequence[Rule], *, absent_rule: str = "lenient") -> List[str]:
    """
    Keep only the words that satisfy *all* rules, in input order.

    An empty rule sequence keeps every word. A new list is always returned.
    """
    if absent_rule not in ABSENT_RULES:
        raise ValueError(f"absent_rule must be one of {ABSENT_RULES}, got {absent_rule!r}")
    if not rules:
        return list(words)

    if absent_rule == "counted":
        groups = group_feedback(rules)
        return [w for w in words if all(satisfies_counted(w, g) for g in groups)]

    candidates = []
    for w in words:
        ok = True
        for r in rules:
            if not satisfies(w, r):
                ok = False
                break
        if ok:
            candidates.append(w)
    return candidates
