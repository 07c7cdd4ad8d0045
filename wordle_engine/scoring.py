"""
scoring.py

Expected number of candidates left after playing a guess.

Model: the hidden word is uniform over the current pool of N words. For each
of the 3**L outcomes of the guess, the rule filter keeps k words; that outcome
happens with probability k/N and leaves k words, so

    exp_remaining = sum(k * (k / N))

Lower is better. Under the lenient ABSENT reading every word matches exactly
one outcome, hence 0 <= exp_remaining <= N.

The all-EXACT outcome means the guess was the answer and nothing is left to
search, so it contributes 0 unless `count_solved_outcome` is set.
"""

from __future__ import annotations

from typing import Dict, Optional, Sequence

import numpy as np

from wordle_engine.config import WORD_LENGTH, SolverConfig
from wordle_engine.constraints import filter_candidates
from wordle_engine.errors import NoCandidatesError
from wordle_engine.feedback import Rule
from wordle_engine.outcomes import all_outcomes


def outcome_counts(pool: Sequence[str], guess: str, *, absent_rule: str = "lenient", word_length: int = WORD_LENGTH) -> np.ndarray:
    """Number of pool words consistent with each outcome of `guess`, in outcome order."""
    outcomes = all_outcomes(guess, word_length)
    return np.fromiter(
        (len(filter_candidates(pool, o, absent_rule=absent_rule)) for o in outcomes),
        dtype=np.int64,
        count=len(outcomes),
    )


def _check_pool(pool: Sequence[str]) -> int:
    n = len(pool)
    if n == 0:
        raise NoCandidatesError("candidate pool is empty; the feedback rules eliminated every word")
    return n


def expected_from_counts(counts: np.ndarray, n: int, *, count_solved_outcome: bool = False) -> float:
    if n <= 0:
        raise NoCandidatesError("candidate pool is empty; the feedback rules eliminated every word")
    k = counts.astype(np.int64)
    if not count_solved_outcome:
        # the last outcome is all EXACT
        k[-1] = 0
    # exact integer sum, so equal partitions in any order tie exactly
    return int((k * k).sum()) / n


def expected_remaining(
    pool: Sequence[str],
    rules: Sequence[Rule],
    guess: str,
    *,
    config: Optional[SolverConfig] = None,
) -> float:
    """
    Expected size of `pool` after playing `guess`.

    `rules` (the accumulated feedback) is not applied here: `pool` must
    already be filtered by it.

    Raises
    ------
    NoCandidatesError
        If `pool` is empty.
    """
    cfg = config or SolverConfig()
    n = _check_pool(pool)
    counts = outcome_counts(pool, guess, absent_rule=cfg.absent_rule, word_length=cfg.word_length)
    return expected_from_counts(counts, n, count_solved_outcome=cfg.count_solved_outcome)


def partition_metrics(counts: np.ndarray, n: int, *, count_solved_outcome: bool = False) -> Dict[str, float]:
    """exp_remaining plus the size of the largest outcome and the number of non-empty ones."""
    return {
        "exp_remaining": expected_from_counts(counts, n, count_solved_outcome=count_solved_outcome),
        "worst_case": int(counts.max()) if counts.size else 0,
        "partitions": int(np.count_nonzero(counts)),
    }
