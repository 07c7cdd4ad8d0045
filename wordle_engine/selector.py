"""
selector.py

Scores candidate guesses and picks the one leaving the fewest expected
candidates.

Ties go to the first guess in input order, so the result is deterministic
whether the scores are computed serially or in a process pool.
"""

from __future__ import annotations

import logging
import multiprocessing
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence

import numpy as np
from tqdm import tqdm

from wordle_engine.config import SolverConfig
from wordle_engine.constraints import filter_candidates
from wordle_engine.errors import NoCandidatesError
from wordle_engine.feedback import Rule
from wordle_engine.scoring import outcome_counts, partition_metrics

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoreRow:
    guess: str
    exp_remaining: float
    worst_case: int
    partitions: int


@dataclass(frozen=True)
class Selection:
    word: str
    score: float
    scores: Optional[List[ScoreRow]] = None


def score_guess(guess: str, pool: Sequence[str], config: SolverConfig) -> ScoreRow:
    counts = outcome_counts(pool, guess, absent_rule=config.absent_rule, word_length=config.word_length)
    m = partition_metrics(counts, len(pool), count_solved_outcome=config.count_solved_outcome)
    return ScoreRow(guess, m["exp_remaining"], m["worst_case"], m["partitions"])


# Per-process state for the worker pool; set once by the initializer so the
# candidate pool is not pickled with every task.
_WORKER_POOL: Optional[List[str]] = None
_WORKER_CONFIG: Optional[SolverConfig] = None


def _score_init(pool: List[str], config: SolverConfig) -> None:
    global _WORKER_POOL, _WORKER_CONFIG
    _WORKER_POOL = pool
    _WORKER_CONFIG = config


def _score_worker(guess: str) -> ScoreRow:
    return score_guess(guess, _WORKER_POOL, _WORKER_CONFIG)


def _score_all(guesses: List[str], pool: List[str], config: SolverConfig, progress: bool) -> List[ScoreRow]:
    n_jobs = min(config.workers, len(guesses))
    if n_jobs <= 1:
        rows: Iterator[ScoreRow] = (score_guess(g, pool, config) for g in guesses)
        return list(tqdm(rows, total=len(guesses), disable=not progress, desc="scoring"))

    log.debug("Scoring %d guesses on %d processes", len(guesses), n_jobs)
    chunksize = max(1, len(guesses) // (n_jobs * 8))
    with multiprocessing.Pool(processes=n_jobs, initializer=_score_init, initargs=(pool, config)) as mp:
        # imap keeps input order, which the tie-break relies on
        rows = mp.imap(_score_worker, guesses, chunksize=chunksize)
        return list(tqdm(rows, total=len(guesses), disable=not progress, desc="scoring"))


def select_best(
    candidate_guesses: Iterable[str],
    pool: Sequence[str],
    rules: Sequence[Rule],
    *,
    config: Optional[SolverConfig] = None,
    with_scores: bool = False,
    progress: bool = False,
) -> Selection:
    """
    Return the guess with the lowest expected remaining pool size.

    Parameters
    ----------
    candidate_guesses : iterable of str
        Words to score, usually the pool itself or the whole universe.
    pool : sequence of str
        Words still consistent with `rules` (already filtered).
    rules : sequence of Rule
        Accumulated feedback; kept for symmetry with `expected_remaining`.
    with_scores : bool
        If True, `Selection.scores` holds one ScoreRow per guess in input order.

    Raises
    ------
    NoCandidatesError
        If `pool` or `candidate_guesses` is empty.
    """
    cfg = config or SolverConfig()
    pool = list(pool)
    guesses = list(candidate_guesses)
    if not pool:
        raise NoCandidatesError("candidate pool is empty; the feedback rules eliminated every word")
    if not guesses:
        raise NoCandidatesError("no candidate guesses to score")

    rows = _score_all(guesses, pool, cfg, progress)
    scores = np.fromiter((r.exp_remaining for r in rows), dtype=np.float64, count=len(rows))
    best = int(np.argmin(scores))  # first index of the minimum
    log.debug("Best of %d guesses: %s (%.3f)", len(rows), rows[best].guess, rows[best].exp_remaining)
    return Selection(rows[best].guess, rows[best].exp_remaining, rows if with_scores else None)


def suggest(
    universe: Sequence[str],
    rules: Sequence[Rule],
    *,
    config: Optional[SolverConfig] = None,
    exhaustive: bool = False,
    with_scores: bool = False,
    progress: bool = False,
) -> Selection:
    """
    Filter `universe` by `rules`, then pick the best guess.

    Candidates are the filtered pool, or the whole universe when `exhaustive`.
    """
    cfg = config or SolverConfig()
    pool = filter_candidates(universe, rules, absent_rule=cfg.absent_rule)
    log.info("%d of %d words match the feedback", len(pool), len(universe))
    candidates = universe if exhaustive else pool
    return select_best(candidates, pool, rules, config=cfg, with_scores=with_scores, progress=progress)
