"""
wordle_engine/config.py

Constants and the solver configuration shared by the engine and the CLI.
"""

from __future__ import annotations

from dataclasses import dataclass

WORD_LENGTH = 5
ALPHABET_SIZE = 26
N_SIGNALS = 3
N_OUTCOMES = N_SIGNALS ** WORD_LENGTH  # 243

ABSENT_RULES = ("lenient", "counted")


@dataclass(frozen=True)
class SolverConfig:
    """
    Knobs for filtering and scoring.

    word_length : int, default=5
        Length of every word and Feedback Set.
    absent_rule : str, default="lenient"
        "lenient" = an Absent letter must not occur anywhere in the word.
        "counted" = an Absent letter also marked Exact/Present in the same guess
        caps that letter's count instead of excluding it.
    count_solved_outcome : bool, default=False
        If True, the all-Exact outcome adds its k*k/N term like any other.
    workers : int, default=1
        Number of processes used by the selector.
    """

    word_length: int = WORD_LENGTH
    absent_rule: str = "lenient"
    count_solved_outcome: bool = False
    workers: int = 1

    def __post_init__(self) -> None:
        if not isinstance(self.word_length, int) or self.word_length <= 0:
            raise ValueError("word_length must be a positive integer")
        if self.absent_rule not in ABSENT_RULES:
            raise ValueError(f"absent_rule must be one of {ABSENT_RULES}, got {self.absent_rule!r}")
        if not isinstance(self.workers, int) or self.workers < 1:
            raise ValueError("workers must be an integer >= 1")
