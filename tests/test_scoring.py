import numpy as np
import pytest

import wordle_engine.scoring as scoring
from wordle_engine.config import SolverConfig
from wordle_engine.errors import NoCandidatesError
from wordle_engine.feedback import evaluate
from wordle_engine.scoring import expected_from_counts, expected_remaining, outcome_counts, partition_metrics

POOL = ["drink", "brink", "print", "drunk"]


def test_single_candidate_scores_zero():
    assert expected_remaining(["drink"], [], "drink") == 0.0


def test_single_candidate_counting_solved_outcome():
    cfg = SolverConfig(count_solved_outcome=True)
    assert expected_remaining(["drink"], [], "drink", config=cfg) == pytest.approx(1.0)


def test_hand_computed_scores():
    # "drink" splits the pool into singletons, one of them the win
    assert expected_remaining(POOL, [], "drink") == pytest.approx(0.75)
    # "print" leaves drink/brink together: 2*2/4 + 1/4
    assert expected_remaining(POOL, [], "print") == pytest.approx(1.25)
    cfg = SolverConfig(count_solved_outcome=True)
    assert expected_remaining(POOL, [], "print", config=cfg) == pytest.approx(1.5)


def test_guess_without_information_scores_pool_size():
    assert expected_remaining(["drink", "brink"], [], "jumpy") == pytest.approx(2.0)


def test_score_is_bounded_by_pool_size():
    for guess in POOL + ["snare", "jumpy", "kiosk"]:
        score = expected_remaining(POOL, [], guess)
        assert 0.0 <= score <= len(POOL)


def test_outcomes_partition_the_pool():
    counts = outcome_counts(POOL, "print")
    assert counts.sum() == len(POOL)
    assert len(counts) == 243


def test_accumulated_rules_do_not_filter_again():
    rules = evaluate("print", "drink")
    assert expected_remaining(POOL, rules, "drunk") == expected_remaining(POOL, [], "drunk")


def test_empty_pool_raises():
    with pytest.raises(NoCandidatesError):
        expected_remaining([], [], "drink")


def test_partition_metrics():
    counts = outcome_counts(POOL, "print")
    m = partition_metrics(counts, len(POOL))
    assert m["worst_case"] == 2
    assert m["partitions"] == 3
    assert m["exp_remaining"] == pytest.approx(1.25)


def test_one_filter_pass_per_outcome(monkeypatch):
    calls = []
    real = scoring.filter_candidates

    def counting(words, rules, **kwargs):
        calls.append(len(words))
        return real(words, rules, **kwargs)

    monkeypatch.setattr(scoring, "filter_candidates", counting)
    expected_remaining(POOL, [], "snare")
    assert len(calls) == 243
    assert set(calls) == {len(POOL)}


def test_counted_absent_scoring_matches_for_distinct_letters():
    cfg = SolverConfig(absent_rule="counted")
    assert expected_remaining(POOL, [], "drink", config=cfg) == pytest.approx(0.75)


def test_config_validation():
    with pytest.raises(ValueError):
        SolverConfig(absent_rule="strict")
    with pytest.raises(ValueError):
        SolverConfig(workers=0)
    with pytest.raises(ValueError):
        SolverConfig(word_length=0)


def test_equal_partitions_tie_exactly_in_any_order():
    counts = np.zeros(243, dtype=np.int64)
    counts[:8] = [40, 23, 11, 9, 7, 4, 2, 1]
    shuffled = counts.copy()
    shuffled[:8] = [1, 7, 40, 2, 11, 23, 4, 9]
    n = int(counts.sum())
    assert n == 97
    assert expected_from_counts(counts, n) == expected_from_counts(shuffled, n)
    assert expected_from_counts(counts, n) == (40 * 40 + 23 * 23 + 11 * 11 + 81 + 49 + 16 + 4 + 1) / 97
