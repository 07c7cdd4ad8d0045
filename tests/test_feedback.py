import pytest

from wordle_engine.feedback import (
    Rule,
    Signal,
    equivalent,
    evaluate,
    int_to_pattern,
    make_feedback,
    pattern_to_int,
    signals,
)

A, P, E = Signal.ABSENT, Signal.PRESENT, Signal.EXACT


def test_worked_example_drink_snare():
    fb = evaluate("drink", "snare")
    assert fb == (
        Rule(0, "s", A),
        Rule(1, "n", P),
        Rule(2, "a", A),
        Rule(3, "r", P),
        Rule(4, "e", A),
    )


def test_duplicate_letters_sissy_assis():
    # exact 's' at 2 is consumed first, then left to right: 's' at 1 and 4 take
    # the two remaining 's', 'i' takes the only 'i', 'a' is absent
    assert signals(evaluate("sissy", "assis")) == [A, P, E, P, P]


@pytest.mark.parametrize(
    "true_word, guess, expected",
    [
        ("crane", "crane", [2, 2, 2, 2, 2]),
        ("total", "allot", [1, 1, 0, 1, 1]),
        ("cabin", "abbey", [1, 0, 2, 0, 0]),
        ("spree", "press", [1, 1, 1, 1, 0]),
    ],
)
def test_classic_duplicate_cases(true_word, guess, expected):
    assert signals(evaluate(true_word, guess)) == expected


def test_double_guess_single_occurrence_gives_one_coloured_signal():
    # "crane" holds one 'e'; "eerie" guesses three
    fb = evaluate("crane", "eerie")
    e_signals = [r.signal for r in fb if r.letter == "e"]
    assert e_signals.count(A) == 2
    assert e_signals.count(E) == 1

    # no exact match: the leftmost copy gets the yellow
    fb = evaluate("other", "eerie")
    assert [r.signal for r in fb] == [P, A, P, A, A]


def test_evaluate_attaches_guess_letters_and_positions():
    fb = evaluate("drink", "snare")
    assert "".join(r.letter for r in fb) == "snare"
    assert [r.position for r in fb] == [0, 1, 2, 3, 4]


def test_evaluate_validation():
    with pytest.raises(ValueError):
        evaluate("drink", "snar")
    with pytest.raises(ValueError):
        evaluate("DRINK", "snare")
    with pytest.raises(ValueError):
        evaluate("drink", "sn4re")
    with pytest.raises(TypeError):
        evaluate("drink", 12345)


def test_equivalent():
    a = evaluate("drink", "snare")
    assert equivalent(a, make_feedback("snare", [0, 1, 0, 1, 0]))
    assert not equivalent(a, make_feedback("snare", [0, 1, 0, 1, 1]))
    assert not equivalent(a, make_feedback("snarl", [0, 1, 0, 1, 0]))
    assert not equivalent(a, a[:4])


def test_pattern_codec():
    assert pattern_to_int([2, 2, 2, 2, 2]) == 242
    assert pattern_to_int([0, 0, 0, 0, 0]) == 0
    assert pattern_to_int([1, 0, 0, 0, 0]) == 81
    assert int_to_pattern(81) == [1, 0, 0, 0, 0]
    assert int_to_pattern(pattern_to_int([0, 1, 0, 1, 0])) == [0, 1, 0, 1, 0]
    with pytest.raises(ValueError):
        pattern_to_int([0, 3, 0, 0, 0])
    with pytest.raises(ValueError):
        int_to_pattern(243)
