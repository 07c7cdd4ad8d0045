from wordle_cli.render import STYLES, render_feedback
from wordle_engine.feedback import Signal, evaluate


def test_plain_rendering_spells_out_signals():
    text = render_feedback(evaluate("drink", "snare"), color=False)
    assert text.plain == "snare[ . . ]"


def test_colour_rendering_styles_each_letter():
    text = render_feedback(evaluate("drink", "print"), color=True)
    assert text.plain == "print"
    styles = [str(span.style) for span in text.spans]
    assert styles == [
        STYLES[Signal.ABSENT],
        STYLES[Signal.EXACT],
        STYLES[Signal.EXACT],
        STYLES[Signal.EXACT],
        STYLES[Signal.ABSENT],
    ]
