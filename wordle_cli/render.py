"""
wordle_cli/render.py

Terminal rendering of a Feedback Set. Presentation only, the engine never
imports this module.
"""

from __future__ import annotations

from typing import Sequence

from rich.text import Text

from wordle_engine.feedback import Rule, Signal
from wordle_engine.records import format_match_symbols

STYLES = {
    Signal.ABSENT: "bold on bright_black",
    Signal.PRESENT: "bold bright_white on bright_yellow",
    Signal.EXACT: "bold bright_white on bright_green",
}


def render_feedback(rules: Sequence[Rule], color: bool = True) -> Text:
    """
    Colour each letter by its signal, like the game board.

    With `color=False` the signals are spelled out in the input format instead:
    "snare[ . . ]" for s/a/e grey and n/r yellow (an EXACT letter shows itself).
    """
    if not color:
        letters = "".join(r.letter for r in rules)
        return Text(f"{letters}[{format_match_symbols(rules)}]")
    text = Text()
    for r in rules:
        text.append(r.letter, style=STYLES[r.signal])
    return text
