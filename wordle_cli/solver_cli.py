"""
wordle_cli/solver_cli.py

Suggest the next Wordle guess from the feedback received so far.

The feedback file holds pairs of lines, the guess then its signals
(' ' grey, '.' yellow, anything else green), e.g.

    snare
     . .

Run:
  wordle-expect guesses.txt                # best next guess
  wordle-expect -l guesses.txt             # every candidate with its score
  wordle-expect -a guesses.txt             # also consider words that cannot be the answer
  wordle-expect -t drink guesses.txt       # check recorded feedback against "drink"
  cat guesses.txt | python -m wordle_cli.solver_cli -w words
"""

from __future__ import annotations

import argparse
import csv
import logging
import sys
from typing import List, Optional, TextIO

from rich.console import Console
from rich.text import Text

from wordle_engine.config import SolverConfig
from wordle_engine.errors import WordleError
from wordle_engine.feedback import equivalent, evaluate, validate_word
from wordle_engine.records import GuessRecord, flatten_rules, read_records
from wordle_engine.selector import ScoreRow, suggest
from wordle_engine.vocab import load_word_universe
from wordle_cli.render import render_feedback

log = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="wordle-expect",
        description="Pick the Wordle guess that minimizes the expected number of remaining words.",
    )
    ap.add_argument("guesses", nargs="?", default="-", help="Feedback file ('-' or omitted for stdin)")
    ap.add_argument("-w", "--words", default="words", help="Word list, one word per line")
    ap.add_argument("-l", "--list", action="store_true", help="List all candidate words with their scores")
    ap.add_argument("-a", "--all", action="store_true", help="Consider all words for the best guess")
    ap.add_argument("-t", "--test", metavar="WORD", default="", help="Test recorded feedback against this answer")
    ap.add_argument(
        "--counted-absent",
        action="store_true",
        help="Treat a grey letter that is also green/yellow in the same guess as a count limit",
    )
    ap.add_argument("--count-solved", action="store_true", help="Keep the all-green outcome in the expected value")
    ap.add_argument("-j", "--workers", type=int, default=1, help="Number of worker processes")
    ap.add_argument("--progress", action="store_true", help="Show a progress bar while scoring")
    ap.add_argument("--out", default=None, help="Also write the score table to this CSV file")
    ap.add_argument("--no-color", action="store_true", help="Print feedback without colours")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return ap


def _read_guesses(path: str, word_length: int) -> List[GuessRecord]:
    if path == "-":
        return read_records(sys.stdin, word_length=word_length)
    with open(path, encoding="utf-8") as f:
        return read_records(f, word_length=word_length)


def _run_self_test(answer: str, records: List[GuessRecord], console: Console, color: bool) -> int:
    fail = 0
    for rec in records:
        try:
            actual = evaluate(answer, rec.word)
        except ValueError as e:
            log.error("cannot evaluate %r against %r: %s", rec.word, answer, e)
            fail = 1
            continue
        if equivalent(actual, rec.rules):
            console.print(Text.assemble(f"{rec.word} OK ", render_feedback(rec.rules, color)))
        else:
            console.print(
                Text.assemble(
                    f"{rec.word} FAIL ",
                    render_feedback(rec.rules, color),
                    " != ",
                    render_feedback(actual, color),
                )
            )
            fail = 1
    return fail


def _write_csv(rows: List[ScoreRow], path: str) -> None:
    fieldnames = ["guess", "exp_remaining", "worst_case", "partitions"]
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fieldnames)
        w.writeheader()
        for r in rows:
            w.writerow(
                {"guess": r.guess, "exp_remaining": r.exp_remaining, "worst_case": r.worst_case, "partitions": r.partitions}
            )


def main(argv: Optional[List[str]] = None, stdout: Optional[TextIO] = None) -> int:
    ap = _build_parser()
    args = ap.parse_args(argv)

    loglevel = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=loglevel, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)

    try:
        config = SolverConfig(
            absent_rule="counted" if args.counted_absent else "lenient",
            count_solved_outcome=args.count_solved,
            workers=args.workers,
        )
    except ValueError as e:
        ap.error(str(e))

    out = stdout or sys.stdout
    console = Console(file=out, highlight=False, soft_wrap=True)
    color = console.is_terminal and not args.no_color

    try:
        records = _read_guesses(args.guesses, config.word_length)
    except WordleError as e:
        log.error("%s", e)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        log.error("cannot read feedback from %s: %s", args.guesses, e)
        return 1

    if args.test:
        answer = args.test.strip().lower()
        try:
            validate_word(answer, config.word_length, "test word")
        except ValueError as e:
            ap.error(str(e))
        return _run_self_test(answer, records, console, color)

    try:
        vocab = load_word_universe(args.words, word_len=config.word_length)
        for rec in records:
            if not vocab.contains(rec.word):
                log.warning("guess %r is not in the word list", rec.word)
        rules = flatten_rules(records)
        selection = suggest(
            vocab.words(),
            rules,
            config=config,
            exhaustive=args.all,
            with_scores=args.list or args.out is not None,
            progress=args.progress,
        )
    except WordleError as e:
        log.error("%s", e)
        return 1

    if args.list:
        for row in selection.scores:
            print(f"{row.guess} {row.exp_remaining:.3f}", file=out)
    else:
        print(selection.word, file=out)

    if args.out is not None:
        try:
            _write_csv(selection.scores, args.out)
        except OSError as e:
            log.error("cannot write scores to %s: %s", args.out, e)
            return 1
        log.info("Wrote %d scores to %s", len(selection.scores), args.out)

    return 0


if __name__ == "__main__":
    sys.exit(main())
