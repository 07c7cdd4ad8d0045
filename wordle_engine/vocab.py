from __future__ import annotations

import logging
from typing import List

import pandas as pd

from wordle_engine.config import WORD_LENGTH
from wordle_engine.errors import WordListError

log = logging.getLogger(__name__)


class WordVocab:
    """Ordered, read-only word universe."""

    def __init__(self, words: List[str]) -> None:
        if not isinstance(words, list):
            raise TypeError("`words` must be a list of strings")
        if not words:
            raise ValueError("no words provided")
        if not all(isinstance(w, str) for w in words):
            raise TypeError("all items in `words` must be str")

        # Enforce uniqueness (first occurrence policy is handled by from_text)
        if len(set(words)) != len(words):
            raise ValueError("duplicate words detected; input to WordVocab must be deduplicated")

        self._words: List[str] = list(words)
        self._index = {w: i for i, w in enumerate(self._words)}

    # ---------- Construction helpers ----------

    @classmethod
    def from_text(cls, path: str, *, word_len: int = WORD_LENGTH) -> "WordVocab":
        """
        Load a newline-delimited word list (one word per line, no header).

        Words are stripped and lowercased; lines of the wrong length or with
        non-letters are skipped, and later duplicates are dropped.

        Raises
        ------
        FileNotFoundError, OSError, ValueError
        """
        df = pd.read_csv(
            path,
            header=None,
            names=["word"],
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
        )
        raw = df["word"].str.strip().str.lower()

        clean: List[str] = []
        seen = set()
        skipped = 0
        for w in raw:
            if len(w) != word_len or not (w.isascii() and w.isalpha()):
                skipped += 1
                continue
            if w in seen:
                continue
            seen.add(w)
            clean.append(w)

        if skipped:
            log.debug("Skipped %d malformed lines in %s", skipped, path)
        if not clean:
            raise ValueError("no valid words after filtering")

        return cls(clean)

    # ---------- Basic protocol ----------

    def __len__(self) -> int:
        return len(self._words)

    def words(self) -> List[str]:
        """Return a copy of the internal word list (to avoid external mutation)."""
        return list(self._words)

    def contains(self, word: str) -> bool:
        return word in self._index


def load_word_universe(path: str, *, word_len: int = WORD_LENGTH) -> WordVocab:
    """
    Load the word universe for a run.

    Any failure (missing file, unreadable file, nothing usable in it) becomes
    a WordListError so the caller can stop before scoring an empty universe.
    """
    try:
        vocab = WordVocab.from_text(path, word_len=word_len)
    except pd.errors.EmptyDataError as e:
        raise WordListError(f"word list {path} is empty") from e
    except (OSError, ValueError, UnicodeDecodeError) as e:
        raise WordListError(f"cannot load word list {path}: {e}") from e
    log.info("Loaded %d words from %s", len(vocab), path)
    return vocab
