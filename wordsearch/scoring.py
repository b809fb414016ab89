from __future__ import annotations

import logging
from typing import Iterable

from wordsearch.errors import InvalidInputError, NotReadyError
from wordsearch.lexicon import Lexicon
from wordsearch.solver import PathFinder

logger = logging.getLogger("boggle")


def _check_args(lexicon: Lexicon, min_length: int):
    if isinstance(min_length, bool) or not isinstance(min_length, int) or min_length < 1:
        raise InvalidInputError(f"minimum word length must be at least 1, got {min_length}")
    if not lexicon.loaded:
        raise NotReadyError("lexicon has not been loaded")


def word_score(word: str, min_length: int) -> int:
    """One point for reaching the minimum length, plus one per extra character."""
    return 1 + len(word) - min_length


def all_scorable_words(lexicon: Lexicon, finder: PathFinder, min_length: int) -> list[str]:
    """Every lexicon word of at least min_length characters that can be found on the board, sorted."""
    _check_args(lexicon, min_length)
    found = [w for w in lexicon.words_with_min_length(min_length) if finder.find(w) is not None]
    logger.info("Found %d scorable words (min length %d)", len(found), min_length)
    return found


def score_words(words: Iterable[str], lexicon: Lexicon, finder: PathFinder, min_length: int) -> int:
    """Total score of the words that are in the lexicon and on the board with at least min_length cells.

    Words failing either check score nothing.
    """
    if words is None or isinstance(words, str):
        raise InvalidInputError("words must be a collection of strings")
    _check_args(lexicon, min_length)

    unique = set()
    for w in words:
        if not isinstance(w, str):
            raise InvalidInputError(f"words must be strings, got {w!r}")
        unique.add(w.upper())

    total = 0
    for word in sorted(unique):
        if not lexicon.contains(word):
            continue
        path = finder.find(word)
        if path is None or len(path) < min_length:
            continue
        total += word_score(word, min_length)
    return total
