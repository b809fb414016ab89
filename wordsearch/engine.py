from __future__ import annotations

import logging
from typing import Iterable, Sequence

from wordsearch.board import Board
from wordsearch.errors import InvalidInputError, NotReadyError
from wordsearch.lexicon import Lexicon, load_lexicon
from wordsearch.scoring import all_scorable_words, score_words
from wordsearch.solver import PathFinder

logger = logging.getLogger("boggle")


class WordSearchEngine:
    """Query surface over one lexicon and one board snapshot.

    A default 4x4 board is in place until set_board() is called. Every
    lexicon-dependent query raises NotReadyError until a dictionary is
    loaded. Not safe for concurrent use; give each thread its own engine.
    """

    def __init__(self):
        self.lexicon = Lexicon()
        self.board = Board.default()
        self._finder = PathFinder(self.board)

    def load_lexicon(self, path) -> int:
        self.lexicon = load_lexicon(path)
        return len(self.lexicon)

    def load_words(self, words: Iterable[str]) -> int:
        self.lexicon = Lexicon().load(words)
        logger.info("Loaded %d words", len(self.lexicon))
        return len(self.lexicon)

    def set_board(self, tiles: Sequence[str]):
        self.board = Board.from_tiles(tiles)
        self._finder = PathFinder(self.board)
        logger.info("Board set to %dx%d", self.board.size, self.board.size)

    @property
    def board_text(self) -> str:
        return self.board.render()

    def _require(self, value, what: str):
        if value is None:
            raise InvalidInputError(f"{what} is required")
        if not self.lexicon.loaded:
            raise NotReadyError("lexicon has not been loaded")

    def is_valid_word(self, word: str) -> bool:
        return self.lexicon.contains(word)

    def is_valid_prefix(self, prefix: str) -> bool:
        return self.lexicon.has_prefix(prefix)

    def is_on_board(self, word: str) -> list[int]:
        """Row-major cell indices spelling word, or an empty list if it is not on the board."""
        self._require(word, "word")
        return self._finder.find(word) or []

    def all_scorable_words(self, min_length: int) -> list[str]:
        return all_scorable_words(self.lexicon, self._finder, min_length)

    def score_for_words(self, words: Iterable[str], min_length: int) -> int:
        return score_words(words, self.lexicon, self._finder, min_length)
