from __future__ import annotations

import logging

from wordsearch.board import Board
from wordsearch.errors import InvalidInputError

logger = logging.getLogger("boggle")


class PathFinder:
    """Locate a word on a board as a path of adjacent, distinct cells.

    Start cells are tried in row-major order and neighbors in the fixed
    order of Board.neighbors, so the first path found for a given board
    and word is always the same one.
    """

    def __init__(self, board: Board):
        self.board = board

    def find(self, word: str) -> list[int] | None:
        """Return the row-major cell indices spelling word, or None if it is not on the board."""
        if word is None:
            raise InvalidInputError("word is required")
        target = word.upper()
        if not target or not len(self.board):
            return None

        for start, tile in enumerate(self.board.tiles):
            if not target.startswith(tile):
                continue
            path = self._extend(target, start, len(tile))
            if path is not None:
                logger.debug("Found %s at %s", target, path)
                return path

        logger.debug("%s is not on the board", target)
        return None

    def _extend(self, target: str, start: int, matched: int) -> list[int] | None:
        """Depth-first search from start over an explicit stack of (cell, matched, neighbor iterator) frames."""
        if matched == len(target):
            return [start]
        tiles = self.board.tiles
        neighbors = self.board.neighbors

        path = [start]
        visited = 1 << start
        stack = [(start, matched, iter(neighbors[start]))]
        while stack:
            idx, matched, candidates = stack[-1]
            for nidx in candidates:
                if visited & (1 << nidx):
                    continue
                tile = tiles[nidx]
                # startswith at an offset also rejects tiles running past the end of the word
                if not target.startswith(tile, matched):
                    continue
                path.append(nidx)
                if matched + len(tile) == len(target):
                    return path
                visited |= 1 << nidx
                stack.append((nidx, matched + len(tile), iter(neighbors[nidx])))
                break
            else:
                # every neighbor of idx tried: uncommit it
                stack.pop()
                path.pop()
                visited &= ~(1 << idx)
        return None


def spell(board: Board, path: list[int]) -> str:
    return "".join(board.tile(idx) for idx in path)


def is_valid_path(board: Board, path: list[int]) -> bool:
    """True if path has no repeated cell and each step moves to an adjacent cell."""
    if len(set(path)) != len(path):
        return False
    return all(b in board.neighbors[a] for a, b in zip(path, path[1:]))
