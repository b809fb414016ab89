from __future__ import annotations

import math
from typing import Sequence

from wordsearch.errors import InvalidInputError

DEFAULT_TILES = (
    "E", "E", "C", "A",
    "A", "L", "E", "P",
    "H", "N", "B", "O",
    "Q", "T", "T", "Y",
)

TILE_SEPARATOR = "  "


def init_neighbors(grid_size: int) -> list[list[int]]:
    """Adjacency lists for an NxN grid, each in row-major order of the 3x3 neighborhood."""
    neighbors: list[list[int]] = []
    for idx in range(grid_size * grid_size):
        r, c = divmod(idx, grid_size)
        adj = []
        for dr in (-1, 0, 1):
            for dc in (-1, 0, 1):
                if dr == 0 and dc == 0:
                    continue
                nr, nc = r + dr, c + dc
                if 0 <= nr < grid_size and 0 <= nc < grid_size:
                    adj.append(nr * grid_size + nc)
        neighbors.append(adj)
    return neighbors


class Board:
    """Square grid of tiles, stored flat in row-major order (index = row * N + col)."""

    def __init__(self, tiles: Sequence[str], grid_size: int):
        self.size = grid_size
        self.tiles: tuple[str, ...] = tuple(tiles)
        self.rows: tuple[tuple[str, ...], ...] = tuple(
            self.tiles[r * grid_size:(r + 1) * grid_size] for r in range(grid_size)
        )
        self.neighbors = init_neighbors(grid_size)

    @classmethod
    def from_tiles(cls, tiles: Sequence[str] | None) -> Board:
        if tiles is None:
            raise InvalidInputError("board tiles are required")
        tiles = list(tiles)
        grid_size = math.isqrt(len(tiles))
        if grid_size * grid_size != len(tiles):
            raise InvalidInputError(f"board of {len(tiles)} tiles is not square")
        for i, tile in enumerate(tiles):
            if not isinstance(tile, str) or not tile:
                raise InvalidInputError(f"tile {i} must be a non-empty string")
        return cls([t.upper() for t in tiles], grid_size)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[str]] | None) -> Board:
        if rows is None:
            raise InvalidInputError("board rows are required")
        if isinstance(rows, str) or any(isinstance(row, str) for row in rows):
            raise InvalidInputError("board rows must be sequences of tiles, not strings")
        if any(row is None or len(row) != len(rows) for row in rows):
            raise InvalidInputError("board rows must form a square")
        return cls.from_tiles([tile for row in rows for tile in row])

    @classmethod
    def default(cls) -> Board:
        return cls(DEFAULT_TILES, 4)

    def __len__(self) -> int:
        return len(self.tiles)

    def tile(self, idx: int) -> str:
        return self.tiles[idx]

    def position(self, idx: int) -> tuple[int, int]:
        return divmod(idx, self.size)

    def index(self, row: int, col: int) -> int:
        return row * self.size + col

    def render(self) -> str:
        return "\n".join(TILE_SEPARATOR.join(row) for row in self.rows)

    def __str__(self) -> str:
        return self.render()
