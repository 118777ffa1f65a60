"""A fixed-size two-dimensional grid addressed by (x, y)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

_OUT_OF_REGION = "Out of region exception"


@dataclass(frozen=True)
class Vec2i:
    """An integer pair, used for grid dimensions."""

    x: int
    y: int


class Array2D(Generic[T]):
    """A rectangular grid of cells stored row by row."""

    def __init__(self, x: int = 0, y: int = 0, fill: T | None = None) -> None:
        if x < 0 or y < 0:
            raise ValueError("grid dimensions must not be negative")
        self._fill = fill
        self._rows: list[list[T | None]] = [[fill] * x for _ in range(y)]
        self._size = Vec2i(x, y)

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self._size.x and 0 <= y < self._size.y):
            raise IndexError(_OUT_OF_REGION)

    def at(self, x: int, y: int) -> T | None:
        """Return the cell at column x, row y."""
        self._check(x, y)
        return self._rows[y][x]

    def set(self, x: int, y: int, val: T) -> None:
        """Store val at column x, row y."""
        self._check(x, y)
        self._rows[y][x] = val

    def size(self) -> Vec2i:
        """Return the grid's width and height."""
        return self._size

    def resize(self, x: int, y: int) -> None:
        """Change the dimensions, keeping the cells that still fit."""
        if x < 0 or y < 0:
            raise ValueError("grid dimensions must not be negative")
        rows: list[list[T | None]] = []
        for row_index in range(y):
            if row_index < len(self._rows):
                old = self._rows[row_index][:x]
                rows.append(old + [self._fill] * (x - len(old)))
            else:
                rows.append([self._fill] * x)
        self._rows = rows
        self._size = Vec2i(x, y)