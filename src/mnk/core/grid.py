# src/mnk/core/grid.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Sequence, Tuple, Union

from mnk.types import Cell, OutOfRange, OUT_OF_RANGE


@dataclass(frozen=True, slots=True)
class CellGrid:
    """
    Immutable rows x cols board snapshot with its run target k.

    Cells are stored flat, row-major: (x, y) lives at x * cols + y.
    Updates go through with_move(), which returns a new grid, so one
    instance can be shared by the live game and any number of history entries.
    """

    rows: int
    cols: int
    k: int
    cells: Sequence[Cell] = field(default=(), repr=False)

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError(f"Board must be at least 1x1 (got {self.rows}x{self.cols}).")
        if self.k < 1:
            raise ValueError(f"k must be at least 1 (got {self.k}).")
        if not self.cells:
            object.__setattr__(self, "cells", (None,) * (self.rows * self.cols))
        else:
            object.__setattr__(self, "cells", tuple(self.cells))
        if len(self.cells) != self.rows * self.cols:
            raise ValueError(
                f"Expected {self.rows * self.cols} cells, got {len(self.cells)}."
            )

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.rows and 0 <= y < self.cols

    def index(self, x: int, y: int) -> int:
        return x * self.cols + y

    def get(self, x: int, y: int) -> Union[Cell, OutOfRange]:
        if not self.in_bounds(x, y):
            return OUT_OF_RANGE
        return self.cells[self.index(x, y)]

    def with_move(self, x: int, y: int, mark: Cell) -> "CellGrid":
        # No legality check here; callers make sure (x, y) is empty.
        i = self.index(x, y)
        cells = self.cells[:i] + (mark,) + self.cells[i + 1:]
        return CellGrid(self.rows, self.cols, self.k, cells)

    def empty_count(self) -> int:
        return self.cells.count(None)

    def row(self, x: int) -> Tuple[Cell, ...]:
        start = x * self.cols
        return self.cells[start:start + self.cols]
