# src/mnk/types.py

from __future__ import annotations
from typing import Literal, Optional, Tuple

Player = Literal["X", "O"]
Cell = Optional[Player]      # None = empty
Coord = Tuple[int, int]      # (x, y) = (row, col)


class OutOfRange:
    """Lookup result for a coordinate outside the grid. Never stored in a grid."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "OUT_OF_RANGE"


OUT_OF_RANGE = OutOfRange()
