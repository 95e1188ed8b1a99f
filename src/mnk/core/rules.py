from __future__ import annotations
from typing import List, Optional, Tuple

from mnk.core.grid import CellGrid
from mnk.types import Coord, OUT_OF_RANGE

# (dx, dy) steps scanned through the last placed cell.
DIRECTIONS: Tuple[Coord, ...] = (
    (1, 0),
    (0, 1),
    (1, 1),
    (1, -1),
)


def _same_mark(grid: CellGrid, a: Coord, b: Coord) -> bool:
    p = grid.get(*a)
    if p is None or p is OUT_OF_RANGE:
        return False
    return p == grid.get(*b)


def winning_run(grid: CellGrid, x: int, y: int) -> Optional[List[Coord]]:
    """
    Look for k same-player marks in a line through (x, y), the cell just played.

    Each direction walks the window of offsets -(k-1)..(k-1) around (x, y),
    counting consecutive identical adjacent pairs; k-1 pairs make a run of k.
    A broken pair resets the count. Left of centre the scan carries on,
    past centre it gives up on that direction.

    With k == 1 the placed mark is a complete run on its own, so any move
    wins at once rather than never (the pair scan has nothing to count).

    Returns the coordinates of the run, or None.
    """
    k = grid.k
    start = grid.get(x, y)
    if start is None or start is OUT_OF_RANGE:
        return None
    if k == 1:
        return [(x, y)]

    for dx, dy in DIRECTIONS:
        count = 0
        for i in range(-k + 1, k - 1):
            here = (x + dx * i, y + dy * i)
            nxt = (x + dx * (i + 1), y + dy * (i + 1))
            if _same_mark(grid, here, nxt):
                count += 1
            else:
                count = 0
                if i > 0:
                    break
            if count == k - 1:
                return [(x + dx * j, y + dy * j) for j in range(i - k + 2, i + 2)]

    return None


def has_win(grid: CellGrid, x: int, y: int) -> bool:
    return winning_run(grid, x, y) is not None
