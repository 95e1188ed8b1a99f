from __future__ import annotations
from typing import Iterable, List, Optional, Set

from mnk import config
from mnk.core.grid import CellGrid
from mnk.game.state import GameState
from mnk.types import Cell, Coord
from mnk.ui.colors import c, mark, BOLD, DIM, FG_CYAN, FG_GRAY


def _piece(cell: Cell, highlight: bool) -> str:
    if cell is None:
        return " "
    return mark(cell, highlight)


def clear_screen() -> None:
    if config.CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def board_lines(grid: CellGrid, highlight: Optional[Iterable[Coord]] = None) -> List[str]:
    """
    Column numbers on top, one line of cells per row with the row number on
    the right, and a ' ---' rule under the header and under every row.
    """
    hl: Set[Coord] = set(highlight) if highlight else set()
    rule = c(" ---" * grid.cols, FG_GRAY)

    lines = ["".join(f"  {i} " if i < 10 else f" {i} " for i in range(grid.cols)), rule]
    for x in range(grid.rows):
        parts = []
        for y, cell in enumerate(grid.row(x)):
            parts.append(f" | {_piece(cell, (x, y) in hl)}")
        lines.append("".join(parts) + f" | {x}")
        lines.append(rule)
    return lines


def render(state: GameState, status: str = "", highlight: Optional[Iterable[Coord]] = None) -> None:
    clear_screen()

    print(c(f"M,N,K-GAME  {state.rows}x{state.cols}, {state.k} in a row", BOLD))
    if status:
        print(c(status, FG_CYAN))
    else:
        print()

    for line in board_lines(state.grid, highlight):
        print(line)

    print(c("   Enter 'x, y' to play, 'undo' to take back, q to quit.", DIM))
