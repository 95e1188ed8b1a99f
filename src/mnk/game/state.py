# src/mnk/game/state.py

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import List, Literal, Optional, Tuple, Union

from mnk.config import FIRST_PLAYER
from mnk.core.grid import CellGrid
from mnk.core.rules import winning_run
from mnk.game.errors import CellOccupied, EmptyHistory, GameOver, MoveOutOfRange
from mnk.types import Cell, Coord, OutOfRange, Player, OUT_OF_RANGE

logger = logging.getLogger(__name__)

Status = Literal["ongoing", "won", "draw"]


def other(player: Player) -> Player:
    return "O" if player == "X" else "X"


@dataclass(frozen=True, slots=True)
class Outcome:
    status: Status
    winner: Optional[Player] = None
    line: Tuple[Coord, ...] = ()

    @staticmethod
    def won(player: Player, line: Tuple[Coord, ...] = ()) -> "Outcome":
        return Outcome("won", player, tuple(line))

    @property
    def is_terminal(self) -> bool:
        return self.status != "ongoing"

    def __str__(self) -> str:
        if self.status == "won":
            return f"Won({self.winner})"
        return self.status.capitalize()


ONGOING = Outcome("ongoing")
DRAW = Outcome("draw")


class GameState:
    """
    Turn and history bookkeeping for one m,n,k-game.

    The current grid is replaced (never mutated) on every accepted move and
    the previous one pushed on the history stack, so undo is a pop. Rejected
    requests raise a GameError and leave every field untouched.
    """

    __slots__ = ("_grid", "_active", "_history", "_outcome")

    def __init__(self, rows: int, cols: int, k: int) -> None:
        self._grid = CellGrid(rows, cols, k)
        self._active: Player = FIRST_PLAYER
        self._history: List[CellGrid] = []
        self._outcome: Outcome = ONGOING

    # --- read-only queries -------------------------------------------------

    @property
    def grid(self) -> CellGrid:
        return self._grid

    @property
    def rows(self) -> int:
        return self._grid.rows

    @property
    def cols(self) -> int:
        return self._grid.cols

    @property
    def k(self) -> int:
        return self._grid.k

    @property
    def active_player(self) -> Player:
        return self._active

    @property
    def move_count(self) -> int:
        return len(self._history)

    @property
    def history(self) -> Tuple[CellGrid, ...]:
        return tuple(self._history)

    @property
    def outcome(self) -> Outcome:
        return self._outcome

    def cell(self, x: int, y: int) -> Union[Cell, OutOfRange]:
        return self._grid.get(x, y)

    def is_full(self) -> bool:
        return self.move_count == self.rows * self.cols

    # --- transitions -------------------------------------------------------

    def play(self, x: int, y: int) -> Outcome:
        if self._outcome.is_terminal:
            logger.info("Rejected move (%d, %d): game already %s", x, y, self._outcome)
            raise GameOver(x, y)

        target = self._grid.get(x, y)
        if target is OUT_OF_RANGE:
            logger.info("Rejected move (%d, %d): out of range", x, y)
            raise MoveOutOfRange(x, y, self.rows, self.cols)
        if target is not None:
            logger.info("Rejected move (%d, %d): occupied by %s", x, y, target)
            raise CellOccupied(x, y)

        mover = self._active
        self._history.append(self._grid)
        self._grid = self._grid.with_move(x, y, mover)
        logger.debug("Player %s played (%d, %d), move %d", mover, x, y, self.move_count)

        line = winning_run(self._grid, x, y)
        if line is not None:
            self._outcome = Outcome.won(mover, tuple(line))
            logger.debug("Player %s wins with %s", mover, line)
        elif self.is_full():
            self._outcome = DRAW
            logger.debug(
                "Board full after %d moves (%d empty): draw",
                self.move_count, self._grid.empty_count(),
            )
        else:
            self._active = other(mover)

        return self._outcome

    def undo(self) -> Outcome:
        if not self._history:
            logger.info("Rejected undo: no moves played")
            raise EmptyHistory()

        self._grid = self._history.pop()
        # Whoever made the undone move is on turn again: X moves on even counts.
        self._active = FIRST_PLAYER if self.move_count % 2 == 0 else other(FIRST_PLAYER)
        self._outcome = ONGOING
        logger.debug("Undid move %d, player %s to play", self.move_count + 1, self._active)
        return self._outcome


def new_game(rows: int, cols: int, k: int) -> GameState:
    return GameState(rows, cols, k)
