"""
Generalised tic-tac-toe (m,n,k-game): two players alternate on an m x n
board and the first to get k marks in a row, column or diagonal wins.
"""

from .types import Player, Cell, Coord, OutOfRange, OUT_OF_RANGE
from .core.grid import CellGrid
from .core.rules import DIRECTIONS, winning_run, has_win
from .game.errors import GameError, InvalidMove, MoveOutOfRange, CellOccupied, GameOver, EmptyHistory
from .game.state import GameState, Outcome, ONGOING, DRAW, new_game

__version__ = "0.1.0"
__all__ = [
    "Player",
    "Cell",
    "Coord",
    "OutOfRange",
    "OUT_OF_RANGE",
    "CellGrid",
    "DIRECTIONS",
    "winning_run",
    "has_win",
    "GameError",
    "InvalidMove",
    "MoveOutOfRange",
    "CellOccupied",
    "GameOver",
    "EmptyHistory",
    "GameState",
    "Outcome",
    "ONGOING",
    "DRAW",
    "new_game",
]
