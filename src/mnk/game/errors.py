from __future__ import annotations


class GameError(ValueError):
    """A rejected request. The game is left exactly as it was."""


class InvalidMove(GameError):
    def __init__(self, x: int, y: int, message: str) -> None:
        super().__init__(message)
        self.x = x
        self.y = y


class MoveOutOfRange(InvalidMove):
    def __init__(self, x: int, y: int, rows: int, cols: int) -> None:
        super().__init__(
            x, y,
            f"Illegal input ({x}, {y}): row must be 0-{rows - 1} and column 0-{cols - 1}.",
        )


class CellOccupied(InvalidMove):
    def __init__(self, x: int, y: int) -> None:
        super().__init__(x, y, f"Cell ({x}, {y}) is not empty.")


class GameOver(InvalidMove):
    def __init__(self, x: int, y: int) -> None:
        super().__init__(x, y, "The game is over. Undo a move or quit.")


class EmptyHistory(GameError):
    def __init__(self) -> None:
        super().__init__("Nothing to undo.")
