# src/mnk/config.py

from __future__ import annotations

from mnk.types import Player

ROWS = 3
COLS = 3
K = 3

FIRST_PLAYER: Player = "X"

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
