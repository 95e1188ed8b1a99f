from __future__ import annotations
from typing import Dict

from mnk import config
from mnk.types import Player

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
REVERSE = "\033[7m"

FG_RED = "\033[31m"
FG_YELLOW = "\033[33m"
FG_CYAN = "\033[36m"
FG_GRAY = "\033[90m"

MARK_COLORS: Dict[Player, str] = {"X": FG_RED, "O": FG_YELLOW}


def c(s: str, *codes: str) -> str:
    """Wrap s in the given ANSI codes, or return it untouched when colour is off."""
    if not config.USE_COLOR or not codes:
        return s
    return f"{''.join(codes)}{s}{RESET}"


def mark(player: Player, highlight: bool = False) -> str:
    codes = [MARK_COLORS[player]]
    if highlight:
        codes.append(REVERSE)
    return c(player, *codes)
