from __future__ import annotations
from dataclasses import dataclass
from typing import Union

USAGE = "Please input in format of: 'x, y', or input 'undo' to undo previous steps."


@dataclass(frozen=True, slots=True)
class PlayMove:
    x: int
    y: int


@dataclass(frozen=True, slots=True)
class Undo:
    pass


@dataclass(frozen=True, slots=True)
class Quit:
    pass


Command = Union[PlayMove, Undo, Quit]


def parse_command(raw: str) -> Command:
    s = raw.strip().lower()
    if s in {"q", "quit", "exit"}:
        return Quit()
    if s == "undo":
        return Undo()

    parts = [p.strip() for p in s.split(",")]
    if len(parts) != 2:
        raise ValueError(USAGE)
    try:
        x, y = (int(p) for p in parts)
    except ValueError:
        raise ValueError(f"Cannot recognize input. {USAGE}") from None
    return PlayMove(x, y)
