from __future__ import annotations
import logging
from typing import Callable

from mnk.game.state import GameState, Outcome
from mnk.ui.prompts import PlayMove, Quit, Undo, parse_command
from mnk.ui.render import render

logger = logging.getLogger(__name__)


def _result_line(outcome: Outcome) -> str:
    if outcome.status == "won":
        return f"Congrats! Player {outcome.winner} has won!"
    return "Draw."


def run_game(state: GameState, read: Callable[[str], str] = input) -> Outcome:
    """
    Drive a game from the console until the player quits or input runs out.

    A finished game stays on screen and accepts only 'undo' or quit.
    Returns the outcome at the time the loop ends.
    """
    status = f"Player {state.active_player} starts."

    while True:
        outcome = state.outcome
        if outcome.is_terminal:
            status = f"{_result_line(outcome)} Enter 'undo' to take back the last move or q to quit."
        render(state, status, highlight=outcome.line)

        if outcome.is_terminal:
            prompt = "Undo or quit: "
        else:
            prompt = f"It's player {state.active_player}'s turn to play.\nPlease enter your move: "

        try:
            raw = read(prompt)
        except EOFError:
            logger.debug("Input closed, leaving game loop")
            return state.outcome

        try:
            cmd = parse_command(raw)
            if isinstance(cmd, Quit):
                render(state, "Game quit.", highlight=outcome.line)
                return state.outcome

            if isinstance(cmd, Undo):
                state.undo()
                status = f"Move undone. Player {state.active_player}'s turn."
            elif isinstance(cmd, PlayMove):
                mover = state.active_player
                state.play(cmd.x, cmd.y)
                status = f"Player {mover} played ({cmd.x}, {cmd.y}). Next: Player {state.active_player}"

        except ValueError as e:
            status = str(e)
