# file: gamecommands/core/game_state.py

import logging
from functools import partial

from gamecommands.core.commands.base_command import Command

logger = logging.getLogger(__name__)


class GameState:
    """
    Mutable game counters shared by the changers below.

    Constructed explicitly and handed to whatever needs it; there is no
    process-wide instance.
    """
    def __init__(self, number_of_players: int = 0, number_of_enemies: int = 0):
        self.number_of_players = number_of_players
        self.number_of_enemies = number_of_enemies

    def reset(self):
        self.number_of_players = 0
        self.number_of_enemies = 0
        logger.debug("Game state reset")

    def __repr__(self) -> str:
        return f"GameState(players={self.number_of_players}, enemies={self.number_of_enemies})"


class GameStateChanger:
    """Operates on the state it was constructed with."""
    def __init__(self, state: GameState):
        self.state = state

    def increase_number_of_enemies(self):
        self.state.number_of_enemies += 1

    def decrease_number_of_enemies(self):
        self.state.number_of_enemies -= 1

    def set_number_of_players(self, number: int):
        self.state.number_of_players = number

    def __repr__(self) -> str:
        return f"GameStateChanger({self.state!r})"


class MethodGameStateChanger:
    """Stateless; the state to change is passed on every call."""
    def set_players_and_enemies(self, state: GameState, number_of_players: int, number_of_enemies: int):
        state.number_of_players = number_of_players
        state.number_of_enemies = number_of_enemies

    def __repr__(self) -> str:
        return "MethodGameStateChanger()"


def make_players_and_enemies_command(state: GameState, number_of_players: int = 1,
                                     number_of_enemies: int = 2) -> Command[MethodGameStateChanger]:
    """
    Builds a picklable command that sets both counters on ``state``.
    The state stays reachable as ``command.operation.keywords["state"]``.
    """
    return Command(
        MethodGameStateChanger(),
        partial(
            MethodGameStateChanger.set_players_and_enemies,
            state=state,
            number_of_players=number_of_players,
            number_of_enemies=number_of_enemies,
        ),
    )
