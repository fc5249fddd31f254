# file: gamecommands/main.py

import logging
from operator import methodcaller
from pathlib import Path
from typing import List

from gamecommands.core.commands import (
    BaseCommand,
    Command,
    CommandSerializer,
    ReversibleCommand,
    as_reversible,
)
from gamecommands.core.game_state import (
    GameState,
    GameStateChanger,
    make_players_and_enemies_command,
)
from gamecommands.utils.config_loader import ConfigLoader
from gamecommands.utils.logger import setup_logging

DEFAULT_DATA_DIR = Path.home() / ".gamecommands"


def build_demo_commands(state: GameState, count: int = 4) -> List[BaseCommand]:
    """
    One command that sets players/enemies, followed by ``count`` enemy
    increments alternating between plain and reversible.
    """
    changer = GameStateChanger(state)
    increase = methodcaller("increase_number_of_enemies")
    decrease = methodcaller("decrease_number_of_enemies")

    commands: List[BaseCommand] = [make_players_and_enemies_command(state, 2, 3)]
    for i in range(count):
        if i % 2 == 0:
            commands.append(Command(changer, increase))
        else:
            commands.append(ReversibleCommand(changer, increase, decrease))
    return commands


def run_demo(config_loader: ConfigLoader, count: int = 4) -> GameState:
    """
    Executes the demo commands, undoes the reversible ones, saves the list,
    loads it back and replays the loaded copy.

    Returns the game state reconstructed from the saved file.
    """
    logger = logging.getLogger(__name__)

    state = GameState()
    commands = build_demo_commands(state, count)

    for command in commands:
        command.execute()
    logger.info(f"After execute: {state}")

    for command in commands:
        reversible = as_reversible(command)
        if reversible is not None:
            reversible.undo()
    logger.info(f"After undo: {state}")

    serializer = CommandSerializer(config_loader)
    path = serializer.save(commands)
    loaded = serializer.load_file(path)

    # The first command always binds the state; every loaded command shares it
    restored = loaded[0].operation.keywords["state"]
    for command in loaded:
        command.execute()
    logger.info(f"Replayed {len(loaded)} loaded commands: {restored}")
    return restored


def main(data_dir: Path = DEFAULT_DATA_DIR) -> GameState:
    config_loader = ConfigLoader(data_dir)
    config_loader.load_all_configs()
    setup_logging(config_loader)
    return run_demo(config_loader)


if __name__ == "__main__":
    main()
