"""Strategic game model and document loaders."""

from nashfinder.game.loader import (
    GameDefinition,
    PayoffEntry,
    ProgramResultDefinition,
    load_game,
    load_game_string,
    load_program_result,
    load_program_result_string,
)
from nashfinder.game.player_action import PlayerAction
from nashfinder.game.strategic_game import GameAccessor, StrategicGame

__all__ = [
    "GameAccessor",
    "GameDefinition",
    "PayoffEntry",
    "PlayerAction",
    "ProgramResultDefinition",
    "StrategicGame",
    "load_game",
    "load_game_string",
    "load_program_result",
    "load_program_result_string",
]
