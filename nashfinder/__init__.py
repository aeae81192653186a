"""NashFinder - Nash equilibria for two-player strategic games."""

__version__ = "1.0.0"

from nashfinder.core.exceptions import (
    GameValidationError,
    InvalidArgumentError,
    LoaderError,
    NashFinderError,
    ParseError,
)
from nashfinder.game.loader import (
    load_game,
    load_game_string,
    load_program_result,
    load_program_result_string,
)
from nashfinder.game.player_action import PlayerAction
from nashfinder.game.strategic_game import StrategicGame
from nashfinder.nash.equilibrium import NashEquilibrium
from nashfinder.nash.result import (
    ExpectedUtility,
    MappingProgramResult,
    SolvedProgramResult,
)
from nashfinder.nash.strategy import NashStrategy
from nashfinder.nash.supports import SupportProfile, enumerate_support_profiles
from nashfinder.util.math import ROUNDING_DECIMAL_SCALE, round_number_to
from nashfinder.util.sets import cartesian_product, power_set

__all__ = [
    "ExpectedUtility",
    "GameValidationError",
    "InvalidArgumentError",
    "LoaderError",
    "MappingProgramResult",
    "NashEquilibrium",
    "NashFinderError",
    "NashStrategy",
    "ParseError",
    "PlayerAction",
    "ROUNDING_DECIMAL_SCALE",
    "SolvedProgramResult",
    "StrategicGame",
    "SupportProfile",
    "__version__",
    "cartesian_product",
    "enumerate_support_profiles",
    "load_game",
    "load_game_string",
    "load_program_result",
    "load_program_result_string",
    "power_set",
    "round_number_to",
]
