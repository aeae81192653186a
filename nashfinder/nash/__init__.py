"""Nash equilibria, strategies and solver result access."""

from nashfinder.nash.equilibrium import NashEquilibrium, extract_player_strategy
from nashfinder.nash.result import (
    ExpectedUtility,
    MappingProgramResult,
    SolvedProgramResult,
)
from nashfinder.nash.strategy import NashStrategy
from nashfinder.nash.supports import (
    SupportProfile,
    enumerate_support_profiles,
    player_supports,
)

__all__ = [
    "ExpectedUtility",
    "MappingProgramResult",
    "NashEquilibrium",
    "NashStrategy",
    "SolvedProgramResult",
    "SupportProfile",
    "enumerate_support_profiles",
    "extract_player_strategy",
    "player_supports",
]
