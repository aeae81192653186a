"""Load games and solver results from YAML or JSON documents.

Game document:

    name: Matching pennies
    players: [Alice, Bob]
    actions:
      Alice: [heads, tails]
      Bob: [heads, tails]
    payoffs:
      - profile: [heads, heads]
        utilities: [1, -1]

Solver result document (``solved: false`` means no equilibrium):

    solved: true
    utilities: {first_player: 0.0, second_player: 0.0}
    probabilities:
      Alice: {heads: 0.5, tails: 0.5}
      Bob: {heads: 0.5, tails: 0.5}
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import MarkedYAMLError, YAMLError

from nashfinder.core.exceptions import GameValidationError, ParseError
from nashfinder.core.logging import get_logger
from nashfinder.game.strategic_game import StrategicGame
from nashfinder.nash.result import ExpectedUtility, MappingProgramResult

logger = get_logger(__name__)


class PayoffEntry(BaseModel):
    """Payoffs of all players for one action profile."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    profile: list[str] = Field(..., description="One action per player")
    utilities: list[float] = Field(..., description="One payoff per player")


class GameDefinition(BaseModel):
    """A strategic game as written in a game document."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str = Field(default="", description="Human-readable game name")
    players: list[str] = Field(..., min_length=1, description="Ordered players")
    actions: dict[str, list[str]] = Field(
        ..., description="Ordered actions of each player"
    )
    payoffs: list[PayoffEntry] = Field(default_factory=list)

    def to_game(self) -> StrategicGame[str, str]:
        """Build the game model. Assumes the definition passed validation."""
        game: StrategicGame[str, str] = StrategicGame(self.name)
        for player in self.players:
            game.add_player(player)
            for action in self.actions[player]:
                game.add_action(player, action)
        for entry in self.payoffs:
            for player, utility in zip(self.players, entry.utilities):
                game.set_payoff(entry.profile, player, utility)
        return game


class ProgramResultDefinition(BaseModel):
    """A solved program result as written in a result document."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    solved: bool = Field(default=True, description="Whether a solution was found")
    utilities: dict[ExpectedUtility, float | None] = Field(default_factory=dict)
    probabilities: dict[str, dict[str, float | None]] = Field(default_factory=dict)

    def to_result(self) -> MappingProgramResult | None:
        """Build the result accessor, None if the program was not solved."""
        if not self.solved:
            return None
        return MappingProgramResult.from_values(self.utilities, self.probabilities)


class DocumentParser:
    """YAML parser for game and result documents. JSON is accepted too."""

    def __init__(self) -> None:
        self.yaml = YAML(typ="safe")

    def parse_file(self, file_path: str | Path) -> dict[str, Any]:
        """Parse a document file.

        Raises:
            ParseError: If the file is missing or not a YAML mapping.
        """
        file_path = Path(file_path)

        if not file_path.exists():
            raise ParseError(f"File not found: {file_path}")

        try:
            content = file_path.read_text(encoding="utf-8")
        except OSError as e:
            raise ParseError(f"Failed to read file {file_path}: {e}") from e
        return self.parse_string(content, source=str(file_path))

    def parse_string(self, content: str, source: str = "content") -> dict[str, Any]:
        """Parse a document from a string.

        Raises:
            ParseError: If the content is not a YAML mapping.
        """
        try:
            data = self.yaml.load(content)
        except MarkedYAMLError as e:
            line = e.problem_mark.line + 1 if e.problem_mark else None
            column = e.problem_mark.column + 1 if e.problem_mark else None
            raise ParseError(
                f"YAML parsing error in {source} at line {line}, "
                f"column {column}: {e.problem}"
            ) from e
        except YAMLError as e:
            raise ParseError(f"Failed to parse {source}: {e}") from e

        if data is None:
            raise ParseError(f"Empty document: {source}")
        if not isinstance(data, dict):
            raise ParseError(
                f"Expected a mapping at the top of {source}, "
                f"got {type(data).__name__}"
            )
        return data


def _format_pydantic_errors(title: str, error: PydanticValidationError) -> str:
    errors = []
    for detail in error.errors():
        loc = ".".join(str(x) for x in detail["loc"])
        errors.append(f"{loc}: {detail['msg']}")
    return f"{title}:\n  " + "\n  ".join(errors)


def _validate_game_semantics(definition: GameDefinition) -> list[str]:
    """Collect consistency errors of a structurally valid game definition."""
    errors = []
    num_players = len(definition.players)

    seen_players: set[str] = set()
    for player in definition.players:
        if player in seen_players:
            errors.append(f"Duplicate player '{player}'")
        seen_players.add(player)
        actions = definition.actions.get(player)
        if not actions:
            errors.append(f"Player '{player}' has no actions")
        elif len(set(actions)) != len(actions):
            errors.append(f"Player '{player}' has duplicate actions")

    for player in definition.actions:
        if player not in seen_players:
            errors.append(f"Actions given for unknown player '{player}'")

    for i, entry in enumerate(definition.payoffs):
        if len(entry.profile) != num_players:
            errors.append(
                f"payoffs[{i}].profile must have {num_players} actions, "
                f"got {len(entry.profile)}"
            )
            continue
        if len(entry.utilities) != num_players:
            errors.append(
                f"payoffs[{i}].utilities must have {num_players} values, "
                f"got {len(entry.utilities)}"
            )
        for player, action in zip(definition.players, entry.profile):
            if action not in definition.actions.get(player, []):
                errors.append(
                    f"payoffs[{i}]: action '{action}' is not available "
                    f"to player '{player}'"
                )

    return errors


def _build_game(
    data: dict[str, Any], file_path: str | None
) -> StrategicGame[str, str]:
    try:
        definition = GameDefinition.model_validate(data)
    except PydanticValidationError as e:
        raise GameValidationError(
            _format_pydantic_errors("Game validation failed", e),
            file_path=file_path,
        ) from e

    errors = _validate_game_semantics(definition)
    if errors:
        raise GameValidationError(
            "Game validation failed:\n  " + "\n  ".join(errors),
            file_path=file_path,
        )

    game = definition.to_game()
    logger.debug(
        "game_loaded",
        name=definition.name,
        players=definition.players,
        payoff_entries=len(definition.payoffs),
    )
    return game


def _build_program_result(
    data: dict[str, Any], file_path: str | None
) -> MappingProgramResult | None:
    try:
        definition = ProgramResultDefinition.model_validate(data)
    except PydanticValidationError as e:
        raise GameValidationError(
            _format_pydantic_errors("Result validation failed", e),
            file_path=file_path,
        ) from e
    return definition.to_result()


def load_game(file_path: str | Path) -> StrategicGame[str, str]:
    """Load a game from a YAML or JSON file.

    Raises:
        ParseError: If the file cannot be parsed.
        GameValidationError: If the game definition is invalid.
    """
    data = DocumentParser().parse_file(file_path)
    return _build_game(data, str(file_path))


def load_game_string(content: str) -> StrategicGame[str, str]:
    """Load a game from a YAML or JSON string."""
    data = DocumentParser().parse_string(content)
    return _build_game(data, None)


def load_program_result(file_path: str | Path) -> MappingProgramResult | None:
    """Load a solver result from a YAML or JSON file.

    Returns:
        The result, or None if the document reports no solution.

    Raises:
        ParseError: If the file cannot be parsed.
        GameValidationError: If the result document is invalid.
    """
    data = DocumentParser().parse_file(file_path)
    return _build_program_result(data, str(file_path))


def load_program_result_string(content: str) -> MappingProgramResult | None:
    """Load a solver result from a YAML or JSON string."""
    data = DocumentParser().parse_string(content)
    return _build_program_result(data, None)
