"""Main CLI entry point for NashFinder."""

import json
import sys
from pathlib import Path

import click

from nashfinder import __version__
from nashfinder.core.exceptions import NashFinderError
from nashfinder.core.logging import configure_logging
from nashfinder.core.settings import NashFinderSettings, get_settings, use_settings
from nashfinder.game.loader import load_game, load_program_result
from nashfinder.nash.equilibrium import NashEquilibrium
from nashfinder.nash.supports import enumerate_support_profiles

EXIT_SUCCESS = 0
EXIT_NO_EQUILIBRIUM = 1  # The solver result reports no solution
EXIT_ERROR = 2  # Invalid input (missing file, invalid game, etc.)


class ConfigContext:
    """Context object to hold configuration state."""

    def __init__(self) -> None:
        self.settings: NashFinderSettings | None = None
        self.verbose: bool = False


@click.group(invoke_without_command=True)
@click.option(
    "--config",
    "-c",
    "config_file",
    type=click.Path(exists=True, path_type=Path),
    help="Path to nashfinder.config.yaml configuration file",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging",
)
@click.version_option(version=__version__, prog_name="nashfinder")
@click.pass_context
def cli(ctx: click.Context, config_file: Path | None, verbose: bool) -> None:
    """NashFinder - Nash equilibria of two-player strategic games.

    Examples:

      # Candidate supports for support enumeration
      nashfinder supports game.yaml --equal-size

      # Equilibrium described by a solver result
      nashfinder extract game.yaml result.yaml --format json
    """
    ctx.ensure_object(ConfigContext)
    config_ctx = ctx.obj
    config_ctx.verbose = verbose

    try:
        settings = get_settings(config_file=config_file)
    except ValueError as e:
        raise click.ClickException(f"Invalid configuration: {e}") from e
    config_ctx.settings = settings
    use_settings(settings)

    configure_logging(
        level="DEBUG" if verbose else settings.logging.level,
        json_output=settings.logging.json_output,
        log_file=settings.logging.file,
    )

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command(name="version")
def version_cmd() -> None:
    """Show NashFinder version information."""
    click.echo(f"NashFinder v{__version__}")
    click.echo(f"Python: {sys.version.split()[0]}")
    click.echo(f"Platform: {sys.platform}")


@cli.command(name="show")
@click.argument("game_file", type=click.Path(exists=True, path_type=Path))
def show_cmd(game_file: Path) -> None:
    """Show the players, actions and payoffs of a game.

    Payoffs of two-player games are printed as a bimatrix with one
    "first, second" cell per action profile.
    """
    try:
        game = load_game(game_file)
    except NashFinderError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_ERROR)

    click.echo(f"Game: {game.name or game_file.stem}")
    for player in game.players:
        click.echo(f"  {player}: {', '.join(game.player_actions(player))}")

    if len(game.players) != 2:
        return

    first, second = game.players
    payoff_1, payoff_2 = game.payoff_matrices()
    columns = game.player_actions(second)
    click.echo(f"\nPayoffs ({first}, {second}):")
    click.echo("\t" + "\t".join(columns))
    for i, row_action in enumerate(game.player_actions(first)):
        cells = [
            f"{payoff_1[i, j]:g}, {payoff_2[i, j]:g}" for j in range(len(columns))
        ]
        click.echo(f"{row_action}\t" + "\t".join(cells))


@cli.command(name="supports")
@click.argument("game_file", type=click.Path(exists=True, path_type=Path))
@click.option(
    "--equal-size",
    is_flag=True,
    help="Only list supports of equal size (non-degenerate games)",
)
def supports_cmd(game_file: Path, equal_size: bool) -> None:
    """List candidate support profiles of a two-player game.

    Every pair of non-empty action subsets of the first two players is a
    candidate for support enumeration.

    Examples:

      nashfinder supports game.yaml --equal-size
    """
    try:
        game = load_game(game_file)
        profiles = enumerate_support_profiles(game, equal_size=equal_size)
    except NashFinderError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_ERROR)

    click.echo(f"Support profiles ({len(profiles)}):")
    for profile in profiles:
        click.echo(f"  {profile}")


@cli.command(name="extract")
@click.argument("game_file", type=click.Path(exists=True, path_type=Path))
@click.argument("result_file", type=click.Path(exists=True, path_type=Path))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
def extract_cmd(game_file: Path, result_file: Path, output_format: str) -> None:
    """Print the Nash equilibrium described by a solver result.

    Exit Codes:

      0 - Equilibrium extracted
      1 - The result reports no equilibrium
      2 - Error occurred
    """
    try:
        game = load_game(game_file)
        result = load_program_result(result_file)
        equilibrium = NashEquilibrium.extract_from_lcp_result(result, game)
    except NashFinderError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_ERROR)

    if equilibrium is None:
        click.echo("No Nash equilibrium found.")
        sys.exit(EXIT_NO_EQUILIBRIUM)

    if output_format == "json":
        click.echo(json.dumps(equilibrium.to_dict(), indent=2))
        return

    click.echo("Nash equilibrium:")
    for line in str(equilibrium).splitlines():
        click.echo(f"  {line}")


def main() -> None:
    """Main entry point for the CLI."""
    cli(auto_envvar_prefix="NASHFINDER")


if __name__ == "__main__":
    main()
