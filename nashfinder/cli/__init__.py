"""NashFinder command line interface."""

from nashfinder.cli.main import cli, main

__all__ = ["cli", "main"]
