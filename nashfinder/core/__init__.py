"""Core infrastructure: exceptions, logging and settings."""

from nashfinder.core.exceptions import (
    GameValidationError,
    InvalidArgumentError,
    LoaderError,
    NashFinderError,
    ParseError,
)

__all__ = [
    "GameValidationError",
    "InvalidArgumentError",
    "LoaderError",
    "NashFinderError",
    "ParseError",
]
