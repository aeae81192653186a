"""NashFinder exceptions."""


class NashFinderError(Exception):
    """Base exception for all NashFinder errors."""


class InvalidArgumentError(NashFinderError, ValueError):
    """Raised when a caller violates a precondition.

    Examples are a cartesian product over fewer than two sets or an
    equilibrium extraction against a game without two players.
    """


class LoaderError(NashFinderError):
    """Base exception for loader errors."""


class ParseError(LoaderError):
    """YAML or JSON parsing error."""


class GameValidationError(LoaderError):
    """A well-formed document with invalid game or result content."""

    def __init__(self, message: str, file_path: str | None = None) -> None:
        self.message = message
        self.file_path = file_path

        if file_path:
            full_message = f"File: {file_path}: {message}"
        else:
            full_message = message

        super().__init__(full_message)
