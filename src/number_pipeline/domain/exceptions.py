"""
Domain Exceptions.

Every failure the pipeline can report is a NumberPipelineError. All of them
are detected before or at the start of a run and none are retried; the CLI
turns them into a one-line diagnostic and a non-zero exit status.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class NumberPipelineError(Exception):
    """Base class for all pipeline errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class UsageError(NumberPipelineError):
    """Raised when the command line is malformed."""


class UnknownFilterError(NumberPipelineError):
    """Raised when no registered prefix matches a filter name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown filter: {name}")
        self.name = name


class InvalidFilterArgumentError(NumberPipelineError):
    """Raised when a parameterized filter gets a missing or malformed argument."""

    def __init__(self, name: str, parameter: str, reason: str) -> None:
        super().__init__(f"Invalid argument for filter {name}: {reason}")
        self.name = name
        self.parameter = parameter
        self.reason = reason


class NumberSourceError(NumberPipelineError):
    """Raised when the number file cannot be opened or decoded."""

    def __init__(self, path: Union[str, Path], reason: str) -> None:
        super().__init__(f"Cannot read numbers from {path}: {reason}")
        self.path = Path(path)
        self.reason = reason


class NumberFileNotFoundError(NumberSourceError):
    """Raised when the number file does not exist."""

    def __init__(self, path: Union[str, Path]) -> None:
        super().__init__(path, "file not found")


class ConfigurationError(NumberPipelineError):
    """Raised when configuration cannot be loaded or is invalid."""

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path
