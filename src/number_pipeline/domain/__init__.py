"""
Domain Package - Errors and Value Objects.

Contains the pure domain types with no infrastructure dependencies:
    - exceptions: NumberPipelineError hierarchy
    - value_objects: FilterSpec, RunResult
"""

from number_pipeline.domain.exceptions import (
    ConfigurationError,
    InvalidFilterArgumentError,
    NumberFileNotFoundError,
    NumberPipelineError,
    NumberSourceError,
    UnknownFilterError,
    UsageError,
)
from number_pipeline.domain.value_objects import FilterSpec, NumberSequence, RunResult

__all__ = [
    "ConfigurationError",
    "FilterSpec",
    "InvalidFilterArgumentError",
    "NumberFileNotFoundError",
    "NumberPipelineError",
    "NumberSequence",
    "NumberSourceError",
    "RunResult",
    "UnknownFilterError",
    "UsageError",
]
