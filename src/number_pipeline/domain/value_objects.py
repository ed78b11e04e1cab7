"""
Value Objects for Domain Layer.

Immutable descriptions of a resolved filter request and of a finished run.
"""

from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, Field, computed_field


# Ordered integers read from one file
NumberSequence = Tuple[int, ...]


class FilterSpec(BaseModel):
    """A filter name split into its registered prefix and parameter string."""

    name: str
    prefix: str = Field(min_length=1)
    parameter: str = ""

    model_config = {"frozen": True}


class RunResult(BaseModel):
    """Outcome of one complete pipeline run."""

    run_id: str
    filter_name: str
    input_count: int = Field(ge=0)
    passed_numbers: Tuple[int, ...] = ()
    duration_seconds: float = Field(default=0.0, ge=0)

    model_config = {"frozen": True}

    @computed_field
    @property
    def passed_count(self) -> int:
        """Number of values that passed the filter."""
        return len(self.passed_numbers)

    @computed_field
    @property
    def rejected_count(self) -> int:
        """Number of values the filter rejected."""
        return self.input_count - len(self.passed_numbers)
