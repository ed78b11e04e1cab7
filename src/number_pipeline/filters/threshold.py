"""
Threshold Filter Implementation.

GT<n> keeps numbers strictly greater than n. The threshold is parsed from
the parameter string once, at construction, and cannot change afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass

from number_pipeline.domain.exceptions import InvalidFilterArgumentError
from number_pipeline.domain.integers import parse_integer

GREATER_THAN_PREFIX = "GT"


@dataclass(frozen=True)
class GreaterThanFilter:
    """Keep numbers strictly greater than a fixed threshold."""

    threshold: int

    @property
    def name(self) -> str:
        return f"{GREATER_THAN_PREFIX}{self.threshold}"

    def keep(self, number: int) -> bool:
        return number > self.threshold


def create_greater_than_filter(parameter: str) -> GreaterThanFilter:
    """
    Registry constructor for GT.

    Args:
        parameter: Text following the GT prefix, e.g. "5" or "-3"

    Returns:
        GreaterThanFilter with the parsed threshold

    Raises:
        InvalidFilterArgumentError: If the parameter is empty or not an integer
    """
    name = f"{GREATER_THAN_PREFIX}{parameter}"
    if not parameter:
        raise InvalidFilterArgumentError(name, parameter, "missing threshold")

    threshold = parse_integer(parameter)
    if threshold is None:
        raise InvalidFilterArgumentError(
            name, parameter, f"threshold '{parameter}' is not a base-10 integer"
        )
    return GreaterThanFilter(threshold)
