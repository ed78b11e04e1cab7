"""
Number Filter Protocol.

Defines the interface every filter variant conforms to. A filter is a pure
predicate over a single integer, constructed once per run by the
FilterRegistry and never mutated afterwards.

Design Notes:
    - Uses typing.Protocol for structural subtyping
    - Filters hold no state beyond constructor arguments
    - No I/O and no failure mode once constructed
"""

from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable


@runtime_checkable
class NumberFilter(Protocol):
    """Abstract interface for number filters."""

    @property
    def name(self) -> str:
        """Filter identifier as it would be requested from the registry."""
        ...

    def keep(self, number: int) -> bool:
        """
        Decide whether a number passes.

        Args:
            number: Value to test

        Returns:
            True if the number passes the filter
        """
        ...


# Builds a filter from the parameter string left after prefix stripping
FilterConstructor = Callable[[str], NumberFilter]
