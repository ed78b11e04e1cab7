"""
Parity Filters.

EVEN and ODD take no argument; the parameter string left over after prefix
matching is ignored.
"""

from __future__ import annotations


class EvenFilter:
    """Keep numbers divisible by two."""

    @property
    def name(self) -> str:
        return "EVEN"

    def keep(self, number: int) -> bool:
        return number % 2 == 0

    def __repr__(self) -> str:
        return "EvenFilter()"


class OddFilter:
    """Keep numbers not divisible by two."""

    @property
    def name(self) -> str:
        return "ODD"

    def keep(self, number: int) -> bool:
        return number % 2 != 0

    def __repr__(self) -> str:
        return "OddFilter()"


def create_even_filter(parameter: str = "") -> EvenFilter:
    """Registry constructor for EVEN."""
    return EvenFilter()


def create_odd_filter(parameter: str = "") -> OddFilter:
    """Registry constructor for ODD."""
    return OddFilter()
