"""
Number Source Protocol.

A number source turns a path into the full, ordered sequence of integers
for one run. Reading is not incremental: the whole sequence is returned
before filtering begins.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, Tuple, Union, runtime_checkable


@runtime_checkable
class NumberSource(Protocol):
    """Abstract interface for number sources."""

    def read_numbers(self, path: Union[str, Path]) -> Tuple[int, ...]:
        """
        Read all integers from the given location.

        Args:
            path: Location of the numbers

        Returns:
            Integers in source order

        Raises:
            NumberSourceError: If the source cannot be read
        """
        ...
