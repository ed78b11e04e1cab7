"""
Count Observer.

Keeps a running tally of passing numbers and reports it when the run ends.
Use a fresh instance per run; a reused instance keeps counting.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from number_pipeline.config.models import OutputConfig


class CountObserver:
    """Count passing numbers and report the total on completion."""

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        config: Optional[OutputConfig] = None,
    ) -> None:
        """
        Initialize count observer.

        Args:
            stream: Destination for the total line. Defaults to sys.stdout.
            config: Line templates. Defaults to OutputConfig().
        """
        self._stream = stream
        self._config = config or OutputConfig()
        self._count = 0

    @property
    def count(self) -> int:
        """Numbers seen so far."""
        return self._count

    def on_number(self, number: int) -> None:
        self._count += 1

    def on_finished(self) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        print(self._config.total_template.format(count=self._count), file=stream)
