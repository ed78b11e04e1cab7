"""
Print Observer.

Writes one line per passing number and a completion line at the end.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from number_pipeline.config.models import OutputConfig


class PrintObserver:
    """Echo passing numbers to a text stream."""

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        config: Optional[OutputConfig] = None,
    ) -> None:
        """
        Initialize print observer.

        Args:
            stream: Destination stream. Defaults to the current sys.stdout.
            config: Line templates. Defaults to OutputConfig().
        """
        self._stream = stream
        self._config = config or OutputConfig()

    def on_number(self, number: int) -> None:
        self._write(self._config.pass_template.format(number=number))

    def on_finished(self) -> None:
        self._write(self._config.finished_message)

    def _write(self, line: str) -> None:
        stream = self._stream if self._stream is not None else sys.stdout
        print(line, file=stream)
