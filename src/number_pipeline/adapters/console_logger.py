"""
Console Audit Logger.

A simple audit logger that writes run events to stderr, keeping stdout
free for observer output.
"""

from __future__ import annotations

import sys
from datetime import datetime
from typing import Optional, TextIO


class ConsoleAuditLogger:
    """Simple console-based audit logger."""

    def __init__(self, verbose: bool = True, stream: Optional[TextIO] = None) -> None:
        """
        Initialize console logger.

        Args:
            verbose: If True, log every rejected number. If False, only summaries.
            stream: Destination stream. Defaults to the current sys.stderr.
        """
        self._verbose = verbose
        self._stream = stream
        self._correlation_id: Optional[str] = None

    def set_correlation_id(self, correlation_id: str) -> None:
        """Set correlation ID for subsequent log entries."""
        self._correlation_id = correlation_id

    def log_run_start(self, filter_name: str, input_count: int) -> None:
        """Log the start of a run."""
        self._log("INFO", f"Starting {filter_name} with {input_count} numbers")

    def log_number_rejected(self, number: int, filter_name: str) -> None:
        """Log that a number did not pass."""
        if self._verbose:
            self._log("DEBUG", f"{number} rejected by {filter_name}")

    def log_run_end(
        self,
        filter_name: str,
        passed_count: int,
        duration_seconds: float,
    ) -> None:
        """Log the end of a run."""
        self._log(
            "INFO",
            f"Completed {filter_name}: {passed_count} numbers passed "
            f"({duration_seconds:.3f}s)",
        )

    def _log(self, level: str, message: str) -> None:
        """Internal logging method."""
        timestamp = datetime.now().strftime("%H:%M:%S")
        corr_id = self._correlation_id[:8] if self._correlation_id else "--------"
        stream = self._stream if self._stream is not None else sys.stderr
        print(f"[{timestamp}] [{corr_id}] [{level:5}] {message}", file=stream)
