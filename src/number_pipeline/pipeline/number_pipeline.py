"""
Number Pipeline - Main Orchestrator.

The NumberPipeline drives one run: read the numbers, test each one against
the filter, fan passing numbers out to the observers, then tell every
observer the run is over.
"""

from __future__ import annotations

import logging
import time
import uuid
from pathlib import Path
from typing import Iterable, List, Optional, Protocol, Sequence, Union

from number_pipeline.domain.value_objects import RunResult
from number_pipeline.interfaces.number_filter import NumberFilter
from number_pipeline.interfaces.number_observer import NumberObserver
from number_pipeline.interfaces.number_source import NumberSource

logger = logging.getLogger(__name__)


class AuditLoggerProtocol(Protocol):
    """Protocol for audit loggers."""

    def set_correlation_id(self, correlation_id: str) -> None:
        ...

    def log_run_start(self, filter_name: str, input_count: int) -> None:
        ...

    def log_number_rejected(self, number: int, filter_name: str) -> None:
        ...

    def log_run_end(
        self, filter_name: str, passed_count: int, duration_seconds: float
    ) -> None:
        ...


class MetricsCollectorProtocol(Protocol):
    """Protocol for metrics collectors."""

    def record_timing(
        self, name: str, duration_seconds: float, tags: Optional[dict] = None
    ) -> None:
        ...

    def record_count(self, name: str, value: int, tags: Optional[dict] = None) -> None:
        ...


class NumberPipeline:
    """
    Runs numbers through a filter and notifies observers.

    The pipeline keeps no state between runs. Filters and observers are
    passed per run; the source, audit logger and metrics collector are
    injected once.
    """

    def __init__(
        self,
        source: Optional[NumberSource] = None,
        audit_logger: Optional[AuditLoggerProtocol] = None,
        metrics_collector: Optional[MetricsCollectorProtocol] = None,
    ) -> None:
        """
        Initialize pipeline with its dependencies.

        Args:
            source: Where process() reads numbers from
            audit_logger: For the run audit trail (optional)
            metrics_collector: For run counts and timings (optional)
        """
        self.source = source
        self.audit_logger = audit_logger
        self.metrics_collector = metrics_collector

    def process(
        self,
        number_filter: NumberFilter,
        observers: Sequence[NumberObserver],
        path: Union[str, Path],
    ) -> RunResult:
        """
        Read numbers from path and run them through the pipeline.

        The file is read completely before any observer is notified, so a
        source error never leaves partial output behind.

        Args:
            number_filter: Predicate deciding which numbers pass
            observers: Listeners, notified in this order
            path: Location passed to the number source

        Returns:
            RunResult for the run

        Raises:
            ValueError: If the pipeline was built without a source
            NumberSourceError: If the numbers cannot be read
        """
        if self.source is None:
            raise ValueError("NumberPipeline.process() requires a number source")

        numbers = self.source.read_numbers(path)
        logger.debug(f"Loaded {len(numbers)} numbers from {path}")
        return self.run(number_filter, observers, numbers)

    def run(
        self,
        number_filter: NumberFilter,
        observers: Sequence[NumberObserver],
        numbers: Iterable[int],
    ) -> RunResult:
        """
        Execute one run over an already loaded number sequence.

        Every number is evaluated in order. Each passing number goes to every
        observer in order; afterwards each observer gets on_finished once.

        Args:
            number_filter: Predicate deciding which numbers pass
            observers: Listeners, notified in this order
            numbers: Input values

        Returns:
            RunResult with the passing numbers and timing
        """
        start_time = time.perf_counter()
        run_id = str(uuid.uuid4())
        numbers = tuple(numbers)
        observers = list(observers)
        filter_name = number_filter.name

        if self.audit_logger:
            self.audit_logger.set_correlation_id(run_id)
            self.audit_logger.log_run_start(filter_name, len(numbers))
        logger.debug(
            f"Run {run_id[:8]}: {filter_name} over {len(numbers)} numbers, "
            f"{len(observers)} observers"
        )

        passed = self._filter_and_notify(number_filter, observers, numbers)
        self._notify_finished(observers)

        duration = time.perf_counter() - start_time
        self._record(filter_name, len(numbers), len(passed), duration)
        logger.info(
            f"Run {run_id[:8]} finished: {len(passed)}/{len(numbers)} numbers "
            f"passed {filter_name}"
        )

        return RunResult(
            run_id=run_id,
            filter_name=filter_name,
            input_count=len(numbers),
            passed_numbers=tuple(passed),
            duration_seconds=duration,
        )

    def _filter_and_notify(
        self,
        number_filter: NumberFilter,
        observers: List[NumberObserver],
        numbers: Sequence[int],
    ) -> List[int]:
        """Evaluate each number and fan passing ones out to observers."""
        passed: List[int] = []
        for number in numbers:
            if not number_filter.keep(number):
                if self.audit_logger:
                    self.audit_logger.log_number_rejected(number, number_filter.name)
                continue

            passed.append(number)
            for observer in observers:
                observer.on_number(number)
        return passed

    def _notify_finished(self, observers: List[NumberObserver]) -> None:
        for observer in observers:
            observer.on_finished()

    def _record(
        self,
        filter_name: str,
        input_count: int,
        passed_count: int,
        duration: float,
    ) -> None:
        """Push run figures to the audit logger and metrics collector."""
        if self.audit_logger:
            self.audit_logger.log_run_end(filter_name, passed_count, duration)

        if self.metrics_collector:
            tags = {"filter": filter_name}
            self.metrics_collector.record_count("numbers_read_total", input_count, tags)
            self.metrics_collector.record_count(
                "numbers_passed_total", passed_count, tags
            )
            self.metrics_collector.record_timing("run_duration_seconds", duration, tags)
