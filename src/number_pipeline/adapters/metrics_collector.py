"""
In-Memory Metrics Collector.

Stores run metrics in memory and summarizes them per metric name.
"""

from __future__ import annotations

from datetime import datetime
from threading import Lock
from typing import Any, Dict, List, Optional


class InMemoryMetricsCollector:
    """Simple in-memory metrics collector."""

    def __init__(self) -> None:
        """Initialize the metrics collector."""
        self._metrics: Dict[str, List[Dict[str, Any]]] = {}
        self._lock = Lock()

    def record_timing(
        self,
        name: str,
        duration_seconds: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        """Record a timing metric."""
        with self._lock:
            self._record(name, "timing", duration_seconds, tags)

    def record_count(
        self,
        name: str,
        value: int,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        """Record a count metric."""
        with self._lock:
            self._record(name, "count", value, tags)

    def get_entries(self, name: str) -> List[Dict[str, Any]]:
        """Get raw entries recorded under a metric name."""
        with self._lock:
            return [dict(entry) for entry in self._metrics.get(name, [])]

    def get_metrics(self) -> Dict[str, Any]:
        """
        Summarize collected metrics.

        Returns:
            Metric name to {"type", "count", "total", "last"}
        """
        with self._lock:
            summary = {}
            for name, entries in self._metrics.items():
                values = [e["value"] for e in entries]
                summary[name] = {
                    "type": entries[-1]["type"],
                    "count": len(values),
                    "total": sum(values),
                    "last": values[-1],
                }
            return summary

    def clear(self) -> None:
        """Clear all metrics."""
        with self._lock:
            self._metrics.clear()

    def _record(
        self,
        name: str,
        metric_type: str,
        value: float,
        tags: Optional[Dict[str, str]],
    ) -> None:
        self._metrics.setdefault(name, []).append(
            {
                "type": metric_type,
                "value": value,
                "tags": dict(tags or {}),
                "timestamp": datetime.now().isoformat(),
            }
        )
