"""
Adapters Package - Infrastructure Implementations.

Adapters:
    - FileNumberSource: reads integers from text files
    - ConsoleAuditLogger: run audit lines on stderr
    - InMemoryMetricsCollector: per-run counts and timings
"""

from number_pipeline.adapters.console_logger import ConsoleAuditLogger
from number_pipeline.adapters.file_source import FileNumberSource
from number_pipeline.adapters.metrics_collector import InMemoryMetricsCollector

__all__ = [
    "ConsoleAuditLogger",
    "FileNumberSource",
    "InMemoryMetricsCollector",
]
