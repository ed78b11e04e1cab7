"""
Pipeline Package - Run Orchestration.

Components:
    - NumberPipeline: reads numbers, filters them, notifies observers
"""

from number_pipeline.pipeline.number_pipeline import (
    AuditLoggerProtocol,
    MetricsCollectorProtocol,
    NumberPipeline,
)

__all__ = [
    "AuditLoggerProtocol",
    "MetricsCollectorProtocol",
    "NumberPipeline",
]
