"""
Configuration Package - Models and Loaders.

Configuration Structure:
    - PipelineConfig: Root configuration object
    - SourceConfig: Number file reading (encoding)
    - OutputConfig: Observer line templates
    - LoggingConfig: Diagnostic log level and audit verbosity

Design Principles:
    - Type-safe via Pydantic
    - Validation on load (fail fast)
    - Support for profiles merged over a base file
"""

from number_pipeline.config.loader import ConfigLoader
from number_pipeline.config.models import (
    LoggingConfig,
    OutputConfig,
    PipelineConfig,
    SourceConfig,
)

__all__ = [
    "ConfigLoader",
    "LoggingConfig",
    "OutputConfig",
    "PipelineConfig",
    "SourceConfig",
]
