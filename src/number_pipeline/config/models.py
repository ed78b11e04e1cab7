"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field, field_validator

ObserverKind = Literal["printer", "counter"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def _check_template(field: str, value: str, placeholder: str) -> str:
    """Reject templates that lack the placeholder or cannot be formatted."""
    if "{" + placeholder not in value:
        raise ValueError(f"{field} must contain '{{{placeholder}}}'")
    try:
        value.format(**{placeholder: 0})
    except (KeyError, IndexError, ValueError, AttributeError) as e:
        raise ValueError(f"{field} is not a valid template: {e!r}") from e
    return value


class SourceConfig(BaseModel):
    """Configuration for reading number files."""

    encoding: str = Field(default="utf-8", min_length=1)


class OutputConfig(BaseModel):
    """Line templates used by the observers."""

    pass_template: str = "Number passed: {number}"
    finished_message: str = "Processing finished."
    total_template: str = "Total passed numbers: {count}"

    @field_validator("pass_template")
    @classmethod
    def check_pass_template(cls, value: str) -> str:
        return _check_template("pass_template", value, "number")

    @field_validator("total_template")
    @classmethod
    def check_total_template(cls, value: str) -> str:
        return _check_template("total_template", value, "count")


class LoggingConfig(BaseModel):
    """Diagnostic logging settings."""

    level: LogLevel = "WARNING"
    verbose_audit: bool = False


class PipelineConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    source: SourceConfig = Field(default_factory=SourceConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    observers: List[ObserverKind] = Field(
        default_factory=lambda: ["printer", "counter"],
        min_length=1,
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
