"""
Command Line Interface.

    number-pipeline [options] <FILTER> <FILE>

Prints one line per passing number followed by the completion and total
lines. Every error ends the process with status 1 and a diagnostic on
stderr before any number is printed.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, NoReturn, Optional

import number_pipeline
from number_pipeline.adapters.console_logger import ConsoleAuditLogger
from number_pipeline.adapters.file_source import FileNumberSource
from number_pipeline.config.loader import ConfigLoader
from number_pipeline.config.models import PipelineConfig
from number_pipeline.domain.exceptions import (
    ConfigurationError,
    NumberPipelineError,
    UsageError,
)
from number_pipeline.filters.builtin import create_default_registry
from number_pipeline.observers.factory import build_observers
from number_pipeline.pipeline.number_pipeline import NumberPipeline
from number_pipeline.registry.filter_registry import FilterRegistry

logger = logging.getLogger(__name__)

PROG = "number-pipeline"
USAGE = f"Usage: {PROG} <FILTER> <FILE>\nExample filters: EVEN, ODD, GT5"


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises UsageError instead of exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def _build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=PROG,
        description="Filter integers from a file and report the ones that pass.",
        epilog="Example filters: EVEN, ODD, GT5",
    )
    parser.add_argument("filter_name", nargs="?", metavar="FILTER")
    parser.add_argument("file_path", nargs="?", metavar="FILE")
    parser.add_argument("--config", type=Path, help="YAML configuration file")
    parser.add_argument("--profile", help="Profile merged over the configuration")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Diagnostic log level (overrides configuration)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Write run audit lines to stderr",
    )
    parser.add_argument(
        "--list-filters",
        action="store_true",
        help="List registered filter prefixes and exit",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {number_pipeline.__version__}",
    )
    return parser


def load_configuration(
    config_path: Optional[Path], profile: Optional[str] = None
) -> PipelineConfig:
    """
    Load configuration for a CLI run.

    Args:
        config_path: YAML file, or None for defaults
        profile: Optional profile name

    Returns:
        Validated PipelineConfig

    Raises:
        ConfigurationError: If the file is missing, malformed or invalid
    """
    if config_path is None:
        if profile:
            raise ConfigurationError("--profile requires --config")
        return PipelineConfig()

    return ConfigLoader(base_path=config_path.parent).load(config_path.name, profile)


def _print_filters(registry: FilterRegistry) -> None:
    for prefix, info in registry.list_all().items():
        print(f"{prefix:<8} {info.description}")


def run_cli(argv: Optional[List[str]] = None) -> None:
    """
    Parse arguments and execute one run.

    Raises:
        NumberPipelineError: For any usage, filter, source or config failure
    """
    args = _build_parser().parse_args(argv)

    if args.list_filters:
        _print_filters(create_default_registry())
        return

    if args.filter_name is None or args.file_path is None:
        raise UsageError("expected exactly two arguments: FILTER and FILE")

    config = load_configuration(args.config, args.profile)
    number_pipeline.configure_logging(
        getattr(logging, args.log_level or config.logging.level)
    )

    # Resolve the filter before touching the file
    number_filter = create_default_registry().create(args.filter_name)

    audit_logger = None
    if args.verbose:
        audit_logger = ConsoleAuditLogger(verbose=config.logging.verbose_audit)

    pipeline = NumberPipeline(
        source=FileNumberSource(encoding=config.source.encoding),
        audit_logger=audit_logger,
    )
    pipeline.process(number_filter, build_observers(config), args.file_path)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Console entry point.

    Returns:
        Process exit status: 0 on success, 1 on any error
    """
    try:
        run_cli(argv)
    except UsageError as e:
        print(f"error: {e.message}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 1
    except NumberPipelineError as e:
        logger.debug("Run aborted", exc_info=True)
        print(e.message, file=sys.stderr)
        return 1
    return 0
