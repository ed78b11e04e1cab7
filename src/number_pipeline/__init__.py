"""
Number Pipeline - Filter Integers Through a Pluggable Predicate.

Reads whitespace-separated integers from a file, keeps the ones a filter
accepts, and notifies an ordered list of observers of each passing number
and of completion.

Architecture:
    - Ports & Adapters: the pipeline depends only on protocols
    - Prefix-based filter registry ("GT5" -> GT constructor with "5")
    - Dependency Injection: registries and observers are built by the caller
    - Configuration-driven output via YAML

Main Components:
    - domain: Errors and value objects (FilterSpec, RunResult)
    - interfaces: Protocols for filters, observers and sources
    - filters: EVEN, ODD, GT<n>
    - registry: FilterRegistry
    - observers: PrintObserver, CountObserver
    - pipeline: NumberPipeline
    - adapters: File source, audit logger, metrics collector
    - config: Configuration models and loaders

Example:
    >>> from number_pipeline.filters import create_default_registry
    >>> from number_pipeline.observers import build_observers
    >>> from number_pipeline.pipeline import NumberPipeline
    >>> registry = create_default_registry()
    >>> result = NumberPipeline().run(registry.create("EVEN"), build_observers(), [1, 2, 3, 4])
    Number passed: 2
    Number passed: 4
    Processing finished.
    Total passed numbers: 2
"""

import logging

__version__ = "1.0.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Number Pipeline.

    Log records go to stderr; stdout is reserved for observer output.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import number_pipeline
        >>> number_pipeline.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("number_pipeline").setLevel(level)
