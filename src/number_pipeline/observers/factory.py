"""
Observer Factory.

Builds a fresh, ordered observer list from configuration.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Optional, TextIO

from number_pipeline.config.models import OutputConfig, PipelineConfig
from number_pipeline.interfaces.number_observer import NumberObserver
from number_pipeline.observers.counter import CountObserver
from number_pipeline.observers.printer import PrintObserver

_OBSERVER_TYPES: Dict[str, Callable[[Optional[TextIO], OutputConfig], NumberObserver]] = {
    "printer": PrintObserver,
    "counter": CountObserver,
}


def build_observers(
    config: Optional[PipelineConfig] = None,
    stream: Optional[TextIO] = None,
) -> List[NumberObserver]:
    """
    Create new observer instances in configured order.

    Args:
        config: Pipeline configuration (defaults to printer then counter)
        stream: Output stream shared by all observers

    Returns:
        Observer list ready for one run
    """
    config = config or PipelineConfig()
    return [_OBSERVER_TYPES[kind](stream, config.output) for kind in config.observers]
