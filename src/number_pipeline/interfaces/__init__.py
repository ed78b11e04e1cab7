"""
Interfaces Package - Protocols for Pipeline Collaborators.

The pipeline depends only on these protocols, so filters, observers and
sources can be swapped freely (including test doubles).
"""

from number_pipeline.interfaces.number_filter import FilterConstructor, NumberFilter
from number_pipeline.interfaces.number_observer import NumberObserver
from number_pipeline.interfaces.number_source import NumberSource

__all__ = [
    "FilterConstructor",
    "NumberFilter",
    "NumberObserver",
    "NumberSource",
]
