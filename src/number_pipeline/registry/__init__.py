"""
Registry Module - Prefix-Based Filter Factory.

Components:
    - FilterRegistry: Maps name prefixes to filter constructors
    - FilterInfo: Metadata about registered prefixes
"""

from number_pipeline.registry.filter_registry import (
    FilterInfo,
    FilterRegistry,
    FilterRegistryProtocol,
)

__all__ = [
    "FilterRegistry",
    "FilterInfo",
    "FilterRegistryProtocol",
]
