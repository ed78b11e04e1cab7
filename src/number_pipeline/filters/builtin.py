"""
Built-in Filter Registration.

Populates a FilterRegistry with the filters shipped with the package.
"""

from __future__ import annotations

from number_pipeline.filters.parity import create_even_filter, create_odd_filter
from number_pipeline.filters.threshold import (
    GREATER_THAN_PREFIX,
    create_greater_than_filter,
)
from number_pipeline.registry.filter_registry import (
    FilterRegistry,
    FilterRegistryProtocol,
)


def register_builtin_filters(registry: FilterRegistryProtocol) -> None:
    """
    Register EVEN, ODD and GT on the given registry.

    Args:
        registry: Any registry implementation to populate
    """
    registry.register(
        "EVEN",
        create_even_filter,
        description="Keep even numbers",
        tags=["parity"],
    )
    registry.register(
        "ODD",
        create_odd_filter,
        description="Keep odd numbers",
        tags=["parity"],
    )
    registry.register(
        GREATER_THAN_PREFIX,
        create_greater_than_filter,
        description="Keep numbers greater than <n>, e.g. GT5",
        tags=["threshold"],
    )


def create_default_registry() -> FilterRegistry:
    """Create a new registry holding the built-in filters."""
    registry = FilterRegistry()
    register_builtin_filters(registry)
    return registry
