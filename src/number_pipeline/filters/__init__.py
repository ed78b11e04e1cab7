"""
Filters Package - Concrete Filter Implementations.

Filters:
    - EvenFilter (EVEN): keeps numbers divisible by two
    - OddFilter (ODD): keeps numbers not divisible by two
    - GreaterThanFilter (GT<n>): keeps numbers greater than n

Each module also provides the constructor function the registry calls with
the parameter string that follows the matched prefix.
"""

from number_pipeline.filters.builtin import (
    create_default_registry,
    register_builtin_filters,
)
from number_pipeline.filters.parity import (
    EvenFilter,
    OddFilter,
    create_even_filter,
    create_odd_filter,
)
from number_pipeline.filters.threshold import (
    GREATER_THAN_PREFIX,
    GreaterThanFilter,
    create_greater_than_filter,
)

__all__ = [
    "EvenFilter",
    "OddFilter",
    "GreaterThanFilter",
    "GREATER_THAN_PREFIX",
    "create_even_filter",
    "create_odd_filter",
    "create_greater_than_filter",
    "create_default_registry",
    "register_builtin_filters",
]
