"""
Filter Registry - Prefix-Based Filter Factory.

This module provides a thread-safe registry that maps filter name prefixes
to constructor functions. A requested name such as "GT5" is resolved by
finding the registered prefix it starts with ("GT"), stripping it, and
passing the remainder ("5") to that prefix's constructor.

Usage:
    registry = FilterRegistry()
    registry.register("EVEN", create_even_filter)
    registry.register("GT", create_greater_than_filter)

    number_filter = registry.create("GT5")
    number_filter.keep(7)  # True

Design Notes:
    - Longest-prefix match: with "G" and "GT" registered, "GT5" resolves to "GT"
    - Prefixes are unique and matched case-sensitively
    - Registries are constructed explicitly and injected, never global
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from threading import RLock
from typing import Any, Dict, List, Optional, Protocol

from number_pipeline.domain.exceptions import UnknownFilterError
from number_pipeline.domain.value_objects import FilterSpec
from number_pipeline.interfaces.number_filter import FilterConstructor, NumberFilter

logger = logging.getLogger(__name__)


@dataclass
class FilterInfo:
    """Metadata about a registered filter prefix."""

    prefix: str
    constructor: FilterConstructor
    description: str = ""
    tags: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "prefix": self.prefix,
            "description": self.description,
            "tags": self.tags,
            "constructor": getattr(
                self.constructor, "__name__", type(self.constructor).__name__
            ),
        }


class FilterRegistryProtocol(Protocol):
    """Protocol for filter registry implementations."""

    def register(
        self,
        prefix: str,
        constructor: FilterConstructor,
        description: str = "",
        tags: Optional[List[str]] = None,
    ) -> None:
        """Register a constructor under a name prefix."""
        ...

    def unregister(self, prefix: str) -> bool:
        """Remove a registered prefix."""
        ...

    def resolve(self, name: str) -> FilterSpec:
        """Split a filter name into prefix and parameter."""
        ...

    def create(self, name: str) -> NumberFilter:
        """Build the filter a name refers to."""
        ...

    def list_all(self) -> Dict[str, FilterInfo]:
        """List all registered prefixes."""
        ...


class FilterRegistry:
    """
    Thread-safe prefix registry for number filters.

    Supports:
        - Runtime registration of new filter kinds
        - Parameterized names (prefix + parameter string)
        - Deterministic longest-prefix resolution
    """

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._filters: Dict[str, FilterInfo] = {}
        self._lock = RLock()
        logger.debug("FilterRegistry initialized")

    def register(
        self,
        prefix: str,
        constructor: FilterConstructor,
        description: str = "",
        tags: Optional[List[str]] = None,
    ) -> None:
        """
        Register a filter constructor under a name prefix.

        Args:
            prefix: Leading part of filter names this constructor handles
            constructor: Called with the parameter string after the prefix
            description: Optional description
            tags: Optional tags for categorization

        Raises:
            ValueError: If the prefix is empty or already registered
        """
        if not prefix:
            raise ValueError("Filter prefix must not be empty.")

        with self._lock:
            if prefix in self._filters:
                raise ValueError(
                    f"Filter prefix '{prefix}' is already registered. "
                    f"Use unregister() first."
                )

            self._filters[prefix] = FilterInfo(
                prefix=prefix,
                constructor=constructor,
                description=description,
                tags=list(tags or []),
            )
            logger.info(f"Registered filter prefix: {prefix}")

    def unregister(self, prefix: str) -> bool:
        """
        Unregister a filter prefix.

        Args:
            prefix: Prefix to remove

        Returns:
            True if the prefix was removed, False if not found
        """
        with self._lock:
            if prefix not in self._filters:
                logger.warning(f"Cannot unregister: prefix '{prefix}' not found")
                return False

            del self._filters[prefix]
            logger.info(f"Unregistered filter prefix: {prefix}")
            return True

    def resolve(self, name: str) -> FilterSpec:
        """
        Find the registered prefix a filter name starts with.

        When several registered prefixes match, the longest one wins.

        Args:
            name: Requested filter name, e.g. "EVEN" or "GT5"

        Returns:
            FilterSpec holding the matched prefix and remaining parameter

        Raises:
            UnknownFilterError: If no registered prefix matches
        """
        with self._lock:
            candidates = [p for p in self._filters if name.startswith(p)]

        if not candidates:
            raise UnknownFilterError(name)

        prefix = max(candidates, key=len)
        spec = FilterSpec(name=name, prefix=prefix, parameter=name[len(prefix):])
        logger.debug(
            f"Resolved filter '{name}' to prefix '{spec.prefix}' "
            f"with parameter '{spec.parameter}'"
        )
        return spec

    def create(self, name: str) -> NumberFilter:
        """
        Create the filter a name refers to.

        Args:
            name: Requested filter name

        Returns:
            Constructed filter instance

        Raises:
            UnknownFilterError: If no registered prefix matches
            InvalidFilterArgumentError: If the constructor rejects the parameter
        """
        with self._lock:
            spec = self.resolve(name)
            info = self._filters[spec.prefix]
        return info.constructor(spec.parameter)

    def get_info(self, prefix: str) -> Optional[FilterInfo]:
        """Get metadata for a registered prefix."""
        with self._lock:
            return self._filters.get(prefix)

    def list_all(self) -> Dict[str, FilterInfo]:
        """
        List all registered prefixes.

        Returns:
            Dictionary of prefix to FilterInfo, in registration order
        """
        with self._lock:
            return dict(self._filters)

    @property
    def prefixes(self) -> List[str]:
        """Registered prefixes in registration order."""
        with self._lock:
            return list(self._filters)

    @property
    def registered_count(self) -> int:
        """Total number of registered prefixes."""
        with self._lock:
            return len(self._filters)

    def clear(self) -> None:
        """Remove all registered prefixes."""
        with self._lock:
            self._filters.clear()
            logger.info("Cleared all filters from registry")
