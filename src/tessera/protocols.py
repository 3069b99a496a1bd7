"""Protocols and shared type aliases for Tessera.

Defines the contract every builder satisfies and the shapes of the
callables and external attribute maps the builders accept.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Protocol, TypeAlias, runtime_checkable

# Captured/unmatched component parameters supplied by the host framework.
# Read-only: builders never mutate it.
AttributeSource: TypeAlias = Mapping[str, object] | None

# Zero-argument condition evaluated once, at call time.
Predicate: TypeAlias = Callable[[], object]


@runtime_checkable
class Builder(Protocol):
    """Protocol for fluent accumulators.

    Thread Safety:
        Implementations are single-owner and unsynchronized. build() is a
        pure read: calling it twice without mutation yields equal results.

    """

    def build(self) -> Any:
        """Render the accumulated state."""
        ...

    def clear(self) -> Any:
        """Drop accumulated fragments, returning the builder."""
        ...
