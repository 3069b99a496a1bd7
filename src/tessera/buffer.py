"""Ordered fragment buffer shared by the builders.

Appends to a list, joins once at build time. Each builder owns exactly
one FragmentBuffer; buffers are never shared between builders.

Thread Safety:
Not synchronized. A buffer belongs to the call site holding its builder.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class FragmentBuffer:
    """Append-only sequence of string fragments.
    
    Empty and ``None`` fragments never occupy a slot.
    
    Usage:
            >>> buf = FragmentBuffer()
            >>> buf.append("btn").append("").append("active")
            >>> buf.build(" ")
            'btn active'
    
    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, fragment: str | None) -> FragmentBuffer:
        """Append a fragment to the buffer.

        Args:
            fragment: Fragment to append (None and empty strings are skipped)

        Returns:
            self for method chaining
        """
        if fragment:
            self._parts.append(fragment)
        return self

    def extend(self, fragments: Iterable[str | None]) -> FragmentBuffer:
        """Append multiple fragments in order.

        Returns:
            self for method chaining
        """
        self._parts.extend(f for f in fragments if f)
        return self

    def build(self, separator: str) -> str:
        """Join all fragments with ``separator`` and strip outer whitespace.

        Calling build() repeatedly without mutation returns the same string.
        """
        return separator.join(self._parts).strip()

    def clear(self) -> FragmentBuffer:
        """Remove all fragments.

        Returns:
            self for method chaining
        """
        self._parts.clear()
        return self

    def __iter__(self) -> Iterator[str]:
        # Snapshot so callers can mutate the buffer while iterating.
        return iter(tuple(self._parts))

    def __len__(self) -> int:
        """Return number of fragments (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)

    def __repr__(self) -> str:
        return f"FragmentBuffer({self._parts!r})"
