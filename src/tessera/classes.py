"""Fluent builder for CSS class lists.

Collects class tokens from conditional fragments and renders them as one
space-separated string suitable for a ``class`` attribute.

Example:
    >>> from tessera import ClassBuilder
    >>> (
    ...     ClassBuilder("btn")
    ...     .add_if(is_primary, "btn-primary")
    ...     .add_if_else(is_large, "btn-lg", "btn-sm")
    ...     .merge_attributes(captured_attributes)
    ...     .build_or_none()
    ... )
    'btn btn-primary btn-sm custom'

Prefixing:
    set_prefix() namespaces every token added afterwards through the add
    family. Tokens already buffered keep their original form, and tokens
    pulled in by merge_attributes() are never prefixed.

        >>> ClassBuilder().set_prefix("sf").add("btn").clear_prefix().add("x").build()
        'sf-btn x'

Thread Safety:
    Not synchronized. A builder belongs to the call site holding it.

"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias

from tessera.buffer import FragmentBuffer
from tessera.config import get_builder_config
from tessera.protocols import AttributeSource, Predicate
from tessera.utils.logger import get_logger
from tessera.utils.text import is_blank, split_class_tokens, stringify, unique_tokens

logger = get_logger(__name__)

ClassAction: TypeAlias = Callable[["ClassBuilder"], object]
ClassBranch: TypeAlias = str | None | ClassAction


class ClassBuilder:
    """Accumulates CSS class tokens.

    Every mutating method returns the builder itself, so calls chain.
    Empty and ``None`` tokens are dropped silently.

    """

    __slots__ = ("_tokens", "_prefix", "_separator")

    def __init__(self, value: str | None = None) -> None:
        """Initialize the builder, optionally seeded with one class.

        Args:
            value: Initial class token (ignored when empty)
        """
        self._tokens = FragmentBuffer()
        self._prefix: str | None = None
        self._separator: str = get_builder_config().prefix_separator
        self.add(value)

    @property
    def prefix(self) -> str | None:
        """Active prefix, or None when tokens are added as-is."""
        return self._prefix

    @property
    def separator(self) -> str:
        """Separator placed between the active prefix and each token."""
        return self._separator

    def add(self, *values: str | None) -> ClassBuilder:
        """Add one or more class tokens in order.

        Each token is rendered as ``prefix + separator + value`` when a prefix
        is active.

        Args:
            *values: Class tokens (None and empty strings are skipped)

        Returns:
            self for method chaining
        """
        for value in values:
            if not value:
                continue
            if self._prefix is not None:
                value = f"{self._prefix}{self._separator}{value}"
            self._tokens.append(value)
        return self

    def add_if(self, condition: object, value: ClassBranch) -> ClassBuilder:
        """Add a class, or run a builder action, when ``condition`` is truthy.

        Args:
            condition: Evaluated eagerly, at call time
            value: Class token, or a callable receiving this builder. The
                callable is only invoked when the condition holds.

        Returns:
            self for method chaining

        Example:
            >>> ClassBuilder("card").add_if(True, lambda b: b.add("a", "b")).build()
            'card a b'
        """
        if condition:
            self._apply(value)
        return self

    def add_if_else(
        self,
        condition: object,
        if_true: ClassBranch,
        if_false: ClassBranch,
    ) -> ClassBuilder:
        """Apply exactly one of two branches.

        Either branch may be a class token or a builder action.

        Returns:
            self for method chaining
        """
        self._apply(if_true if condition else if_false)
        return self

    def add_when(self, predicate: Predicate, value: str | None) -> ClassBuilder:
        """Add a class if ``predicate()`` returns a truthy value.

        The predicate is called exactly once per call, whatever it returns.
        """
        return self.add_if(predicate(), value)

    def add_lazy(self, condition: object, factory: Callable[[], str | None]) -> ClassBuilder:
        """Add the class produced by ``factory`` when ``condition`` is truthy.

        The factory is never invoked when the condition is false.
        """
        if condition:
            self.add(factory())
        return self

    def set_prefix(self, prefix: str | None, separator: str | None = None) -> ClassBuilder:
        """Set the prefix applied to classes added from now on.

        Args:
            prefix: Namespace prefix; None or empty clears it
            separator: Text between prefix and class (default from BuilderConfig)

        Returns:
            self for method chaining
        """
        self._prefix = prefix or None
        self._separator = (
            separator if separator is not None else get_builder_config().prefix_separator
        )
        return self

    def clear_prefix(self) -> ClassBuilder:
        """Stop prefixing subsequently added classes."""
        self._prefix = None
        return self

    def merge_attributes(self, attributes: AttributeSource, key: str | None = None) -> ClassBuilder:
        """Merge the class value from an external attribute map.

        The value is split on whitespace, empty tokens are dropped, and exact
        duplicates are removed keeping their first occurrence. Merged tokens
        are never prefixed; the active prefix is restored afterwards even if
        merging fails.

        Args:
            attributes: Read-only attribute map (None is a no-op)
            key: Attribute to read (default: BuilderConfig.class_key, "class")

        Returns:
            self for method chaining

        Example:
            >>> ClassBuilder().merge_attributes({"class": "btn btn active btn"}).build()
            'btn active'
        """
        if attributes is None:
            return self

        key = key if key is not None else get_builder_config().class_key
        if key not in attributes:
            return self

        class_string = stringify(attributes[key])
        if is_blank(class_string):
            return self

        tokens = split_class_tokens(class_string)
        unique = unique_tokens(tokens)
        logger.debug(
            "Merging %d class token(s) from %r (%d duplicate(s) dropped)",
            len(unique),
            key,
            len(tokens) - len(unique),
        )

        saved_prefix = self._prefix
        try:
            self._prefix = None
            self.add(*unique)
        finally:
            self._prefix = saved_prefix

        return self

    def clear(self) -> ClassBuilder:
        """Remove all classes. The active prefix is kept."""
        self._tokens.clear()
        return self

    def build(self) -> str:
        """Build the space-separated class string."""
        return self._tokens.build(" ")

    def build_or_none(self) -> str | None:
        """Build the class string, returning None when it would be blank.

        Lets the host omit the ``class`` attribute entirely.
        """
        result = self.build()
        return None if is_blank(result) else result

    def _apply(self, branch: ClassBranch) -> None:
        if callable(branch):
            branch(self)
        else:
            self.add(branch)

    def __str__(self) -> str:
        return self.build()

    def __repr__(self) -> str:
        return f"ClassBuilder({self.build()!r})"

    def __len__(self) -> int:
        """Return number of buffered class tokens."""
        return len(self._tokens)

    def __bool__(self) -> bool:
        return bool(self._tokens)
