"""Fluent builder for inline CSS style declarations.

Collects ``property: value;`` declarations and raw snippets and renders
them as one string suitable for a ``style`` attribute.

Example:
    >>> from tessera import StyleBuilder
    >>> (
    ...     StyleBuilder("color", "red")
    ...     .add("width", 50.5, "%")
    ...     .add_if(is_hidden, "display", "none")
    ...     .add("backdrop-filter: blur(10px)")
    ...     .build()
    ... )
    'color: red; width: 50.5%; backdrop-filter: blur(10px);'

Numbers:
    Numeric values always go through format_css_number(), so the output is
    byte-identical under every locale and never uses exponent notation.

Merge order:
    merge_attributes() appends the external style after the builder's own
    declarations. Later declarations win in CSS, so externally supplied
    values override the component's defaults.

Thread Safety:
    Not synchronized. A builder belongs to the call site holding it.

"""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal
from numbers import Real
from typing import Final, TypeAlias

from tessera.buffer import FragmentBuffer
from tessera.config import get_builder_config
from tessera.protocols import AttributeSource, Predicate
from tessera.utils.logger import get_logger
from tessera.utils.numbers import format_css_number
from tessera.utils.text import is_blank, stringify

logger = get_logger(__name__)

# Marks an omitted value: add("color: red") is a raw declaration, while
# add("color", None) is a property with no value and is dropped.
_RAW: Final = object()

StyleAction: TypeAlias = Callable[["StyleBuilder"], object]
StyleBranch: TypeAlias = str | None | tuple[object, ...] | StyleAction


def _format_value(value: object) -> str:
    if isinstance(value, (Real, Decimal)) and not isinstance(value, bool):
        return format_css_number(value)
    return stringify(value)


class StyleBuilder:
    """Accumulates inline CSS declarations.

    Every mutating method returns the builder itself, so calls chain.
    Declarations with an empty property or value are dropped silently.

    """

    __slots__ = ("_declarations",)

    def __init__(self, property: str | None = None, value: object = _RAW, unit: str = "") -> None:
        """Initialize the builder, optionally seeded with one declaration.

        Accepts the same arguments as add().
        """
        self._declarations = FragmentBuffer()
        self.add(property, value, unit)

    def add(self, property: str | None, value: object = _RAW, unit: str = "") -> StyleBuilder:
        """Add a declaration.

        With a single argument, ``property`` is a raw declaration and is
        handled by add_raw(). Otherwise renders ``"<property>: <value><unit>;"``.

        Args:
            property: CSS property name, or a raw declaration
            value: String, number, or any object with a useful str()
            unit: Appended directly after the value (e.g. "px", "%")

        Returns:
            self for method chaining

        Example:
            >>> StyleBuilder().add("margin", 10, "px").add("opacity", 0.8).build()
            'margin: 10px; opacity: 0.8;'
        """
        if value is _RAW:
            return self.add_raw(property)
        if not property or value is None:
            return self

        text = _format_value(value)
        if not text:
            return self

        self._declarations.append(f"{property}: {text}{unit};")
        return self

    def add_raw(self, declaration: str | None) -> StyleBuilder:
        """Add a raw CSS snippet verbatim, without parsing.

        A terminating ``;`` is appended when the snippet lacks one.

        Example:
            >>> StyleBuilder().add_raw("color: red").add_raw("top: 0;").build()
            'color: red; top: 0;'
        """
        if not declaration:
            return self
        if not declaration.endswith(";"):
            declaration = f"{declaration};"
        self._declarations.append(declaration)
        return self

    def add_verbatim(self, snippet: str | None) -> StyleBuilder:
        """Alias for add_raw(), for call sites appending hand-written CSS."""
        return self.add_raw(snippet)

    def add_if(
        self,
        condition: object,
        property: str | None | StyleAction,
        value: object = _RAW,
        unit: str = "",
    ) -> StyleBuilder:
        """Add a declaration, or run a builder action, when ``condition`` is truthy.

        Args:
            condition: Evaluated eagerly, at call time
            property: Property name, raw declaration, or a callable receiving
                this builder. The callable is only invoked when the condition holds.
            value: Declaration value (omit for a raw declaration)
            unit: Unit appended to the value

        Returns:
            self for method chaining
        """
        if not condition:
            return self
        if callable(property):
            property(self)
            return self
        return self.add(property, value, unit)

    def add_if_else(
        self,
        condition: object,
        if_true: StyleBranch,
        if_false: StyleBranch,
    ) -> StyleBuilder:
        """Apply exactly one of two branches.

        Each branch is a builder action, a raw declaration string, or a
        ``(property, value)`` / ``(property, value, unit)`` tuple.

        Example:
            >>> StyleBuilder().add_if_else(False, ("display", "block"), ("display", "none")).build()
            'display: none;'
        """
        branch = if_true if condition else if_false
        if callable(branch):
            branch(self)
        elif isinstance(branch, tuple):
            self.add(*branch)
        else:
            self.add_raw(branch)
        return self

    def add_when(
        self,
        predicate: Predicate,
        property: str | None,
        value: object = _RAW,
        unit: str = "",
    ) -> StyleBuilder:
        """Add a declaration if ``predicate()`` returns a truthy value.

        The predicate is called exactly once per call, whatever it returns.
        """
        return self.add_if(predicate(), property, value, unit)

    def add_lazy(
        self,
        condition: object,
        property: str | None,
        factory: Callable[[], object],
        unit: str = "",
    ) -> StyleBuilder:
        """Add ``property`` with the value produced by ``factory``.

        The factory is invoked only when the condition is truthy. It may
        return a string or a number.
        """
        if condition:
            self.add(property, factory(), unit)
        return self

    def merge_attributes(self, attributes: AttributeSource, key: str | None = None) -> StyleBuilder:
        """Append the style value from an external attribute map.

        The external text is trimmed and added verbatim after every
        declaration added so far.

        Args:
            attributes: Read-only attribute map (None is a no-op)
            key: Attribute to read (default: BuilderConfig.style_key, "style")

        Returns:
            self for method chaining
        """
        if attributes is None:
            return self

        key = key if key is not None else get_builder_config().style_key
        if key not in attributes:
            return self

        style_string = stringify(attributes[key])
        if is_blank(style_string):
            return self

        logger.debug("Merging external style from %r", key)
        return self.add_raw(style_string.strip())

    def clear(self) -> StyleBuilder:
        """Remove all declarations."""
        self._declarations.clear()
        return self

    def build(self) -> str:
        """Build the style string."""
        return self._declarations.build(" ")

    def build_or_none(self) -> str | None:
        """Build the style string, returning None when it would be blank.

        Lets the host omit the ``style`` attribute entirely.
        """
        result = self.build()
        return None if is_blank(result) else result

    def __str__(self) -> str:
        return self.build()

    def __repr__(self) -> str:
        return f"StyleBuilder({self.build()!r})"

    def __len__(self) -> int:
        """Return number of buffered declarations."""
        return len(self._declarations)

    def __bool__(self) -> bool:
        return bool(self._declarations)
