"""Fluent builder for HTML attribute mappings.

Example:
    >>> from tessera import AttributeBuilder
    >>> (
    ...     AttributeBuilder()
    ...     .add("type", "text")
    ...     .add_if(is_disabled, "disabled")
    ...     .add_if_present("placeholder", placeholder)
    ...     .fail(is_disabled and is_required, "A disabled input cannot be required")
    ...     .build()
    ... )
    {'type': 'text', 'disabled': '', 'placeholder': 'Enter name'}

"""

from __future__ import annotations

from collections.abc import Callable

from tessera.errors import ValidationError
from tessera.utils.logger import get_logger
from tessera.utils.text import is_blank, stringify

logger = get_logger(__name__)


class AttributeBuilder:
    """Accumulates attribute name/value pairs.

    Values are stored as text: None becomes "" and everything else goes
    through str(). The last write for a name wins.

    """

    __slots__ = ("_attributes",)

    def __init__(self) -> None:
        self._attributes: dict[str, str] = {}

    def add(self, name: str | AttributeBuilder | None, value: object = None) -> AttributeBuilder:
        """Set an attribute, or merge every attribute of another builder.

        Args:
            name: Attribute name, or another AttributeBuilder to merge
                (None or an empty builder is a no-op)
            value: Attribute value; None renders as "" (e.g. ``disabled``)

        Returns:
            self for method chaining

        Example:
            >>> AttributeBuilder().add("id", "a").add("id", "b").build()
            {'id': 'b'}
        """
        if name is None:
            return self
        if isinstance(name, AttributeBuilder):
            # Other builder's values win on collision.
            self._attributes.update(name._attributes)
            return self
        self._attributes[name] = stringify(value)
        return self

    def add_if(self, condition: object, name: str, value: object = None) -> AttributeBuilder:
        """Set an attribute when ``condition`` is truthy."""
        if condition:
            self.add(name, value)
        return self

    def add_if_present(self, name: str, value: object) -> AttributeBuilder:
        """Set an attribute only if its text is not blank.

        Intended for optional attributes such as ``placeholder``.
        """
        return self.add_if(not is_blank(stringify(value)), name, value)

    def add_lazy(self, condition: object, name: str, factory: Callable[[], object]) -> AttributeBuilder:
        """Set ``name`` to the value produced by ``factory``.

        The factory is invoked only when the condition is truthy.
        """
        if condition:
            self.add(name, factory())
        return self

    def fail(self, condition: object, message: str) -> AttributeBuilder:
        """Raise ValidationError when ``condition`` is truthy.

        Lets a fluent chain carry inline precondition checks.

        Raises:
            ValidationError: Carrying ``message``, if the condition holds

        Example:
            >>> AttributeBuilder().fail(False, "never raised").build()
            {}
        """
        if not condition:
            return self
        logger.debug("Attribute validation failed: %s", message)
        raise ValidationError(message)

    def build(self) -> dict[str, str]:
        """Build the attribute mapping.

        Returns a copy; later mutations of the builder do not affect it.
        """
        return dict(self._attributes)

    def __contains__(self, name: object) -> bool:
        return name in self._attributes

    def __len__(self) -> int:
        """Return number of attributes."""
        return len(self._attributes)

    def __bool__(self) -> bool:
        return bool(self._attributes)

    def __repr__(self) -> str:
        return f"AttributeBuilder({self._attributes!r})"

    def clear(self) -> AttributeBuilder:
        """Remove all attributes."""
        self._attributes.clear()
        return self
