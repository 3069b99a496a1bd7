"""
Tessera — fluent builders for CSS classes, inline styles, and HTML attributes

Composes markup attribute values from conditional fragments, for component
code that would otherwise glue strings together with if-statements.
Zero runtime dependencies.

Quick Start:
    >>> from tessera import AttributeBuilder, ClassBuilder, StyleBuilder
    >>> ClassBuilder("btn").add_if(True, "active").build()
    'btn active'
    >>> StyleBuilder().add("width", 50.5, "%").build()
    'width: 50.5%;'
    >>> AttributeBuilder().add("disabled").build()
    {'disabled': ''}

Merging captured attributes:
    >>> captured = {"class": "mt-2 mt-2 shadow", "style": "color: blue"}
    >>> ClassBuilder().set_prefix("sf").add("card").merge_attributes(captured).build()
    'sf-card mt-2 shadow'
    >>> StyleBuilder("color", "red").merge_attributes(captured).build()
    'color: red; color: blue;'
"""

from tessera.attributes import AttributeBuilder
from tessera.buffer import FragmentBuffer
from tessera.classes import ClassBuilder
from tessera.config import (
    BuilderConfig,
    builder_config_context,
    get_builder_config,
    reset_builder_config,
    set_builder_config,
)
from tessera.errors import TesseraError, ValidationError
from tessera.protocols import Builder
from tessera.styles import StyleBuilder
from tessera.utils.numbers import format_css_number

__version__ = "0.1.0"

__all__ = [
    "AttributeBuilder",
    "Builder",
    "BuilderConfig",
    "ClassBuilder",
    "FragmentBuffer",
    "StyleBuilder",
    "TesseraError",
    "ValidationError",
    "__version__",
    "builder_config_context",
    "format_css_number",
    "get_builder_config",
    "reset_builder_config",
    "set_builder_config",
]
