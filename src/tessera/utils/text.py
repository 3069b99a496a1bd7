"""Text helpers shared by the builders.

Example:
    >>> from tessera.utils.text import split_class_tokens, unique_tokens
    >>> unique_tokens(split_class_tokens("btn  btn\\tactive"))
    ['btn', 'active']
"""

from __future__ import annotations

import re
from collections.abc import Iterable

# Class attribute values are split on these four characters only.
_CLASS_SEPARATORS = re.compile(r"[ \t\n\r]+")


def stringify(value: object) -> str:
    """Convert a value to text: None becomes "", anything else uses str()."""
    if value is None:
        return ""
    return str(value)


def is_blank(text: str | None) -> bool:
    """Return True for None, empty, or whitespace-only text."""
    return text is None or not text.strip()


def split_class_tokens(text: str) -> list[str]:
    """Split a class attribute value into non-empty tokens.

    Args:
        text: Raw class string, e.g. ``"btn\\n  active"``

    Returns:
        Tokens in source order, duplicates included
    """
    tokens = (token.strip() for token in _CLASS_SEPARATORS.split(text))
    return [token for token in tokens if token]


def unique_tokens(tokens: Iterable[str]) -> list[str]:
    """Remove exact-match duplicates, keeping the first occurrence.

    Comparison is plain string equality: no case folding.
    """
    return list(dict.fromkeys(tokens))
