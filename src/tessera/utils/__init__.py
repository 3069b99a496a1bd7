"""Utility modules for Tessera.

Provides:
- numbers: format_css_number for locale-independent numeric output
- text: stringify, is_blank, split_class_tokens, unique_tokens
- logger: get_logger for logging
"""

from tessera.utils.logger import get_logger
from tessera.utils.numbers import format_css_number
from tessera.utils.text import is_blank, split_class_tokens, stringify, unique_tokens

__all__ = [
    "format_css_number",
    "get_logger",
    "is_blank",
    "split_class_tokens",
    "stringify",
    "unique_tokens",
]
