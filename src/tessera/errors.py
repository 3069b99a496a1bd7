"""Exception classes for Tessera.

Builders are permissive: empty fragments and missing merge sources are
silent no-ops. The only error raised by a builder on purpose is
ValidationError, from AttributeBuilder.fail().
"""

from __future__ import annotations


class TesseraError(Exception):
    """Base exception for all Tessera errors.
    
    Subclass this for specific error categories.
    """

    pass


class ValidationError(TesseraError, ValueError):
    """Inline precondition failure raised from a fluent chain.
    
    Raised by AttributeBuilder.fail() when its condition holds. Also a
    ValueError, so callers that already guard component parameters with
    ``except ValueError`` keep working.
    """

    def __init__(self, message: str) -> None:
        """Initialize validation error.
        
        Args:
            message: Description of the violated precondition
        """
        self.message = message
        super().__init__(message)
