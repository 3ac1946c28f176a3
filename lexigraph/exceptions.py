"""
Custom exceptions for lexigraph.
"""


class LexigraphError(Exception):
    """Base exception for all lexigraph exceptions."""
    pass


class ValidationError(LexigraphError):
    """Raised when a Language or Word is built from invalid values."""
    pass


class IntegrityError(LexigraphError):
    """Raised when a translation graph fails its consistency check."""
    pass
