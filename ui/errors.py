"""Exceptions raised by the language and selection layers."""


class ShapeError(TypeError):
    """Raised when an option or language lacks a required field or has the wrong type."""


class DuplicateKeyError(ValueError):
    """Raised when two entries share the same id."""


class NotFoundError(LookupError):
    """Raised when an option id is not part of the list."""


class InvariantViolation(RuntimeError):
    """Raised when a list does not have exactly one current entry."""


class StyleLookupError(RuntimeError):
    """Raised when a base class name is missing from a style module."""
