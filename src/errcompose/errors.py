"""
Error hierarchy for errcompose.
"""

from __future__ import annotations

from .utils.logging import describe_type


class ErrComposeError(Exception):
    """Base error for errcompose failures."""


class UnsupportedTypeError(ErrComposeError, TypeError):
    """
    Reported when ``new`` receives an input whose type it cannot compose.

    The constructor returns this error instead of raising it, so a call site
    doing ``raise new(value)`` still raises something meaningful.
    """

    def __init__(self, rejected: object, *, role: str = "main error") -> None:
        self.rejected_type: type = type(rejected)
        self.role = role
        super().__init__(f"errcompose: unsupported {role} type {describe_type(rejected)}")


class SettingsError(ErrComposeError, ValueError):
    """Raised when settings cannot be parsed from the environment."""


class LeafError(Exception):
    """Plain error built from a text message."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message
