"""Error taxonomy for note resolution and transposition."""

from __future__ import annotations


class TransposerError(Exception):
    """Base class for all transposer errors."""


class UnknownNote(TransposerError, ValueError):
    """A token matches no note or alias in the selected notation.

    Attributes:
        token: The raw token as supplied by the caller.
        notation: Name of the notation it was resolved against.
    """

    def __init__(self, token: str, notation: str):
        self.token = token
        self.notation = notation
        super().__init__(f"Invalid {notation.capitalize()} note: {token}")


class InvalidScaleRoot(UnknownNote):
    """A scale root could not be resolved, so no delta can be computed."""
