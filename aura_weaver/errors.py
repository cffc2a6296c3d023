"""
aura_weaver/errors.py
Exception types raised by the engine and its collaborators
"""

from typing import Optional


class AuraError(Exception):
    """Base class for all Aura Weaver errors."""


class ValidationError(AuraError, ValueError):
    """
    Input rejected before generation started.

    Attributes:
        field: Which input was rejected ("mood_seed" or "activity_count")
        bound: The violated bound, e.g. "max_length=100"
    """

    def __init__(self, field: str, message: str, bound: Optional[str] = None):
        super().__init__(message)
        self.field = field
        self.message = message
        self.bound = bound

    def __str__(self) -> str:
        if self.bound:
            return f"{self.field}: {self.message} ({self.bound})"
        return f"{self.field}: {self.message}"


class RenderError(AuraError):
    """Drawing surface could not be created or encoded. Carries no image."""

    user_message = "Aura rendering failed. Please retry."


class StorageError(AuraError):
    """Pinning service rejected or failed an upload."""
