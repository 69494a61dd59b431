"""Error types for the PGAdapter sample application.

A small hierarchy of exceptions raised when the embedded proxy cannot be
started, when sample data cannot be generated and when read options are
combined in a way Spanner does not accept.
"""

from __future__ import annotations


class SampleError(Exception):
    """Base error for all sample application exceptions."""


class PGAdapterStartupError(SampleError):
    """Raised when the embedded PGAdapter does not start or never accepts connections."""

    def __init__(self, image: str, reason: str) -> None:
        super().__init__(f"PGAdapter from image '{image}' failed to start: {reason}")
        self.image = image


class NoParentRowsError(SampleError):
    """Raised when random child rows are requested but the parent table is empty."""

    def __init__(self, entity: str, parent: str) -> None:
        super().__init__(f"Cannot generate random {entity}: no {parent} found")
        self.entity = entity
        self.parent = parent


class InvalidReadOptionsError(SampleError):
    """Raised for timestamp bounds or directed read options that cannot be applied."""
