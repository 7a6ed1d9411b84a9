"""Shared vocabulary: operation direction and the error hierarchy."""

from __future__ import annotations

import enum

__all__ = [
    "Direction",
    "GeodesyError",
    "BadParameterError",
    "MissingParameterError",
    "NotFoundError",
]


class Direction(enum.Enum):
    """Which way a two-way operation should run."""

    FWD = "fwd"
    INV = "inv"

    def inverted(self) -> Direction:
        """Return the opposite direction."""
        return Direction.INV if self is Direction.FWD else Direction.FWD


class GeodesyError(Exception):
    """Base class for all errors raised by this package."""


class MissingParameterError(GeodesyError):
    """A required operator parameter was not given."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Missing required parameter '{key}'")


class BadParameterError(GeodesyError):
    """An operator parameter was given a malformed or unusable value."""

    def __init__(self, key: str, value: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Malformed value for parameter '{key}': '{value}'")


class NotFoundError(GeodesyError):
    """An operator could not be found."""

    def __init__(self, name: str, detail: str = "") -> None:
        self.name = name
        self.detail = detail
        super().__init__(f"Operator '{name}' not found{detail}")