from __future__ import annotations


class PointSetError(Exception):
    """Base class for errors raised by pointsets."""


class InvalidArgumentError(PointSetError, ValueError):
    """Raised when a point set cannot be built from the given input."""
