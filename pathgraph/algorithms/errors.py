"""Errors raised by the path-finding algorithms."""

from __future__ import annotations


class AlgorithmError(Exception):
    """Base class for failures of a path query."""


class CannotFindPathError(AlgorithmError):
    """No path can be produced for the requested endpoints.

    Attributes:
        reason: Human-readable explanation. Informational only.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class CannotFindClosestNodeError(AlgorithmError):
    """The frontier ran dry while the search still expected a member."""

    def __init__(self, message: str = "Frontier is empty") -> None:
        super().__init__(message)
