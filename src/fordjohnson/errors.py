"""
Exception types raised by the fordjohnson package.

Public API (stable):
    FordJohnsonError
    InvalidInput
"""

from __future__ import annotations

from typing import Any

__all__ = ["FordJohnsonError", "InvalidInput"]


class FordJohnsonError(Exception):
    """Base class for all errors raised by this package."""


class InvalidInput(FordJohnsonError, ValueError):
    """
    A value handed to the sorter (or the CLI) is outside the accepted domain.

    Attributes
    ----------
    token : Any
        The offending token or element, as received.
    reason : str
        Short human-readable explanation.
    """

    def __init__(self, token: Any, reason: str) -> None:
        self.token = token
        self.reason = reason
        super().__init__(f"invalid input {token!r}: {reason}")
