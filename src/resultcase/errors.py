"""Exceptions raised at the boundary between Result values and raising code."""

from __future__ import annotations


class FailureError(Exception):
    """Exception wrapping a non-exception Failure payload for raising.

    Raised by Failure.get_or_throw() when the stored error cannot be raised
    directly (e.g. a string or a dict). The original payload is kept intact.
    """

    __slots__ = ("error",)

    def __init__(self, error: object) -> None:
        self.error = error
        super().__init__(f"Failure: {error!r}")
