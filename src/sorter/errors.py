"""
Error types for the sorting library.

There is exactly one: `PreconditionError`. It signals a programming error on
the caller's side (wrong argument type, out-of-bounds range) and is never
caught inside the library.
"""

from __future__ import annotations

__all__ = ["PreconditionError"]


class PreconditionError(Exception):
    """A sort entry point was called with arguments that break its contract."""
