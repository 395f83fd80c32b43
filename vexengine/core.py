"""Engine-wide helpers: assertions and bit flags."""

from __future__ import annotations


class EngineError(Exception):
    """Raised when an engine invariant is violated."""


def vex_assert(condition: object, message: str) -> None:
    """Raise :class:`EngineError` with ``message`` when ``condition`` is falsy."""
    if not condition:
        raise EngineError(f"Assertion Failed: {message}")


def bit(x: int) -> int:
    """Return an integer with only bit ``x`` set."""
    if x < 0:
        raise ValueError("bit index must not be negative")
    return 1 << x