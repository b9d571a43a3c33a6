"""Floor division helpers shared by every calendar formula."""
from __future__ import annotations

from operator import index as _index

__all__ = ["div", "mod"]


def div(a: int, b: int) -> int:
    """Return ``a / b`` rounded toward negative infinity.

    ``div(-1, 4) == -1``. Raises ``ZeroDivisionError`` when ``b`` is zero and
    ``TypeError`` for non-integer operands.
    """

    return _index(a) // _index(b)


def mod(a: int, b: int) -> int:
    """Return ``a - b * div(a, b)``; the result carries the sign of ``b``."""

    return _index(a) % _index(b)
