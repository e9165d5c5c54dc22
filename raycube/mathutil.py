"""Small numeric helpers."""

from __future__ import annotations


def clamp(value: int, low: int, high: int) -> int:
    """Limit ``value`` to ``[low, high]``.

    The lower bound is applied first, so when ``low > high`` the result is ``high``.
    """
    return min(max(value, low), high)