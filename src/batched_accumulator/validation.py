"""Argument validation helpers."""

from __future__ import annotations

import numbers


def is_natural_number(value: object) -> bool:
    """
    Check whether a value is a natural number (an integer >= 1).

    Booleans are rejected even though ``bool`` subclasses ``int``. Floats are
    rejected outright, including integral-valued ones such as ``4.0``, along
    with ``nan`` and ``inf``.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        return False
    return value >= 1
