"""Table-driven sine and cosine at whole-degree resolution."""

from __future__ import annotations

import math

PI = 3.1415926

_TABLE_SIZE = 361


def _build_table(func) -> tuple[float, ...]:
    # Entries are kept to eight significant digits, one per whole degree 0..360.
    return tuple(
        float(f"{func(math.radians(degree)):.7e}") for degree in range(_TABLE_SIZE)
    )


SIN_TABLE: tuple[float, ...] = _build_table(math.sin)
COS_TABLE: tuple[float, ...] = tuple(
    0.0 if degree == 90 else value
    for degree, value in enumerate(_build_table(math.cos))
)


def _radians_to_index(radians: float) -> int:
    # Truncate toward zero first, then wrap into 0..359.
    return int(radians * 180.0 / PI) % 360


def _degrees_to_index(degrees: int) -> int:
    return int(degrees) % 360


def fast_sin(radians: float) -> float:
    """Sine of an angle in radians, truncated to a whole degree."""
    return SIN_TABLE[_radians_to_index(radians)]


def fast_cos(radians: float) -> float:
    """Cosine of an angle in radians, truncated to a whole degree."""
    return COS_TABLE[_radians_to_index(radians)]


def dfast_sin(degrees: int) -> float:
    """Sine of a whole number of degrees; any integer is accepted."""
    return SIN_TABLE[_degrees_to_index(degrees)]


def dfast_cos(degrees: int) -> float:
    """Cosine of a whole number of degrees; any integer is accepted."""
    return COS_TABLE[_degrees_to_index(degrees)]