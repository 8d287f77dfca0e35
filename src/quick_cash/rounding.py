"""Snap monetary values to the prize rounding unit."""

from __future__ import annotations


def round_to_nearest(value: float, unit: int) -> int:
    """Round ``value`` to the nearest multiple of ``unit`` (ties to even)."""

    return int(round(value / unit)) * unit


def is_multiple_of(value: int, unit: int) -> bool:
    return value % unit == 0


__all__ = ["round_to_nearest", "is_multiple_of"]
