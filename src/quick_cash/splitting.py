"""Constrained random partitioning of prize values.

A total is split by sampling every part but the last from a band around
the running average of what is left, snapping each part to the rounding
unit, and giving the last part the (rounded) remainder. An attempt whose
parts drift from the total or leave the floor/ceiling is discarded and
resampled; the number of attempts is capped.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable

from quick_cash.config import (
    MAX_CHUNK_MULTIPLIER,
    MIN_ADJACENT_ELEMENTS,
    MIN_CHUNK_MULTIPLIER,
    SPLIT_MAX_ATTEMPTS,
)
from quick_cash.errors import SplitNonConvergence, WarningCode, emit_warning
from quick_cash.rounding import round_to_nearest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CellBounds:
    """Per-cell value bounds snapped to the rounding unit."""

    min_cell: int
    max_cell: int

    @classmethod
    def from_coin_range(cls, min_coin: float, max_coin: float, rounding_unit: int) -> "CellBounds":
        min_cell = max(rounding_unit, round_to_nearest(min_coin, rounding_unit))
        max_cell = max(rounding_unit, round_to_nearest(max_coin, rounding_unit))
        return cls(min_cell=min_cell, max_cell=max_cell)

    @property
    def inverted(self) -> bool:
        return self.min_cell > self.max_cell

    @property
    def floor_cell(self) -> int:
        """Smallest value a cell can actually receive."""

        return min(self.min_cell, self.max_cell)

    @property
    def min_combination(self) -> int:
        """Smallest value a combination of the minimum size can hold."""

        return MIN_ADJACENT_ELEMENTS * self.floor_cell


def sample_band(
    remaining: float,
    parts_left: int,
    min_unit: int,
    max_unit: int,
    *,
    floor: int = 0,
    ceiling: int | None = None,
) -> tuple[int, int, bool]:
    """Return ``(min_chunk, max_chunk, inverted)`` for the next part.

    An inverted band has its lower end clamped down to the upper end. The
    band is then clamped into the window that still lets the parts after
    this one land within ``[floor, ceiling]``.
    """

    average = remaining / parts_left
    min_chunk = max(int(min_unit), int(average * MIN_CHUNK_MULTIPLIER))
    max_chunk = min(int(max_unit), int(average * MAX_CHUNK_MULTIPLIER))
    inverted = min_chunk > max_chunk
    if inverted:
        min_chunk = max_chunk

    others = parts_left - 1
    low = floor
    high = remaining - floor * others
    if ceiling is not None:
        low = max(low, remaining - ceiling * others)
        high = min(high, ceiling)
    if low <= high:
        min_chunk = min(max(min_chunk, low), high)
        max_chunk = min(max(max_chunk, low), high)
    return int(min_chunk), int(max_chunk), inverted


def _attempt_split(total, parts, min_unit, max_unit, rounding_unit, rng, floor, ceiling):
    values = []
    remaining = total
    inverted = False

    for i in range(parts - 1):
        min_chunk, max_chunk, band_inverted = sample_band(
            remaining, parts - i, min_unit, max_unit, floor=floor, ceiling=ceiling
        )
        inverted = inverted or band_inverted

        value = round_to_nearest(rng.randint(min_chunk, max_chunk), rounding_unit)
        values.append(value)
        remaining -= value

    values.append(round_to_nearest(remaining, rounding_unit))
    return values, inverted


def split_total(
    total: int,
    parts: int,
    min_unit: int,
    max_unit: int,
    rounding_unit: int,
    *,
    floor: int = 0,
    ceiling: int | None = None,
    accept: Callable[[list[int]], bool] | None = None,
    rng: random.Random | None = None,
    max_attempts: int = SPLIT_MAX_ATTEMPTS,
    warnings=None,
) -> list[int]:
    """Split ``total`` into ``parts`` rounded values that sum exactly to it.

    Every part is a multiple of ``rounding_unit``, at least ``floor`` and,
    when given, at most ``ceiling``; the last part is held to the same
    bounds as the others. ``accept`` may reject an otherwise valid split.
    Raises ``SplitNonConvergence`` when no attempt out of ``max_attempts``
    is accepted.
    """

    rng = rng or random
    total = int(total)
    parts = int(parts)
    if parts <= 0:
        raise ValueError(f"parts must be positive, got {parts}")
    if total % rounding_unit != 0:
        # Rounded parts always add up to a multiple of the unit.
        raise SplitNonConvergence(total, parts, 0)

    for attempt in range(1, max_attempts + 1):
        values, inverted = _attempt_split(
            total, parts, min_unit, max_unit, rounding_unit, rng, floor, ceiling
        )
        if sum(values) != total or min(values) < floor:
            continue
        if ceiling is not None and max(values) > ceiling:
            continue
        if accept is not None and not accept(values):
            continue

        if inverted:
            emit_warning(
                logger,
                warnings,
                WarningCode.BOUND_INVERSION,
                f"Split of {total} into {parts} parts hit an inverted band "
                f"(min unit {min_unit} > max unit {max_unit}); clamped to the upper bound",
            )
        if attempt > 1:
            logger.debug("Split %s into %s parts after %s attempts", total, parts, attempt)
        return values

    raise SplitNonConvergence(total, parts, max_attempts)


def split_prize_into_spins(
    total: int,
    spins: int,
    rounding_unit: int,
    *,
    floor: int = 0,
    ceiling: int | None = None,
    rng: random.Random | None = None,
    max_attempts: int = SPLIT_MAX_ATTEMPTS,
    warnings=None,
) -> list[int]:
    """Split the rounded prize into spin values using a purely proportional band."""

    return split_total(
        total,
        spins,
        0,
        total,
        rounding_unit,
        floor=floor,
        ceiling=ceiling,
        rng=rng,
        max_attempts=max_attempts,
        warnings=warnings,
    )


def split_spin_into_combinations(
    spin_value: int,
    count: int,
    bounds: CellBounds,
    max_elements: int,
    rounding_unit: int,
    *,
    accept: Callable[[list[int]], bool] | None = None,
    rng: random.Random | None = None,
    max_attempts: int = SPLIT_MAX_ATTEMPTS,
    warnings=None,
) -> list[int]:
    """Split a spin value into combination totals.

    Each total must fill at least a minimum-size combination and at most
    what ``max_elements`` cells of maximum value can hold.
    """

    capacity = bounds.max_cell * max_elements
    return split_total(
        spin_value,
        count,
        bounds.min_combination,
        capacity,
        rounding_unit,
        floor=bounds.min_combination,
        ceiling=capacity,
        accept=accept,
        rng=rng,
        max_attempts=max_attempts,
        warnings=warnings,
    )


def split_combination_into_cells(
    total: int,
    coin_count: int,
    bounds: CellBounds,
    rounding_unit: int,
    *,
    rng: random.Random | None = None,
    max_attempts: int = SPLIT_MAX_ATTEMPTS,
    warnings=None,
) -> list[int]:
    """Split a combination total into per-cell coin values within the coin range."""

    return split_total(
        total,
        coin_count,
        bounds.min_cell,
        bounds.max_cell,
        rounding_unit,
        floor=bounds.floor_cell,
        ceiling=bounds.max_cell,
        rng=rng,
        max_attempts=max_attempts,
        warnings=warnings,
    )


__all__ = [
    "CellBounds",
    "sample_band",
    "split_total",
    "split_prize_into_spins",
    "split_spin_into_combinations",
    "split_combination_into_cells",
]
