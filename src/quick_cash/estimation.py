"""Spin count heuristic and coin value range lookup."""

from __future__ import annotations

import logging
import math

from quick_cash.config import (
    BASE_MAX_PRIZE,
    BASE_WAGER,
    HIGH_PRIZE_MIN_SPINS,
    HIGH_PRIZE_RATIO_THRESHOLD,
    QuickCashConfig,
)
from quick_cash.errors import GenerationWarning, InvalidConfiguration, WarningCode, emit_warning

logger = logging.getLogger(__name__)


def prize_ratio(wager: int, prize: float) -> float:
    """Return ``prize`` as a fraction of the maximum prize scaled to ``wager``."""

    if wager <= 0:
        raise InvalidConfiguration(f"wager must be positive to scale the max prize, got {wager}")

    scaling_factor = wager / BASE_WAGER
    scaled_max_prize = BASE_MAX_PRIZE * scaling_factor
    return prize / scaled_max_prize


def estimate_spin_count(wager: int, prize: float, max_spins: int) -> int:
    """Estimate how many spins a prize should be spread across.

    Prizes at or above the high-prize threshold use a fixed spin count;
    smaller ones get a share of ``max_spins`` proportional to the prize
    ratio, clamped to ``[1, max_spins - 1]``.
    """

    ratio = prize_ratio(wager, prize)
    if ratio >= HIGH_PRIZE_RATIO_THRESHOLD:
        return HIGH_PRIZE_MIN_SPINS

    spins = math.floor(max_spins * ratio)
    return max(1, min(max_spins - 1, spins))


def resolve_coin_value_range(
    config: QuickCashConfig,
    min_spins: int,
    wager: int | None = None,
    base_prize: float | None = None,
    warnings: list[GenerationWarning] | None = None,
) -> tuple[float, float]:
    """Return ``(min_coin, max_coin)`` for the wager.

    Falls back to ``(base_prize / min_spins, base_prize)`` when no range
    is configured for the wager.
    """

    wager = config.wager if wager is None else wager
    base_prize = config.base_prize if base_prize is None else base_prize
    coin_range = config.coin_range_for(wager)
    if coin_range is not None:
        return float(coin_range.min_coin_value), float(coin_range.max_coin_value)

    emit_warning(
        logger,
        warnings,
        WarningCode.CONFIGURATION_MISSING,
        f"No coin value range found for wager {wager}; "
        f"defaulting to base prize / min spins ({min_spins})",
    )
    return base_prize / min_spins, float(base_prize)


__all__ = [
    "prize_ratio",
    "estimate_spin_count",
    "resolve_coin_value_range",
]
