"""Quick Cash constants, configuration record and config-provider helpers."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final

from quick_cash.errors import InvalidConfiguration

# Spin count heuristic
BASE_WAGER: Final[float] = 100.0
BASE_MAX_PRIZE: Final[float] = 30000.0
HIGH_PRIZE_RATIO_THRESHOLD: Final[float] = 0.9
HIGH_PRIZE_MIN_SPINS: Final[int] = 5

# Splitting
PRIZE_ROUNDING_FACTOR: Final[int] = 500
MIN_CHUNK_MULTIPLIER: Final[float] = 0.8
MAX_CHUNK_MULTIPLIER: Final[float] = 1.2
SPLIT_MAX_ATTEMPTS: Final[int] = 10_000

# Combinations
MIN_ADJACENT_ELEMENTS: Final[int] = 3
MAX_ELEMENTS_PER_COMBINATION: Final[int] = 7
COMBINATION_COUNT_CAP: Final[int] = 4

# Board
GRID_ROWS: Final[int] = 3
GRID_COLUMNS: Final[int] = 5
CLUSTER_MAX_TRIALS: Final[int] = 10


def normalize_range_config(min_value, max_value, label):
    """Validate and normalize a non-negative integer [min, max] range."""

    min_value = int(min_value)
    max_value = int(max_value)
    if min_value < 0 or max_value < 0:
        raise InvalidConfiguration(f"{label} cannot be negative")
    return min_value, max_value


@dataclass(frozen=True)
class CoinValueRange:
    """Inclusive bound on a single cell's value for one wager tier."""

    wager: int
    min_coin_value: int
    max_coin_value: int

    def __post_init__(self):
        min_value, max_value = normalize_range_config(
            self.min_coin_value,
            self.max_coin_value,
            f"coin value range for wager {self.wager}",
        )
        object.__setattr__(self, "wager", int(self.wager))
        object.__setattr__(self, "min_coin_value", min_value)
        object.__setattr__(self, "max_coin_value", max_value)


@dataclass(frozen=True)
class QuickCashConfig:
    """Read-only inputs of one payout computation."""

    wager: int
    base_prize: float
    max_spins: int
    max_combinations: int
    max_adjacent_elements: int = 0
    coin_value_ranges: tuple[CoinValueRange, ...] = field(default_factory=tuple)
    grid_rows: int = GRID_ROWS
    grid_columns: int = GRID_COLUMNS
    rounding_unit: int = PRIZE_ROUNDING_FACTOR

    def __post_init__(self):
        object.__setattr__(self, "coin_value_ranges", tuple(self.coin_value_ranges))

        if self.wager <= 0:
            raise InvalidConfiguration(f"wager must be positive, got {self.wager}")
        if self.base_prize < 0:
            raise InvalidConfiguration(f"base prize cannot be negative, got {self.base_prize}")
        if self.max_spins < 2:
            raise InvalidConfiguration(f"max spins must be at least 2, got {self.max_spins}")
        if self.max_combinations < 1:
            raise InvalidConfiguration(
                f"max combinations must be at least 1, got {self.max_combinations}"
            )
        if 0 < self.max_adjacent_elements < MIN_ADJACENT_ELEMENTS or self.max_adjacent_elements < 0:
            raise InvalidConfiguration(
                f"max adjacent elements must be 0 or at least {MIN_ADJACENT_ELEMENTS}, "
                f"got {self.max_adjacent_elements}"
            )
        if self.grid_rows < 1 or self.grid_columns < 1:
            raise InvalidConfiguration("grid needs at least one row and one column")
        if self.grid_rows * self.grid_columns < MIN_ADJACENT_ELEMENTS:
            raise InvalidConfiguration(
                f"grid must hold at least {MIN_ADJACENT_ELEMENTS} cells"
            )
        if self.rounding_unit <= 0:
            raise InvalidConfiguration(
                f"rounding unit must be positive, got {self.rounding_unit}"
            )

    @property
    def grid_size(self) -> int:
        return self.grid_rows * self.grid_columns

    def coin_range_for(self, wager: int) -> CoinValueRange | None:
        """Return the first range configured for exactly ``wager``."""

        for coin_range in self.coin_value_ranges:
            if coin_range.wager == wager:
                return coin_range
        return None


QUICK_CASH_STANDARD: Final[QuickCashConfig] = QuickCashConfig(
    wager=100,
    base_prize=15000,
    max_spins=10,
    max_combinations=4,
    max_adjacent_elements=7,
    coin_value_ranges=(
        CoinValueRange(wager=10, min_coin_value=500, max_coin_value=1500),
        CoinValueRange(wager=50, min_coin_value=500, max_coin_value=3000),
        CoinValueRange(wager=100, min_coin_value=500, max_coin_value=5000),
        CoinValueRange(wager=200, min_coin_value=1000, max_coin_value=10000),
    ),
)

_CONFIG_KEYS = {
    "wager": "wager",
    "basePrize": "base_prize",
    "maxSpins": "max_spins",
    "maxCombinations": "max_combinations",
    "maxAdjacentElements": "max_adjacent_elements",
    "coinValueRanges": "coin_value_ranges",
    "gridRows": "grid_rows",
    "gridColumns": "grid_columns",
    "roundingUnit": "rounding_unit",
}

_RANGE_KEYS = {
    "wager": "wager",
    "minCoinValue": "min_coin_value",
    "maxCoinValue": "max_coin_value",
}


def _snake_case_keys(data, key_map, label):
    known = set(key_map) | set(key_map.values())
    unknown = sorted(key for key in data if key not in known)
    if unknown:
        raise InvalidConfiguration(f"unknown {label} keys: {', '.join(unknown)}")
    return {key_map.get(key, key): value for key, value in data.items()}


def config_from_mapping(data) -> QuickCashConfig:
    """Build a config from the external data contract (camelCase or snake_case keys)."""

    values = _snake_case_keys(data, _CONFIG_KEYS, "config")
    ranges = []
    for raw_range in values.pop("coin_value_ranges", ()):
        ranges.append(CoinValueRange(**_snake_case_keys(raw_range, _RANGE_KEYS, "coin value range")))

    try:
        return QuickCashConfig(coin_value_ranges=tuple(ranges), **values)
    except TypeError as exc:
        raise InvalidConfiguration(f"incomplete config: {exc}") from exc


def load_config(path) -> QuickCashConfig:
    """Read a JSON config file written in the external data contract."""

    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise InvalidConfiguration(f"{path} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise InvalidConfiguration(f"{path} must contain a JSON object")
    return config_from_mapping(data)


__all__ = [
    "BASE_WAGER",
    "BASE_MAX_PRIZE",
    "HIGH_PRIZE_RATIO_THRESHOLD",
    "HIGH_PRIZE_MIN_SPINS",
    "PRIZE_ROUNDING_FACTOR",
    "MIN_CHUNK_MULTIPLIER",
    "MAX_CHUNK_MULTIPLIER",
    "SPLIT_MAX_ATTEMPTS",
    "MIN_ADJACENT_ELEMENTS",
    "MAX_ELEMENTS_PER_COMBINATION",
    "COMBINATION_COUNT_CAP",
    "GRID_ROWS",
    "GRID_COLUMNS",
    "CLUSTER_MAX_TRIALS",
    "CoinValueRange",
    "QuickCashConfig",
    "QUICK_CASH_STANDARD",
    "normalize_range_config",
    "config_from_mapping",
    "load_config",
]
