import json

import pytest

from quick_cash.config import (
    QUICK_CASH_STANDARD,
    CoinValueRange,
    QuickCashConfig,
    config_from_mapping,
    load_config,
)
from quick_cash.errors import InvalidConfiguration

CONTRACT = {
    "wager": 100,
    "basePrize": 15000,
    "maxSpins": 10,
    "maxCombinations": 3,
    "maxAdjacentElements": 7,
    "coinValueRanges": [
        {"wager": 100, "minCoinValue": 500, "maxCoinValue": 5000},
    ],
}


def test_mapping_uses_external_contract_keys():
    config = config_from_mapping(CONTRACT)
    assert config.base_prize == 15000
    assert config.max_combinations == 3
    assert config.coin_value_ranges == (CoinValueRange(100, 500, 5000),)
    assert config.grid_size == 15


def test_mapping_accepts_snake_case_keys():
    config = config_from_mapping({"wager": 50, "base_prize": 2000, "max_spins": 4, "max_combinations": 2})
    assert config.max_spins == 4
    assert config.coin_value_ranges == ()


def test_unknown_keys_are_rejected():
    with pytest.raises(InvalidConfiguration):
        config_from_mapping({**CONTRACT, "jackpot": True})


def test_missing_keys_are_rejected():
    with pytest.raises(InvalidConfiguration):
        config_from_mapping({"wager": 100})


@pytest.mark.parametrize(
    "overrides",
    [
        {"wager": 0},
        {"max_spins": 1},
        {"max_combinations": 0},
        {"max_adjacent_elements": 2},
        {"base_prize": -1},
        {"rounding_unit": 0},
    ],
)
def test_invalid_values_are_rejected(overrides):
    values = {"wager": 100, "base_prize": 15000, "max_spins": 10, "max_combinations": 3}
    values.update(overrides)
    with pytest.raises(InvalidConfiguration):
        QuickCashConfig(**values)


def test_negative_coin_values_are_rejected():
    with pytest.raises(InvalidConfiguration):
        CoinValueRange(wager=100, min_coin_value=-500, max_coin_value=5000)


def test_coin_range_lookup_is_exact():
    assert QUICK_CASH_STANDARD.coin_range_for(100).max_coin_value == 5000
    assert QUICK_CASH_STANDARD.coin_range_for(99) is None


def test_load_config_reads_json(tmp_path):
    path = tmp_path / "quick_cash.json"
    path.write_text(json.dumps(CONTRACT), encoding="utf-8")
    assert load_config(path) == config_from_mapping(CONTRACT)


def test_load_config_rejects_bad_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{wager: 100", encoding="utf-8")
    with pytest.raises(InvalidConfiguration):
        load_config(path)
