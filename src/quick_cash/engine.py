import logging
import random

from quick_cash.assembler import CombinationAssembler
from quick_cash.errors import InvalidConfiguration, WarningCode, emit_warning
from quick_cash.estimation import estimate_spin_count, resolve_coin_value_range
from quick_cash.layout import GridTopology
from quick_cash.models import PayoutResult
from quick_cash.report import format_frame_splits
from quick_cash.rounding import round_to_nearest
from quick_cash.splitting import CellBounds, split_prize_into_spins
from quick_cash.validation import validate_result

logger = logging.getLogger(__name__)


class QuickCashEngine:
    """Splits a prize into spins, combinations and cell values for one config."""

    def __init__(self, config, rng=None):
        self.config = config
        self.rng = rng or random.Random()
        self.topology = GridTopology(config.grid_rows, config.grid_columns)

    def calculate_split(self, wager=None, base_prize=None):
        config = self.config
        wager = config.wager if wager is None else wager
        base_prize = config.base_prize if base_prize is None else base_prize
        unit = config.rounding_unit
        warnings = []

        min_spins = estimate_spin_count(wager, base_prize, config.max_spins)
        min_coin, max_coin = resolve_coin_value_range(
            config, min_spins, wager=wager, base_prize=base_prize, warnings=warnings
        )
        logger.info(
            "Wager: %s, Base Prize: %s, Min Spins: %s, Min Coin Value: %s, Max Coin Value: %s",
            wager,
            base_prize,
            min_spins,
            min_coin,
            max_coin,
        )

        bounds = CellBounds.from_coin_range(min_coin, max_coin, unit)
        if bounds.inverted:
            emit_warning(
                logger,
                warnings,
                WarningCode.BOUND_INVERSION,
                f"Coin range {bounds.min_cell}-{bounds.max_cell} is inverted; "
                f"cells are clamped to {bounds.max_cell}",
            )

        rounded_prize = round_to_nearest(base_prize, unit)
        if rounded_prize < bounds.min_combination:
            raise InvalidConfiguration(
                f"Rounded prize {rounded_prize} is below the smallest combination "
                f"value {bounds.min_combination}"
            )

        spin_count = min_spins
        supported = rounded_prize // bounds.min_combination
        if spin_count > supported:
            emit_warning(
                logger,
                warnings,
                WarningCode.SPIN_COUNT_REDUCED,
                f"Prize {rounded_prize} supports only {supported} spins; reducing from {spin_count}",
            )
            spin_count = supported

        assembler = CombinationAssembler(config, bounds, self.topology, rng=self.rng, warnings=warnings)
        spin_capacity = assembler.spin_capacity()
        if rounded_prize > spin_count * spin_capacity:
            raise InvalidConfiguration(
                f"Rounded prize {rounded_prize} does not fit {spin_count} spins of at most "
                f"{spin_capacity} with coins up to {bounds.max_cell}"
            )

        spin_values = split_prize_into_spins(
            rounded_prize,
            spin_count,
            unit,
            floor=bounds.min_combination,
            ceiling=spin_capacity,
            rng=self.rng,
            warnings=warnings,
        )

        spins = []
        for spin_value in spin_values:
            spin = assembler.assemble_spin(spin_value)
            logger.info(
                "Spin Value: %s, Combinations Used: %s, Frame Splits: %s",
                spin_value,
                len(spin.combinations),
                format_frame_splits(spin, self.topology.size),
            )
            spins.append(spin)

        validation = validate_result(
            spins,
            rounded_prize,
            topology=self.topology,
            max_elements=assembler.max_elements,
            rounding_unit=unit,
            coin_range=(bounds.floor_cell, bounds.max_cell),
        )
        return PayoutResult(
            wager=wager,
            base_prize=base_prize,
            rounded_prize=rounded_prize,
            spin_count=spin_count,
            coin_range=(bounds.min_cell, bounds.max_cell),
            spins=tuple(spins),
            validation=validation,
            warnings=tuple(warnings),
        )


def calculate_split(config, seed=None, rng=None, wager=None, base_prize=None):
    """Run one payout computation; ``seed`` makes it reproducible."""

    if rng is None and seed is not None:
        rng = random.Random(seed)
    return QuickCashEngine(config, rng=rng).calculate_split(wager=wager, base_prize=base_prize)
