import logging
import math
import random

from quick_cash.boards import allocate_cluster
from quick_cash.config import (
    COMBINATION_COUNT_CAP,
    MAX_ELEMENTS_PER_COMBINATION,
    MIN_ADJACENT_ELEMENTS,
)
from quick_cash.errors import SplitNonConvergence, WarningCode, emit_warning
from quick_cash.models import CellAssignment, CoinColor, Combination, SpinPlan
from quick_cash.splitting import split_combination_into_cells, split_spin_into_combinations

logger = logging.getLogger(__name__)


class CombinationAssembler:
    """Lays out one spin's value as colored combinations of board cells."""

    def __init__(self, config, bounds, topology, rng=None, warnings=None):
        self.config = config
        self.bounds = bounds
        self.topology = topology
        self.rng = rng or random
        self.warnings = warnings
        self.max_elements = MAX_ELEMENTS_PER_COMBINATION
        if config.max_adjacent_elements > 0:
            self.max_elements = min(self.max_elements, config.max_adjacent_elements)
        self.combination_capacity = self.max_elements * bounds.max_cell

    def _count_upper(self):
        # Exclusive upper end of the combination count draw.
        return max(min(self.config.max_combinations, COMBINATION_COUNT_CAP), 2)

    def spin_capacity(self):
        """Largest spin value one board can carry without breaking the coin range."""

        combinations = min(self._count_upper() - 1, self.topology.size // MIN_ADJACENT_ELEMENTS)
        cells = min(combinations * self.max_elements, self.topology.size)
        return cells * self.bounds.max_cell

    def coins_needed(self, total):
        """Fewest coins that carry ``total`` within the coin range, or None."""

        fewest = max(MIN_ADJACENT_ELEMENTS, math.ceil(total / self.bounds.max_cell))
        most = min(self.max_elements, total // self.bounds.floor_cell)
        if fewest > most:
            return None
        return fewest

    def fits_board(self, totals):
        needed = [self.coins_needed(total) for total in totals]
        return None not in needed and sum(needed) <= self.topology.size

    def choose_combination_count(self, spin_value):
        upper = self._count_upper()
        count = self.rng.randrange(1, upper)

        # Every combination needs room for its minimum number of coins, and
        # together they must hold the spin without a cell above the ceiling.
        fewest = math.ceil(spin_value / self.combination_capacity)
        most = min(
            upper - 1,
            spin_value // self.bounds.min_combination,
            self.topology.size // MIN_ADJACENT_ELEMENTS,
        )
        if fewest > most:
            raise SplitNonConvergence(spin_value, fewest, 0)

        clamped = min(max(count, fewest), most)
        if clamped != count:
            logger.debug(
                "Adjusting combinations for spin %s from %s to %s", spin_value, count, clamped
            )
        return clamped

    @staticmethod
    def pick_color(used_colors, rng):
        for color in CoinColor:
            if color not in used_colors:
                return color
        return rng.choice(list(CoinColor))

    def coin_count_bounds(self, total, claimed_count, reserved=0):
        low = max(MIN_ADJACENT_ELEMENTS, math.ceil(total / self.bounds.max_cell))
        max_by_value = low
        max_by_space = self.topology.size - claimed_count - reserved
        max_allowed = self.config.max_adjacent_elements or self.topology.size
        max_coins = min(max_by_space, max_by_value, max_allowed)

        upper = min(max_coins, MAX_ELEMENTS_PER_COMBINATION, total // self.bounds.floor_cell)
        if upper < low:
            emit_warning(
                logger,
                self.warnings,
                WarningCode.RESOURCE_EXHAUSTION,
                f"Combination of {total} needs {low} coins but only {upper} fit "
                f"({max_by_space} cells free)",
            )
            raise SplitNonConvergence(total, low, 0)
        return low, upper

    def assemble_spin(self, spin_value):
        count = self.choose_combination_count(spin_value)
        totals = split_spin_into_combinations(
            spin_value,
            count,
            self.bounds,
            self.max_elements,
            self.config.rounding_unit,
            accept=self.fits_board,
            rng=self.rng,
            warnings=self.warnings,
        )
        needed = [self.coins_needed(total) for total in totals]

        claimed = set()
        used_colors = []
        combinations = []
        for position, total in enumerate(totals):
            color = self.pick_color(used_colors, self.rng)
            used_colors.append(color)

            combination = self._build_combination(
                total, color, claimed, reserved=sum(needed[position + 1:])
            )
            claimed.update(combination.indices)
            combinations.append(combination)

        return SpinPlan(spin_value=spin_value, combinations=tuple(combinations))

    def _build_combination(self, total, color, claimed, reserved):
        low, high = self.coin_count_bounds(total, len(claimed), reserved)
        coin_count = self.rng.randint(low, high)

        values = split_combination_into_cells(
            total,
            coin_count,
            self.bounds,
            self.config.rounding_unit,
            rng=self.rng,
            warnings=self.warnings,
        )
        indices = allocate_cluster(
            coin_count, claimed, self.topology, rng=self.rng, warnings=self.warnings
        )
        if len(indices) < len(values):
            raise SplitNonConvergence(total, coin_count, 0)

        cells = tuple(
            CellAssignment(index=index, value=value, color=color)
            for index, value in zip(indices, values)
        )
        return Combination(color=color, total_value=total, cells=cells)
