"""Bottom-up consistency checks for a computed payout.

The validator only reports: each check is logged as passed or failed and
collected in a ``ValidationReport``; nothing is corrected or raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from quick_cash.config import MAX_ELEMENTS_PER_COMBINATION, MIN_ADJACENT_ELEMENTS
from quick_cash.rounding import is_multiple_of

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationCheck:
    name: str
    expected: object
    actual: object

    @property
    def passed(self) -> bool:
        return self.expected == self.actual

    def describe(self) -> str:
        if self.passed:
            return f"{self.name}: Passed"
        return f"{self.name}: FAILED ({self.actual} != {self.expected})"

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "expected": self.expected,
            "actual": self.actual,
            "passed": self.passed,
        }


@dataclass(frozen=True)
class ValidationReport:
    checks: tuple[ValidationCheck, ...]

    @property
    def passed(self) -> bool:
        return all(check.passed for check in self.checks)

    @property
    def failures(self) -> tuple[ValidationCheck, ...]:
        return tuple(check for check in self.checks if not check.passed)

    def to_dict(self) -> dict:
        return {
            "passed": self.passed,
            "checks": [check.to_dict() for check in self.checks],
        }


def _combination_checks(spin_number, combo_number, combination, max_elements, rounding_unit, coin_range=None):
    label = f"Spin {spin_number} combination {combo_number}"
    checks = [
        ValidationCheck(f"{label} cell total", combination.total_value, combination.cell_sum()),
    ]

    cell_count = len(combination.cells)
    within = MIN_ADJACENT_ELEMENTS <= cell_count <= max_elements
    checks.append(
        ValidationCheck(
            f"{label} cell count in [{MIN_ADJACENT_ELEMENTS}, {max_elements}]",
            True,
            within,
        )
    )

    if rounding_unit:
        off_unit = [cell.value for cell in combination.cells if not is_multiple_of(cell.value, rounding_unit)]
        checks.append(ValidationCheck(f"{label} values are multiples of {rounding_unit}", [], off_unit))

    if coin_range is not None:
        lo, hi = coin_range
        out_of_range = [cell.value for cell in combination.cells if not lo <= cell.value <= hi]
        checks.append(ValidationCheck(f"{label} values within [{lo}, {hi}]", [], out_of_range))
    return checks


def _disjointness_check(spin_number, spin, topology):
    seen = set()
    repeated = []
    out_of_bounds = []
    for combination in spin.combinations:
        for cell in combination.cells:
            if cell.index in seen:
                repeated.append(cell.index)
            seen.add(cell.index)
            if topology is not None and not 0 <= cell.index < topology.size:
                out_of_bounds.append(cell.index)

    checks = [ValidationCheck(f"Spin {spin_number} cells are disjoint", [], repeated)]
    if topology is not None:
        checks.append(ValidationCheck(f"Spin {spin_number} cells on board", [], out_of_bounds))
    return checks


def validate_result(
    spins,
    rounded_prize: int,
    topology=None,
    max_elements: int = MAX_ELEMENTS_PER_COMBINATION,
    rounding_unit: int | None = None,
    coin_range: tuple[int, int] | None = None,
) -> ValidationReport:
    """Recompute every level's sum and compare it with its parent."""

    logger.info("Running validation tests...")
    checks = []

    for spin_number, spin in enumerate(spins, start=1):
        for combo_number, combination in enumerate(spin.combinations, start=1):
            checks.extend(
                _combination_checks(
                    spin_number, combo_number, combination, max_elements, rounding_unit, coin_range
                )
            )
        checks.append(
            ValidationCheck(f"Combination total == Spin {spin_number}", spin.spin_value, spin.combination_sum())
        )
        checks.extend(_disjointness_check(spin_number, spin, topology))

    spin_total = sum(spin.spin_value for spin in spins)
    checks.append(ValidationCheck("Spin total == Base prize", rounded_prize, spin_total))

    for check in checks:
        if check.passed:
            logger.debug(check.describe())
        else:
            logger.error(check.describe())

    report = ValidationReport(checks=tuple(checks))
    logger.info(
        "Validation done: %s of %s checks passed",
        len(checks) - len(report.failures),
        len(checks),
    )
    return report


__all__ = [
    "ValidationCheck",
    "ValidationReport",
    "validate_result",
]
