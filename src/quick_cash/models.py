"""Immutable records describing a computed payout."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class CoinColor(Enum):
    A = "A"
    B = "B"
    C = "C"


@dataclass(frozen=True)
class CellAssignment:
    index: int
    value: int
    color: CoinColor

    def to_dict(self) -> dict:
        return {"index": self.index, "value": self.value, "color": self.color.value}


@dataclass(frozen=True)
class Combination:
    """A colored group of cells whose values add up to ``total_value``."""

    color: CoinColor
    total_value: int
    cells: tuple[CellAssignment, ...]

    @property
    def indices(self) -> tuple[int, ...]:
        return tuple(cell.index for cell in self.cells)

    def cell_sum(self) -> int:
        return sum(cell.value for cell in self.cells)

    def to_dict(self) -> dict:
        return {
            "color": self.color.value,
            "totalValue": self.total_value,
            "cells": [cell.to_dict() for cell in self.cells],
        }


@dataclass(frozen=True)
class SpinPlan:
    """One spin: a board layout made of combinations."""

    spin_value: int
    combinations: tuple[Combination, ...]

    def board(self) -> dict[int, int]:
        """Map each occupied cell index to its value."""

        return {cell.index: cell.value for combo in self.combinations for cell in combo.cells}

    def combination_sum(self) -> int:
        return sum(combo.total_value for combo in self.combinations)

    def to_dict(self) -> dict:
        return {
            "spinValue": self.spin_value,
            "combinations": [combo.to_dict() for combo in self.combinations],
        }


@dataclass(frozen=True)
class PayoutResult:
    """Everything produced by one payout computation."""

    wager: int
    base_prize: float
    rounded_prize: int
    spin_count: int
    coin_range: tuple[int, int]
    spins: tuple[SpinPlan, ...]
    validation: object = None
    warnings: tuple = field(default_factory=tuple)

    @property
    def passed(self) -> bool:
        return self.validation is None or self.validation.passed

    def spin_total(self) -> int:
        return sum(spin.spin_value for spin in self.spins)

    def to_dict(self) -> dict:
        data = {
            "wager": self.wager,
            "basePrize": self.base_prize,
            "roundedPrize": self.rounded_prize,
            "spinCount": self.spin_count,
            "coinRange": list(self.coin_range),
            "spins": [spin.to_dict() for spin in self.spins],
            "warnings": [str(warning) for warning in self.warnings],
        }
        if self.validation is not None:
            data["validation"] = self.validation.to_dict()
        return data


__all__ = [
    "CoinColor",
    "CellAssignment",
    "Combination",
    "SpinPlan",
    "PayoutResult",
]
