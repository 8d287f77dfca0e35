"""Errors and recoverable-warning records raised or collected by Quick Cash."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum


class QuickCashError(Exception):
    """Base class for failures of a payout computation."""


class InvalidConfiguration(QuickCashError, ValueError):
    """The configuration cannot describe a valid payout."""


class SplitNonConvergence(QuickCashError, RuntimeError):
    """A constrained split never produced an exact-sum result."""

    def __init__(self, total: int, parts: int, attempts: int):
        super().__init__(
            f"could not split {total} into {parts} parts within {attempts} attempts"
        )
        self.total = total
        self.parts = parts
        self.attempts = attempts


class WarningCode(Enum):
    CONFIGURATION_MISSING = "configuration_missing"
    RESOURCE_EXHAUSTION = "resource_exhaustion"
    CLUSTERING_DEGRADED = "clustering_degraded"
    BOUND_INVERSION = "bound_inversion"
    SPIN_COUNT_REDUCED = "spin_count_reduced"


@dataclass(frozen=True)
class GenerationWarning:
    """A recovered condition that degraded the result without failing it."""

    code: WarningCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


def emit_warning(logger: logging.Logger, warnings: list | None, code: WarningCode, message: str) -> None:
    """Log a recovered condition and append it to ``warnings`` when given."""

    logger.warning(message)
    if warnings is not None:
        warnings.append(GenerationWarning(code, message))


__all__ = [
    "QuickCashError",
    "InvalidConfiguration",
    "SplitNonConvergence",
    "WarningCode",
    "GenerationWarning",
    "emit_warning",
]
