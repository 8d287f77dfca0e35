"""Quick Cash prize splitting: spins, combinations and cell values on a fixed board."""

from quick_cash.config import CoinValueRange, QuickCashConfig, QUICK_CASH_STANDARD
from quick_cash.engine import QuickCashEngine, calculate_split
from quick_cash.errors import InvalidConfiguration, QuickCashError, SplitNonConvergence
from quick_cash.models import CellAssignment, CoinColor, Combination, PayoutResult, SpinPlan

__version__ = "0.1.0"

__all__ = [
    "CellAssignment",
    "CoinColor",
    "CoinValueRange",
    "Combination",
    "InvalidConfiguration",
    "PayoutResult",
    "QUICK_CASH_STANDARD",
    "QuickCashConfig",
    "QuickCashEngine",
    "QuickCashError",
    "SpinPlan",
    "SplitNonConvergence",
    "calculate_split",
]
