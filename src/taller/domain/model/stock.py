"""Stock classification.

Pure functions that turn a part's current and minimum stock into a
display bucket.  They never fail and have no side effects.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class StockBucket(Enum):
    NO_STOCK = "sin-stock"
    LOW = "stock-bajo"
    MEDIUM = "stock-medio"
    NORMAL = "stock-alto"


@dataclass(frozen=True)
class StockStatus:
    """Classification result; lower ``severity_rank`` is more urgent."""

    bucket: StockBucket
    severity_rank: int
    label: str
    color: str


_STATUSES = {
    StockBucket.NO_STOCK: StockStatus(StockBucket.NO_STOCK, 0, "Sin Stock", "#f44336"),
    StockBucket.LOW: StockStatus(StockBucket.LOW, 1, "Stock Bajo", "#ff9800"),
    StockBucket.MEDIUM: StockStatus(StockBucket.MEDIUM, 2, "Stock Medio", "#ffc107"),
    StockBucket.NORMAL: StockStatus(StockBucket.NORMAL, 3, "Stock Normal", "#4caf50"),
}


def stock_status(current: int, minimum: int) -> StockStatus:
    """Classify stock.  First matching rule wins:

    - ``current == 0``           -> NO_STOCK
    - ``current <= minimum``     -> LOW
    - ``current <= 2 * minimum`` -> MEDIUM
    - otherwise                  -> NORMAL
    """
    if current == 0:
        return _STATUSES[StockBucket.NO_STOCK]
    if current <= minimum:
        return _STATUSES[StockBucket.LOW]
    if current <= minimum * 2:
        return _STATUSES[StockBucket.MEDIUM]
    return _STATUSES[StockBucket.NORMAL]


# ---------------------------------------------------------------------------
# Alert panel scale
# ---------------------------------------------------------------------------


class AlertLevel(Enum):
    CRITICAL = ("SIN STOCK", "#d32f2f")
    DANGER = ("CRÍTICO", "#f57c00")
    WARNING = ("BAJO", "#ffa000")
    NORMAL = ("NORMAL", "#388e3c")

    @property
    def label(self) -> str:
        return self.value[0]

    @property
    def color(self) -> str:
        return self.value[1]


def alert_level(current: int, minimum: int) -> AlertLevel:
    """Finer-grained level used by the stock alert panel."""
    if current == 0:
        return AlertLevel.CRITICAL
    if current <= minimum * 0.5:
        return AlertLevel.DANGER
    if current <= minimum:
        return AlertLevel.WARNING
    return AlertLevel.NORMAL


def stock_percentage(current: int, minimum: int) -> int:
    """Current stock as a rounded percentage of the minimum (0 if no minimum)."""
    if minimum <= 0:
        return 0
    return round(current / minimum * 100)
