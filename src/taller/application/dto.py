"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  Money and durations
arrive already formatted for display.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ServiceDTO:
    id: int
    code: str
    name: str
    category: str
    category_color: str
    price: str  # formatted, e.g. "S/ 45.00"
    estimated_time: str  # formatted, e.g. "1h 30min"
    active: bool


@dataclass(frozen=True)
class PartDTO:
    id: int
    code: str
    name: str
    category: str
    category_color: str
    price: str
    current_stock: int
    minimum_stock: int
    stock_label: str
    stock_color: str
    active: bool


@dataclass(frozen=True)
class StockAlertDTO:
    part_id: int
    code: str
    name: str
    current_stock: int
    minimum_stock: int
    level: str
    color: str
    percentage: int


@dataclass(frozen=True)
class StockAlertsDTO:
    no_stock: list[StockAlertDTO]
    low_stock: list[StockAlertDTO]

    @property
    def total(self) -> int:
        return len(self.no_stock) + len(self.low_stock)


@dataclass(frozen=True)
class MovementDTO:
    id: int
    timestamp: str
    part_code: str
    part_name: str
    type: str
    quantity: int  # signed by the movement's effect on stock
    stock_before: int
    stock_after: int
    reference: str
    user_name: str


@dataclass(frozen=True)
class StartWorkResult:
    order_id: int
    order_number: str
    status: str
    services_recorded: int
    parts_recorded: int
    total: str
    failures: list[str] = field(default_factory=list)
