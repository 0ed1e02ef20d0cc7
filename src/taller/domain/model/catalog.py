"""Catalog aggregates: workshop services and spare parts.

Both live in the backend's catalog and are read-only from the point of
view of an order being worked on.  Prices change and items get
switched on and off, but an order line always keeps the price it was
selected at.
"""

from __future__ import annotations

from dataclasses import dataclass

from taller.domain.exceptions import ValidationError
from taller.domain.model.category import part_category_color, service_category_color
from taller.domain.model.stock import StockStatus, stock_status
from taller.domain.model.value_objects import Duration, Money

DEFAULT_ESTIMATED_MINUTES = 60
DEFAULT_MINIMUM_STOCK = 5


@dataclass
class CatalogItem:
    """Fields shared by services and parts."""

    id: int | None
    code: str
    name: str
    price: Money
    category: str = ""
    description: str = ""
    active: bool = True

    def update_price(self, new_price: Money) -> None:
        """Change the catalog price.

        Lines already selected for an order keep their own snapshot.
        """
        if new_price.amount <= 0:
            raise ValidationError(f"Price of '{self.name}' must be greater than zero")
        self.price = new_price

    def activate(self) -> None:
        self.active = True

    def deactivate(self) -> None:
        self.active = False

    def validate(self) -> None:
        """Check the fields the backend requires on create/update."""
        if not self.code or not self.code.strip():
            raise ValidationError("Code is required")
        if not self.name or not self.name.strip():
            raise ValidationError("Name is required")
        if self.price.amount <= 0:
            raise ValidationError("Price must be greater than zero")


@dataclass
class Service(CatalogItem):
    """A labour service offered by the workshop."""

    estimated_minutes: int = DEFAULT_ESTIMATED_MINUTES

    @property
    def duration(self) -> Duration:
        return Duration(self.estimated_minutes)

    @property
    def category_color(self) -> str:
        return service_category_color(self.category)

    def validate(self) -> None:
        super().validate()
        if self.estimated_minutes <= 0:
            raise ValidationError("Estimated time must be positive")


@dataclass
class Part(CatalogItem):
    """A spare part (repuesto) held in inventory."""

    current_stock: int = 0
    minimum_stock: int = DEFAULT_MINIMUM_STOCK

    @property
    def stock_status(self) -> StockStatus:
        return stock_status(self.current_stock, self.minimum_stock)

    @property
    def in_stock(self) -> bool:
        return self.current_stock > 0

    @property
    def category_color(self) -> str:
        return part_category_color(self.category)

    def validate(self) -> None:
        super().validate()
        if self.current_stock < 0:
            raise ValidationError("Current stock cannot be negative")
        if self.minimum_stock < 0:
            raise ValidationError("Minimum stock cannot be negative")
