"""Selection of catalog items for a work order.

A Selection is an ordered collection of SelectedLines, one per catalog
item.  Services and parts share the same collection; what differs
between them (price snapshot, stock ceiling, which catalog items can be
offered) lives in a SelectionPolicy.

Invariants:
- an item id appears at most once
- every line's quantity is >= 1
- a line with a recorded ``available_stock`` never exceeds it
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Iterator, TypeVar

from taller.domain.model.catalog import CatalogItem, Part, Service
from taller.domain.model.value_objects import Money

T = TypeVar("T", bound=CatalogItem)


@dataclass
class SelectedLine:
    """A catalog item picked for the order.

    ``unit_price`` is copied from the catalog when the line is created;
    later catalog price changes do not touch it.
    """

    item_id: int
    name: str
    unit_price: Money  # snapshot at add-time
    quantity: int = 1
    comment: str = ""
    description: str = ""
    available_stock: int | None = None  # parts only

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity


class QuantityError(Enum):
    NOT_SELECTED = "Item is not in the selection"
    BELOW_MINIMUM = "Quantity must be at least 1"
    ABOVE_STOCK = "Quantity exceeds available stock"


@dataclass(frozen=True)
class QuantityResult:
    """Outcome of a quantity edit: the updated line, or why nothing changed."""

    line: SelectedLine | None = None
    error: QuantityError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


# ---------------------------------------------------------------------------
# Policies
# ---------------------------------------------------------------------------


class SelectionPolicy(ABC, Generic[T]):
    """What makes a service selection differ from a parts selection."""

    label: str = "items"

    @abstractmethod
    def to_line(self, item: T) -> SelectedLine:
        """Build a fresh line (quantity 1, empty comment) for *item*."""

    def max_quantity(self, line: SelectedLine) -> int | None:
        """Upper bound for the line's quantity, or None when unbounded."""
        return None

    def is_offerable(self, item: T) -> bool:
        """Whether *item* may be offered for selection at all."""
        return True


class ServiceSelectionPolicy(SelectionPolicy[Service]):

    label = "services"

    def to_line(self, item: Service) -> SelectedLine:
        return SelectedLine(
            item_id=item.id,  # type: ignore[arg-type]
            name=item.name or "Unnamed service",
            description=item.description or "",
            unit_price=item.price,
        )


class PartSelectionPolicy(SelectionPolicy[Part]):

    label = "parts"

    def to_line(self, item: Part) -> SelectedLine:
        return SelectedLine(
            item_id=item.id,  # type: ignore[arg-type]
            name=item.name or "Unnamed part",
            description=item.description or "",
            unit_price=item.price,
            available_stock=item.current_stock,
        )

    def max_quantity(self, line: SelectedLine) -> int | None:
        return line.available_stock

    def is_offerable(self, item: Part) -> bool:
        return item.in_stock


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------


class Selection(Generic[T]):

    def __init__(self, policy: SelectionPolicy[T]) -> None:
        self._policy = policy
        self._lines: list[SelectedLine] = []

    @property
    def policy(self) -> SelectionPolicy[T]:
        return self._policy

    @property
    def lines(self) -> list[SelectedLine]:
        return list(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[SelectedLine]:
        return iter(list(self._lines))

    def is_empty(self) -> bool:
        return not self._lines

    def get(self, item_id: int) -> SelectedLine | None:
        for line in self._lines:
            if line.item_id == item_id:
                return line
        return None

    # --- Mutations ------------------------------------------------------------

    def add(self, item: T) -> SelectedLine | None:
        """Append a line for *item*.  Returns None if it is already selected."""
        if self.get(item.id) is not None:  # type: ignore[arg-type]
            return None
        line = self._policy.to_line(item)
        self._lines.append(line)
        return line

    def set_quantity(self, item_id: int, quantity: int) -> QuantityResult:
        """Change a line's quantity.  Out-of-range requests change nothing."""
        line = self.get(item_id)
        if line is None:
            return QuantityResult(error=QuantityError.NOT_SELECTED)
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            return QuantityResult(line=line, error=QuantityError.BELOW_MINIMUM)
        ceiling = self._policy.max_quantity(line)
        if ceiling is not None and quantity > ceiling:
            return QuantityResult(line=line, error=QuantityError.ABOVE_STOCK)
        line.quantity = quantity
        return QuantityResult(line=line)

    def set_comment(self, item_id: int, comment: str) -> None:
        line = self.get(item_id)
        if line is not None:
            line.comment = comment

    def remove(self, item_id: int) -> None:
        self._lines = [line for line in self._lines if line.item_id != item_id]

    def clear(self) -> None:
        self._lines = []

    # --- Derived state --------------------------------------------------------

    def available_to_add(self, catalog: list[T]) -> list[T]:
        """Catalog items that are offerable and not selected yet."""
        selected = {line.item_id for line in self._lines}
        return [
            item
            for item in catalog
            if item.id not in selected and self._policy.is_offerable(item)
        ]

    def subtotal(self) -> Money:
        return Money.sum(line.line_total for line in self._lines)
