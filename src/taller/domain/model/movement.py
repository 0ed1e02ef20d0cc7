"""Inventory movement history.

Movements are recorded by the backend whenever a part's stock changes.
This side only reads and filters them.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from enum import Enum


class MovementType(Enum):
    ENTRY = "ENTRADA"
    EXIT = "SALIDA"
    ADJUSTMENT = "AJUSTE"
    RETURN = "DEVOLUCION"
    TRANSFER = "TRANSFERENCIA"
    SHRINKAGE = "MERMA"
    INVENTORY_COUNT = "INVENTARIO"

    @property
    def direction(self) -> int:
        """+1 if the movement adds stock, -1 if it removes it, 0 otherwise."""
        if self in (MovementType.ENTRY, MovementType.RETURN):
            return 1
        if self in (MovementType.EXIT, MovementType.SHRINKAGE):
            return -1
        return 0


@dataclass(frozen=True)
class StockMovement:
    id: int
    part_id: int
    part_code: str
    part_name: str
    type: MovementType
    quantity: int
    stock_before: int
    stock_after: int
    timestamp: datetime
    reference: str = ""
    user_name: str = ""

    @property
    def signed_quantity(self) -> int:
        """Quantity with the sign of its effect; neutral types keep it unsigned."""
        if self.type.direction < 0:
            return -self.quantity
        return self.quantity


@dataclass(frozen=True)
class MovementFilter:
    """Criteria for the movement history view.

    Every field is optional; unset fields do not filter.  Date bounds
    cover whole days on both ends.
    """

    term: str = ""
    part_id: int | None = None
    type: MovementType | None = None
    date_from: date | None = None
    date_to: date | None = None

    def matches(self, movement: StockMovement) -> bool:
        if self.term:
            needle = self.term.lower()
            haystack = (
                movement.part_code,
                movement.part_name,
                movement.reference,
                movement.user_name,
            )
            if not any(needle in (field or "").lower() for field in haystack):
                return False

        if self.part_id is not None and movement.part_id != self.part_id:
            return False

        if self.type is not None and movement.type is not self.type:
            return False

        stamp = movement.timestamp.replace(tzinfo=None)
        if self.date_from is not None and stamp < datetime.combine(self.date_from, time.min):
            return False
        if self.date_to is not None and stamp > datetime.combine(self.date_to, time.max):
            return False

        return True

    def apply(self, movements: list[StockMovement]) -> list[StockMovement]:
        return [m for m in movements if self.matches(m)]
