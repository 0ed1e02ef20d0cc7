"""Work order reference.

Orders are owned by the backend.  The only thing this package ever does
to one is move it to IN_PROGRESS when work starts, so the model keeps
the identifying fields and carries everything else through untouched.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any


class OrderStatus(Enum):
    RECEIVED = "RECIBIDA"
    DIAGNOSED = "DIAGNOSTICADA"
    IN_PROGRESS = "EN_PROCESO"
    COMPLETED = "COMPLETADA"
    DELIVERED = "ENTREGADA"
    CANCELLED = "CANCELADA"


@dataclass(frozen=True)
class WorkOrder:
    id: int
    number: str
    status: OrderStatus
    extra: dict[str, Any] = field(default_factory=dict, compare=False)

    def started(self) -> WorkOrder:
        """Copy of this order with status IN_PROGRESS."""
        return replace(self, status=OrderStatus.IN_PROGRESS)
