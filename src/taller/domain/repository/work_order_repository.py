"""Abstract repository for work orders and the lines recorded on them."""

from __future__ import annotations

from abc import ABC, abstractmethod

from taller.domain.model.work_order import WorkOrder
from taller.domain.model.work_session import PayloadLine


class WorkOrderRepository(ABC):

    @abstractmethod
    def get_by_id(self, order_id: int) -> WorkOrder | None:
        """Return an order by its ID, or None if not found."""

    @abstractmethod
    def update(self, order: WorkOrder) -> WorkOrder:
        """Persist the order (status transition)."""

    @abstractmethod
    def record_service(self, order_id: int, line: PayloadLine) -> None:
        """Record a service applied to the order."""

    @abstractmethod
    def record_part_usage(self, order_id: int, line: PayloadLine) -> None:
        """Record a part used on the order."""
