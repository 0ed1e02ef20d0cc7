"""Abstract repository for inventory movements (read-only)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from taller.domain.model.movement import StockMovement


class MovementRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[StockMovement]:
        """Return every recorded movement."""

    @abstractmethod
    def list_by_part(self, part_id: int) -> list[StockMovement]:
        """Return the movements of a single part."""
