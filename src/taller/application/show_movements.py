"""Application service: Show Inventory Movements use case (query)."""

from __future__ import annotations

from taller.application.dto import MovementDTO
from taller.domain.model.movement import MovementFilter, StockMovement
from taller.domain.repository.movement_repository import MovementRepository


class ShowMovementsHandler:

    def __init__(self, movement_repo: MovementRepository) -> None:
        self._movement_repo = movement_repo

    def handle(self, criteria: MovementFilter | None = None) -> list[MovementDTO]:
        """Movements matching *criteria*, newest first.

        A part ID in the criteria narrows the backend query itself.
        """
        criteria = criteria or MovementFilter()
        if criteria.part_id is not None:
            movements = self._movement_repo.list_by_part(criteria.part_id)
        else:
            movements = self._movement_repo.list_all()

        movements = sorted(movements, key=lambda m: m.timestamp, reverse=True)
        return [self._to_dto(m) for m in criteria.apply(movements)]

    @staticmethod
    def _to_dto(movement: StockMovement) -> MovementDTO:
        return MovementDTO(
            id=movement.id,
            timestamp=movement.timestamp.strftime("%Y-%m-%d %H:%M"),
            part_code=movement.part_code,
            part_name=movement.part_name,
            type=movement.type.value,
            quantity=movement.signed_quantity,
            stock_before=movement.stock_before,
            stock_after=movement.stock_after,
            reference=movement.reference,
            user_name=movement.user_name,
        )
