"""REST-backed implementation of MovementRepository."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from taller.domain.model.movement import MovementType, StockMovement
from taller.domain.repository.movement_repository import MovementRepository
from taller.infrastructure.http.api_client import ApiClient


class RestMovementRepository(MovementRepository):

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    # --- MovementRepository interface -----------------------------------------

    def list_all(self) -> list[StockMovement]:
        return self._parse_all(self._client.get("/repuesto-movimientos"))

    def list_by_part(self, part_id: int) -> list[StockMovement]:
        return self._parse_all(
            self._client.get(f"/repuesto-movimientos/buscar-por-repuesto-nativo/{part_id}")
        )

    # --- Serialization helpers ------------------------------------------------

    def _parse_all(self, raw: list[dict[str, Any]] | None) -> list[StockMovement]:
        return [self._from_json(item) for item in raw or []]

    @staticmethod
    def _from_json(raw: dict[str, Any]) -> StockMovement:
        part = raw.get("repuesto") or {}
        user = raw.get("usuarioMovimiento") or {}
        return StockMovement(
            id=raw["idMovimiento"],
            part_id=part.get("idRepuesto") or raw.get("idRepuesto") or 0,
            part_code=part.get("codigo") or "",
            part_name=part.get("nombre") or "",
            type=MovementType(raw["tipoMovimiento"]),
            quantity=int(raw.get("cantidad") or 0),
            stock_before=int(raw.get("stockAnterior") or 0),
            stock_after=int(raw.get("stockNuevo") or 0),
            reference=raw.get("referencia") or "",
            user_name=user.get("nombreCompleto") or "",
            timestamp=_parse_timestamp(raw["fechaMovimiento"]),
        )


def _parse_timestamp(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))
