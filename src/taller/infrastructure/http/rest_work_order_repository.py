"""REST-backed implementation of WorkOrderRepository."""

from __future__ import annotations

from typing import Any

from taller.domain.exceptions import EntityNotFoundError
from taller.domain.model.work_order import OrderStatus, WorkOrder
from taller.domain.model.work_session import PayloadLine
from taller.domain.repository.work_order_repository import WorkOrderRepository
from taller.infrastructure.http.api_client import ApiClient

_OWN_FIELDS = ("idOrden", "numeroOrden", "estado")


class RestWorkOrderRepository(WorkOrderRepository):

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    # --- WorkOrderRepository interface ----------------------------------------

    def get_by_id(self, order_id: int) -> WorkOrder | None:
        try:
            raw = self._client.get(f"/ordenes-trabajo/{order_id}")
        except EntityNotFoundError:
            return None
        return self._from_json(raw) if raw else None

    def update(self, order: WorkOrder) -> WorkOrder:
        raw = self._client.put(f"/ordenes-trabajo/{order.id}", self._to_json(order))
        return self._from_json(raw) if raw else order

    def record_service(self, order_id: int, line: PayloadLine) -> None:
        # One detail row per service; quantity is folded into the applied price.
        self._client.post(
            "/detalles-orden",
            {
                "ordenTrabajo": {"idOrden": order_id},
                "servicio": {"idServicio": line.item_id},
                "precioAplicado": float(line.subtotal.amount),
                "observaciones": line.comment,
            },
        )

    def record_part_usage(self, order_id: int, line: PayloadLine) -> None:
        self._client.post(
            "/usos-repuesto",
            {
                "ordenTrabajo": {"idOrden": order_id},
                "repuesto": {"idRepuesto": line.item_id},
                "cantidad": line.quantity,
                "precioUnitario": float(line.price.amount),
                "subtotal": float(line.subtotal.amount),
                "observaciones": line.comment,
            },
        )

    # --- Serialization helpers ------------------------------------------------

    @staticmethod
    def _from_json(raw: dict[str, Any]) -> WorkOrder:
        return WorkOrder(
            id=raw["idOrden"],
            number=raw.get("numeroOrden") or str(raw["idOrden"]),
            status=OrderStatus(raw["estado"]),
            extra={k: v for k, v in raw.items() if k not in _OWN_FIELDS},
        )

    @staticmethod
    def _to_json(order: WorkOrder) -> dict[str, Any]:
        return {
            **order.extra,
            "idOrden": order.id,
            "numeroOrden": order.number,
            "estado": order.status.value,
        }
