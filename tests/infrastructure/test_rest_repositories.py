"""Tests for the REST repositories: paths and JSON mapping."""

import json
from datetime import datetime
from decimal import Decimal

import httpx

from taller.domain.model.catalog import Part, Service
from taller.domain.model.movement import MovementType
from taller.domain.model.value_objects import Money
from taller.domain.model.work_order import OrderStatus, WorkOrder
from taller.domain.model.work_session import PayloadLine
from taller.infrastructure.http.api_client import ApiClient
from taller.infrastructure.http.rest_catalog_repository import (
    RestPartRepository,
    RestServiceRepository,
)
from taller.infrastructure.http.rest_movement_repository import RestMovementRepository
from taller.infrastructure.http.rest_work_order_repository import RestWorkOrderRepository


class FakeBackend:
    """Answers (method, path) pairs with canned responses and records requests."""

    def __init__(self, routes: dict[tuple[str, str], httpx.Response]) -> None:
        self.routes = routes
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.path.removeprefix("/api"))
        return self.routes.get(key, httpx.Response(404))

    def client(self) -> ApiClient:
        return ApiClient("http://backend.test/api", transport=httpx.MockTransport(self))

    def body(self, index: int = -1) -> dict:
        return json.loads(self.requests[index].content)


SERVICE_JSON = {
    "idServicio": 4,
    "codigo": "MNT-01",
    "nombre": "Cambio de aceite",
    "descripcion": "Incluye filtro",
    "categoria": "MANTENIMIENTO",
    "precioBase": 45.5,
    "tiempoEstimadoMinutos": 30,
    "activo": True,
}

PART_JSON = {
    "idRepuesto": 8,
    "codigo": "FRE-01",
    "nombre": "Pastilla de freno",
    "categoria": "FRENOS",
    "stockActual": 3,
    "stockMinimo": 5,
    "precioUnitario": 35,
    "activo": False,
}


class TestRestServiceRepository:

    def test_list_active_maps_fields(self):
        backend = FakeBackend({("GET", "/servicios/estado/true"): httpx.Response(200, json=[SERVICE_JSON])})
        [service] = RestServiceRepository(backend.client()).list_active()
        assert service.id == 4
        assert service.code == "MNT-01"
        assert service.price == Money(Decimal("45.5"))
        assert service.estimated_minutes == 30
        assert service.category == "MANTENIMIENTO"

    def test_missing_fields_get_defaults(self):
        backend = FakeBackend({("GET", "/servicios"): httpx.Response(200, json=[{"idServicio": 1}])})
        [service] = RestServiceRepository(backend.client()).list_all()
        assert service.name == ""
        assert service.price == Money.zero()
        assert service.estimated_minutes == 60
        assert service.active is True

    def test_get_missing_returns_none(self):
        backend = FakeBackend({})
        assert RestServiceRepository(backend.client()).get_by_id(99) is None

    def test_exists_code(self):
        backend = FakeBackend({("GET", "/servicios/existe/codigo/MNT-01"): httpx.Response(200, json=True)})
        assert RestServiceRepository(backend.client()).exists_code("MNT-01") is True

    def test_create_posts_backend_fields(self):
        backend = FakeBackend({("POST", "/servicios"): httpx.Response(201, json={**SERVICE_JSON, "idServicio": 12})})
        service = Service(id=None, code="MNT-01", name="Cambio de aceite",
                          price=Money.of("45.50"), estimated_minutes=30)
        created = RestServiceRepository(backend.client()).create(service)
        assert created.id == 12
        body = backend.body()
        assert body["precioBase"] == 45.5
        assert body["tiempoEstimadoMinutos"] == 30
        assert "idServicio" not in body

    def test_update_puts_full_record(self):
        backend = FakeBackend({("PUT", "/servicios/4"): httpx.Response(200, json={**SERVICE_JSON, "activo": False})})
        service = Service(id=4, code="MNT-01", name="Cambio de aceite",
                          price=Money.of("45.5"), active=False)
        updated = RestServiceRepository(backend.client()).update(service)
        assert updated.active is False
        assert backend.body()["idServicio"] == 4
        assert backend.body()["activo"] is False

    def test_delete(self):
        backend = FakeBackend({("DELETE", "/servicios/4"): httpx.Response(204)})
        RestServiceRepository(backend.client()).delete(4)
        assert backend.requests[0].method == "DELETE"


class TestRestPartRepository:

    def test_list_active_maps_stock(self):
        backend = FakeBackend({("GET", "/repuestos/activo/true"): httpx.Response(200, json=[PART_JSON])})
        [part] = RestPartRepository(backend.client()).list_active()
        assert part.id == 8
        assert part.current_stock == 3
        assert part.minimum_stock == 5
        assert part.price == Money.of("35")
        assert part.active is False

    def test_zero_minimum_is_kept(self):
        raw = {**PART_JSON, "stockMinimo": 0}
        backend = FakeBackend({("GET", "/repuestos"): httpx.Response(200, json=[raw])})
        [part] = RestPartRepository(backend.client()).list_all()
        assert part.minimum_stock == 0

    def test_exists_code_path(self):
        backend = FakeBackend({("GET", "/repuestos/codigo/FRE-01/existe"): httpx.Response(200, json=False)})
        assert RestPartRepository(backend.client()).exists_code("FRE-01") is False

    def test_update_body(self):
        backend = FakeBackend({("PUT", "/repuestos/8"): httpx.Response(200, json=PART_JSON)})
        part = Part(id=8, code="FRE-01", name="Pastilla", price=Money.of("36.90"),
                    current_stock=3, minimum_stock=5)
        RestPartRepository(backend.client()).update(part)
        body = backend.body()
        assert body["precioUnitario"] == 36.9
        assert body["stockActual"] == 3
        assert body["idRepuesto"] == 8


class TestRestMovementRepository:

    MOVEMENT_JSON = {
        "idMovimiento": 31,
        "repuesto": {"idRepuesto": 8, "codigo": "FRE-01", "nombre": "Pastilla de freno"},
        "tipoMovimiento": "SALIDA",
        "cantidad": 2,
        "stockAnterior": 5,
        "stockNuevo": 3,
        "referencia": "OT-0007",
        "usuarioMovimiento": {"nombreCompleto": "Ana Torres"},
        "fechaMovimiento": "2024-05-10T14:30:00",
    }

    def test_list_all(self):
        backend = FakeBackend({("GET", "/repuesto-movimientos"): httpx.Response(200, json=[self.MOVEMENT_JSON])})
        [movement] = RestMovementRepository(backend.client()).list_all()
        assert movement.id == 31
        assert movement.part_id == 8
        assert movement.part_code == "FRE-01"
        assert movement.type is MovementType.EXIT
        assert movement.user_name == "Ana Torres"
        assert movement.timestamp == datetime(2024, 5, 10, 14, 30)

    def test_list_by_part_path(self):
        backend = FakeBackend({
            ("GET", "/repuesto-movimientos/buscar-por-repuesto-nativo/8"): httpx.Response(200, json=[]),
        })
        assert RestMovementRepository(backend.client()).list_by_part(8) == []

    def test_utc_suffix(self):
        raw = {**self.MOVEMENT_JSON, "fechaMovimiento": "2024-05-10T14:30:00Z"}
        backend = FakeBackend({("GET", "/repuesto-movimientos"): httpx.Response(200, json=[raw])})
        [movement] = RestMovementRepository(backend.client()).list_all()
        assert movement.timestamp.utcoffset().total_seconds() == 0


class TestRestWorkOrderRepository:

    ORDER_JSON = {
        "idOrden": 7,
        "numeroOrden": "OT-0007",
        "estado": "RECIBIDA",
        "moto": {"idMoto": 2, "placa": "1234-AB"},
        "problemaReportado": "Ruido al frenar",
    }

    def test_get_keeps_unknown_fields(self):
        backend = FakeBackend({("GET", "/ordenes-trabajo/7"): httpx.Response(200, json=self.ORDER_JSON)})
        order = RestWorkOrderRepository(backend.client()).get_by_id(7)
        assert order.status is OrderStatus.RECEIVED
        assert order.extra["moto"] == {"idMoto": 2, "placa": "1234-AB"}
        assert "idOrden" not in order.extra

    def test_update_sends_whole_order_with_new_status(self):
        backend = FakeBackend({("PUT", "/ordenes-trabajo/7"): httpx.Response(200, json={**self.ORDER_JSON, "estado": "EN_PROCESO"})})
        repo = RestWorkOrderRepository(backend.client())
        order = WorkOrder(id=7, number="OT-0007", status=OrderStatus.IN_PROGRESS,
                          extra={"problemaReportado": "Ruido al frenar"})
        updated = repo.update(order)
        assert updated.status is OrderStatus.IN_PROGRESS
        assert backend.body() == {
            "problemaReportado": "Ruido al frenar",
            "idOrden": 7,
            "numeroOrden": "OT-0007",
            "estado": "EN_PROCESO",
        }

    def test_record_service(self):
        backend = FakeBackend({("POST", "/detalles-orden"): httpx.Response(201, json={})})
        line = PayloadLine(item_id=4, quantity=2, price=Money.of("45.50"), comment="urgente")
        RestWorkOrderRepository(backend.client()).record_service(7, line)
        assert backend.body() == {
            "ordenTrabajo": {"idOrden": 7},
            "servicio": {"idServicio": 4},
            "precioAplicado": 91.0,
            "observaciones": "urgente",
        }

    def test_record_part_usage(self):
        backend = FakeBackend({("POST", "/usos-repuesto"): httpx.Response(201, json={})})
        line = PayloadLine(item_id=8, quantity=3, price=Money.of("12.50"))
        RestWorkOrderRepository(backend.client()).record_part_usage(7, line)
        assert backend.body() == {
            "ordenTrabajo": {"idOrden": 7},
            "repuesto": {"idRepuesto": 8},
            "cantidad": 3,
            "precioUnitario": 12.5,
            "subtotal": 37.5,
            "observaciones": "",
        }
