"""REST-backed implementations of ServiceRepository and PartRepository."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from taller.domain.exceptions import EntityNotFoundError
from taller.domain.model.catalog import (
    DEFAULT_ESTIMATED_MINUTES,
    DEFAULT_MINIMUM_STOCK,
    CatalogItem,
    Part,
    Service,
)
from taller.domain.model.value_objects import Money
from taller.domain.repository.catalog_repository import PartRepository, ServiceRepository
from taller.infrastructure.http.api_client import ApiClient

T = TypeVar("T", bound=CatalogItem)


class _RestCatalogRepository(ABC, Generic[T]):
    """Shared plumbing; subclasses supply paths and (de)serialization."""

    collection: str = ""
    active_path: str = ""

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    # --- CatalogRepository interface ------------------------------------------

    def list_all(self) -> list[T]:
        return [self._from_json(raw) for raw in self._client.get(self.collection) or []]

    def list_active(self) -> list[T]:
        return [self._from_json(raw) for raw in self._client.get(self.active_path) or []]

    def get_by_id(self, item_id: int) -> T | None:
        try:
            raw = self._client.get(f"{self.collection}/{item_id}")
        except EntityNotFoundError:
            return None
        return self._from_json(raw) if raw else None

    def exists_code(self, code: str) -> bool:
        return bool(self._client.get(self._exists_path(code)))

    def create(self, item: T) -> T:
        return self._from_json(self._client.post(self.collection, self._to_json(item)))

    def update(self, item: T) -> T:
        raw = self._client.put(f"{self.collection}/{item.id}", self._to_json(item))
        return self._from_json(raw) if raw else item

    def delete(self, item_id: int) -> None:
        self._client.delete(f"{self.collection}/{item_id}")

    # --- Serialization hooks --------------------------------------------------

    @abstractmethod
    def _exists_path(self, code: str) -> str:
        ...

    @abstractmethod
    def _from_json(self, raw: dict[str, Any]) -> T:
        ...

    @abstractmethod
    def _to_json(self, item: T) -> dict[str, Any]:
        ...


class RestServiceRepository(_RestCatalogRepository[Service], ServiceRepository):

    collection = "/servicios"
    active_path = "/servicios/estado/true"

    def _exists_path(self, code: str) -> str:
        return f"/servicios/existe/codigo/{code}"

    def _from_json(self, raw: dict[str, Any]) -> Service:
        return Service(
            id=raw.get("idServicio"),
            code=raw.get("codigo") or "",
            name=raw.get("nombre") or "",
            description=raw.get("descripcion") or "",
            category=raw.get("categoria") or "",
            price=Money.of(raw.get("precioBase") or raw.get("precio") or 0),
            estimated_minutes=int(raw.get("tiempoEstimadoMinutos") or DEFAULT_ESTIMATED_MINUTES),
            active=bool(raw.get("activo", True)),
        )

    def _to_json(self, item: Service) -> dict[str, Any]:
        raw: dict[str, Any] = {
            "codigo": item.code,
            "nombre": item.name,
            "descripcion": item.description,
            "categoria": item.category,
            "precioBase": float(item.price.amount),
            "tiempoEstimadoMinutos": item.estimated_minutes,
            "activo": item.active,
        }
        if item.id is not None:
            raw["idServicio"] = item.id
        return raw


class RestPartRepository(_RestCatalogRepository[Part], PartRepository):

    collection = "/repuestos"
    active_path = "/repuestos/activo/true"

    def _exists_path(self, code: str) -> str:
        return f"/repuestos/codigo/{code}/existe"

    def _from_json(self, raw: dict[str, Any]) -> Part:
        return Part(
            id=raw.get("idRepuesto"),
            code=raw.get("codigo") or "",
            name=raw.get("nombre") or "",
            description=raw.get("descripcion") or "",
            category=raw.get("categoria") or "",
            price=Money.of(raw.get("precioUnitario") or raw.get("precio") or 0),
            current_stock=int(raw.get("stockActual") or raw.get("stock") or 0),
            minimum_stock=int(
                raw["stockMinimo"] if raw.get("stockMinimo") is not None else DEFAULT_MINIMUM_STOCK
            ),
            active=bool(raw.get("activo", True)),
        )

    def _to_json(self, item: Part) -> dict[str, Any]:
        raw: dict[str, Any] = {
            "codigo": item.code,
            "nombre": item.name,
            "descripcion": item.description,
            "categoria": item.category,
            "precioUnitario": float(item.price.amount),
            "stockActual": item.current_stock,
            "stockMinimo": item.minimum_stock,
            "activo": item.active,
        }
        if item.id is not None:
            raw["idRepuesto"] = item.id
        return raw
