"""Application services: list services and parts (queries).

Both read through CatalogAccess, so a list shown right after a create,
update or delete reflects the backend, never a local guess.
"""

from __future__ import annotations

from taller.application.catalog_access import CatalogAccess
from taller.application.dto import PartDTO, ServiceDTO
from taller.domain.model.catalog import Part, Service
from taller.domain.model.filters import PartFilter, ServiceFilter


class ListServicesHandler:

    def __init__(self, catalog: CatalogAccess[Service]) -> None:
        self._catalog = catalog

    def handle(self, criteria: ServiceFilter | None = None) -> list[ServiceDTO]:
        services = self._catalog.load_all()
        if criteria is not None:
            services = criteria.apply(services)
        return [self._to_dto(s) for s in services]

    @staticmethod
    def _to_dto(service: Service) -> ServiceDTO:
        return ServiceDTO(
            id=service.id,  # type: ignore[arg-type]
            code=service.code,
            name=service.name,
            category=service.category,
            category_color=service.category_color,
            price=str(service.price),
            estimated_time=str(service.duration),
            active=service.active,
        )


class ListPartsHandler:

    def __init__(self, catalog: CatalogAccess[Part]) -> None:
        self._catalog = catalog

    def handle(self, criteria: PartFilter | None = None) -> list[PartDTO]:
        parts = self._catalog.load_all()
        if criteria is not None:
            parts = criteria.apply(parts)
        return [self._to_dto(p) for p in parts]

    @staticmethod
    def _to_dto(part: Part) -> PartDTO:
        status = part.stock_status
        return PartDTO(
            id=part.id,  # type: ignore[arg-type]
            code=part.code,
            name=part.name,
            category=part.category,
            category_color=part.category_color,
            price=str(part.price),
            current_stock=part.current_stock,
            minimum_stock=part.minimum_stock,
            stock_label=status.label,
            stock_color=status.color,
            active=part.active,
        )
