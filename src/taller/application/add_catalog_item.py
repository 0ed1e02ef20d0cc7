"""Application services: Add Service / Add Part use cases."""

from __future__ import annotations

import logging
from typing import Generic, TypeVar

from taller.application.catalog_access import CatalogAccess
from taller.domain.exceptions import ValidationError
from taller.domain.model.catalog import (
    DEFAULT_ESTIMATED_MINUTES,
    DEFAULT_MINIMUM_STOCK,
    CatalogItem,
    Part,
    Service,
)
from taller.domain.model.value_objects import Money

T = TypeVar("T", bound=CatalogItem)

logger = logging.getLogger(__name__)


class _AddCatalogItemHandler(Generic[T]):

    def __init__(self, catalog: CatalogAccess[T]) -> None:
        self._catalog = catalog

    def _create(self, item: T) -> T:
        item.code = item.code.strip().upper()
        item.name = item.name.strip()
        item.validate()

        repo = self._catalog.repository
        if repo.exists_code(item.code):
            raise ValidationError(f"Code '{item.code}' is already in use")

        created = repo.create(item)
        self._catalog.invalidate()
        logger.info("Created %s %s (#%s)", self._catalog.label, created.code, created.id)
        return created


class AddServiceHandler(_AddCatalogItemHandler[Service]):

    def handle(
        self,
        code: str,
        name: str,
        price: str,
        category: str = "",
        description: str = "",
        estimated_minutes: int = DEFAULT_ESTIMATED_MINUTES,
    ) -> Service:
        """Add a new service to the catalog."""
        service = Service(
            id=None,
            code=code or "",
            name=name or "",
            price=Money.of(price),
            category=category,
            description=description,
            estimated_minutes=estimated_minutes,
        )
        return self._create(service)


class AddPartHandler(_AddCatalogItemHandler[Part]):

    def handle(
        self,
        code: str,
        name: str,
        price: str,
        category: str = "",
        description: str = "",
        current_stock: int = 0,
        minimum_stock: int = DEFAULT_MINIMUM_STOCK,
    ) -> Part:
        """Add a new spare part to the catalog."""
        part = Part(
            id=None,
            code=code or "",
            name=name or "",
            price=Money.of(price),
            category=category,
            description=description,
            current_stock=current_stock,
            minimum_stock=minimum_stock,
        )
        return self._create(part)
