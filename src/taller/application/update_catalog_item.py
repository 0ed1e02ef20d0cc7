"""Application service: Update catalog item use case.

Price changes, activation toggles and soft deletes for services and
parts alike.  Every change invalidates the catalog so the next list
is fetched again from the backend.
"""

from __future__ import annotations

import logging
from typing import Generic, TypeVar

from taller.application.catalog_access import CatalogAccess
from taller.domain.exceptions import EntityNotFoundError
from taller.domain.model.catalog import CatalogItem
from taller.domain.model.value_objects import Money

T = TypeVar("T", bound=CatalogItem)

logger = logging.getLogger(__name__)


class UpdateCatalogItemHandler(Generic[T]):

    def __init__(self, catalog: CatalogAccess[T]) -> None:
        self._catalog = catalog

    def set_price(self, item_id: int, new_price: str) -> T:
        """Update an item's price.

        Lines already selected for an order keep the price they were
        added at.
        """
        item = self._get(item_id)
        item.update_price(Money.of(new_price))
        return self._save(item)

    def set_active(self, item_id: int, active: bool) -> T:
        item = self._get(item_id)
        if active:
            item.activate()
        else:
            item.deactivate()
        return self._save(item)

    def toggle(self, item_id: int) -> T:
        item = self._get(item_id)
        if item.active:
            item.deactivate()
        else:
            item.activate()
        return self._save(item)

    def delete(self, item_id: int) -> None:
        self._get(item_id)
        self._catalog.repository.delete(item_id)
        self._catalog.invalidate()
        logger.info("Deleted %s #%s", self._catalog.label, item_id)

    # --- Internal helpers -----------------------------------------------------

    def _get(self, item_id: int) -> T:
        item = self._catalog.repository.get_by_id(item_id)
        if item is None:
            raise EntityNotFoundError(f"No {self._catalog.label} with ID {item_id}")
        return item

    def _save(self, item: T) -> T:
        saved = self._catalog.repository.update(item)
        self._catalog.invalidate()
        return saved
