"""Abstract repositories for the catalog aggregates.

Defined in the domain layer so the domain never depends on
infrastructure.  The concrete implementation talks to the workshop's
REST backend.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from taller.domain.model.catalog import CatalogItem, Part, Service

T = TypeVar("T", bound=CatalogItem)


class CatalogRepository(ABC, Generic[T]):

    @abstractmethod
    def list_all(self) -> list[T]:
        """Return every item, active or not."""

    @abstractmethod
    def list_active(self) -> list[T]:
        """Return only active items."""

    @abstractmethod
    def get_by_id(self, item_id: int) -> T | None:
        """Return an item by its ID, or None if not found."""

    @abstractmethod
    def exists_code(self, code: str) -> bool:
        """True if an item with this unique code already exists."""

    @abstractmethod
    def create(self, item: T) -> T:
        """Persist a new item and return it with its assigned ID."""

    @abstractmethod
    def update(self, item: T) -> T:
        """Persist changes to an existing item."""

    @abstractmethod
    def delete(self, item_id: int) -> None:
        """Soft-delete an item."""


class ServiceRepository(CatalogRepository[Service], ABC):
    """Catalog of workshop services."""


class PartRepository(CatalogRepository[Part], ABC):
    """Catalog of spare parts."""
