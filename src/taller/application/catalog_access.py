"""Catalog access shared by every consumer of a catalog.

Wraps one CatalogRepository with a read-through cache and the
"active items first, all items as fallback" loading rule.  Consumers
get it injected instead of each fetching the catalog on their own.
Mutations elsewhere must call ``invalidate()`` so the next read goes
back to the backend.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from taller.domain.exceptions import (
    EntityNotFoundError,
    GatewayError,
    PermissionDeniedError,
)
from taller.domain.model.catalog import CatalogItem
from taller.domain.repository.catalog_repository import CatalogRepository

T = TypeVar("T", bound=CatalogItem)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CatalogLoad(Generic[T]):
    """Result of loading a catalog for selection.

    ``error`` is a user-facing message when nothing could be loaded.
    ``degraded`` is True when the active-only fetch failed and the full
    catalog was used instead.
    """

    items: list[T] = field(default_factory=list)
    error: str | None = None
    degraded: bool = False


class CatalogAccess(Generic[T]):

    def __init__(self, repo: CatalogRepository[T], label: str) -> None:
        self._repo = repo
        self._label = label
        self._selectable: CatalogLoad[T] | None = None
        self._all: list[T] | None = None

    @property
    def label(self) -> str:
        return self._label

    @property
    def repository(self) -> CatalogRepository[T]:
        return self._repo

    def load(self) -> CatalogLoad[T]:
        """Items to offer for selection.

        Tries the active items; on any backend error retries once with
        the whole catalog.  If that fails too, returns an empty load with
        a message (permission problems get their own).  Failed loads are
        not cached.
        """
        if self._selectable is not None:
            return self._selectable

        degraded = False
        try:
            items = self._repo.list_active()
        except (GatewayError, EntityNotFoundError) as exc:
            logger.warning(
                "Could not load active %s (%s); falling back to full catalog",
                self._label,
                exc,
            )
            degraded = True
            try:
                items = self._repo.list_all()
            except PermissionDeniedError:
                logger.error("Permission denied loading %s", self._label)
                return CatalogLoad(
                    error=(
                        f"You do not have permission to access {self._label}. "
                        "Contact the administrator."
                    ),
                    degraded=True,
                )
            except (GatewayError, EntityNotFoundError) as exc:
                logger.error("Could not load %s: %s", self._label, exc)
                return CatalogLoad(
                    error=f"Unexpected error loading {self._label}",
                    degraded=True,
                )

        self._selectable = CatalogLoad(items=list(items), degraded=degraded)
        logger.debug("Loaded %d %s", len(items), self._label)
        return self._selectable

    def load_all(self) -> list[T]:
        """The complete catalog, active and inactive.  Errors propagate."""
        if self._all is None:
            self._all = list(self._repo.list_all())
        return list(self._all)

    def invalidate(self) -> None:
        self._selectable = None
        self._all = None
