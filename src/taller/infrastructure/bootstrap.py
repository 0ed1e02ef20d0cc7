"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache

from taller.application.catalog_access import CatalogAccess
from taller.domain.model.catalog import Part, Service
from taller.infrastructure.http.api_client import ApiClient
from taller.infrastructure.http.rest_catalog_repository import (
    RestPartRepository,
    RestServiceRepository,
)
from taller.infrastructure.http.rest_movement_repository import RestMovementRepository
from taller.infrastructure.http.rest_work_order_repository import (
    RestWorkOrderRepository,
)
from taller.infrastructure.settings import settings


@lru_cache(maxsize=1)
def api_client() -> ApiClient:
    return ApiClient(
        base_url=settings.API_BASE_URL,
        token=settings.API_TOKEN,
        timeout=settings.HTTP_TIMEOUT,
    )


def service_repository() -> RestServiceRepository:
    return RestServiceRepository(api_client())


def part_repository() -> RestPartRepository:
    return RestPartRepository(api_client())


def movement_repository() -> RestMovementRepository:
    return RestMovementRepository(api_client())


def work_order_repository() -> RestWorkOrderRepository:
    return RestWorkOrderRepository(api_client())


def service_catalog() -> CatalogAccess[Service]:
    return CatalogAccess(service_repository(), label="services")


def part_catalog() -> CatalogAccess[Part]:
    return CatalogAccess(part_repository(), label="parts")
