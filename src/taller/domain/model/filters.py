"""Filter criteria for the catalog list views.

Each criterion is an independent predicate; an item is kept only when
all of them hold.  A criterion left at its default (empty text, ALL,
open range, no bucket) is always satisfied.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Callable, Iterable, TypeVar

from taller.domain.exceptions import ValidationError
from taller.domain.model.catalog import CatalogItem
from taller.domain.model.stock import StockBucket

T = TypeVar("T", bound=CatalogItem)


class Activity(Enum):
    ALL = "all"
    ACTIVE = "active"
    INACTIVE = "inactive"


@dataclass(frozen=True)
class NumericRange:
    """Inclusive range; a None bound is open."""

    minimum: Decimal | int | None = None
    maximum: Decimal | int | None = None

    def __post_init__(self) -> None:
        if (
            self.minimum is not None
            and self.maximum is not None
            and self.minimum > self.maximum
        ):
            raise ValidationError(
                f"Range minimum {self.minimum} is greater than maximum {self.maximum}"
            )

    @property
    def is_open(self) -> bool:
        return self.minimum is None and self.maximum is None

    def contains(self, value: Decimal | int) -> bool:
        if self.minimum is not None and value < self.minimum:
            return False
        if self.maximum is not None and value > self.maximum:
            return False
        return True


# ---------------------------------------------------------------------------
# Shared predicates
# ---------------------------------------------------------------------------


def _matches_term(item: CatalogItem, term: str) -> bool:
    needle = term.lower()
    fields = (item.name, item.code, item.category, item.description)
    return any(needle in (value or "").lower() for value in fields)


def _matches_activity(item: CatalogItem, activity: Activity) -> bool:
    if activity is Activity.ALL:
        return True
    return item.active == (activity is Activity.ACTIVE)


@dataclass(frozen=True)
class _CatalogFilter:
    term: str = ""
    category: str = ""
    activity: Activity = Activity.ALL
    price: NumericRange = field(default_factory=NumericRange)

    def _predicates(self) -> list[Callable[[CatalogItem], bool]]:
        predicates: list[Callable[[CatalogItem], bool]] = []
        if self.term:
            predicates.append(lambda item: _matches_term(item, self.term))
        if self.category:
            predicates.append(lambda item: item.category == self.category)
        if self.activity is not Activity.ALL:
            predicates.append(lambda item: _matches_activity(item, self.activity))
        if not self.price.is_open:
            predicates.append(lambda item: self.price.contains(item.price.amount))
        return predicates

    def matches(self, item: T) -> bool:
        return all(predicate(item) for predicate in self._predicates())

    def apply(self, items: Iterable[T]) -> list[T]:
        predicates = self._predicates()
        return [item for item in items if all(p(item) for p in predicates)]

    def active_count(self) -> int:
        """Number of criteria that actually filter something."""
        return len(self._predicates())


@dataclass(frozen=True)
class ServiceFilter(_CatalogFilter):
    minutes: NumericRange = field(default_factory=NumericRange)

    def _predicates(self) -> list[Callable[[CatalogItem], bool]]:
        predicates = super()._predicates()
        if not self.minutes.is_open:
            predicates.append(
                lambda item: self.minutes.contains(item.estimated_minutes)  # type: ignore[attr-defined]
            )
        return predicates


@dataclass(frozen=True)
class PartFilter(_CatalogFilter):
    stock: StockBucket | None = None

    def _predicates(self) -> list[Callable[[CatalogItem], bool]]:
        predicates = super()._predicates()
        if self.stock is not None:
            predicates.append(
                lambda item: item.stock_status.bucket is self.stock  # type: ignore[attr-defined]
            )
        return predicates
