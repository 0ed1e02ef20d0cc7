"""Application service: editing a selection against a loaded catalog."""

from __future__ import annotations

from typing import Generic, TypeVar

from taller.application.catalog_access import CatalogAccess
from taller.domain.exceptions import EntityNotFoundError, ValidationError
from taller.domain.model.catalog import CatalogItem
from taller.domain.model.selection import QuantityResult, SelectedLine, Selection
from taller.domain.model.value_objects import Money

T = TypeVar("T", bound=CatalogItem)


class SelectionEditor(Generic[T]):
    """Pairs a Selection with the catalog it picks from.

    ``message`` explains an empty catalog: nothing exists, nothing has
    stock, no permission, or a generic failure.
    """

    def __init__(self, catalog: CatalogAccess[T], selection: Selection[T]) -> None:
        self._catalog = catalog
        self._selection = selection
        self._items: list[T] = []
        self._message = ""
        self._loaded = False

    @property
    def selection(self) -> Selection[T]:
        return self._selection

    @property
    def message(self) -> str:
        return self._message

    @property
    def loaded(self) -> bool:
        return self._loaded

    def load(self) -> None:
        result = self._catalog.load()
        policy = self._selection.policy
        self._items = [item for item in result.items if policy.is_offerable(item)]
        self._loaded = True

        if result.error:
            self._message = result.error
        elif not result.items:
            self._message = f"No {policy.label} available in the system"
        elif not self._items:
            self._message = f"No {policy.label} with available stock"
        else:
            self._message = ""

    def available_to_add(self) -> list[T]:
        return self._selection.available_to_add(self._items)

    # --- Delegated edits ------------------------------------------------------

    def add(self, item: T) -> SelectedLine | None:
        return self._selection.add(item)

    def add_by_id(self, item_id: int) -> SelectedLine | None:
        """Add a catalog item by ID.  Returns None if it was already selected."""
        if not self._loaded:
            self.load()
        for item in self._items:
            if item.id == item_id:
                return self._selection.add(item)
        label = self._selection.policy.label
        if any(item.id == item_id for item in self._catalog.load().items):
            raise ValidationError(f"Item #{item_id} cannot be selected: no stock available")
        raise EntityNotFoundError(f"No {label} with ID {item_id} in the catalog")

    def set_quantity(self, item_id: int, quantity: int) -> QuantityResult:
        return self._selection.set_quantity(item_id, quantity)

    def set_comment(self, item_id: int, comment: str) -> None:
        self._selection.set_comment(item_id, comment)

    def remove(self, item_id: int) -> None:
        self._selection.remove(item_id)

    def subtotal(self) -> Money:
        return self._selection.subtotal()
