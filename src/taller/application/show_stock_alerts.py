"""Application service: Show Stock Alerts use case (query).

Active parts that are out of stock, and active parts at or below their
minimum but not empty.  Within each group the most urgent come first.
"""

from __future__ import annotations

from taller.application.catalog_access import CatalogAccess
from taller.application.dto import StockAlertDTO, StockAlertsDTO
from taller.domain.model.catalog import Part
from taller.domain.model.stock import alert_level, stock_percentage


class ShowStockAlertsHandler:

    def __init__(self, catalog: CatalogAccess[Part]) -> None:
        self._catalog = catalog

    def handle(self) -> StockAlertsDTO:
        parts = [p for p in self._catalog.load_all() if p.active]

        no_stock = [p for p in parts if p.current_stock == 0]
        low_stock = [
            p for p in parts
            if 0 < p.current_stock <= p.minimum_stock
        ]
        low_stock.sort(key=lambda p: stock_percentage(p.current_stock, p.minimum_stock))

        return StockAlertsDTO(
            no_stock=[self._to_dto(p) for p in no_stock],
            low_stock=[self._to_dto(p) for p in low_stock],
        )

    @staticmethod
    def _to_dto(part: Part) -> StockAlertDTO:
        level = alert_level(part.current_stock, part.minimum_stock)
        return StockAlertDTO(
            part_id=part.id,  # type: ignore[arg-type]
            code=part.code,
            name=part.name,
            current_stock=part.current_stock,
            minimum_stock=part.minimum_stock,
            level=level.label,
            color=level.color,
            percentage=stock_percentage(part.current_stock, part.minimum_stock),
        )
