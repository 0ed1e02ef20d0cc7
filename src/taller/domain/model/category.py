"""Category display colours.

Categories only group items visually; no business rule depends on them.
"""

from __future__ import annotations

DEFAULT_CATEGORY_COLOR = "#757575"

SERVICE_CATEGORY_COLORS: dict[str, str] = {
    "MANTENIMIENTO": "#2196F3",
    "REPARACION": "#FF9800",
    "DIAGNOSTICO": "#9C27B0",
    "INSTALACION": "#4CAF50",
    "LIMPIEZA": "#00BCD4",
    "INSPECCION": "#FF5722",
    "AJUSTE": "#795548",
    "LUBRICACION": "#607D8B",
    "CAMBIO_ACEITE": "#FFC107",
    "REVISION": "#E91E63",
}

PART_CATEGORY_COLORS: dict[str, str] = {
    "MOTOR": "#FF5722",
    "FRENOS": "#F44336",
    "SUSPENSION": "#9C27B0",
    "ELECTRICO": "#2196F3",
    "CARROCERIA": "#4CAF50",
    "TRANSMISION": "#FF9800",
    "FILTROS": "#795548",
    "LUBRICANTES": "#607D8B",
    "NEUMATICOS": "#424242",
    "ACCESORIOS": "#9E9E9E",
}


def service_category_color(category: str | None) -> str:
    return SERVICE_CATEGORY_COLORS.get(category or "", DEFAULT_CATEGORY_COLOR)


def part_category_color(category: str | None) -> str:
    return PART_CATEGORY_COLORS.get(category or "", DEFAULT_CATEGORY_COLOR)


def category_color(category: str | None) -> str:
    """Colour for any catalog category; service and part names never overlap."""
    key = category or ""
    if key in SERVICE_CATEGORY_COLORS:
        return SERVICE_CATEGORY_COLORS[key]
    return PART_CATEGORY_COLORS.get(key, DEFAULT_CATEGORY_COLOR)
