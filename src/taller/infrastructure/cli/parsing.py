"""Option parsing shared by the CLI command modules."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

import click

from taller.domain.model.filters import NumericRange


@dataclass(frozen=True)
class LineSpec:
    item_id: int
    quantity: int | None = None
    comment: str = ""


def price_range(minimum: float | None, maximum: float | None) -> NumericRange:
    """Build a price range from float options without float artefacts."""
    return NumericRange(
        Decimal(str(minimum)) if minimum is not None else None,
        Decimal(str(maximum)) if maximum is not None else None,
    )


def parse_line_spec(raw: str) -> LineSpec:
    """Parse 'ID[:QTY[:COMMENT]]', e.g. '7', '7:2' or '7:2:left side'.

    The comment may itself contain colons.
    """
    parts = raw.split(":", 2)
    try:
        item_id = int(parts[0])
    except ValueError:
        raise click.BadParameter(
            f"Invalid item '{raw}'. Expected 'ID[:QTY[:COMMENT]]'."
        )

    quantity = None
    if len(parts) > 1 and parts[1].strip():
        try:
            quantity = int(parts[1])
        except ValueError:
            raise click.BadParameter(f"Invalid quantity '{parts[1]}' for item #{item_id}.")

    comment = parts[2].strip() if len(parts) > 2 else ""
    return LineSpec(item_id=item_id, quantity=quantity, comment=comment)
