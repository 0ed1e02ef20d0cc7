"""CLI commands for the spare parts inventory."""

from __future__ import annotations

from datetime import datetime

import click

from taller.application.add_catalog_item import AddPartHandler
from taller.application.list_catalog import ListPartsHandler
from taller.application.show_movements import ShowMovementsHandler
from taller.application.show_stock_alerts import ShowStockAlertsHandler
from taller.application.update_catalog_item import UpdateCatalogItemHandler
from taller.domain.exceptions import DomainException
from taller.domain.model.filters import Activity, PartFilter
from taller.domain.model.movement import MovementFilter, MovementType
from taller.domain.model.stock import StockBucket
from taller.infrastructure.bootstrap import movement_repository, part_catalog
from taller.infrastructure.cli.parsing import price_range


@click.command("list")
@click.option("--search", default="", help="Text to look for in name, code, category or description.")
@click.option("--category", default="", help="Exact category, e.g. FRENOS.")
@click.option(
    "--status",
    type=click.Choice([a.value for a in Activity]),
    default=Activity.ALL.value,
    show_default=True,
)
@click.option("--stock", type=click.Choice([b.value for b in StockBucket]), default=None)
@click.option("--min-price", type=float, default=None)
@click.option("--max-price", type=float, default=None)
def part_list(
    search: str,
    category: str,
    status: str,
    stock: str | None,
    min_price: float | None,
    max_price: float | None,
) -> None:
    """List spare parts with their stock status."""
    try:
        criteria = PartFilter(
            term=search,
            category=category,
            activity=Activity(status),
            price=price_range(min_price, max_price),
            stock=StockBucket(stock) if stock else None,
        )
        parts = ListPartsHandler(part_catalog()).handle(criteria)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not parts:
        click.echo("No parts found.")
        return

    click.echo(
        f"{'ID':>4}  {'Code':<10} {'Name':<26} {'Category':<14} {'Price':>12} "
        f"{'Stock':>6} {'Min':>5}  Status"
    )
    click.echo("-" * 100)
    for p in parts:
        click.echo(
            f"{p.id:>4}  {p.code:<10} {p.name:<26} {p.category:<14} {p.price:>12} "
            f"{p.current_stock:>6} {p.minimum_stock:>5}  {p.stock_label}"
            f"{'' if p.active else ' (inactive)'}"
        )
    click.echo(f"\n{len(parts)} part(s)")


@click.command("add")
@click.option("--code", required=True, help="Unique part code.")
@click.option("--name", required=True, help="Part name.")
@click.option("--price", required=True, help="Unit price, e.g. 25.50")
@click.option("--category", default="", help="Part category.")
@click.option("--description", default="")
@click.option("--stock", type=int, default=0, show_default=True, help="Current stock.")
@click.option("--min-stock", type=int, default=5, show_default=True, help="Minimum stock.")
def part_add(
    code: str,
    name: str,
    price: str,
    category: str,
    description: str,
    stock: int,
    min_stock: int,
) -> None:
    """Add a spare part to the inventory."""
    handler = AddPartHandler(part_catalog())

    try:
        part = handler.handle(
            code=code,
            name=name,
            price=price,
            category=category,
            description=description,
            current_stock=stock,
            minimum_stock=min_stock,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Part #{part.id} '{part.code}' created  ({part.price}, stock {part.current_stock})")


@click.command("set-price")
@click.option("--id", "part_id", required=True, type=int)
@click.option("--price", required=True, help="New unit price.")
def part_set_price(part_id: int, price: str) -> None:
    """Change a part's unit price."""
    handler = UpdateCatalogItemHandler(part_catalog())

    try:
        part = handler.set_price(part_id, price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Part '{part.code}' price set to {part.price}")


@click.command("toggle")
@click.option("--id", "part_id", required=True, type=int)
def part_toggle(part_id: int) -> None:
    """Activate an inactive part, or deactivate an active one."""
    handler = UpdateCatalogItemHandler(part_catalog())

    try:
        part = handler.toggle(part_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Part '{part.code}' is now {'active' if part.active else 'inactive'}")


@click.command("delete")
@click.option("--id", "part_id", required=True, type=int)
@click.confirmation_option(prompt="Delete this part?")
def part_delete(part_id: int) -> None:
    """Delete a part from the inventory."""
    handler = UpdateCatalogItemHandler(part_catalog())

    try:
        handler.delete(part_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Part #{part_id} deleted.")


@click.command("alerts")
def part_alerts() -> None:
    """Show parts that are out of stock or at their minimum."""
    try:
        alerts = ShowStockAlertsHandler(part_catalog()).handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not alerts.total:
        click.echo("All parts are above their minimum stock.")
        return

    click.echo(f"{alerts.total} stock alert(s)")
    for title, group in (("Out of stock", alerts.no_stock), ("Low stock", alerts.low_stock)):
        if not group:
            continue
        click.echo(f"\n{title} ({len(group)})")
        for a in group:
            click.echo(
                f"  {a.code:<10} {a.name:<26} {a.current_stock:>4}/{a.minimum_stock:<4} "
                f"{a.percentage:>4}%  {a.level}"
            )


@click.command("movements")
@click.option("--part", "part_id", type=int, default=None, help="Only movements of this part ID.")
@click.option("--search", default="", help="Text to look for in part, reference or user.")
@click.option("--type", "movement_type", type=click.Choice([t.value for t in MovementType]), default=None)
@click.option("--from", "date_from", type=click.DateTime(formats=["%Y-%m-%d"]), default=None)
@click.option("--to", "date_to", type=click.DateTime(formats=["%Y-%m-%d"]), default=None)
def part_movements(
    part_id: int | None,
    search: str,
    movement_type: str | None,
    date_from: datetime | None,
    date_to: datetime | None,
) -> None:
    """Show the inventory movement history, newest first."""
    criteria = MovementFilter(
        term=search,
        part_id=part_id,
        type=MovementType(movement_type) if movement_type else None,
        date_from=date_from.date() if date_from else None,
        date_to=date_to.date() if date_to else None,
    )

    try:
        movements = ShowMovementsHandler(movement_repository()).handle(criteria)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not movements:
        click.echo("No movements found.")
        return

    click.echo(
        f"{'Date':<16}  {'Code':<10} {'Part':<24} {'Type':<13} {'Qty':>5} "
        f"{'Before':>7} {'After':>7}  Reference"
    )
    click.echo("-" * 100)
    for m in movements:
        click.echo(
            f"{m.timestamp:<16}  {m.part_code:<10} {m.part_name:<24} {m.type:<13} "
            f"{m.quantity:>+5} {m.stock_before:>7} {m.stock_after:>7}  {m.reference}"
        )
