"""CLI commands for the service catalog."""

from __future__ import annotations

import click

from taller.application.add_catalog_item import AddServiceHandler
from taller.application.list_catalog import ListServicesHandler
from taller.application.update_catalog_item import UpdateCatalogItemHandler
from taller.domain.exceptions import DomainException
from taller.domain.model.filters import Activity, NumericRange, ServiceFilter
from taller.infrastructure.bootstrap import service_catalog
from taller.infrastructure.cli.parsing import price_range


@click.command("list")
@click.option("--search", default="", help="Text to look for in name, code, category or description.")
@click.option("--category", default="", help="Exact category, e.g. MANTENIMIENTO.")
@click.option(
    "--status",
    type=click.Choice([a.value for a in Activity]),
    default=Activity.ALL.value,
    show_default=True,
)
@click.option("--min-price", type=float, default=None)
@click.option("--max-price", type=float, default=None)
@click.option("--min-minutes", type=int, default=None)
@click.option("--max-minutes", type=int, default=None)
def service_list(
    search: str,
    category: str,
    status: str,
    min_price: float | None,
    max_price: float | None,
    min_minutes: int | None,
    max_minutes: int | None,
) -> None:
    """List services in the catalog."""
    try:
        criteria = ServiceFilter(
            term=search,
            category=category,
            activity=Activity(status),
            price=price_range(min_price, max_price),
            minutes=NumericRange(min_minutes, max_minutes),
        )
        services = ListServicesHandler(service_catalog()).handle(criteria)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not services:
        click.echo("No services found.")
        return

    click.echo(
        f"{'ID':>4}  {'Code':<10} {'Name':<28} {'Category':<16} {'Price':>12} {'Time':>9}  Status"
    )
    click.echo("-" * 96)
    for s in services:
        click.echo(
            f"{s.id:>4}  {s.code:<10} {s.name:<28} {s.category:<16} "
            f"{s.price:>12} {s.estimated_time:>9}  {'active' if s.active else 'inactive'}"
        )
    click.echo(f"\n{len(services)} service(s)")


@click.command("add")
@click.option("--code", required=True, help="Unique service code.")
@click.option("--name", required=True, help="Service name.")
@click.option("--price", required=True, help="Base price, e.g. 45.00")
@click.option("--category", default="", help="Service category.")
@click.option("--description", default="")
@click.option("--minutes", type=int, default=60, show_default=True, help="Estimated time in minutes.")
def service_add(code: str, name: str, price: str, category: str, description: str, minutes: int) -> None:
    """Add a service to the catalog."""
    handler = AddServiceHandler(service_catalog())

    try:
        service = handler.handle(
            code=code,
            name=name,
            price=price,
            category=category,
            description=description,
            estimated_minutes=minutes,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Service #{service.id} '{service.code}' created  ({service.price}, {service.duration})")


@click.command("set-price")
@click.option("--id", "service_id", required=True, type=int)
@click.option("--price", required=True, help="New base price.")
def service_set_price(service_id: int, price: str) -> None:
    """Change a service's base price."""
    handler = UpdateCatalogItemHandler(service_catalog())

    try:
        service = handler.set_price(service_id, price)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Service '{service.code}' price set to {service.price}")


@click.command("toggle")
@click.option("--id", "service_id", required=True, type=int)
def service_toggle(service_id: int) -> None:
    """Activate an inactive service, or deactivate an active one."""
    handler = UpdateCatalogItemHandler(service_catalog())

    try:
        service = handler.toggle(service_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Service '{service.code}' is now {'active' if service.active else 'inactive'}")


@click.command("delete")
@click.option("--id", "service_id", required=True, type=int)
@click.confirmation_option(prompt="Delete this service?")
def service_delete(service_id: int) -> None:
    """Delete a service from the catalog."""
    handler = UpdateCatalogItemHandler(service_catalog())

    try:
        handler.delete(service_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Service #{service_id} deleted.")
