import click

from taller.infrastructure.cli.order_commands import order_start_work
from taller.infrastructure.cli.part_commands import (
    part_add,
    part_alerts,
    part_delete,
    part_list,
    part_movements,
    part_set_price,
    part_toggle,
)
from taller.infrastructure.cli.service_commands import (
    service_add,
    service_delete,
    service_list,
    service_set_price,
    service_toggle,
)
from taller.infrastructure.logging_config import setup_logging


@click.group()
def cli() -> None:
    """Taller — motorcycle workshop catalog, inventory and work orders"""
    setup_logging()


@cli.group()
def service() -> None:
    """Manage the service catalog."""


@cli.group()
def part() -> None:
    """Manage spare parts and stock."""


@cli.group()
def order() -> None:
    """Work on repair orders."""


# Register subcommands
service.add_command(service_add)
service.add_command(service_delete)
service.add_command(service_list)
service.add_command(service_set_price)
service.add_command(service_toggle)
part.add_command(part_add)
part.add_command(part_alerts)
part.add_command(part_delete)
part.add_command(part_list)
part.add_command(part_movements)
part.add_command(part_set_price)
part.add_command(part_toggle)
order.add_command(order_start_work)
