"""CLI commands for work orders."""

from __future__ import annotations

import click

from taller.application.selection_editor import SelectionEditor
from taller.application.start_work import StartWorkHandler
from taller.application.work_wizard import WorkWizard
from taller.domain.exceptions import DomainException, EntityNotFoundError
from taller.domain.model.selection import QuantityError
from taller.domain.model.work_session import WorkSession
from taller.infrastructure.bootstrap import (
    part_catalog,
    service_catalog,
    work_order_repository,
)
from taller.infrastructure.cli.parsing import LineSpec, parse_line_spec

_QUANTITY_ERRORS = {
    QuantityError.NOT_SELECTED: "is not selected",
    QuantityError.BELOW_MINIMUM: "needs a quantity of at least 1",
    QuantityError.ABOVE_STOCK: "exceeds the available stock",
}


def _select(editor: SelectionEditor, specs: list[LineSpec]) -> None:
    """Apply the --service / --part specs to one step of the wizard."""
    for spec in specs:
        editor.add_by_id(spec.item_id)
        if spec.quantity is not None:
            result = editor.set_quantity(spec.item_id, spec.quantity)
            if not result.ok:
                raise click.ClickException(
                    f"Quantity {spec.quantity} for item #{spec.item_id} "
                    f"{_QUANTITY_ERRORS[result.error]}"
                )
        if spec.comment:
            editor.set_comment(spec.item_id, spec.comment)


def _display_review(session: WorkSession) -> None:
    click.echo(f"Order {session.order.number}  (status={session.order.status.value})")
    click.echo()
    click.echo(f"  {'Item':<30} {'Qty':>5} {'Price':>12} {'Total':>12}")
    click.echo(f"  {'-'*62}")
    for title, selection in (("Services", session.services), ("Parts", session.parts)):
        if selection.is_empty():
            continue
        click.echo(f"  {title}")
        for line in selection:
            click.echo(
                f"    {line.name:<28} {line.quantity:>5} {str(line.unit_price):>12} "
                f"{str(line.line_total):>12}"
            )
            if line.comment:
                click.echo(f"      {line.comment}")
    click.echo(f"  {'-'*62}")
    click.echo(f"  {'Services':<37} {str(session.services_total):>25}")
    click.echo(f"  {'Parts':<37} {str(session.parts_total):>25}")
    click.echo(f"  {'Total':<37} {str(session.total):>25}")


@click.command("start-work")
@click.option("--id", "order_id", required=True, type=int, help="Work order ID.")
@click.option(
    "--service",
    "services",
    multiple=True,
    required=True,
    help="Service as 'ID[:QTY[:COMMENT]]'. Repeatable.",
)
@click.option("--part", "parts", multiple=True, help="Part as 'ID[:QTY[:COMMENT]]'. Repeatable.")
@click.option("--comment", default="", help="General comment for the order.")
@click.option("--yes", is_flag=True, help="Submit without asking for confirmation.")
def order_start_work(
    order_id: int,
    services: tuple[str, ...],
    parts: tuple[str, ...],
    comment: str,
    yes: bool,
) -> None:
    """Attach services and parts to an order and move it to EN_PROCESO."""
    service_specs = [parse_line_spec(raw) for raw in services]
    part_specs = [parse_line_spec(raw) for raw in parts]

    order_repo = work_order_repository()
    wizard = WorkWizard(
        submitter=StartWorkHandler(order_repo),
        service_catalog=service_catalog(),
        part_catalog=part_catalog(),
    )

    try:
        order = order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Work order #{order_id} not found")

        session = wizard.open(order)
        if wizard.services.message:
            raise click.ClickException(wizard.services.message)
        _select(wizard.services, service_specs)
        if not wizard.next():
            raise click.ClickException(session.error_message)

        if part_specs and wizard.parts.message:
            raise click.ClickException(wizard.parts.message)
        _select(wizard.parts, part_specs)
        wizard.next()

        session.general_comment = comment
        _display_review(session)
        if not yes:
            click.confirm("Start work on this order?", abort=True)

        result = wizard.submit()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if result is None:
        raise click.ClickException(session.error_message)

    click.echo(
        f"Order {result.order_number} is now {result.status}: "
        f"{result.services_recorded} service(s), {result.parts_recorded} part(s), "
        f"total {result.total}"
    )
    for failure in result.failures:
        click.echo(f"  Not recorded: {failure}", err=True)
