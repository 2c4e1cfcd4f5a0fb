"""CLI commands for the Customer aggregate."""

from __future__ import annotations

import click

from shopbook.application.add_customer import AddCustomerHandler
from shopbook.application.delete_customer import DeleteCustomerHandler
from shopbook.application.list_customers import CustomerHistoryHandler, ListCustomersHandler
from shopbook.application.update_customer import UpdateCustomerHandler
from shopbook.infrastructure.bootstrap import Container
from shopbook.infrastructure.cli.formatting import EXPECTED_ERRORS, local_date, rupiah


@click.command("add")
@click.option("--name", required=True, help="Customer name.")
@click.option("--email", default=None)
@click.option("--phone", default=None)
@click.option("--address", default=None)
@click.pass_obj
def customer_add(
    container: Container,
    name: str,
    email: str | None,
    phone: str | None,
    address: str | None,
) -> None:
    """Add a customer."""
    handler = AddCustomerHandler(customer_repo=container.customer_repository(), lock=container.lock)

    try:
        customer = handler.handle(name=name, email=email, phone=phone, address=address)
    except EXPECTED_ERRORS as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer #{customer.id} '{customer.name}' added")


@click.command("list")
@click.option("--search", default=None, help="Filter by name.")
@click.pass_obj
def customer_list(container: Container, search: str | None) -> None:
    """List customers."""
    handler = ListCustomersHandler(customer_repo=container.customer_repository())

    try:
        customers = handler.handle(search=search)
    except EXPECTED_ERRORS as exc:
        raise click.ClickException(str(exc))

    if not customers:
        click.echo("No customers found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Email':<24} {'Phone':<14}")
    click.echo("-" * 66)
    for c in customers:
        click.echo(f"{c.id:<6} {c.name:<20} {c.email:<24} {c.phone:<14}")


@click.command("update")
@click.option("--id", "customer_id", required=True, help="Customer ID.")
@click.option("--name", default=None)
@click.option("--email", default=None)
@click.option("--phone", default=None)
@click.option("--address", default=None)
@click.pass_obj
def customer_update(
    container: Container,
    customer_id: str,
    name: str | None,
    email: str | None,
    phone: str | None,
    address: str | None,
) -> None:
    """Edit a customer. Existing sales keep the old name."""
    handler = UpdateCustomerHandler(customer_repo=container.customer_repository(), lock=container.lock)

    try:
        customer = handler.handle(
            customer_id, name=name, email=email, phone=phone, address=address
        )
    except EXPECTED_ERRORS as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer #{customer.id} updated.")


@click.command("delete")
@click.option("--id", "customer_id", required=True, help="Customer ID.")
@click.pass_obj
def customer_delete(container: Container, customer_id: str) -> None:
    """Delete a customer (their sales are kept)."""
    handler = DeleteCustomerHandler(customer_repo=container.customer_repository(), lock=container.lock)

    try:
        handler.handle(customer_id)
    except EXPECTED_ERRORS as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Customer #{customer_id} deleted.")


@click.command("history")
@click.option("--id", "customer_id", required=True, help="Customer ID.")
@click.pass_obj
def customer_history(container: Container, customer_id: str) -> None:
    """Show a customer's contact details and sales."""
    handler = CustomerHistoryHandler(
        customer_repo=container.customer_repository(),
        sale_repo=container.sale_repository(),
    )

    try:
        customer, sales = handler.handle(customer_id)
    except EXPECTED_ERRORS as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{customer.name}")
    click.echo(f"  Email:   {customer.email or '-'}")
    click.echo(f"  Phone:   {customer.phone or '-'}")
    click.echo(f"  Address: {customer.address or '-'}")
    click.echo()
    if not sales:
        click.echo("No purchase history.")
        return
    for s in sales:
        click.echo(
            f"  Inv #{s.id:<32} {local_date(s.date)}  "
            f"{rupiah(s.total_amount):>16}  {s.status}"
        )
