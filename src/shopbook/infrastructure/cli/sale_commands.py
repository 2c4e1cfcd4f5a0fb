"""CLI commands for the Sale aggregate."""

from __future__ import annotations

from datetime import datetime

import click

from shopbook.application.build_cart import BuildCartHandler
from shopbook.application.checkout import CheckoutHandler
from shopbook.application.delete_sale import DeleteSaleHandler
from shopbook.application.dto import CartItemSpec, SaleDTO, SalePatch
from shopbook.application.edit_sale import EditSaleHandler
from shopbook.application.show_sale import ListSalesHandler, ShowSaleHandler
from shopbook.application.toggle_sale_status import ToggleSaleStatusHandler
from shopbook.infrastructure.bootstrap import Container
from shopbook.infrastructure.cli.formatting import EXPECTED_ERRORS, local_date, rupiah


def _parse_items(raw: str) -> list[CartItemSpec]:
    """Parse '1:3,4:1' (product id : quantity) into CartItemSpec list."""
    specs: list[CartItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductID:Quantity'."
            )
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        specs.append(CartItemSpec(product_id=product_id.strip(), quantity=qty))
    return specs


def _display_sale(dto: SaleDTO) -> None:
    """Shared formatting for displaying a sale."""
    click.echo(f"Invoice #{dto.id}  (status={dto.status})")
    click.echo(f"Customer: {dto.customer_name}")
    click.echo(f"Date:     {local_date(dto.date)}")
    click.echo()
    click.echo(f"  {'Product':<22} {'Qty':>5} {'Price':>16} {'Total':>16}")
    click.echo(f"  {'-'*62}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<22} {item.quantity:>5} "
            f"{rupiah(item.price_at_sale):>16} {rupiah(item.total):>16}"
        )
    click.echo(f"  {'-'*62}")
    click.echo(f"  {'Total':<28} {rupiah(dto.total_amount):>33}")


@click.command("create")
@click.option("--customer", "customer_id", required=True, help="Customer ID.")
@click.option("--items", required=True, help="Items as 'ProductID:Qty,ProductID:Qty'.")
@click.pass_obj
def sale_create(container: Container, customer_id: str, items: str) -> None:
    """Create an invoice and deduct the sold stock."""
    specs = _parse_items(items)

    product_repo = container.product_repository()
    build = BuildCartHandler(product_repo=product_repo)
    checkout = CheckoutHandler(
        product_repo=product_repo,
        customer_repo=container.customer_repository(),
        sale_repo=container.sale_repository(),
        lock=container.lock,
    )

    try:
        cart = build.handle(specs)
        dto = checkout.handle(cart, customer_id)
    except EXPECTED_ERRORS as exc:
        raise click.ClickException(str(exc))

    _display_sale(dto)


@click.command("list")
@click.pass_obj
def sale_list(container: Container) -> None:
    """List invoices, newest first."""
    handler = ListSalesHandler(sale_repo=container.sale_repository())

    try:
        sales = handler.handle()
    except EXPECTED_ERRORS as exc:
        raise click.ClickException(str(exc))

    if not sales:
        click.echo("No sales recorded.")
        return

    click.echo(f"{'Date':<11} {'Invoice':<32} {'Customer':<20} {'Total':>16} {'Status':>8}")
    click.echo("-" * 91)
    for s in sales:
        click.echo(
            f"{local_date(s.date):<11} {s.id:<32} {s.customer_name:<20} "
            f"{rupiah(s.total_amount):>16} {s.status:>8}"
        )


@click.command("show")
@click.option("--id", "sale_id", required=True, help="Sale ID to display.")
@click.pass_obj
def sale_show(container: Container, sale_id: str) -> None:
    """Show details of an invoice."""
    handler = ShowSaleHandler(sale_repo=container.sale_repository())

    try:
        dto = handler.handle(sale_id)
    except EXPECTED_ERRORS as exc:
        raise click.ClickException(str(exc))

    _display_sale(dto)


@click.command("toggle")
@click.option("--id", "sale_id", required=True, help="Sale ID.")
@click.pass_obj
def sale_toggle(container: Container, sale_id: str) -> None:
    """Switch an invoice between PENDING and PAID."""
    handler = ToggleSaleStatusHandler(sale_repo=container.sale_repository(), lock=container.lock)

    try:
        dto = handler.handle(sale_id)
    except EXPECTED_ERRORS as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Sale #{dto.id} is now {dto.status}.")


@click.command("edit")
@click.option("--id", "sale_id", required=True, help="Sale ID to edit.")
@click.option("--new-id", default=None, help="Replacement sale ID.")
@click.option("--date", "sale_date", default=None, type=click.DateTime(formats=["%Y-%m-%d"]),
              help="Invoice date (YYYY-MM-DD).")
@click.option("--customer", "customer_id", default=None, help="Customer ID.")
@click.option("--total", default=None, type=int, help="Total amount override.")
@click.option("--status", default=None, type=click.Choice(["PENDING", "PAID"], case_sensitive=False))
@click.pass_obj
def sale_edit(
    container: Container,
    sale_id: str,
    new_id: str | None,
    sale_date: datetime | None,
    customer_id: str | None,
    total: int | None,
    status: str | None,
) -> None:
    """Correct an invoice's header fields (line items are never changed)."""
    patch = SalePatch(
        sale_id=new_id,
        # A bare date means local midnight
        date=sale_date.astimezone() if sale_date else None,
        customer_id=customer_id,
        total_amount=total,
        status=status,
    )
    handler = EditSaleHandler(
        sale_repo=container.sale_repository(),
        customer_repo=container.customer_repository(),
        lock=container.lock,
    )

    try:
        dto = handler.handle(sale_id, patch)
    except EXPECTED_ERRORS as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Sale #{dto.id} updated.")


@click.command("delete")
@click.option("--id", "sale_id", required=True, help="Sale ID to delete.")
@click.confirmation_option(
    prompt="Delete this invoice? Stock changes will NOT be reverted."
)
@click.pass_obj
def sale_delete(container: Container, sale_id: str) -> None:
    """Delete an invoice. Sold stock is not returned."""
    handler = DeleteSaleHandler(sale_repo=container.sale_repository(), lock=container.lock)

    try:
        handler.handle(sale_id)
    except EXPECTED_ERRORS as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Sale #{sale_id} deleted.")
