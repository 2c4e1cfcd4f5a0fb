"""CLI commands for the dashboard and reports."""

from __future__ import annotations

import click

from shopbook.application.show_dashboard import ShowDashboardHandler
from shopbook.application.show_reports import ShowReportsHandler
from shopbook.domain.service.sales_statistics import TOP_INVENTORY_LIMIT
from shopbook.infrastructure.bootstrap import Container
from shopbook.infrastructure.cli.formatting import EXPECTED_ERRORS, rupiah


def _reports(container: Container, top: int = TOP_INVENTORY_LIMIT):
    handler = ShowReportsHandler(
        product_repo=container.product_repository(),
        sale_repo=container.sale_repository(),
    )
    try:
        return handler.handle(top=top)
    except EXPECTED_ERRORS as exc:
        raise click.ClickException(str(exc))


@click.command("dashboard")
@click.pass_obj
def report_dashboard(container: Container) -> None:
    """Headline numbers and the most recent sales."""
    handler = ShowDashboardHandler(
        product_repo=container.product_repository(),
        customer_repo=container.customer_repository(),
        sale_repo=container.sale_repository(),
    )

    try:
        dto = handler.handle()
    except EXPECTED_ERRORS as exc:
        raise click.ClickException(str(exc))

    stats = dto.stats
    click.echo(f"{'Total products':<20} {stats.total_products:>16}")
    click.echo(f"{'Total customers':<20} {stats.total_customers:>16}")
    click.echo(f"{'Sales this month':<20} {rupiah(stats.monthly_sales):>16}")
    click.echo(f"{'Low stock items':<20} {stats.low_stock_count:>16}")
    if dto.recent:
        click.echo()
        click.echo("Recent sales:")
        for point in dto.recent:
            click.echo(f"  {point.label:<10} {rupiah(point.amount):>16}")


@click.command("revenue")
@click.pass_obj
def report_revenue(container: Container) -> None:
    """Revenue per calendar day."""
    reports = _reports(container)

    if not reports.revenue_by_date:
        click.echo("No sales recorded.")
        return

    click.echo(f"{'Date':<12} {'Revenue':>16}")
    click.echo("-" * 29)
    for point in reports.revenue_by_date:
        click.echo(f"{point.day.isoformat():<12} {rupiah(point.amount):>16}")


@click.command("stock")
@click.option("--top", default=TOP_INVENTORY_LIMIT, show_default=True, type=int,
              help="Number of products to rank.")
@click.pass_obj
def report_stock(container: Container, top: int) -> None:
    """Products holding the most stock value."""
    reports = _reports(container, top=top)

    click.echo(f"{'Product':<22} {'Stock value':>18}")
    click.echo("-" * 41)
    for entry in reports.top_inventory:
        click.echo(f"{entry.name:<22} {rupiah(entry.value):>18}")


@click.command("totals")
@click.pass_obj
def report_totals(container: Container) -> None:
    """Paid revenue, outstanding invoices and inventory value."""
    reports = _reports(container)

    click.echo(f"{'Total revenue (paid)':<24} {rupiah(reports.totals.total_revenue):>18}")
    click.echo(f"{'Pending payments':<24} {rupiah(reports.totals.total_pending):>18}")
    click.echo(f"{'Inventory value':<24} {rupiah(reports.inventory_value):>18}")
