from pathlib import Path

import click
from pydantic import ValidationError

from shopbook.infrastructure.bootstrap import Container
from shopbook.infrastructure.cli.customer_commands import (
    customer_add,
    customer_delete,
    customer_history,
    customer_list,
    customer_update,
)
from shopbook.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_update,
)
from shopbook.infrastructure.cli.report_commands import (
    report_dashboard,
    report_revenue,
    report_stock,
    report_totals,
)
from shopbook.infrastructure.cli.sale_commands import (
    sale_create,
    sale_delete,
    sale_edit,
    sale_list,
    sale_show,
    sale_toggle,
)
from shopbook.infrastructure.cli.theme_commands import theme_set, theme_show, theme_toggle
from shopbook.infrastructure.config import Settings
from shopbook.infrastructure.logging_config import configure_logging


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    envvar="SHOPBOOK_DATA_DIR",
    default=None,
    help="Directory holding the JSON data files.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log at INFO level.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None, verbose: bool) -> None:
    """Shopbook — products, customers and sales for a small business"""
    overrides: dict[str, object] = {}
    if data_dir is not None:
        overrides["data_dir"] = data_dir
    if verbose:
        overrides["log_level"] = "INFO"
    try:
        settings = Settings(**overrides)
    except ValidationError as exc:
        raise click.ClickException("; ".join(err["msg"] for err in exc.errors()))
    configure_logging(settings.log_level, settings.log_file)
    ctx.obj = Container(settings=settings)


@cli.group()
def product() -> None:
    """Manage the product catalog."""


@cli.group()
def customer() -> None:
    """Manage customers."""


@cli.group()
def sale() -> None:
    """Create and manage sales invoices."""


@cli.group()
def report() -> None:
    """Dashboard and reports."""


@cli.group()
def theme() -> None:
    """Display theme preference."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_update)
customer.add_command(customer_add)
customer.add_command(customer_delete)
customer.add_command(customer_history)
customer.add_command(customer_list)
customer.add_command(customer_update)
sale.add_command(sale_create)
sale.add_command(sale_delete)
sale.add_command(sale_edit)
sale.add_command(sale_list)
sale.add_command(sale_show)
sale.add_command(sale_toggle)
report.add_command(report_dashboard)
report.add_command(report_revenue)
report.add_command(report_stock)
report.add_command(report_totals)
theme.add_command(theme_set)
theme.add_command(theme_show)
theme.add_command(theme_toggle)
