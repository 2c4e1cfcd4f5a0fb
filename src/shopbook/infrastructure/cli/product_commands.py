"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from shopbook.application.add_product import AddProductHandler
from shopbook.application.delete_product import DeleteProductHandler
from shopbook.application.list_products import ListProductsHandler
from shopbook.application.update_product import UpdateProductHandler
from shopbook.infrastructure.bootstrap import Container
from shopbook.infrastructure.cli.formatting import EXPECTED_ERRORS, rupiah


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--sku", required=True, help="Stock-keeping code (unique, case-sensitive).")
@click.option("--price", required=True, help="Unit price in whole currency units.")
@click.option("--stock", default=0, show_default=True, type=int, help="Units in stock.")
@click.pass_obj
def product_add(container: Container, name: str, sku: str, price: str, stock: int) -> None:
    """Add a new product to the catalog."""
    handler = AddProductHandler(product_repo=container.product_repository(), lock=container.lock)

    try:
        product = handler.handle(name=name, sku=sku, price=price, stock=stock)
    except EXPECTED_ERRORS as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {rupiah(product.price)}")


@click.command("list")
@click.option("--search", default=None, help="Filter by name or SKU.")
@click.pass_obj
def product_list(container: Container, search: str | None) -> None:
    """List products in the catalog."""
    handler = ListProductsHandler(product_repo=container.product_repository())

    try:
        products = handler.handle(search=search)
    except EXPECTED_ERRORS as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<22} {'SKU':<10} {'Price':>16} {'Stock':>7}")
    click.echo("-" * 65)
    for p in products:
        flag = "  low" if p.is_low_stock else ""
        click.echo(
            f"{p.id:<6} {p.name:<22} {p.sku:<10} {rupiah(p.price):>16} {p.stock:>7}{flag}"
        )


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--sku", default=None, help="New SKU.")
@click.option("--price", default=None, help="New price.")
@click.option("--stock", default=None, type=int, help="New stock level.")
@click.pass_obj
def product_update(
    container: Container,
    product_id: str,
    name: str | None,
    sku: str | None,
    price: str | None,
    stock: int | None,
) -> None:
    """Edit a product."""
    handler = UpdateProductHandler(product_repo=container.product_repository(), lock=container.lock)

    try:
        product = handler.handle(product_id, name=name, sku=sku, price=price, stock=stock)
    except EXPECTED_ERRORS as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{product.id} updated: {product.name} ({product.sku}) "
        f"{rupiah(product.price)}, stock {product.stock}"
    )


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_delete(container: Container, product_id: str) -> None:
    """Remove a product from the catalog."""
    handler = DeleteProductHandler(product_repo=container.product_repository(), lock=container.lock)

    try:
        handler.handle(product_id)
    except EXPECTED_ERRORS as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted.")
