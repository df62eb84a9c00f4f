"""CLI commands for the shopping cart."""

from __future__ import annotations

import click

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.dto import CartDTO
from storefront.application.personalize_item import PersonalizeItemHandler
from storefront.application.remove_from_cart import RemoveFromCartHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import cart_store, product_repository
from storefront.infrastructure.settings import Settings


def _display_cart(dto: CartDTO) -> None:
    """Shared formatting for displaying the cart."""
    if not dto.items:
        click.echo("Your cart is empty.")
        return

    click.echo(f"  {'#':>3} {'Product':<28} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*60}")
    for item in dto.items:
        click.echo(
            f"  {item.index:>3} {item.name:<28} {item.quantity:>5} "
            f"{item.unit_price:>10} {item.line_total:>10}"
        )
        if item.child_name:
            click.echo(f"      Child's name: {item.child_name}")
    click.echo(f"  {'-'*60}")
    click.echo(f"  {'Total':<38} {dto.total:>22}")


@click.command("show")
def cart_show() -> None:
    """Show the cart and its total."""
    dto = ShowCartHandler(cart_store()).handle()
    _display_cart(dto)


@click.command("add")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--qty", "quantity", default=1, show_default=True, type=int, help="Units to add.")
def cart_add(product_id: str, quantity: int) -> None:
    """Add a catalog product to the cart."""
    handler = AddToCartHandler(
        product_repo=product_repository(),
        store=cart_store(),
        currency=Settings.CURRENCY,
    )

    try:
        item = handler.handle(product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"'{item.name}' in cart: {item.quantity} pcs, {item.line_total}")


@click.command("remove")
@click.option("--id", "product_id", required=True, help="Product ID.")
def cart_remove(product_id: str) -> None:
    """Remove one unit of a product from the cart."""
    remaining = RemoveFromCartHandler(cart_store()).handle(product_id)
    if remaining:
        click.echo(f"'{product_id}' now has {remaining} pcs in the cart.")
    else:
        click.echo(f"'{product_id}' is no longer in the cart.")


@click.command("name")
@click.option("--index", required=True, type=int, help="Cart line number (see 'cart show').")
@click.option("--name", "child_name", default="", help="Child's name; omit to clear it.")
def cart_name(index: int, child_name: str) -> None:
    """Set or clear the child's name printed on a cart line."""
    handler = PersonalizeItemHandler(cart_store())

    try:
        item = handler.handle(index, child_name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if item.child_name:
        click.echo(f"Line #{index} '{item.name}' personalized for {item.child_name}.")
    else:
        click.echo(f"Line #{index} '{item.name}' has no personalization.")
