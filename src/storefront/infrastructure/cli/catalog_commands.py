"""CLI commands for browsing the catalog."""

from __future__ import annotations

import click

from storefront.application.browse_catalog import BrowseCatalogHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.catalog import SortOption, available_types
from storefront.infrastructure.bootstrap import (
    canonical_types,
    collator,
    navigation,
    product_repository,
)


@click.command("list")
@click.option("--search", "search_term", default="", help="Search in names and descriptions.")
@click.option(
    "--sort",
    "sort_option",
    type=click.Choice([option.value for option in SortOption]),
    default=SortOption.DEFAULT.value,
    show_default=True,
    help="Sort order.",
)
@click.option("--type", "product_type", default=None, help="Show only this product type.")
@click.option("--all-types", is_flag=True, default=False, help="Clear the type filter.")
@click.option("--url", default=None, help="Start from this catalog URL, e.g. '/products?type=...'.")
def catalog_list(
    search_term: str,
    sort_option: str,
    product_type: str | None,
    all_types: bool,
    url: str | None,
) -> None:
    """List products after filtering, searching and sorting."""
    try:
        catalog_collator = collator()
    except DomainException as exc:
        raise click.ClickException(str(exc))
    nav = navigation(url)
    handler = BrowseCatalogHandler(
        product_repo=product_repository(),
        navigation=nav,
        collator=catalog_collator,
        canonical_types=canonical_types(),
    )
    page = handler.handle(
        search_term=search_term,
        sort_option=SortOption(sort_option),
        product_type=product_type,
        clear_type=all_types,
    )

    click.echo(f"URL:    {nav.url}")
    click.echo(f"Type:   {page.selected_type or 'All products'}")
    click.echo(f"Sort:   {page.sort_label}")
    click.echo()

    if not page.products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<12} {'Name':<30} {'Type':<14} {'Price':>10}")
    click.echo("-" * 69)
    for p in page.products:
        click.echo(f"{p.id:<12} {p.name:<30} {p.product_type or '-':<14} {p.price:>10}")


@click.command("types")
def catalog_types() -> None:
    """List the product types that have at least one product."""
    types = available_types(product_repository().list_all(), canonical_types())
    if not types:
        click.echo("No product types found.")
        return
    for product_type in types:
        click.echo(product_type)
