import click

from storefront.infrastructure.cli.cart_commands import (
    cart_add,
    cart_name,
    cart_remove,
    cart_show,
)
from storefront.infrastructure.cli.catalog_commands import catalog_list, catalog_types
from storefront.infrastructure.logging_config import setup_logging
from storefront.infrastructure.settings import Settings


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Console log level.",
)
@click.option("--log-file", is_flag=True, default=False, help="Also write a DEBUG log to the logs directory.")
def cli(log_level: str | None, log_file: bool) -> None:
    """Storefront: catalog browsing and shopping cart"""
    setup_logging(
        level=log_level.upper() if log_level else None,
        log_file=Settings.LOGS_DIR / "storefront.log" if log_file else None,
    )


@cli.group()
def cart() -> None:
    """Manage the shopping cart."""


@cli.group()
def catalog() -> None:
    """Browse the product catalog."""


# Register subcommands
cart.add_command(cart_add)
cart.add_command(cart_name)
cart.add_command(cart_remove)
cart.add_command(cart_show)
catalog.add_command(catalog_list)
catalog.add_command(catalog_types)
