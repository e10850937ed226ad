import click

from shopflow.infrastructure.bootstrap import settings
from shopflow.infrastructure.cli.catalog_commands import catalog_slug
from shopflow.infrastructure.cli.contact_commands import contact_email, contact_phone
from shopflow.infrastructure.cli.pricing_commands import pricing_quote
from shopflow.infrastructure.logging_config import configure_logging


@click.group()
@click.option("--log-level", default=None, help="Override the configured log level.")
def cli(log_level: str | None) -> None:
    """ShopFlow marketplace domain tools"""
    configure_logging(log_level or settings().logging.level)


@cli.group()
def pricing() -> None:
    """Price quotes."""


@cli.group()
def catalog() -> None:
    """Catalog names and slugs."""


@cli.group()
def contact() -> None:
    """Contact details."""


# Register subcommands
pricing.add_command(pricing_quote)
catalog.add_command(catalog_slug)
contact.add_command(contact_email)
contact.add_command(contact_phone)
