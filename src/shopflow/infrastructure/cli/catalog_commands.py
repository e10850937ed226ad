"""CLI commands for catalog names and slugs."""

from __future__ import annotations

import click

from shopflow.domain.exceptions import DomainException
from shopflow.domain.model.catalog_names import (
    CategoryName,
    CategorySlug,
    ProductName,
    ProductSlug,
)


@click.command("slug")
@click.argument("name")
@click.option(
    "--kind",
    type=click.Choice(["category", "product"]),
    default="category",
    show_default=True,
    help="Which naming rules to apply.",
)
def catalog_slug(name: str, kind: str) -> None:
    """Validate NAME and print the slug derived from it."""
    try:
        if kind == "category":
            slug = CategorySlug.from_category_name(CategoryName.from_display_name(name))
        else:
            slug = ProductSlug.from_product_name(ProductName.from_display_name(name))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(slug.value)
