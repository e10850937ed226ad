"""CLI commands for the pricing engine."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation

import click

from shopflow.application.dto import QuoteLineSpec
from shopflow.application.quote_order import QuoteOrderHandler
from shopflow.domain.exceptions import DomainException
from shopflow.infrastructure.bootstrap import pricing_service


def _parse_lines(raw: str) -> list[QuoteLineSpec]:
    """Parse '150000:2,50000:1' (unit price:quantity) into QuoteLineSpec list."""
    specs: list[QuoteLineSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'UnitPrice:Qty'."
            )
        price_str, qty_str = pair.rsplit(":", 1)
        try:
            price = Decimal(price_str.strip())
        except InvalidOperation:
            raise click.BadParameter(f"Invalid unit price '{price_str}'.")
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(f"Invalid quantity '{qty_str}'.")
        specs.append(QuoteLineSpec(unit_price=price, quantity=qty))
    return specs


@click.command("quote")
@click.option("--items", required=True, help="Lines as 'UnitPrice:Qty,UnitPrice:Qty'.")
@click.option("--zone", required=True, help="Shipping zone.")
@click.option("--weight", required=True, help="Parcel weight in kilograms.")
@click.option("--discount", default="0", show_default=True, help="Discount fraction (0-1).")
@click.option("--tax-rate", default=None, help="Tax rate fraction (0-1); configured default if omitted.")
def pricing_quote(items: str, zone: str, weight: str, discount: str, tax_rate: str | None) -> None:
    """Quote an order: subtotal, discount, tax, shipping and total."""
    specs = _parse_lines(items)
    handler = QuoteOrderHandler(pricing_service=pricing_service())

    try:
        dto = handler.handle(
            lines=specs,
            zone=zone,
            weight_kg=weight,
            discount_pct=discount,
            tax_rate=tax_rate,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    for label, money in (
        ("Subtotal", dto.subtotal),
        ("Discount", dto.discount),
        ("Tax", dto.tax),
        ("Shipping", dto.shipping),
    ):
        click.echo(f"  {label:<10} {money.display:>20}")
    click.echo(f"  {'-' * 31}")
    click.echo(f"  {'Total':<10} {dto.total.display:>20}")
