"""Application service: Quote Order use case.

Prices a basket without creating anything: line prices are summed into
the subtotal, the discount and tax are taken on that subtotal, the
shipping fee depends on parcel weight, and the pricing service composes
the total.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from uuid import uuid4

from shopflow.application.dto import MoneyDTO, QuoteDTO, QuoteLineSpec
from shopflow.domain.exceptions import ValidationError
from shopflow.domain.model.offer import Offer
from shopflow.domain.model.value_objects import DEFAULT_CURRENCY, Money
from shopflow.domain.service.pricing_service import Number, PricingService

logger = logging.getLogger(__name__)


class QuoteOrderHandler:

    def __init__(self, pricing_service: PricingService) -> None:
        self._pricing = pricing_service

    def handle(
        self,
        lines: list[QuoteLineSpec],
        zone: str,
        weight_kg: Number,
        discount_pct: Number = Decimal("0"),
        tax_rate: Number | None = None,
    ) -> QuoteDTO:
        if not lines:
            raise ValidationError("A quote needs at least one line")

        subtotal = Money.zero(DEFAULT_CURRENCY)
        for line in lines:
            # Quotes are anonymous: the offer exists only for the calculation.
            offer = Offer(sku_id=uuid4(), vendor_id=uuid4(), unit_price=line.unit_price)
            subtotal = subtotal + self._pricing.calculate_price(offer, line.quantity)

        discount = subtotal - self._pricing.apply_discount(subtotal, discount_pct)
        tax = self._pricing.calculate_tax(subtotal, tax_rate)
        shipping = self._pricing.calculate_shipping_fee(subtotal, zone, weight_kg)
        total = self._pricing.calculate_total(subtotal, tax, shipping, discount)

        logger.info("Quoted %d line(s) to zone %r: total %s", len(lines), zone, total)
        return QuoteDTO(
            subtotal=MoneyDTO.from_money(subtotal),
            discount=MoneyDTO.from_money(discount),
            tax=MoneyDTO.from_money(tax),
            shipping=MoneyDTO.from_money(shipping),
            total=MoneyDTO.from_money(total),
        )
