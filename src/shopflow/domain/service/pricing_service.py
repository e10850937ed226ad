"""Domain service: Pricing.

Stateless calculations used while assembling an order quote: line
price, tax, shipping fee, discount and the final total. Every method
is a pure function of its inputs and the rates fixed at construction,
so one instance can be shared freely.

Rates are plain ``Decimal`` values; ``int``, ``float`` and numeric
strings are accepted and converted through ``str()`` so ``0.1`` stays
exactly one tenth.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from pydantic import BaseModel

from shopflow.domain.exceptions import NullArgumentError, ValidationError
from shopflow.domain.model.offer import Offer
from shopflow.domain.model.value_objects import DEFAULT_CURRENCY, Money, to_decimal

logger = logging.getLogger(__name__)

Number = Decimal | int | float | str


class PricingSettings(BaseModel):
    """Rates used by the pricing engine. Defaults are the VND marketplace rates.

    Prices and shipping fees are always denominated in ``DEFAULT_CURRENCY``;
    only the rates are configurable.
    """

    base_shipping_fee: Decimal = Decimal("30000")
    per_kg_fee: Decimal = Decimal("5000")  # per kilogram of parcel weight
    default_tax_rate: Decimal = Decimal("0.1")

    model_config = {"frozen": True}


class PricingService:

    def __init__(self, settings: PricingSettings | None = None) -> None:
        self._settings = settings or PricingSettings()

    @property
    def settings(self) -> PricingSettings:
        return self._settings

    def calculate_price(self, offer: Offer, quantity: int) -> Money:
        """Gross price of *quantity* units of *offer*. No bulk discount is applied."""
        if offer is None:
            raise NullArgumentError("offer")
        if quantity is None or quantity <= 0:
            raise ValidationError("Quantity must be positive")

        if offer.min_quantity is not None and quantity >= offer.min_quantity:
            logger.debug(
                "Offer %s: quantity %s reaches minimum %s, no bulk discount configured",
                offer.id,
                quantity,
                offer.min_quantity,
            )
        return Money(offer.gross_price * quantity, DEFAULT_CURRENCY)

    def calculate_tax(self, amount: Money, rate: Number | None = None) -> Money:
        """Tax on *amount* at *rate* (a fraction in [0, 1]); defaults to the configured rate."""
        if amount is None:
            raise NullArgumentError("amount")
        tax_rate = self._settings.default_tax_rate if rate is None else to_decimal(rate, "tax rate")
        if not 0 <= tax_rate <= 1:
            raise ValidationError("Tax rate must be between 0 and 1")
        return Money(amount.amount * tax_rate, amount.currency)

    def calculate_shipping_fee(self, order_value: Money, zone: str, weight: Number) -> Money:
        """Flat base fee plus a per-kilogram charge.

        *zone* is required but does not change the fee yet.
        """
        if order_value is None:
            raise NullArgumentError("order_value")
        if zone is None or not zone.strip():
            raise ValidationError("Shipping zone is required")
        weight_kg = to_decimal(weight, "weight")
        if weight_kg <= 0:
            raise ValidationError("Weight must be positive")

        fee = self._settings.base_shipping_fee + weight_kg * self._settings.per_kg_fee
        logger.debug("Shipping fee for zone %r, %s kg: %s", zone, weight_kg, fee)
        return Money(fee, DEFAULT_CURRENCY)

    def apply_discount(self, amount: Money, pct: Number) -> Money:
        if amount is None:
            raise NullArgumentError("amount")
        fraction = to_decimal(pct, "discount percentage")
        if not 0 <= fraction <= 1:
            raise ValidationError("Discount percentage must be between 0 and 1")
        return Money(amount.amount * (1 - fraction), amount.currency)

    def calculate_total(
        self, subtotal: Money, tax: Money, shipping: Money, discount: Money
    ) -> Money:
        """``subtotal + tax + shipping - discount``.

        A discount larger than the rest fails with the usual negative
        amount ``ValidationError``.
        """
        for name, value in (
            ("subtotal", subtotal),
            ("tax", tax),
            ("shipping", shipping),
            ("discount", discount),
        ):
            if value is None:
                raise NullArgumentError(name)
        return subtotal + tax + shipping - discount

    @staticmethod
    def is_valid_price(price: Money | None) -> bool:
        return price is not None
