"""Data Transfer Objects: plain containers that cross layer boundaries.

Quotes leave the application layer as strings and currency codes, so
callers never handle Money or Decimal directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from shopflow.domain.model.value_objects import Money


@dataclass(frozen=True)
class QuoteLineSpec:
    """Input: one line of a quote (gross unit price + quantity)."""

    unit_price: Decimal | None
    quantity: int


@dataclass(frozen=True)
class MoneyDTO:
    """Output: an amount as the API exposes it."""

    amount: str
    currency: str
    display: str

    @staticmethod
    def from_money(money: Money) -> MoneyDTO:
        return MoneyDTO(
            amount=str(money.amount),
            currency=money.currency,
            display=money.format_display(),
        )


@dataclass(frozen=True)
class QuoteDTO:
    """Output: a complete order quote."""

    subtotal: MoneyDTO
    discount: MoneyDTO
    tax: MoneyDTO
    shipping: MoneyDTO
    total: MoneyDTO
