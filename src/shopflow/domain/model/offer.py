"""Vendor offer on a SKU, the input the pricing engine reads."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from uuid import UUID, uuid4

from shopflow.domain.exceptions import ValidationError
from shopflow.domain.model.value_objects import to_decimal


@dataclass(frozen=True)
class Offer:
    """A vendor's gross price for one SKU.

    ``unit_price`` is the gross VND price; an offer without a price is
    priced as zero. ``min_quantity`` / ``max_quantity`` are informational
    order bounds.
    """

    sku_id: UUID
    vendor_id: UUID
    unit_price: Decimal | None = None
    min_quantity: Decimal | None = None
    max_quantity: Decimal | None = None
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self) -> None:
        for name in ("unit_price", "min_quantity", "max_quantity"):
            value = getattr(self, name)
            if value is None:
                continue
            value = to_decimal(value, name.replace("_", " "))
            if value < 0:
                raise ValidationError(f"Offer {name.replace('_', ' ')} cannot be negative")
            object.__setattr__(self, name, value)
        if (
            self.min_quantity is not None
            and self.max_quantity is not None
            and self.min_quantity > self.max_quantity
        ):
            raise ValidationError("Offer minimum quantity exceeds maximum quantity")

    @property
    def gross_price(self) -> Decimal:
        return self.unit_price if self.unit_price is not None else Decimal("0")
