"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import re
import secrets
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from email_validator import EmailNotValidError, validate_email

from shopflow.domain.exceptions import (
    CurrencyMismatchError,
    DivideByZeroError,
    ValidationError,
)

DEFAULT_CURRENCY = "VND"
AMOUNT_QUANTUM = Decimal("0.0001")


def to_decimal(value: object, name: str = "value") -> Decimal:
    """Coerce an int, float, numeric string or Decimal to Decimal.

    Floats go through ``str()`` so ``0.1`` becomes ``Decimal("0.1")``
    rather than its binary approximation.
    """
    if isinstance(value, bool) or value is None:
        raise ValidationError(f"Invalid {name}: {value!r}")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float, str)):
        try:
            result = Decimal(str(value).strip())
        except (InvalidOperation, ValueError) as exc:
            raise ValidationError(f"Invalid {name}: {value!r}") from exc
    else:
        raise ValidationError(
            f"Invalid {name}: expected a number, got {type(value).__name__}"
        )
    if not result.is_finite():
        raise ValidationError(f"Invalid {name}: {value!r}")
    return result


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations. The amount is quantized to
    four decimal places (half-up) and can never be negative; the
    currency code is stored upper-cased.
    """

    amount: Decimal
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        amount = to_decimal(self.amount, "money amount")
        if amount < 0:
            raise ValidationError("Amount cannot be negative")
        if self.currency is None or not str(self.currency).strip():
            raise ValidationError("Currency cannot be empty")

        # quantize fails once the result needs more digits than the context allows
        try:
            amount = amount.quantize(AMOUNT_QUANTUM, rounding=ROUND_HALF_UP)
        except InvalidOperation as exc:
            raise ValidationError("Amount is too large") from exc
        object.__setattr__(self, "amount", amount)
        object.__setattr__(self, "currency", str(self.currency).strip().upper())

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other, "add")
        return Money(self.amount + other.amount, self.currency)

    def __sub__(self, other: Money) -> Money:
        self._assert_same_currency(other, "subtract")
        return Money(self.amount - other.amount, self.currency)

    def __mul__(self, factor: Decimal | int | float | str) -> Money:
        if isinstance(factor, Money):
            return NotImplemented
        return Money(self.amount * to_decimal(factor, "multiplier"), self.currency)

    __rmul__ = __mul__

    def __truediv__(self, divisor: Decimal | int | float | str) -> Money:
        if isinstance(divisor, Money):
            return NotImplemented
        value = to_decimal(divisor, "divisor")
        if value == 0:
            raise DivideByZeroError("Cannot divide money by zero")
        return Money(self.amount / value, self.currency)

    # --- Comparison -----------------------------------------------------------

    def compare_to(self, other: Money) -> int:
        """Return -1, 0 or 1; raises CurrencyMismatchError across currencies."""
        self._assert_same_currency(other, "compare")
        if self.amount < other.amount:
            return -1
        if self.amount > other.amount:
            return 1
        return 0

    def __lt__(self, other: Money) -> bool:
        return self.compare_to(other) < 0

    def __le__(self, other: Money) -> bool:
        return self.compare_to(other) <= 0

    def __gt__(self, other: Money) -> bool:
        return self.compare_to(other) > 0

    def __ge__(self, other: Money) -> bool:
        return self.compare_to(other) >= 0

    def is_in_range(self, minimum: Money, maximum: Money) -> bool:
        return minimum <= self <= maximum

    @property
    def is_zero(self) -> bool:
        return self.amount == 0

    # --- Display --------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.amount:.4f} {self.currency}"

    def format_display(self) -> str:
        """Human-facing rendering: ``1.500.000 ₫`` for VND, ``25.50 USD`` otherwise."""
        if self.currency == "VND":
            whole = self.amount.quantize(Decimal("1"), rounding=ROUND_HALF_UP)
            return f"{whole:,.0f}".replace(",", ".") + " ₫"
        return f"{self.amount:.2f} {self.currency}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money, verb: str) -> None:
        if not isinstance(other, Money):
            raise TypeError(f"Cannot {verb} Money and {type(other).__name__}")
        if self.currency != other.currency:
            raise CurrencyMismatchError(
                f"Cannot {verb} money with different currencies "
                f"({self.currency} vs {other.currency})"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def of(amount: str | float | int | Decimal, currency: str = DEFAULT_CURRENCY) -> Money:
        """Convenient factory that coerces to Decimal safely."""
        return Money(to_decimal(amount, "money amount"), currency)

    @staticmethod
    def zero(currency: str = DEFAULT_CURRENCY) -> Money:
        return Money(Decimal("0"), currency)


# ---------------------------------------------------------------------------
# Contact details
# ---------------------------------------------------------------------------

EMAIL_MAX_LENGTH = 254


def _normalize_email(value: str | None) -> str:
    if value is None or not str(value).strip():
        raise ValidationError("Email cannot be empty")
    trimmed = str(value).strip()
    if len(trimmed) > EMAIL_MAX_LENGTH:
        raise ValidationError("Email address is too long")
    try:
        result = validate_email(trimmed, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValidationError("Invalid email format") from exc
    return result.normalized.lower()


@dataclass(frozen=True)
class Email:
    """An email address, trimmed and stored lower-cased.

    Syntax is checked with ``email-validator`` (no DNS lookups).
    """

    value: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _normalize_email(self.value))

    @staticmethod
    def is_valid(value: str | None) -> bool:
        try:
            _normalize_email(value)
        except ValidationError:
            return False
        return True

    @property
    def domain(self) -> str:
        return self.value.rsplit("@", 1)[1]

    def __str__(self) -> str:
        return self.value


# Leading digit of a Vietnamese mobile number once the country code or
# trunk prefix has been removed (03x, 05x, 07x, 08x, 09x networks).
MOBILE_LEADING_DIGITS = frozenset("35789")
_NON_DIGITS_RE = re.compile(r"\D")


@dataclass(frozen=True)
class PhoneNumber:
    """A Vietnamese mobile number normalized to its 9 national digits.

    ``0901234567``, ``84901234567`` and ``+84 90 123 4567`` all normalize
    to ``901234567`` and therefore compare equal.
    """

    value: str

    def __post_init__(self) -> None:
        if self.value is None or not str(self.value).strip():
            raise ValidationError("Phone number cannot be empty")
        normalized = self.normalize(str(self.value))
        if normalized is None:
            raise ValidationError("Invalid phone number format")
        object.__setattr__(self, "value", normalized)

    @staticmethod
    def normalize(raw: str) -> str | None:
        """Return the 9-digit national form, or None if *raw* is not a mobile number."""
        stripped = raw.strip()
        plus = stripped.startswith("+")
        digits = _NON_DIGITS_RE.sub("", stripped)

        if plus:
            if not digits.startswith("84"):
                return None
            digits = digits[2:]
        elif digits.startswith("84") and len(digits) == 11:
            digits = digits[2:]

        if digits.startswith("0"):
            digits = digits[1:]

        if len(digits) != 9 or digits[0] not in MOBILE_LEADING_DIGITS:
            return None
        return digits

    @staticmethod
    def is_valid(raw: str | None) -> bool:
        if raw is None or not raw.strip():
            return False
        return PhoneNumber.normalize(raw) is not None

    @property
    def local_format(self) -> str:
        return f"0{self.value}"

    @property
    def international_format(self) -> str:
        return f"+84{self.value}"

    def __str__(self) -> str:
        return self.value


# ---------------------------------------------------------------------------
# One-time passwords
# ---------------------------------------------------------------------------

_OTP_RE = re.compile(r"^[0-9]{6}$")
OTP_DEFAULT_EXPIRATION_MINUTES = 15
OTP_MAX_EXPIRATION_MINUTES = 60


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class OtpCode:
    """A six-digit one-time password with an expiry instant.

    Two codes are equal only if they share value *and* generation time,
    so re-issuing the same digits yields a distinct code.
    """

    value: str
    expiration_minutes: int = OTP_DEFAULT_EXPIRATION_MINUTES
    generated_at: datetime = field(default_factory=_utc_now)
    expires_at: datetime = field(init=False)

    def __post_init__(self) -> None:
        if self.value is None or not str(self.value).strip():
            raise ValidationError("OTP code cannot be empty")
        trimmed = str(self.value).strip()
        if not _OTP_RE.match(trimmed):
            raise ValidationError("OTP code must be exactly 6 digits")
        if not 1 <= self.expiration_minutes <= OTP_MAX_EXPIRATION_MINUTES:
            raise ValidationError(
                f"Expiration minutes must be between 1 and {OTP_MAX_EXPIRATION_MINUTES}"
            )
        object.__setattr__(self, "value", trimmed)
        object.__setattr__(
            self,
            "expires_at",
            self.generated_at + timedelta(minutes=self.expiration_minutes),
        )

    @staticmethod
    def generate(expiration_minutes: int = OTP_DEFAULT_EXPIRATION_MINUTES) -> OtpCode:
        """Issue a new random code using a cryptographically secure source."""
        return OtpCode(f"{secrets.randbelow(1_000_000):06d}", expiration_minutes)

    @staticmethod
    def is_valid_format(value: str | None) -> bool:
        return value is not None and _OTP_RE.match(value.strip()) is not None

    def is_expired(self, now: datetime | None = None) -> bool:
        return (now or _utc_now()) > self.expires_at

    def is_valid(self, now: datetime | None = None) -> bool:
        return not self.is_expired(now)

    def remaining(self, now: datetime | None = None) -> timedelta:
        left = self.expires_at - (now or _utc_now())
        return max(left, timedelta(0))

    def matches(self, candidate: str | None) -> bool:
        """Constant-time comparison against user input."""
        if candidate is None:
            return False
        return secrets.compare_digest(self.value, candidate.strip())

    def __str__(self) -> str:
        return self.value
