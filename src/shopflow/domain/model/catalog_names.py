"""Catalog naming value objects: category/product names and URL slugs.

Names keep the merchant's spelling (Vietnamese diacritics included) and
compare case-insensitively. Slugs are the URL-safe, ASCII-only form that
``slugify`` derives deterministically from a name.
"""

from __future__ import annotations

import re
import unicodedata
from dataclasses import dataclass

from shopflow.domain.exceptions import NullArgumentError, ValidationError

_WHITESPACE_RE = re.compile(r"\s+")
_SEPARATOR_RE = re.compile(r"[\s_]+")
_NON_SLUG_RE = re.compile(r"[^a-z0-9-]")
_HYPHENS_RE = re.compile(r"-{2,}")
_SLUG_RE = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")

# Letters Unicode decomposition does not reduce to ASCII.
_ASCII_FOLDS = str.maketrans({"\u0111": "d", "\u0110": "D"})

_VIETNAMESE_LETTERS = frozenset("\u0111\u0110")
# The five tone marks plus circumflex, breve and horn.
_VIETNAMESE_MARKS = frozenset("\u0300\u0301\u0303\u0309\u0323\u0302\u0306\u031b")


def strip_diacritics(text: str) -> str:
    decomposed = unicodedata.normalize("NFD", text.translate(_ASCII_FOLDS))
    kept = "".join(c for c in decomposed if unicodedata.category(c) != "Mn")
    return unicodedata.normalize("NFC", kept)


def slugify(text: str, *, max_length: int, min_length: int, fallback: str) -> str:
    """Turn free text into a URL slug.

    ``"Áo Dài Truyền Thống"`` becomes ``"ao-dai-truyen-thong"``. Text that
    yields fewer than *min_length* usable characters becomes *fallback*.
    """
    slug = strip_diacritics(text).lower()
    slug = _SEPARATOR_RE.sub("-", slug.strip())
    slug = _NON_SLUG_RE.sub("", slug)
    slug = _HYPHENS_RE.sub("-", slug).strip("-")
    if len(slug) > max_length:
        slug = slug[:max_length].rstrip("-")
    if len(slug) < min_length:
        return fallback
    return slug


def contains_vietnamese(text: str) -> bool:
    """True if *text* uses letters or tone marks specific to Vietnamese."""
    if any(c in _VIETNAMESE_LETTERS for c in text):
        return True
    decomposed = unicodedata.normalize("NFD", text)
    return any(c in _VIETNAMESE_MARKS for c in decomposed)


def _validate_name(
    value: str | None,
    *,
    label: str,
    min_length: int,
    max_length: int,
    allowed_symbols: frozenset[str],
) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{label} cannot be empty")
    trimmed = unicodedata.normalize("NFC", str(value).strip())
    if len(trimmed) < min_length:
        raise ValidationError(f"{label} must be at least {min_length} characters long")
    if len(trimmed) > max_length:
        raise ValidationError(f"{label} cannot exceed {max_length} characters")
    for char in trimmed:
        if not (char.isalnum() or char.isspace() or char in allowed_symbols):
            raise ValidationError(f"{label} contains invalid characters")
    return trimmed


def _validate_slug(value: str | None, *, label: str, min_length: int, max_length: int) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{label} cannot be empty")
    normalized = str(value).strip().lower()
    if len(normalized) < min_length:
        raise ValidationError(f"{label} must be at least {min_length} characters long")
    if len(normalized) > max_length:
        raise ValidationError(f"{label} cannot exceed {max_length} characters")
    if not _SLUG_RE.match(normalized):
        raise ValidationError(
            f"{label} must contain only lowercase letters, numbers, and hyphens"
        )
    return normalized


class _CaseInsensitiveName:
    """Equality and hashing that ignore case, shared by the name types."""

    value: str

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value.casefold() == other.value.casefold()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.value.casefold()))

    def __str__(self) -> str:
        return self.value


# ---------------------------------------------------------------------------
# Category
# ---------------------------------------------------------------------------

CATEGORY_NAME_MIN_LENGTH = 2
CATEGORY_NAME_MAX_LENGTH = 100
CATEGORY_NAME_SYMBOLS = frozenset("-_&./(),")
CATEGORY_SLUG_FALLBACK = "category"


@dataclass(frozen=True, eq=False)
class CategoryName(_CaseInsensitiveName):
    value: str

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "value",
            _validate_name(
                self.value,
                label="Category name",
                min_length=CATEGORY_NAME_MIN_LENGTH,
                max_length=CATEGORY_NAME_MAX_LENGTH,
                allowed_symbols=CATEGORY_NAME_SYMBOLS,
            ),
        )

    @staticmethod
    def from_display_name(display_name: str) -> CategoryName:
        """Trim and collapse internal whitespace runs before validating."""
        if display_name is None or not display_name.strip():
            raise ValidationError("Display name cannot be empty")
        return CategoryName(_WHITESPACE_RE.sub(" ", display_name.strip()))

    @staticmethod
    def is_valid(value: str | None) -> bool:
        try:
            CategoryName(value)  # type: ignore[arg-type]
        except ValidationError:
            return False
        return True


@dataclass(frozen=True)
class CategorySlug:
    value: str

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "value",
            _validate_slug(
                self.value,
                label="Category slug",
                min_length=CATEGORY_NAME_MIN_LENGTH,
                max_length=CATEGORY_NAME_MAX_LENGTH,
            ),
        )

    @staticmethod
    def from_name(name: str) -> CategorySlug:
        if name is None or not name.strip():
            raise ValidationError("Name cannot be empty")
        return CategorySlug(
            slugify(
                name,
                max_length=CATEGORY_NAME_MAX_LENGTH,
                min_length=CATEGORY_NAME_MIN_LENGTH,
                fallback=CATEGORY_SLUG_FALLBACK,
            )
        )

    @staticmethod
    def from_category_name(name: CategoryName) -> CategorySlug:
        if name is None:
            raise NullArgumentError("category_name")
        return CategorySlug.from_name(name.value)

    @staticmethod
    def is_valid(value: str | None) -> bool:
        try:
            CategorySlug(value)  # type: ignore[arg-type]
        except ValidationError:
            return False
        return True

    def __str__(self) -> str:
        return self.value


# ---------------------------------------------------------------------------
# Product
# ---------------------------------------------------------------------------

PRODUCT_NAME_MIN_LENGTH = 2
PRODUCT_NAME_MAX_LENGTH = 255
PRODUCT_NAME_SYMBOLS = frozenset("-_.,()[]/+&")
PRODUCT_SLUG_FALLBACK = "product"


@dataclass(frozen=True, eq=False)
class ProductName(_CaseInsensitiveName):
    value: str

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "value",
            _validate_name(
                self.value,
                label="Product name",
                min_length=PRODUCT_NAME_MIN_LENGTH,
                max_length=PRODUCT_NAME_MAX_LENGTH,
                allowed_symbols=PRODUCT_NAME_SYMBOLS,
            ),
        )

    @staticmethod
    def from_display_name(display_name: str) -> ProductName:
        if display_name is None or not display_name.strip():
            raise ValidationError("Product name cannot be empty")
        return ProductName(_WHITESPACE_RE.sub(" ", display_name.strip()))

    @staticmethod
    def is_valid(value: str | None) -> bool:
        try:
            ProductName(value)  # type: ignore[arg-type]
        except ValidationError:
            return False
        return True


@dataclass(frozen=True)
class ProductSlug:
    value: str

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "value",
            _validate_slug(
                self.value,
                label="Product slug",
                min_length=PRODUCT_NAME_MIN_LENGTH,
                max_length=PRODUCT_NAME_MAX_LENGTH,
            ),
        )

    @staticmethod
    def from_name(name: str) -> ProductSlug:
        if name is None or not name.strip():
            raise ValidationError("Name cannot be empty")
        return ProductSlug(
            slugify(
                name,
                max_length=PRODUCT_NAME_MAX_LENGTH,
                min_length=PRODUCT_NAME_MIN_LENGTH,
                fallback=PRODUCT_SLUG_FALLBACK,
            )
        )

    @staticmethod
    def from_product_name(name: ProductName) -> ProductSlug:
        if name is None:
            raise NullArgumentError("product_name")
        return ProductSlug.from_name(name.value)

    def __str__(self) -> str:
        return self.value
