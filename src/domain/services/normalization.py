"""Domain normalization helpers."""

from src.domain.models.categories import (
    Category,
    TransactionCategory,
    TransactionType,
    UnrecognizedCategory,
)
from src.domain.models.finance import VisibilityScope

_CATEGORY_LOOKUP: dict[str, Category] = {}
for _member in Category:
    _CATEGORY_LOOKUP[_member.name.lower()] = _member
    _CATEGORY_LOOKUP[_member.value.lower()] = _member


def normalize_text(value: str | None) -> str:
    """Return trimmed text, empty for None."""
    if not value:
        return ""
    return str(value).strip()


def parse_category(value) -> TransactionCategory:
    """Map raw category text onto the closed category vocabulary.

    Args:
        value: Member name, persisted label, Category or free-form text.

    Returns:
        TransactionCategory: Known category, or UnrecognizedCategory carrying
        the trimmed raw text. Empty input maps to Category.OTHER.
    """
    if isinstance(value, (Category, UnrecognizedCategory)):
        return value
    cleaned = normalize_text(value)
    if not cleaned:
        return Category.OTHER
    match = _CATEGORY_LOOKUP.get(cleaned.lower())
    if match is not None:
        return match
    return UnrecognizedCategory(raw=cleaned)


def parse_transaction_type(value) -> TransactionType | None:
    """Return the transaction type for raw text, None when unknown."""
    if isinstance(value, TransactionType):
        return value
    cleaned = normalize_text(value).upper()
    try:
        return TransactionType(cleaned)
    except ValueError:
        return None


def parse_scope(value) -> VisibilityScope | None:
    """Return the visibility scope for raw text, None when unknown."""
    if isinstance(value, VisibilityScope):
        return value
    cleaned = normalize_text(value).lower()
    try:
        return VisibilityScope(cleaned)
    except ValueError:
        return None


__all__ = [
    "normalize_text",
    "parse_category",
    "parse_transaction_type",
    "parse_scope",
]
