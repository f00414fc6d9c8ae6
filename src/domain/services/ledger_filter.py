"""Visibility and search filtering of the ledger."""

from collections.abc import Iterable

from src.domain.models.categories import TransactionType
from src.domain.models.finance import VisibilityScope
from src.domain.models.ledger import Transaction
from src.utils.decimal_utils import format_amount


def filter_transactions(
    transactions: Iterable[Transaction],
    scope: VisibilityScope,
    current_user_id: str | None = None,
    query: str | None = None,
) -> list[Transaction]:
    """Narrow the ledger to a visibility scope and an optional search.

    Args:
        transactions: Full ledger.
        scope: SELF keeps the current user's entries, FAMILY keeps all.
        current_user_id: Identifier of the signed-in member.
        query: Case-insensitive substring matched against note, category
            and the plain decimal form of the amount.

    Returns:
        list[Transaction]: Matching transactions in their original order.
    """
    needle = (query or "").strip().lower()
    result: list[Transaction] = []
    for transaction in transactions:
        if (
            scope == VisibilityScope.SELF
            and transaction.user_id != current_user_id
        ):
            continue
        if needle and not matches_query(transaction, needle):
            continue
        result.append(transaction)
    return result


def matches_query(transaction: Transaction, needle: str) -> bool:
    """Return True when a lowercase needle occurs in a searchable field."""
    haystacks = (
        transaction.note or "",
        transaction.category.value,
        getattr(transaction.category, "name", ""),
        format_amount(transaction.amount),
    )
    return any(needle in haystack.lower() for haystack in haystacks)


def transactions_for_baby(
    transactions: Iterable[Transaction],
    baby_id: str,
) -> list[Transaction]:
    """Return entries attributed to a baby."""
    return [t for t in transactions if t.baby_id == baby_id]


def transactions_for_card(
    transactions: Iterable[Transaction],
    card_id: str,
) -> list[Transaction]:
    """Return entries attributed to a credit card."""
    return [t for t in transactions if t.card_id == card_id]


def transactions_for_loan(
    transactions: Iterable[Transaction],
    loan_id: str,
) -> list[Transaction]:
    """Return entries attributed to a loan."""
    return [t for t in transactions if t.loan_id == loan_id]


def debt_ledger(transactions: Iterable[Transaction]) -> list[Transaction]:
    """Return DEBT and REPAYMENT entries."""
    return [
        t
        for t in transactions
        if t.type in (TransactionType.DEBT, TransactionType.REPAYMENT)
    ]


__all__ = [
    "filter_transactions",
    "matches_query",
    "transactions_for_baby",
    "transactions_for_card",
    "transactions_for_loan",
    "debt_ledger",
]
