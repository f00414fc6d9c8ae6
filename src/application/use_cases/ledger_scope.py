"""Shared scoping helper for ledger use cases."""

from src.domain.models.finance import VisibilityScope
from src.domain.models.ledger import LedgerSnapshot, Transaction
from src.domain.services.ledger_filter import filter_transactions


def scoped_transactions(
    snapshot: LedgerSnapshot,
    scope: VisibilityScope,
    current_user_id: str | None,
    query: str | None = None,
) -> list[Transaction]:
    """Return the snapshot's transactions visible in ``scope``.

    Args:
        snapshot: Entity snapshot from the repository.
        scope: Visibility scope.
        current_user_id: Signed-in member for the "self" scope.
        query: Optional free-text search.

    Returns:
        list[Transaction]: Visible transactions in ledger order.
    """
    return filter_transactions(
        snapshot.transactions,
        scope,
        current_user_id=current_user_id,
        query=query,
    )


__all__ = ["scoped_transactions"]
