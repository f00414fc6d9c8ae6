"""Use case to list visible transactions matching a search."""

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.ledger_scope import scoped_transactions
from src.domain.models.finance import VisibilityScope
from src.domain.models.ledger import Transaction
from src.domain.services.ledger_filter import (
    debt_ledger,
    transactions_for_baby,
    transactions_for_card,
    transactions_for_loan,
)


class SearchTransactionsUseCase:
    """Return ledger entries for list views."""

    def __init__(self, ledger_repository: LedgerRepositoryPort) -> None:
        """Initialize the use case with its required dependencies."""
        self._ledger_repository = ledger_repository

    def execute(
        self,
        scope: VisibilityScope = VisibilityScope.FAMILY,
        current_user_id: str | None = None,
        query: str | None = None,
        baby_id: str | None = None,
        card_id: str | None = None,
        loan_id: str | None = None,
        debts_only: bool = False,
    ) -> list[Transaction]:
        """Return visible transactions, optionally narrowed to a sub-ledger."""
        snapshot = self._ledger_repository.fetch_snapshot()
        transactions = scoped_transactions(
            snapshot,
            scope,
            current_user_id,
            query=query,
        )
        if baby_id:
            transactions = transactions_for_baby(transactions, baby_id)
        if card_id:
            transactions = transactions_for_card(transactions, card_id)
        if loan_id:
            transactions = transactions_for_loan(transactions, loan_id)
        if debts_only:
            transactions = debt_ledger(transactions)
        return transactions


__all__ = ["SearchTransactionsUseCase"]
