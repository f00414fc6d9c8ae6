"""Port for reading and writing ledger entities."""

from typing import Protocol

from src.domain.models.ledger import (
    LedgerSnapshot,
    SavingsGoal,
    Transaction,
)


class LedgerRepositoryPort(Protocol):
    """Port exposing the entity store behind the aggregation use cases."""

    def fetch_snapshot(self) -> LedgerSnapshot:
        """Return every entity collection as a read-only snapshot."""

    def save_transaction(self, transaction: Transaction) -> None:
        """Insert or replace a transaction by id."""

    def save_goal(self, goal: SavingsGoal) -> None:
        """Insert or replace a savings goal by id."""


__all__ = ["LedgerRepositoryPort"]
