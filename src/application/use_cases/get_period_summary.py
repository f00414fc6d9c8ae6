"""Use case to compute the statistics view of a month or a year."""

from datetime import date

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.ledger_scope import scoped_transactions
from src.domain.models.finance import (
    Granularity,
    PeriodSummary,
    VisibilityScope,
)
from src.domain.services.periods import summarize_period
from src.infrastructure.logging.logger import get_app_logger


class GetPeriodSummaryUseCase:
    """Compute period totals, comparison, buckets and category breakdown."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing the entity snapshot.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        anchor: date,
        granularity: Granularity = Granularity.MONTH,
        scope: VisibilityScope = VisibilityScope.FAMILY,
        current_user_id: str | None = None,
    ) -> PeriodSummary:
        """Return the statistics view of the anchor's period.

        Args:
            anchor: Any date inside the requested period.
            granularity: MONTH or YEAR.
            scope: Visibility scope.
            current_user_id: Signed-in member for the "self" scope.

        Returns:
            PeriodSummary: Aggregated figures for the period.
        """
        snapshot = self._ledger_repository.fetch_snapshot()
        transactions = scoped_transactions(snapshot, scope, current_user_id)
        summary = summarize_period(transactions, anchor, granularity)
        self._logger.info(
            f"Period summary {granularity.value} {anchor.isoformat()}: "
            f"income={summary.current.income}, "
            f"expense={summary.current.expense}"
        )
        return summary


__all__ = ["GetPeriodSummaryUseCase", "PeriodSummary"]
