"""Use case to compute debt figures for the debt management view."""

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.ledger_scope import scoped_transactions
from src.domain.models.finance import DebtOverview, VisibilityScope
from src.domain.services.balances import compute_debt_overview
from src.infrastructure.logging.logger import get_app_logger


class GetDebtOverviewUseCase:
    """Compute card, loan and group debt from the ledger."""

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
        scope: VisibilityScope = VisibilityScope.FAMILY,
        current_user_id: str | None = None,
    ) -> DebtOverview:
        """Return the debt overview.

        Per-account balances use every linked transaction; totals use the
        visibility-scoped ledger.

        Args:
            scope: Visibility scope.
            current_user_id: Signed-in member for the "self" scope.

        Returns:
            DebtOverview: Aggregated debt figures.
        """
        snapshot = self._ledger_repository.fetch_snapshot()
        transactions = scoped_transactions(snapshot, scope, current_user_id)
        overview = compute_debt_overview(
            transactions,
            snapshot.credit_cards,
            snapshot.loans,
            account_transactions=snapshot.transactions,
            logger=self._logger,
        )
        self._logger.info(
            f"Debt overview computed: total={overview.total_debt}, "
            f"headline={overview.headline_total}"
        )
        return overview


__all__ = ["GetDebtOverviewUseCase", "DebtOverview"]
