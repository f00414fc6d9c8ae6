"""Use case to compute the home view headline figures."""

from datetime import datetime
from decimal import Decimal
from typing import Callable

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.ledger_scope import scoped_transactions
from src.domain.constants import DEFAULT_MONTHLY_BUDGET
from src.domain.models.finance import (
    DashboardOverview,
    Granularity,
    VisibilityScope,
)
from src.domain.services.babies import compute_baby_spend
from src.domain.services.balances import (
    cash_balance,
    credit_card_debt,
    flexible_cash,
)
from src.domain.services.budget import budget_health
from src.domain.services.goals import goals_progress
from src.domain.services.periods import aggregate_period
from src.domain.services.streak import compute_streak
from src.infrastructure.logging.logger import get_app_logger


class GetDashboardOverviewUseCase:
    """Compute cash, budget, streak, debt, baby and goal figures."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
        clock: Callable[[], datetime] | None = None,
        monthly_budget: Decimal = DEFAULT_MONTHLY_BUDGET,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing the entity snapshot.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Callable returning the current time.
            monthly_budget: Spending limit used for budget health.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()
        self._clock = clock or datetime.now
        self._monthly_budget = monthly_budget

    def execute(
        self,
        scope: VisibilityScope = VisibilityScope.FAMILY,
        current_user_id: str | None = None,
        now: datetime | None = None,
    ) -> DashboardOverview:
        """Return the home view figures.

        Args:
            scope: Visibility scope.
            current_user_id: Signed-in member for the "self" scope.
            now: Current time; defaults to the injected clock.

        Returns:
            DashboardOverview: Headline figures.
        """
        today = (now or self._clock()).date()
        snapshot = self._ledger_repository.fetch_snapshot()
        transactions = scoped_transactions(snapshot, scope, current_user_id)
        month = aggregate_period(transactions, today, Granularity.MONTH)
        overview = DashboardOverview(
            cash_balance=cash_balance(transactions),
            flexible_cash=flexible_cash(transactions, snapshot.goals),
            month_income=month.income,
            month_expense=month.expense,
            budget=budget_health(transactions, self._monthly_budget, today),
            streak_days=compute_streak(transactions, today),
            credit_card_debt=credit_card_debt(transactions),
            baby_spend=compute_baby_spend(transactions, snapshot.babies),
            goals=goals_progress(snapshot.goals),
        )
        self._logger.info(
            f"Dashboard computed for {today.isoformat()}: "
            f"cash={overview.cash_balance}, streak={overview.streak_days}"
        )
        return overview


__all__ = ["GetDashboardOverviewUseCase", "DashboardOverview"]
