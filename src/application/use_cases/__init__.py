"""Application use cases package."""

from .deposit_to_goal import DepositToGoalUseCase
from .get_dashboard_overview import (
    DashboardOverview,
    GetDashboardOverviewUseCase,
)
from .get_debt_overview import DebtOverview, GetDebtOverviewUseCase
from .get_period_summary import GetPeriodSummaryUseCase, PeriodSummary
from .get_upcoming_reminders import GetUpcomingRemindersUseCase, Reminder
from .record_parsed_transaction import RecordParsedTransactionUseCase
from .search_transactions import SearchTransactionsUseCase

__all__ = [
    "DepositToGoalUseCase",
    "DashboardOverview",
    "GetDashboardOverviewUseCase",
    "DebtOverview",
    "GetDebtOverviewUseCase",
    "GetPeriodSummaryUseCase",
    "PeriodSummary",
    "GetUpcomingRemindersUseCase",
    "Reminder",
    "RecordParsedTransactionUseCase",
    "SearchTransactionsUseCase",
]
