"""Composition root for wiring infrastructure adapters."""

from datetime import datetime
from typing import Callable

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.ports.transaction_parser import TransactionParserPort
from src.application.use_cases.deposit_to_goal import DepositToGoalUseCase
from src.application.use_cases.get_dashboard_overview import (
    GetDashboardOverviewUseCase,
)
from src.application.use_cases.get_debt_overview import GetDebtOverviewUseCase
from src.application.use_cases.get_period_summary import (
    GetPeriodSummaryUseCase,
)
from src.application.use_cases.get_upcoming_reminders import (
    GetUpcomingRemindersUseCase,
)
from src.application.use_cases.record_parsed_transaction import (
    RecordParsedTransactionUseCase,
)
from src.application.use_cases.search_transactions import (
    SearchTransactionsUseCase,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.ledger_repository import SqlAlchemyLedgerRepository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerSettings

Clock = Callable[[], datetime]


def build_settings() -> LedgerSettings:
    """Return settings sourced from the environment."""
    return LedgerSettings.from_env()


def build_clock() -> Clock:
    """Return the source of the current time for every use case."""
    return datetime.now


def build_database_adapter(
    settings: LedgerSettings | None = None,
) -> DatabaseEnginePort:
    """Return the database adapter instance.

    Without explicit settings the adapter shares the process-wide engine.
    """
    if settings is None:
        return SqlAlchemyDatabaseEngineAdapter()
    return SqlAlchemyDatabaseEngineAdapter(settings.db_url)


def build_ledger_repository(
    db_port: DatabaseEnginePort | None = None,
) -> SqlAlchemyLedgerRepository:
    """Return the ledger repository backed by the configured database."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyLedgerRepository(resolved_db, logger=get_app_logger())


def build_period_summary_use_case(
    repository: LedgerRepositoryPort | None = None,
) -> GetPeriodSummaryUseCase:
    """Return the statistics use case."""
    return GetPeriodSummaryUseCase(repository or build_ledger_repository())


def build_debt_overview_use_case(
    repository: LedgerRepositoryPort | None = None,
) -> GetDebtOverviewUseCase:
    """Return the debt overview use case."""
    return GetDebtOverviewUseCase(repository or build_ledger_repository())


def build_reminders_use_case(
    repository: LedgerRepositoryPort | None = None,
    clock: Clock | None = None,
) -> GetUpcomingRemindersUseCase:
    """Return the reminders use case."""
    return GetUpcomingRemindersUseCase(
        repository or build_ledger_repository(),
        clock=clock or build_clock(),
    )


def build_dashboard_use_case(
    repository: LedgerRepositoryPort | None = None,
    settings: LedgerSettings | None = None,
    clock: Clock | None = None,
) -> GetDashboardOverviewUseCase:
    """Return the home view use case with the configured budget."""
    resolved = settings or build_settings()
    return GetDashboardOverviewUseCase(
        repository or build_ledger_repository(),
        clock=clock or build_clock(),
        monthly_budget=resolved.monthly_budget,
    )


def build_search_use_case(
    repository: LedgerRepositoryPort | None = None,
) -> SearchTransactionsUseCase:
    """Return the transaction search use case."""
    return SearchTransactionsUseCase(repository or build_ledger_repository())


def build_deposit_use_case(
    repository: LedgerRepositoryPort | None = None,
    clock: Clock | None = None,
) -> DepositToGoalUseCase:
    """Return the goal deposit use case."""
    return DepositToGoalUseCase(
        repository or build_ledger_repository(),
        clock=clock or build_clock(),
    )


def build_record_transaction_use_case(
    parser: TransactionParserPort | None,
    repository: LedgerRepositoryPort | None = None,
    clock: Clock | None = None,
) -> RecordParsedTransactionUseCase:
    """Return the parsed-transaction intake use case.

    Raises:
        RuntimeError: If no parser is supplied.
    """
    if parser is None:
        raise RuntimeError("Transaction intake requires a parser adapter.")
    return RecordParsedTransactionUseCase(
        repository or build_ledger_repository(),
        parser,
        clock=clock or build_clock(),
    )


__all__ = [
    "build_settings",
    "build_clock",
    "build_database_adapter",
    "build_ledger_repository",
    "build_period_summary_use_case",
    "build_debt_overview_use_case",
    "build_reminders_use_case",
    "build_dashboard_use_case",
    "build_search_use_case",
    "build_deposit_use_case",
    "build_record_transaction_use_case",
]
