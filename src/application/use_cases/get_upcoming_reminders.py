"""Use case to list upcoming billing and repayment dates."""

from datetime import datetime
from typing import Callable

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models.finance import Reminder
from src.domain.services.reminders import upcoming_reminders
from src.infrastructure.logging.logger import get_app_logger


class GetUpcomingRemindersUseCase:
    """Derive reminders from card and loan settings."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing the entity snapshot.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Callable returning the current time.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()
        self._clock = clock or datetime.now

    def execute(self, now: datetime | None = None) -> list[Reminder]:
        """Return reminders due within their windows, soonest first.

        Args:
            now: Current time; defaults to the injected clock.

        Returns:
            list[Reminder]: Sorted reminders.
        """
        current = now or self._clock()
        snapshot = self._ledger_repository.fetch_snapshot()
        reminders = upcoming_reminders(
            snapshot.credit_cards,
            snapshot.loans,
            current.date(),
            transactions=snapshot.transactions,
            logger=self._logger,
        )
        self._logger.info(
            f"{len(reminders)} reminders due as of {current.date().isoformat()}"
        )
        return reminders


__all__ = ["GetUpcomingRemindersUseCase", "Reminder"]
