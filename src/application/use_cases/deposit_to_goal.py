"""Use case to move money into a savings goal."""

from datetime import datetime
from decimal import Decimal
from typing import Callable
from uuid import uuid4

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.models.ledger import SavingsGoal, Transaction
from src.domain.policies.permissions import ensure_can_edit
from src.domain.services.goals import deposit_to_goal
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger


class DepositToGoalUseCase:
    """Apply a deposit to a goal and record it in the ledger."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
        usage_logger=None,
        clock: Callable[[], datetime] | None = None,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port used to read goals and persist changes.
            logger: Optional logger compatible with logging.Logger-like API.
            usage_logger: Optional logger for user actions.
            clock: Callable returning the current time.
            id_factory: Callable producing new transaction ids.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()
        self._usage_logger = usage_logger or get_usage_logger()
        self._clock = clock or datetime.now
        self._id_factory = id_factory or (lambda: uuid4().hex)

    def execute(
        self,
        goal_id: str,
        amount: Decimal,
        user_id: str,
    ) -> tuple[SavingsGoal, Transaction]:
        """Deposit ``amount`` into ``goal_id``.

        Args:
            goal_id: Goal receiving the deposit.
            amount: Positive amount.
            user_id: Member making the deposit.

        Returns:
            tuple[SavingsGoal, Transaction]: Updated goal and the ledger entry.

        Raises:
            GoalDepositError: If the amount is not positive or the goal is
                unknown. Nothing is persisted in that case.
            PermissionDeniedError: If the member may not edit the ledger.
        """
        snapshot = self._ledger_repository.fetch_snapshot()
        ensure_can_edit(snapshot.users, user_id)
        goals, transaction = deposit_to_goal(
            snapshot.goals,
            goal_id,
            amount,
            user_id=user_id,
            now=self._clock(),
            transaction_id=self._id_factory(),
        )
        goal = next(item for item in goals if item.id == goal_id)
        self._ledger_repository.save_goal(goal)
        self._ledger_repository.save_transaction(transaction)
        self._logger.info(
            f"Deposited {amount} into goal {goal_id}; "
            f"now {goal.current_amount}/{goal.target_amount}"
        )
        self._usage_logger.info(
            f"user={user_id} action=goal_deposit goal={goal_id} amount={amount}"
        )
        return goal, transaction


__all__ = ["DepositToGoalUseCase"]
