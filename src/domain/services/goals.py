"""Savings goal progress and deposits."""

from collections.abc import Iterable
from dataclasses import replace
from datetime import datetime
from decimal import Decimal

from src.domain.errors import GoalDepositError
from src.domain.models.categories import Category, TransactionType
from src.domain.models.finance import GoalProgress
from src.domain.models.ledger import SavingsGoal, Transaction

_HUNDRED = Decimal("100")


def goal_progress(goal: SavingsGoal) -> GoalProgress:
    """Return display progress, clamped to 100 percent."""
    if goal.target_amount <= 0:
        percent = Decimal("0")
    else:
        ratio = goal.current_amount / goal.target_amount * _HUNDRED
        percent = min(ratio, _HUNDRED)
    return GoalProgress(
        goal_id=goal.id,
        name=goal.name,
        current_amount=goal.current_amount,
        target_amount=goal.target_amount,
        percent=percent,
    )


def goals_progress(goals: Iterable[SavingsGoal]) -> list[GoalProgress]:
    """Return display progress of every goal in order."""
    return [goal_progress(goal) for goal in goals]


def deposit_to_goal(
    goals: Iterable[SavingsGoal],
    goal_id: str,
    amount: Decimal,
    *,
    user_id: str,
    now: datetime,
    transaction_id: str,
) -> tuple[tuple[SavingsGoal, ...], Transaction]:
    """Move money into a goal.

    The deposit is not checked against flexible cash; allocating more than
    is spendable is allowed.

    Args:
        goals: Current goals.
        goal_id: Goal receiving the deposit.
        amount: Positive amount to deposit.
        user_id: Member making the deposit.
        now: Timestamp of the deposit.
        transaction_id: Identifier for the generated ledger entry.

    Returns:
        tuple: Updated goals and the EXPENSE entry recording the deposit.

    Raises:
        GoalDepositError: If the amount is not positive or the goal is unknown.
    """
    if amount <= 0:
        raise GoalDepositError(f"Deposit amount must be positive: {amount}")
    updated: list[SavingsGoal] = []
    target: SavingsGoal | None = None
    for goal in goals:
        if goal.id == goal_id:
            goal = replace(goal, current_amount=goal.current_amount + amount)
            target = goal
        updated.append(goal)
    if target is None:
        raise GoalDepositError(f"Unknown savings goal id={goal_id}")
    transaction = Transaction(
        id=transaction_id,
        amount=amount,
        type=TransactionType.EXPENSE,
        category=Category.INVESTMENT,
        date=now,
        note=f"Deposit to goal: {target.name}",
        user_id=user_id,
    )
    return tuple(updated), transaction


__all__ = ["goal_progress", "goals_progress", "deposit_to_goal"]
