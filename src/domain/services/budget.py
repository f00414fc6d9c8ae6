"""Monthly budget consumption."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from src.domain.models.finance import BudgetHealth, Granularity
from src.domain.models.ledger import Transaction
from src.domain.services.periods import aggregate_period


def budget_health(
    transactions: Iterable[Transaction],
    monthly_budget: Decimal,
    today: date,
) -> BudgetHealth:
    """Return how much of this month's budget is left.

    Args:
        transactions: Visibility-scoped ledger.
        monthly_budget: Configured spending limit per month.
        today: Current calendar day.

    Returns:
        BudgetHealth: Spent and remaining amounts, and the remaining share
        clamped to [0, 100] (0 when no budget is set).
    """
    spent = aggregate_period(transactions, today, Granularity.MONTH).expense
    remaining = monthly_budget - spent
    if monthly_budget <= 0:
        health = Decimal("0")
    else:
        health = remaining / monthly_budget * Decimal("100")
        health = max(Decimal("0"), min(Decimal("100"), health))
    return BudgetHealth(
        budget=monthly_budget,
        spent=spent,
        remaining=remaining,
        health_percent=health,
    )


__all__ = ["budget_health"]
