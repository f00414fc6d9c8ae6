"""Presentation helpers for the Streamlit dashboard.

Everything here is pure: it turns domain results into strings and
Altair-ready records so the rendering code stays thin and testable.
"""

from collections.abc import Sequence
from decimal import Decimal

from src.domain.models.finance import (
    CategoryAmount,
    GoalProgress,
    MetricDelta,
    Reminder,
    TimeBucket,
)
from src.domain.models.ledger import Transaction

CURRENCY_SYMBOL = "¥"


def format_currency(value: Decimal, symbol: str = CURRENCY_SYMBOL) -> str:
    """Format currency values for display."""
    return f"{symbol}{value:,.2f}"


def format_delta(value: Decimal) -> str:
    """Format delta values for display."""
    sign = "+" if value >= 0 else ""
    return f"{sign}{value:,.2f}"


def format_metric_delta(delta: MetricDelta) -> str:
    """Format a period comparison with its percentage change.

    The percentage is omitted when there is no positive baseline.
    """
    if delta.previous <= 0:
        return format_delta(delta.difference)
    sign = "+" if delta.percent >= 0 else ""
    return f"{format_delta(delta.difference)} ({sign}{delta.percent:.1f}%)"


def format_days_left(days_left: int) -> str:
    """Return the countdown label of a reminder."""
    if days_left == 0:
        return "Today"
    if days_left == 1:
        return "Tomorrow"
    return f"In {days_left} days"


def bucket_chart_data(
    buckets: Sequence[TimeBucket],
) -> list[dict[str, str | int | float]]:
    """Return long-form records for the income/expense/debt trend chart.

    Args:
        buckets: Period buckets in calendar order.

    Returns:
        list[dict]: One record per bucket and series, each carrying the
        bucket's entry count.
    """
    data: list[dict[str, str | int | float]] = []
    for bucket in buckets:
        for series, amount in (
            ("Income", bucket.income),
            ("Expense", bucket.expense),
            ("Debt", bucket.debt),
        ):
            data.append(
                {
                    "index": bucket.index,
                    "label": bucket.label,
                    "series": series,
                    "amount": float(amount),
                    "entries": bucket.transaction_count,
                }
            )
    return data


def prepare_donut_chart_data(
    categories: Sequence[CategoryAmount],
    max_categories: int = 6,
) -> tuple[list[dict[str, str | float]], Decimal]:
    """Prepare donut chart data with a Top-N + Other grouping.

    Args:
        categories: Expense totals sorted by amount descending.
        max_categories: Maximum categories to keep before grouping into Other.

    Returns:
        Tuple with Altair-ready chart data and the total amount.
    """
    top_items = [
        (item.category.label, item.amount)
        for item in categories[:max_categories]
    ]
    other_amount = sum(
        (item.amount for item in categories[max_categories:]),
        start=Decimal("0"),
    )
    if other_amount != 0:
        top_items.append(("Other", other_amount))
    total_amount = sum(
        (item.amount for item in categories),
        start=Decimal("0"),
    )
    data: list[dict[str, str | float]] = []
    for label, amount in top_items:
        share = (
            (amount / total_amount) * Decimal("100")
            if total_amount
            else Decimal("0")
        )
        data.append(
            {
                "category": label,
                "amount": float(amount),
                "amount_label": format_currency(amount),
                "share_label": f"{share:.1f}%",
            }
        )
    return data, total_amount


def reminder_rows(reminders: Sequence[Reminder]) -> list[dict[str, str]]:
    """Return table rows for reminders."""
    return [
        {
            "When": format_days_left(reminder.days_left),
            "Reminder": reminder.title,
            "Details": reminder.subtitle,
            "Amount": (
                format_currency(reminder.amount)
                if reminder.amount is not None
                else ""
            ),
        }
        for reminder in reminders
    ]


def goal_rows(goals: Sequence[GoalProgress]) -> list[dict[str, str | float]]:
    """Return table rows for savings goals, progress as a 0..1 fraction."""
    return [
        {
            "Goal": goal.name,
            "Saved": format_currency(goal.current_amount),
            "Target": format_currency(goal.target_amount),
            "Progress": float(goal.percent / Decimal("100")),
        }
        for goal in goals
    ]


def transaction_rows(
    transactions: Sequence[Transaction],
) -> list[dict[str, str]]:
    """Return table rows for ledger entries."""
    return [
        {
            "Date": (
                transaction.date.strftime("%Y-%m-%d")
                if transaction.date
                else ""
            ),
            "Type": transaction.type.value,
            "Category": transaction.category.label,
            "Amount": format_currency(transaction.amount),
            "Note": transaction.note,
        }
        for transaction in transactions
    ]


__all__ = [
    "CURRENCY_SYMBOL",
    "format_currency",
    "format_delta",
    "format_metric_delta",
    "format_days_left",
    "bucket_chart_data",
    "prepare_donut_chart_data",
    "reminder_rows",
    "goal_rows",
    "transaction_rows",
]
