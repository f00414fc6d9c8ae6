"""Calendar period aggregation of the ledger."""

from collections.abc import Iterable
from datetime import date, datetime
from decimal import Decimal

from src.domain.models.categories import TransactionCategory, TransactionType
from src.domain.models.finance import (
    CategoryAmount,
    Granularity,
    MetricDelta,
    PeriodSummary,
    PeriodTotals,
    TimeBucket,
)
from src.domain.models.ledger import Transaction
from src.utils.date_utils import days_in_month, shift_month
from src.utils.decimal_utils import percent_change

_ZERO = Decimal("0")


def in_period(
    moment: datetime | None,
    anchor: date,
    granularity: Granularity,
) -> bool:
    """Return True when a timestamp falls in the anchor's month or year."""
    if moment is None:
        return False
    if moment.year != anchor.year:
        return False
    if granularity == Granularity.YEAR:
        return True
    return moment.month == anchor.month


def previous_anchor(anchor: date, granularity: Granularity) -> date:
    """Return the first day of the period preceding the anchor's."""
    if granularity == Granularity.YEAR:
        return date(anchor.year - 1, 1, 1)
    year, month = shift_month(anchor.year, anchor.month, -1)
    return date(year, month, 1)


def period_transactions(
    transactions: Iterable[Transaction],
    anchor: date,
    granularity: Granularity,
) -> list[Transaction]:
    """Return transactions dated within the anchor's period."""
    return [
        t for t in transactions if in_period(t.date, anchor, granularity)
    ]


def sum_totals(transactions: Iterable[Transaction]) -> PeriodTotals:
    """Sum amounts per transaction type.

    Args:
        transactions: Entries to fold.

    Returns:
        PeriodTotals: Income, expense, debt issued and debt repaid sums.
    """
    sums = {kind: _ZERO for kind in TransactionType}
    for transaction in transactions:
        sums[transaction.type] += transaction.amount
    return PeriodTotals(
        income=sums[TransactionType.INCOME],
        expense=sums[TransactionType.EXPENSE],
        debt_issued=sums[TransactionType.DEBT],
        debt_repaid=sums[TransactionType.REPAYMENT],
    )


def aggregate_period(
    transactions: Iterable[Transaction],
    anchor: date,
    granularity: Granularity,
) -> PeriodTotals:
    """Return the per-type sums of the anchor's period."""
    return sum_totals(period_transactions(transactions, anchor, granularity))


def metric_delta(current: Decimal, previous: Decimal) -> MetricDelta:
    """Return the absolute and relative change of a metric."""
    return MetricDelta(
        current=current,
        previous=previous,
        difference=current - previous,
        percent=percent_change(current, previous),
    )


def build_buckets(
    transactions: Iterable[Transaction],
    anchor: date,
    granularity: Granularity,
) -> list[TimeBucket]:
    """Split a period into chart buckets.

    Months are split per calendar day (1..days in month), years per month
    (1..12). Empty buckets are kept with zero sums. Each bucket also
    counts its entries of every type, for activity calendars.

    Args:
        transactions: Entries already restricted to the period.
        anchor: Any date inside the period.
        granularity: Period size.

    Returns:
        list[TimeBucket]: One bucket per day or month, in calendar order.
    """
    if granularity == Granularity.MONTH:
        size = days_in_month(anchor.year, anchor.month)
    else:
        size = 12
    income = [_ZERO] * size
    expense = [_ZERO] * size
    debt = [_ZERO] * size
    counts = [0] * size
    for transaction in transactions:
        if not in_period(transaction.date, anchor, granularity):
            continue
        if granularity == Granularity.MONTH:
            position = transaction.date.day - 1
        else:
            position = transaction.date.month - 1
        counts[position] += 1
        if transaction.type == TransactionType.INCOME:
            income[position] += transaction.amount
        elif transaction.type == TransactionType.EXPENSE:
            expense[position] += transaction.amount
        elif transaction.type == TransactionType.DEBT:
            debt[position] += transaction.amount
    return [
        TimeBucket(
            index=position + 1,
            label=str(position + 1),
            income=income[position],
            expense=expense[position],
            debt=debt[position],
            transaction_count=counts[position],
        )
        for position in range(size)
    ]


def expense_by_category(
    transactions: Iterable[Transaction],
) -> list[CategoryAmount]:
    """Sum EXPENSE amounts per category, largest first.

    Ties keep the order in which categories were first encountered.
    """
    totals: dict[TransactionCategory, Decimal] = {}
    for transaction in transactions:
        if transaction.type != TransactionType.EXPENSE:
            continue
        totals[transaction.category] = (
            totals.get(transaction.category, _ZERO) + transaction.amount
        )
    ordered = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    return [
        CategoryAmount(category=category, amount=amount)
        for category, amount in ordered
    ]


def summarize_period(
    transactions: Iterable[Transaction],
    anchor: date,
    granularity: Granularity,
) -> PeriodSummary:
    """Build the full statistics view for the anchor's period.

    Args:
        transactions: Visibility-scoped ledger.
        anchor: Any date inside the requested period.
        granularity: MONTH or YEAR.

    Returns:
        PeriodSummary: Totals, previous-period comparison, chart buckets and
        the expense category breakdown.
    """
    ledger = list(transactions)
    current_tx = period_transactions(ledger, anchor, granularity)
    previous = aggregate_period(
        ledger,
        previous_anchor(anchor, granularity),
        granularity,
    )
    current = sum_totals(current_tx)
    return PeriodSummary(
        granularity=granularity,
        year=anchor.year,
        month=anchor.month if granularity == Granularity.MONTH else None,
        current=current,
        previous=previous,
        income_delta=metric_delta(current.income, previous.income),
        expense_delta=metric_delta(current.expense, previous.expense),
        debt_delta=metric_delta(current.debt_issued, previous.debt_issued),
        buckets=build_buckets(current_tx, anchor, granularity),
        categories=expense_by_category(current_tx),
    )


__all__ = [
    "in_period",
    "previous_anchor",
    "period_transactions",
    "sum_totals",
    "aggregate_period",
    "metric_delta",
    "build_buckets",
    "expense_by_category",
    "summarize_period",
]
