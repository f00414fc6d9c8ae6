"""Tests for calendar period aggregation."""

from datetime import date, datetime
from decimal import Decimal

from src.domain.models.categories import Category, TransactionType
from src.domain.models.finance import Granularity
from src.domain.models.ledger import Transaction
from src.domain.services.balances import category_debt
from src.domain.services.periods import (
    aggregate_period,
    build_buckets,
    expense_by_category,
    previous_anchor,
    summarize_period,
)


def _tx(
    tx_id: str,
    tx_type: TransactionType,
    amount: str,
    when: datetime | None,
    category=Category.OTHER,
) -> Transaction:
    return Transaction(
        id=tx_id,
        amount=Decimal(amount),
        type=tx_type,
        category=category,
        date=when,
        note="",
        user_id="u1",
    )


def _june_ledger() -> list[Transaction]:
    return [
        _tx("t1", TransactionType.EXPENSE, "100", datetime(2024, 6, 1)),
        _tx("t2", TransactionType.INCOME, "500", datetime(2024, 6, 1)),
        _tx(
            "t3",
            TransactionType.DEBT,
            "200",
            datetime(2024, 6, 5),
            Category.CREDIT_CARD,
        ),
        _tx(
            "t4",
            TransactionType.REPAYMENT,
            "50",
            datetime(2024, 6, 10),
            Category.CREDIT_CARD,
        ),
    ]


def test_june_scenario_totals_and_card_category_debt():
    ledger = _june_ledger()

    totals = aggregate_period(ledger, date(2024, 6, 15), Granularity.MONTH)

    assert totals.income == Decimal("500")
    assert totals.expense == Decimal("100")
    assert totals.debt_issued == Decimal("200")
    assert totals.debt_repaid == Decimal("50")
    assert category_debt(ledger, {Category.CREDIT_CARD}) == Decimal("150")


def test_previous_anchor_rolls_over_the_year():
    assert previous_anchor(date(2024, 1, 31), Granularity.MONTH) == date(
        2023, 12, 1
    )
    assert previous_anchor(date(2024, 3, 31), Granularity.MONTH) == date(
        2024, 2, 1
    )
    assert previous_anchor(date(2024, 7, 4), Granularity.YEAR) == date(
        2023, 1, 1
    )


def test_summary_compares_with_previous_month_across_year_boundary():
    ledger = [
        _tx("a", TransactionType.INCOME, "100", datetime(2023, 12, 20)),
        _tx("b", TransactionType.INCOME, "150", datetime(2024, 1, 3)),
    ]

    summary = summarize_period(ledger, date(2024, 1, 10), Granularity.MONTH)

    assert summary.previous.income == Decimal("100")
    assert summary.current.income == Decimal("150")
    assert summary.income_delta.difference == Decimal("50")
    assert summary.income_delta.percent == Decimal("50")
    assert summary.month == 1


def test_percent_delta_is_zero_without_previous_baseline():
    ledger = [_tx("a", TransactionType.EXPENSE, "80", datetime(2024, 6, 2))]

    summary = summarize_period(ledger, date(2024, 6, 1), Granularity.MONTH)

    assert summary.expense_delta.previous == Decimal("0")
    assert summary.expense_delta.percent == Decimal("0")


def test_daily_buckets_cover_the_month_and_sum_to_period_expense():
    ledger = _june_ledger() + [
        _tx("t5", TransactionType.EXPENSE, "30.5", datetime(2024, 6, 30)),
        _tx("t6", TransactionType.EXPENSE, "99", datetime(2024, 7, 1)),
    ]
    anchor = date(2024, 6, 1)

    buckets = build_buckets(ledger, anchor, Granularity.MONTH)
    totals = aggregate_period(ledger, anchor, Granularity.MONTH)

    assert [b.index for b in buckets] == list(range(1, 31))
    assert buckets[0].label == "1"
    assert buckets[1].expense == Decimal("0")
    assert buckets[4].debt == Decimal("200")
    assert sum((b.expense for b in buckets), Decimal("0")) == totals.expense


def test_daily_buckets_count_entries_of_every_type():
    buckets = build_buckets(_june_ledger(), date(2024, 6, 15), Granularity.MONTH)

    counts = {b.index: b.transaction_count for b in buckets if b.transaction_count}
    assert counts == {1: 2, 5: 1, 10: 1}
    assert buckets[9].expense == Decimal("0")


def test_february_leap_year_has_29_day_buckets():
    buckets = build_buckets([], date(2024, 2, 10), Granularity.MONTH)
    assert len(buckets) == 29
    assert all(b.income == 0 and b.expense == 0 for b in buckets)


def test_year_granularity_buckets_by_month():
    ledger = [
        _tx("a", TransactionType.INCOME, "10", datetime(2024, 1, 5)),
        _tx("b", TransactionType.INCOME, "20", datetime(2024, 12, 31)),
        _tx("c", TransactionType.INCOME, "40", datetime(2023, 12, 31)),
    ]

    summary = summarize_period(ledger, date(2024, 5, 5), Granularity.YEAR)

    assert len(summary.buckets) == 12
    assert summary.buckets[0].income == Decimal("10")
    assert summary.buckets[11].income == Decimal("20")
    assert summary.current.income == Decimal("30")
    assert summary.previous.income == Decimal("40")
    assert summary.month is None


def test_undated_transactions_belong_to_no_period():
    ledger = [_tx("a", TransactionType.EXPENSE, "10", None)]

    summary = summarize_period(ledger, date(2024, 6, 1), Granularity.MONTH)

    assert summary.current.expense == Decimal("0")
    assert summary.categories == []


def test_expense_by_category_sorts_descending_with_stable_ties():
    ledger = [
        _tx("a", TransactionType.EXPENSE, "10", datetime(2024, 6, 1),
            Category.TRANSPORT),
        _tx("b", TransactionType.EXPENSE, "50", datetime(2024, 6, 1),
            Category.FOOD),
        _tx("c", TransactionType.EXPENSE, "10", datetime(2024, 6, 1),
            Category.HEALTH),
        _tx("d", TransactionType.INCOME, "999", datetime(2024, 6, 1),
            Category.SALARY),
    ]

    breakdown = expense_by_category(ledger)

    assert [item.category for item in breakdown] == [
        Category.FOOD,
        Category.TRANSPORT,
        Category.HEALTH,
    ]


def test_net_savings_and_savings_rate():
    summary = summarize_period(
        _june_ledger(), date(2024, 6, 1), Granularity.MONTH
    )

    assert summary.net_savings == Decimal("400")
    assert summary.savings_rate == Decimal("80")


def test_summary_is_idempotent():
    ledger = _june_ledger()
    anchor = date(2024, 6, 1)

    first = summarize_period(ledger, anchor, Granularity.MONTH)
    second = summarize_period(ledger, anchor, Granularity.MONTH)

    assert first == second
