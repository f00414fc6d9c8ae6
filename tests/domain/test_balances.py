"""Tests for debt and cash balance calculations."""

from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock

from src.domain.models.categories import Category, TransactionType
from src.domain.models.ledger import (
    CreditCardAccount,
    LoanAccount,
    SavingsGoal,
    Transaction,
)
from src.domain.services.balances import (
    card_balance,
    cash_balance,
    category_debt,
    compute_debt_overview,
    credit_card_debt,
    flexible_cash,
    loan_balance,
    total_debt,
)


def _tx(tx_type, amount, category=Category.OTHER, **links) -> Transaction:
    return Transaction(
        id=f"{tx_type.value}-{amount}",
        amount=Decimal(amount),
        type=tx_type,
        category=category,
        date=datetime(2024, 6, 1),
        note="",
        user_id=links.pop("user_id", "u1"),
        **links,
    )


def _card(balance="0", card_id="c1") -> CreditCardAccount:
    return CreditCardAccount(
        id=card_id,
        bank_name="CMB",
        card_name="Gold",
        last4_digits="1234",
        credit_limit=Decimal("50000"),
        bill_day=5,
        repayment_day=23,
        balance=Decimal(balance),
    )


def _loan(balance="100000") -> LoanAccount:
    return LoanAccount(
        id="l1",
        name="Home",
        bank_name="ICBC",
        total_amount=Decimal("1000000"),
        balance=Decimal(balance),
        interest_day=20,
        monthly_repayment=Decimal("5000"),
    )


def test_card_balance_adds_linked_flows_to_baseline():
    ledger = [
        _tx(TransactionType.DEBT, "300", card_id="c1"),
        _tx(TransactionType.REPAYMENT, "100", card_id="c1"),
        _tx(TransactionType.DEBT, "999", card_id="other"),
        _tx(TransactionType.EXPENSE, "50", card_id="c1"),
    ]

    assert card_balance("c1", [_card("1000")], ledger) == Decimal("1200")


def test_card_balance_is_floored_at_zero():
    ledger = [_tx(TransactionType.REPAYMENT, "500", card_id="c1")]

    assert card_balance("c1", [_card("100")], ledger) == Decimal("0")


def test_card_balance_of_unknown_card_is_zero_and_warns():
    logger = MagicMock()

    assert card_balance("missing", [_card()], [], logger) == Decimal("0")
    logger.warning.assert_called_once()


def test_loan_balance_follows_card_formula():
    ledger = [
        _tx(TransactionType.REPAYMENT, "5000", loan_id="l1"),
        _tx(TransactionType.DEBT, "1000", loan_id="l1"),
    ]

    assert loan_balance("l1", [_loan()], ledger) == Decimal("96000")


def test_category_debt_is_not_floored():
    ledger = [
        _tx(TransactionType.DEBT, "100", Category.BORROWING),
        _tx(TransactionType.REPAYMENT, "250", Category.BORROWING),
    ]

    assert category_debt(ledger, {Category.BORROWING}) == Decimal("-150")


def test_total_debt_ignores_income_and_expense():
    ledger = [
        _tx(TransactionType.DEBT, "400"),
        _tx(TransactionType.REPAYMENT, "150"),
        _tx(TransactionType.INCOME, "1000"),
        _tx(TransactionType.EXPENSE, "70"),
    ]

    assert total_debt(ledger) == Decimal("250")


def test_credit_card_debt_counts_each_entry_once():
    ledger = [
        _tx(TransactionType.DEBT, "200", Category.CREDIT_CARD, card_id="c1"),
        _tx(TransactionType.DEBT, "50", Category.SHOPPING, card_id="c1"),
        _tx(TransactionType.REPAYMENT, "30", Category.CREDIT_CARD),
        _tx(TransactionType.EXPENSE, "80", Category.CREDIT_CARD),
    ]

    assert credit_card_debt(ledger) == Decimal("220")


def test_cash_balance_treats_borrowing_as_cash():
    ledger = [
        _tx(TransactionType.INCOME, "1000"),
        _tx(TransactionType.DEBT, "200"),
        _tx(TransactionType.EXPENSE, "300"),
        _tx(TransactionType.REPAYMENT, "100"),
    ]

    assert cash_balance(ledger) == Decimal("800")


def test_flexible_cash_subtracts_goal_allocations():
    ledger = [_tx(TransactionType.INCOME, "1000")]
    goals = [
        SavingsGoal(id="g1", name="Trip", target_amount=Decimal("5000"),
                    current_amount=Decimal("300")),
        SavingsGoal(id="g2", name="Car", target_amount=Decimal("9000"),
                    current_amount=Decimal("900")),
    ]

    assert flexible_cash(ledger, goals) == Decimal("-200")


def test_debt_overview_uses_full_ledger_for_accounts():
    scoped = [
        _tx(TransactionType.DEBT, "100", Category.CREDIT_CARD, card_id="c1"),
        _tx(TransactionType.DEBT, "3000", Category.MORTGAGE, loan_id="l1"),
    ]
    everyone = scoped + [
        _tx(TransactionType.DEBT, "40", Category.CREDIT_CARD, card_id="c1",
            user_id="u2"),
    ]

    overview = compute_debt_overview(
        scoped,
        [_card("10")],
        [_loan("1000")],
        account_transactions=everyone,
    )

    assert overview.cards[0].outstanding == Decimal("150")
    assert overview.cards[0].name == "CMB Gold"
    assert overview.loans[0].outstanding == Decimal("4000")
    assert overview.credit_card_debt == Decimal("100")
    assert [g.group for g in overview.groups] == ["CREDIT", "BANK", "PRIVATE"]
    assert overview.groups[0].amount == Decimal("100")
    assert overview.groups[1].amount == Decimal("3000")
    assert overview.groups[2].amount == Decimal("0")
    assert overview.total_debt == Decimal("3100")
    assert overview.headline_total == Decimal("4100")


def test_debt_overview_tolerates_dangling_account_ids():
    logger = MagicMock()
    ledger = [
        _tx(TransactionType.DEBT, "70", Category.CREDIT_CARD,
            card_id="deleted"),
    ]

    overview = compute_debt_overview(ledger, [_card()], [], logger=logger)

    assert overview.cards[0].outstanding == Decimal("0")
    assert overview.credit_card_debt == Decimal("70")
    assert overview.total_debt == Decimal("70")
    logger.info.assert_called_once()
