"""Tests for the read-only ledger use cases."""

from datetime import date, datetime
from decimal import Decimal
from unittest.mock import MagicMock

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
from src.application.use_cases.search_transactions import (
    SearchTransactionsUseCase,
)
from src.domain.models.categories import Category, TransactionType
from src.domain.models.finance import Granularity, VisibilityScope
from src.domain.models.ledger import (
    Baby,
    CreditCardAccount,
    LedgerSnapshot,
    LoanAccount,
    SavingsGoal,
    Transaction,
)

NOW = datetime(2024, 6, 13, 8, 0)


def _tx(tx_id, tx_type, amount, when, category=Category.OTHER,
        user_id="u1", **links) -> Transaction:
    return Transaction(
        id=tx_id,
        amount=Decimal(amount),
        type=tx_type,
        category=category,
        date=when,
        note="",
        user_id=user_id,
        **links,
    )


def _snapshot() -> LedgerSnapshot:
    card = CreditCardAccount(
        id="c1",
        bank_name="CMB",
        card_name="Gold",
        last4_digits="1234",
        credit_limit=Decimal("50000"),
        bill_day=15,
        repayment_day=20,
        balance=Decimal("100"),
    )
    loan = LoanAccount(
        id="l1",
        name="Home",
        bank_name="ICBC",
        total_amount=Decimal("1000000"),
        balance=Decimal("800000"),
        interest_day=14,
        monthly_repayment=Decimal("5000"),
    )
    transactions = (
        _tx("t1", TransactionType.INCOME, "10000", datetime(2024, 6, 1),
            Category.SALARY),
        _tx("t2", TransactionType.EXPENSE, "300", datetime(2024, 6, 12),
            Category.TOYS, baby_id="b1"),
        _tx("t3", TransactionType.DEBT, "200", datetime(2024, 6, 13),
            Category.CREDIT_CARD, card_id="c1"),
        _tx("t4", TransactionType.EXPENSE, "700", datetime(2024, 5, 20),
            Category.FOOD, user_id="u2"),
        _tx("t5", TransactionType.DEBT, "50", datetime(2024, 6, 2),
            Category.CREDIT_CARD, user_id="u2", card_id="c1"),
    )
    return LedgerSnapshot(
        babies=(Baby(id="b1", name="Mia"),),
        credit_cards=(card,),
        loans=(loan,),
        goals=(
            SavingsGoal(
                id="g1",
                name="Trip",
                target_amount=Decimal("2000"),
                current_amount=Decimal("500"),
            ),
        ),
        transactions=transactions,
    )


def _repository() -> MagicMock:
    repository = MagicMock()
    repository.fetch_snapshot.return_value = _snapshot()
    return repository


def test_period_summary_respects_scope() -> None:
    logger = MagicMock()
    use_case = GetPeriodSummaryUseCase(_repository(), logger=logger)

    family = use_case.execute(date(2024, 6, 1))
    mine = use_case.execute(
        date(2024, 6, 1),
        scope=VisibilityScope.SELF,
        current_user_id="u1",
    )

    assert family.current.debt_issued == Decimal("250")
    assert family.previous.expense == Decimal("700")
    assert mine.current.debt_issued == Decimal("200")
    assert mine.previous.expense == Decimal("0")
    assert mine.granularity == Granularity.MONTH
    logger.info.assert_called()


def test_debt_overview_balances_use_every_member_entry() -> None:
    use_case = GetDebtOverviewUseCase(_repository(), logger=MagicMock())

    overview = use_case.execute(
        scope=VisibilityScope.SELF,
        current_user_id="u1",
    )

    assert overview.cards[0].outstanding == Decimal("350")
    assert overview.credit_card_debt == Decimal("200")
    assert overview.loans[0].outstanding == Decimal("800000")
    assert overview.headline_total == Decimal("800200")


def test_reminders_use_injected_clock() -> None:
    repository = _repository()
    use_case = GetUpcomingRemindersUseCase(
        repository,
        logger=MagicMock(),
        clock=lambda: NOW,
    )

    reminders = use_case.execute()

    assert [r.id for r in reminders] == ["loan_l1", "bill_c1", "repay_c1"]
    assert reminders[2].amount == Decimal("350")
    repository.fetch_snapshot.assert_called_once_with()


def test_reminders_accept_explicit_now() -> None:
    use_case = GetUpcomingRemindersUseCase(_repository(), logger=MagicMock())

    reminders = use_case.execute(now=datetime(2024, 6, 25))

    assert reminders == []


def test_dashboard_overview_combines_home_figures() -> None:
    use_case = GetDashboardOverviewUseCase(
        _repository(),
        logger=MagicMock(),
        clock=lambda: NOW,
        monthly_budget=Decimal("1000"),
    )

    overview = use_case.execute(
        scope=VisibilityScope.SELF,
        current_user_id="u1",
    )

    assert overview.cash_balance == Decimal("9900")
    assert overview.flexible_cash == Decimal("9400")
    assert overview.month_income == Decimal("10000")
    assert overview.month_expense == Decimal("300")
    assert overview.budget.remaining == Decimal("700")
    assert overview.streak_days == 2
    assert overview.credit_card_debt == Decimal("200")
    assert overview.baby_spend.per_baby[0].amount == Decimal("300")
    assert overview.goals[0].percent == Decimal("25")


def test_search_narrows_to_sub_ledgers() -> None:
    use_case = SearchTransactionsUseCase(_repository())

    card_entries = use_case.execute(card_id="c1")
    my_debts = use_case.execute(
        scope=VisibilityScope.SELF,
        current_user_id="u1",
        debts_only=True,
    )
    by_query = use_case.execute(query="10000")

    assert [t.id for t in card_entries] == ["t3", "t5"]
    assert [t.id for t in my_debts] == ["t3"]
    assert [t.id for t in by_query] == ["t1"]
