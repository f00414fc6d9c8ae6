"""Domain models for derived ledger views."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from .categories import Category, TransactionCategory, TransactionType


class Granularity(str, Enum):
    """Period size used for aggregation."""

    MONTH = "MONTH"
    YEAR = "YEAR"


class VisibilityScope(str, Enum):
    """Which members' transactions are visible."""

    SELF = "self"
    FAMILY = "family"


class ReminderKind(str, Enum):
    """Reminder origin."""

    CARD_BILL = "CARD_BILL"
    CARD_REPAY = "CARD_REPAY"
    LOAN = "LOAN"


@dataclass(frozen=True)
class PeriodTotals:
    """Sums of each transaction type over a period.

    Attributes:
        income: Sum of INCOME amounts.
        expense: Sum of EXPENSE amounts.
        debt_issued: Sum of DEBT amounts.
        debt_repaid: Sum of REPAYMENT amounts.
    """

    income: Decimal = Decimal("0")
    expense: Decimal = Decimal("0")
    debt_issued: Decimal = Decimal("0")
    debt_repaid: Decimal = Decimal("0")


@dataclass(frozen=True)
class MetricDelta:
    """Change of a metric against the previous period."""

    current: Decimal
    previous: Decimal
    difference: Decimal
    percent: Decimal


@dataclass(frozen=True)
class TimeBucket:
    """Chart bucket (a day of a month, or a month of a year)."""

    index: int
    label: str
    income: Decimal = Decimal("0")
    expense: Decimal = Decimal("0")
    debt: Decimal = Decimal("0")
    transaction_count: int = 0


@dataclass(frozen=True)
class CategoryAmount:
    """Expense total for a category."""

    category: TransactionCategory
    amount: Decimal


@dataclass(frozen=True)
class PeriodSummary:
    """Everything the statistics view needs for one period."""

    granularity: Granularity
    year: int
    month: int | None
    current: PeriodTotals
    previous: PeriodTotals
    income_delta: MetricDelta
    expense_delta: MetricDelta
    debt_delta: MetricDelta
    buckets: list[TimeBucket]
    categories: list[CategoryAmount]

    @property
    def net_savings(self) -> Decimal:
        """Return income minus expense for the current period."""
        return self.current.income - self.current.expense

    @property
    def savings_rate(self) -> Decimal:
        """Return net savings as a percentage of income (0 without income)."""
        if self.current.income <= 0:
            return Decimal("0")
        return self.net_savings / self.current.income * Decimal("100")


@dataclass(frozen=True)
class BudgetHealth:
    """Monthly budget consumption."""

    budget: Decimal
    spent: Decimal
    remaining: Decimal
    health_percent: Decimal


@dataclass(frozen=True)
class AccountBalance:
    """Outstanding balance of a card or loan."""

    account_id: str
    name: str
    outstanding: Decimal


@dataclass(frozen=True)
class DebtGroupAmount:
    """Net debt of a group of debt categories."""

    group: str
    amount: Decimal


@dataclass(frozen=True)
class DebtOverview:
    """Aggregated debt figures for the debt management view."""

    credit_card_debt: Decimal
    cards: list[AccountBalance]
    loans: list[AccountBalance]
    groups: list[DebtGroupAmount]
    total_debt: Decimal

    @property
    def headline_total(self) -> Decimal:
        """Return card debt plus every loan's outstanding balance."""
        return self.credit_card_debt + sum(
            (loan.outstanding for loan in self.loans),
            Decimal("0"),
        )


@dataclass(frozen=True)
class BabySpend:
    """Spending attributed to a single baby."""

    baby_id: str
    name: str
    amount: Decimal
    transaction_count: int


@dataclass(frozen=True)
class BabySpendSummary:
    """Child-related spending for the household."""

    per_baby: list[BabySpend]
    unattributed: Decimal
    total: Decimal


@dataclass(frozen=True)
class GoalProgress:
    """Display progress of a savings goal."""

    goal_id: str
    name: str
    current_amount: Decimal
    target_amount: Decimal
    percent: Decimal


@dataclass(frozen=True)
class RepaymentDraft:
    """Pre-filled values for a repayment the caller may record."""

    type: TransactionType
    category: Category
    amount: Decimal
    note: str
    card_id: str | None = None
    loan_id: str | None = None


@dataclass(frozen=True)
class Reminder:
    """Upcoming billing or repayment date."""

    id: str
    kind: ReminderKind
    account_id: str
    title: str
    subtitle: str
    days_left: int
    amount: Decimal | None = None
    draft: RepaymentDraft | None = None


@dataclass(frozen=True)
class DashboardOverview:
    """Headline figures for the home view."""

    cash_balance: Decimal
    flexible_cash: Decimal
    month_income: Decimal
    month_expense: Decimal
    budget: BudgetHealth
    streak_days: int
    credit_card_debt: Decimal
    baby_spend: BabySpendSummary
    goals: list[GoalProgress]


__all__ = [
    "Granularity",
    "VisibilityScope",
    "ReminderKind",
    "PeriodTotals",
    "MetricDelta",
    "TimeBucket",
    "CategoryAmount",
    "PeriodSummary",
    "BudgetHealth",
    "AccountBalance",
    "DebtGroupAmount",
    "DebtOverview",
    "BabySpend",
    "BabySpendSummary",
    "GoalProgress",
    "RepaymentDraft",
    "Reminder",
    "DashboardOverview",
]
