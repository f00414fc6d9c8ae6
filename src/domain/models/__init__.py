"""Domain models package."""

from .categories import (
    Category,
    TransactionCategory,
    TransactionType,
    UnrecognizedCategory,
)
from .finance import (
    AccountBalance,
    BabySpend,
    BabySpendSummary,
    BudgetHealth,
    CategoryAmount,
    DashboardOverview,
    DebtGroupAmount,
    DebtOverview,
    GoalProgress,
    Granularity,
    MetricDelta,
    PeriodSummary,
    PeriodTotals,
    Reminder,
    ReminderKind,
    RepaymentDraft,
    TimeBucket,
    VisibilityScope,
)
from .ledger import (
    Baby,
    CreditCardAccount,
    LedgerSnapshot,
    LoanAccount,
    Permissions,
    SavingsGoal,
    Transaction,
    User,
)

__all__ = [
    "Category",
    "TransactionCategory",
    "TransactionType",
    "UnrecognizedCategory",
    "AccountBalance",
    "BabySpend",
    "BabySpendSummary",
    "BudgetHealth",
    "CategoryAmount",
    "DashboardOverview",
    "DebtGroupAmount",
    "DebtOverview",
    "GoalProgress",
    "Granularity",
    "MetricDelta",
    "PeriodSummary",
    "PeriodTotals",
    "Reminder",
    "ReminderKind",
    "RepaymentDraft",
    "TimeBucket",
    "VisibilityScope",
    "Baby",
    "CreditCardAccount",
    "LedgerSnapshot",
    "LoanAccount",
    "Permissions",
    "SavingsGoal",
    "Transaction",
    "User",
]
