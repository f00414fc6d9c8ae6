"""Domain package for ledger rules and core models."""

from .constants import (
    BABY_CATEGORIES,
    DEBT_CATEGORIES,
    DEBT_GROUPS,
    DEFAULT_MONTHLY_BUDGET,
)
from .errors import GoalDepositError, LedgerError, TransactionParsingError
from .models import (
    Baby,
    Category,
    CreditCardAccount,
    Granularity,
    LedgerSnapshot,
    LoanAccount,
    Permissions,
    SavingsGoal,
    Transaction,
    TransactionType,
    UnrecognizedCategory,
    User,
    VisibilityScope,
)
from .policies import can_edit, can_view

__all__ = [
    "BABY_CATEGORIES",
    "DEBT_CATEGORIES",
    "DEBT_GROUPS",
    "DEFAULT_MONTHLY_BUDGET",
    "GoalDepositError",
    "LedgerError",
    "TransactionParsingError",
    "Baby",
    "Category",
    "CreditCardAccount",
    "Granularity",
    "LedgerSnapshot",
    "LoanAccount",
    "Permissions",
    "SavingsGoal",
    "Transaction",
    "TransactionType",
    "UnrecognizedCategory",
    "User",
    "VisibilityScope",
    "can_edit",
    "can_view",
]
