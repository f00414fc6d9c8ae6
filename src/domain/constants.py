"""Domain constants for ledger aggregation."""

from decimal import Decimal

from src.domain.models.categories import Category

BILL_DAY_WINDOW_DAYS = 3
CARD_REPAYMENT_WINDOW_DAYS = 10
LOAN_INTEREST_WINDOW_DAYS = 7

DEFAULT_MONTHLY_BUDGET = Decimal("20000")

BABY_CATEGORIES = frozenset(
    {
        Category.BABY,
        Category.EDUCATION,
        Category.DAILY,
        Category.TOYS,
        Category.ALLOWANCE,
    }
)

CREDIT_DEBT_CATEGORIES = frozenset(
    {
        Category.CREDIT_CARD,
        Category.INSTALLMENT,
    }
)

BANK_DEBT_CATEGORIES = frozenset(
    {
        Category.MORTGAGE,
        Category.CAR_LOAN,
        Category.STUDENT_LOAN,
        Category.PERSONAL_LOAN,
        Category.COLLATERAL_LOAN,
    }
)

PRIVATE_DEBT_CATEGORIES = frozenset({Category.BORROWING})

DEBT_CATEGORIES = (
    CREDIT_DEBT_CATEGORIES | BANK_DEBT_CATEGORIES | PRIVATE_DEBT_CATEGORIES
)

DEBT_GROUPS = (
    ("CREDIT", CREDIT_DEBT_CATEGORIES),
    ("BANK", BANK_DEBT_CATEGORIES),
    ("PRIVATE", PRIVATE_DEBT_CATEGORIES),
)


__all__ = [
    "BILL_DAY_WINDOW_DAYS",
    "CARD_REPAYMENT_WINDOW_DAYS",
    "LOAN_INTEREST_WINDOW_DAYS",
    "DEFAULT_MONTHLY_BUDGET",
    "BABY_CATEGORIES",
    "CREDIT_DEBT_CATEGORIES",
    "BANK_DEBT_CATEGORIES",
    "PRIVATE_DEBT_CATEGORIES",
    "DEBT_CATEGORIES",
    "DEBT_GROUPS",
]
