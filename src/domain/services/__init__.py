"""Domain services package."""

from .babies import compute_baby_spend
from .balances import (
    card_balance,
    cash_balance,
    category_debt,
    compute_debt_overview,
    credit_card_debt,
    earmarked_cash,
    flexible_cash,
    loan_balance,
    net_debt_flow,
    total_debt,
)
from .budget import budget_health
from .goals import deposit_to_goal, goal_progress, goals_progress
from .ledger_filter import (
    debt_ledger,
    filter_transactions,
    transactions_for_baby,
    transactions_for_card,
    transactions_for_loan,
)
from .normalization import (
    normalize_text,
    parse_category,
    parse_scope,
    parse_transaction_type,
)
from .periods import (
    aggregate_period,
    build_buckets,
    expense_by_category,
    previous_anchor,
    summarize_period,
)
from .reminders import days_until, next_occurrence, upcoming_reminders
from .streak import compute_streak
from .validation import (
    is_valid_day_of_month,
    warn_invalid_day,
    warn_negative_amount,
)

__all__ = [
    "compute_baby_spend",
    "card_balance",
    "cash_balance",
    "category_debt",
    "compute_debt_overview",
    "credit_card_debt",
    "earmarked_cash",
    "flexible_cash",
    "loan_balance",
    "net_debt_flow",
    "total_debt",
    "budget_health",
    "deposit_to_goal",
    "goal_progress",
    "goals_progress",
    "debt_ledger",
    "filter_transactions",
    "transactions_for_baby",
    "transactions_for_card",
    "transactions_for_loan",
    "normalize_text",
    "parse_category",
    "parse_scope",
    "parse_transaction_type",
    "aggregate_period",
    "build_buckets",
    "expense_by_category",
    "previous_anchor",
    "summarize_period",
    "days_until",
    "next_occurrence",
    "upcoming_reminders",
    "compute_streak",
    "is_valid_day_of_month",
    "warn_invalid_day",
    "warn_negative_amount",
]
