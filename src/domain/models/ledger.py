"""Domain models for ledger entities."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from .categories import Category, TransactionCategory, TransactionType


@dataclass(frozen=True)
class Transaction:
    """Single ledger entry.

    Attributes:
        id: Transaction identifier.
        amount: Non-negative amount; direction comes from ``type``.
        type: Transaction direction.
        category: Known category or the raw unrecognized text.
        date: Booking timestamp, or None when it could not be parsed.
        note: Free-text note.
        user_id: Author/owner of the entry.
        due_date: Optional repayment deadline for debts.
        baby_id: Optional baby the entry is attributed to.
        card_id: Optional credit card the entry is attributed to.
        loan_id: Optional loan the entry is attributed to.
        attachments: References to attached receipts.
    """

    id: str
    amount: Decimal
    type: TransactionType
    category: TransactionCategory
    date: datetime | None
    note: str
    user_id: str
    due_date: datetime | None = None
    baby_id: str | None = None
    card_id: str | None = None
    loan_id: str | None = None
    attachments: tuple[str, ...] = ()


@dataclass(frozen=True)
class CreditCardAccount:
    """Credit card; ``balance`` is the baseline outstanding amount."""

    id: str
    bank_name: str
    card_name: str
    last4_digits: str
    credit_limit: Decimal
    bill_day: int
    repayment_day: int
    balance: Decimal = Decimal("0")


@dataclass(frozen=True)
class LoanAccount:
    """Bank or private loan with a monthly repayment."""

    id: str
    name: str
    bank_name: str
    total_amount: Decimal
    balance: Decimal
    interest_day: int
    monthly_repayment: Decimal
    category: Category = Category.MORTGAGE


@dataclass(frozen=True)
class SavingsGoal:
    """Savings goal; ``current_amount`` may exceed ``target_amount``."""

    id: str
    name: str
    target_amount: Decimal
    current_amount: Decimal = Decimal("0")
    icon: str = ""
    color: str = ""
    deadline: datetime | None = None


@dataclass(frozen=True)
class Baby:
    """Tagging dimension for child-related spending."""

    id: str
    name: str
    avatar: str = ""
    birth_date: datetime | None = None


@dataclass(frozen=True)
class Permissions:
    """Per-member access flags."""

    can_view: bool = True
    can_edit: bool = False


@dataclass(frozen=True)
class User:
    """Family member."""

    id: str
    name: str
    avatar: str = ""
    is_family_admin: bool = False
    permissions: Permissions | None = None


@dataclass(frozen=True)
class LedgerSnapshot:
    """Read-only view of every entity collection at one point in time."""

    users: tuple[User, ...] = ()
    babies: tuple[Baby, ...] = ()
    credit_cards: tuple[CreditCardAccount, ...] = ()
    loans: tuple[LoanAccount, ...] = ()
    goals: tuple[SavingsGoal, ...] = ()
    transactions: tuple[Transaction, ...] = field(default_factory=tuple)


__all__ = [
    "Transaction",
    "CreditCardAccount",
    "LoanAccount",
    "SavingsGoal",
    "Baby",
    "Permissions",
    "User",
    "LedgerSnapshot",
]
