"""Upcoming billing and repayment reminders."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal
from logging import Logger

from src.domain.constants import (
    BILL_DAY_WINDOW_DAYS,
    CARD_REPAYMENT_WINDOW_DAYS,
    LOAN_INTEREST_WINDOW_DAYS,
)
from src.domain.models.categories import Category, TransactionType
from src.domain.models.finance import Reminder, ReminderKind, RepaymentDraft
from src.domain.models.ledger import CreditCardAccount, LoanAccount, Transaction
from src.domain.services.balances import card_balance
from src.domain.services.validation import warn_invalid_day
from src.utils.date_utils import clamped_date, shift_month


def next_occurrence(day_of_month: int, today: date) -> date:
    """Return the next date carrying ``day_of_month``, today included.

    Days beyond the end of a month fall on that month's last day.
    """
    candidate = clamped_date(today.year, today.month, day_of_month)
    if candidate >= today:
        return candidate
    year, month = shift_month(today.year, today.month, 1)
    return clamped_date(year, month, day_of_month)


def days_until(day_of_month: int, today: date) -> int:
    """Return whole days from today to the next occurrence of a day."""
    return (next_occurrence(day_of_month, today) - today).days


def _within(days_left: int, window: int) -> bool:
    return 0 <= days_left <= window


def card_reminders(
    card: CreditCardAccount,
    today: date,
    transactions: Iterable[Transaction] = (),
    logger: Logger | None = None,
) -> list[Reminder]:
    """Return the bill-day and repayment-day reminders of a card."""
    reminders: list[Reminder] = []
    if warn_invalid_day(card.id, "bill_day", card.bill_day, logger):
        days_left = days_until(card.bill_day, today)
        if _within(days_left, BILL_DAY_WINDOW_DAYS):
            reminders.append(
                Reminder(
                    id=f"bill_{card.id}",
                    kind=ReminderKind.CARD_BILL,
                    account_id=card.id,
                    title=f"{card.bank_name} statement day",
                    subtitle=f"Card ending {card.last4_digits}",
                    days_left=days_left,
                )
            )
    if card.balance > 0 and warn_invalid_day(
        card.id, "repayment_day", card.repayment_day, logger
    ):
        days_left = days_until(card.repayment_day, today)
        if _within(days_left, CARD_REPAYMENT_WINDOW_DAYS):
            outstanding = card_balance(card.id, [card], transactions)
            reminders.append(
                Reminder(
                    id=f"repay_{card.id}",
                    kind=ReminderKind.CARD_REPAY,
                    account_id=card.id,
                    title=f"Repay {card.bank_name}",
                    subtitle=f"Card ending {card.last4_digits}",
                    days_left=days_left,
                    amount=outstanding,
                    draft=RepaymentDraft(
                        type=TransactionType.REPAYMENT,
                        category=Category.CREDIT_CARD,
                        amount=outstanding,
                        note=f"Repay {card.bank_name} credit card",
                        card_id=card.id,
                    ),
                )
            )
    return reminders


def loan_reminder(
    loan: LoanAccount,
    today: date,
    logger: Logger | None = None,
) -> Reminder | None:
    """Return the interest-day reminder of a loan, if due soon."""
    if not warn_invalid_day(loan.id, "interest_day", loan.interest_day, logger):
        return None
    days_left = days_until(loan.interest_day, today)
    if not _within(days_left, LOAN_INTEREST_WINDOW_DAYS):
        return None
    return Reminder(
        id=f"loan_{loan.id}",
        kind=ReminderKind.LOAN,
        account_id=loan.id,
        title=f"Repay {loan.name}",
        subtitle=f"{loan.bank_name} monthly instalment",
        days_left=days_left,
        amount=loan.monthly_repayment,
        draft=RepaymentDraft(
            type=TransactionType.REPAYMENT,
            category=loan.category,
            amount=loan.monthly_repayment,
            note=f"Repay {loan.name}",
            loan_id=loan.id,
        ),
    )


def upcoming_reminders(
    cards: Iterable[CreditCardAccount],
    loans: Iterable[LoanAccount],
    today: date,
    transactions: Iterable[Transaction] = (),
    logger: Logger | None = None,
) -> list[Reminder]:
    """Return every reminder due soon, soonest first.

    Args:
        cards: Credit cards in collection order.
        loans: Loans in collection order.
        today: Current calendar day.
        transactions: Ledger used to compute outstanding card balances.
        logger: Logger used for warnings.

    Returns:
        list[Reminder]: Reminders sorted by days left; ties keep cards before
        loans in collection order.
    """
    ledger = list(transactions)
    reminders: list[Reminder] = []
    for card in cards:
        reminders.extend(card_reminders(card, today, ledger, logger))
    for loan in loans:
        reminder = loan_reminder(loan, today, logger)
        if reminder is not None:
            reminders.append(reminder)
    return sorted(reminders, key=lambda item: item.days_left)


def pending_amount(reminders: Iterable[Reminder]) -> Decimal:
    """Return the total amount of reminders that carry one."""
    return sum(
        (item.amount for item in reminders if item.amount is not None),
        Decimal("0"),
    )


__all__ = [
    "next_occurrence",
    "days_until",
    "card_reminders",
    "loan_reminder",
    "upcoming_reminders",
    "pending_amount",
]
