"""Debt and cash balance calculations."""

from collections.abc import Iterable
from decimal import Decimal
from logging import Logger

from src.domain.constants import DEBT_GROUPS
from src.domain.models.categories import (
    Category,
    TransactionCategory,
    TransactionType,
)
from src.domain.models.finance import (
    AccountBalance,
    DebtGroupAmount,
    DebtOverview,
)
from src.domain.models.ledger import (
    CreditCardAccount,
    LoanAccount,
    SavingsGoal,
    Transaction,
)

_ZERO = Decimal("0")


def net_debt_flow(transactions: Iterable[Transaction]) -> Decimal:
    """Return Σ DEBT − Σ REPAYMENT; other types are ignored."""
    total = _ZERO
    for transaction in transactions:
        if transaction.type == TransactionType.DEBT:
            total += transaction.amount
        elif transaction.type == TransactionType.REPAYMENT:
            total -= transaction.amount
    return total


def card_balance(
    card_id: str,
    cards: Iterable[CreditCardAccount],
    transactions: Iterable[Transaction],
    logger: Logger | None = None,
) -> Decimal:
    """Return the outstanding balance of a credit card.

    Args:
        card_id: Identifier of the card.
        cards: Known credit cards.
        transactions: Full ledger, not restricted to a period.
        logger: Logger used for warnings.

    Returns:
        Decimal: ``max(0, baseline + linked DEBT − linked REPAYMENT)``, or 0
        when the card does not exist.
    """
    card = next((c for c in cards if c.id == card_id), None)
    if card is None:
        if logger is not None:
            logger.warning(f"Unknown credit card id={card_id}")
        return _ZERO
    linked = (t for t in transactions if t.card_id == card_id)
    return max(_ZERO, card.balance + net_debt_flow(linked))


def loan_balance(
    loan_id: str,
    loans: Iterable[LoanAccount],
    transactions: Iterable[Transaction],
    logger: Logger | None = None,
) -> Decimal:
    """Return the outstanding balance of a loan, floored at 0."""
    loan = next((item for item in loans if item.id == loan_id), None)
    if loan is None:
        if logger is not None:
            logger.warning(f"Unknown loan id={loan_id}")
        return _ZERO
    linked = (t for t in transactions if t.loan_id == loan_id)
    return max(_ZERO, loan.balance + net_debt_flow(linked))


def category_debt(
    transactions: Iterable[Transaction],
    categories: Iterable[TransactionCategory],
) -> Decimal:
    """Return net debt of the given categories.

    The result is not floored: over-repayment yields a negative value.
    """
    wanted = set(categories)
    return net_debt_flow(t for t in transactions if t.category in wanted)


def total_debt(transactions: Iterable[Transaction]) -> Decimal:
    """Return Σ DEBT − Σ REPAYMENT over the whole scoped ledger."""
    return net_debt_flow(transactions)


def credit_card_debt(transactions: Iterable[Transaction]) -> Decimal:
    """Return net debt of card-linked or CREDIT_CARD-category entries.

    An entry matching both rules is counted once.
    """
    return net_debt_flow(
        t
        for t in transactions
        if t.card_id or t.category == Category.CREDIT_CARD
    )


def cash_balance(transactions: Iterable[Transaction]) -> Decimal:
    """Return (income + borrowed) − (expense + repaid).

    Borrowed money is treated as spendable cash in the same pool.
    """
    total = _ZERO
    for transaction in transactions:
        if transaction.type in (TransactionType.INCOME, TransactionType.DEBT):
            total += transaction.amount
        else:
            total -= transaction.amount
    return total


def earmarked_cash(goals: Iterable[SavingsGoal]) -> Decimal:
    """Return the amount allocated to savings goals."""
    return sum((goal.current_amount for goal in goals), _ZERO)


def flexible_cash(
    transactions: Iterable[Transaction],
    goals: Iterable[SavingsGoal],
) -> Decimal:
    """Return cash balance minus the amount earmarked for goals."""
    return cash_balance(transactions) - earmarked_cash(goals)


def compute_debt_overview(
    transactions: Iterable[Transaction],
    cards: Iterable[CreditCardAccount],
    loans: Iterable[LoanAccount],
    account_transactions: Iterable[Transaction] | None = None,
    logger: Logger | None = None,
) -> DebtOverview:
    """Aggregate every debt figure of the debt management view.

    Args:
        transactions: Visibility-scoped ledger.
        cards: Credit cards in display order.
        loans: Loans in display order.
        account_transactions: Unscoped ledger used for per-account
            balances; defaults to ``transactions``.
        logger: Logger used for warnings.

    Returns:
        DebtOverview: Card debt, per-account balances, group totals and the
        overall net debt.
    """
    ledger = list(transactions)
    if account_transactions is None:
        account_ledger = ledger
    else:
        account_ledger = list(account_transactions)
    card_list = list(cards)
    loan_list = list(loans)
    card_balances = [
        AccountBalance(
            account_id=card.id,
            name=f"{card.bank_name} {card.card_name}".strip(),
            outstanding=card_balance(
                card.id, card_list, account_ledger, logger
            ),
        )
        for card in card_list
    ]
    loan_balances = [
        AccountBalance(
            account_id=loan.id,
            name=loan.name,
            outstanding=loan_balance(
                loan.id, loan_list, account_ledger, logger
            ),
        )
        for loan in loan_list
    ]
    groups = [
        DebtGroupAmount(group=name, amount=category_debt(ledger, members))
        for name, members in DEBT_GROUPS
    ]
    _warn_dangling_accounts(account_ledger, card_list, loan_list, logger)
    return DebtOverview(
        credit_card_debt=credit_card_debt(ledger),
        cards=card_balances,
        loans=loan_balances,
        groups=groups,
        total_debt=total_debt(ledger),
    )


def _warn_dangling_accounts(
    transactions: list[Transaction],
    cards: list[CreditCardAccount],
    loans: list[LoanAccount],
    logger: Logger | None,
) -> None:
    if logger is None:
        return
    card_ids = {card.id for card in cards}
    loan_ids = {loan.id for loan in loans}
    dangling = sum(
        1
        for t in transactions
        if (t.card_id and t.card_id not in card_ids)
        or (t.loan_id and t.loan_id not in loan_ids)
    )
    if dangling:
        logger.info(
            f"{dangling} transactions reference deleted cards or loans"
        )


__all__ = [
    "net_debt_flow",
    "card_balance",
    "loan_balance",
    "category_debt",
    "total_debt",
    "credit_card_debt",
    "cash_balance",
    "earmarked_cash",
    "flexible_cash",
    "compute_debt_overview",
]
