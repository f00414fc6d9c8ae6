"""Child-related spending attribution."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.constants import BABY_CATEGORIES
from src.domain.models.categories import TransactionType
from src.domain.models.finance import BabySpend, BabySpendSummary
from src.domain.models.ledger import Baby, Transaction

_ZERO = Decimal("0")


def compute_baby_spend(
    transactions: Iterable[Transaction],
    babies: Iterable[Baby],
) -> BabySpendSummary:
    """Attribute EXPENSE entries to babies.

    An entry qualifies when it is tagged with a baby or sits in a baby
    category. Entries tagged with a known baby count for that baby only; the
    rest (untagged, or tagged with a deleted baby) land in ``unattributed``.
    Every qualifying entry contributes once to the total.

    Args:
        transactions: Visibility-scoped ledger.
        babies: Babies in display order.

    Returns:
        BabySpendSummary: Per-baby totals, unattributed spend and the total.
    """
    baby_list = list(babies)
    known_ids = {baby.id for baby in baby_list}
    amounts = {baby.id: _ZERO for baby in baby_list}
    counts = {baby.id: 0 for baby in baby_list}
    unattributed = _ZERO
    total = _ZERO
    for transaction in transactions:
        if transaction.type != TransactionType.EXPENSE:
            continue
        tagged = bool(transaction.baby_id)
        if not tagged and transaction.category not in BABY_CATEGORIES:
            continue
        total += transaction.amount
        if transaction.baby_id in known_ids:
            amounts[transaction.baby_id] += transaction.amount
            counts[transaction.baby_id] += 1
        else:
            unattributed += transaction.amount
    return BabySpendSummary(
        per_baby=[
            BabySpend(
                baby_id=baby.id,
                name=baby.name,
                amount=amounts[baby.id],
                transaction_count=counts[baby.id],
            )
            for baby in baby_list
        ],
        unattributed=unattributed,
        total=total,
    )


__all__ = ["compute_baby_spend"]
