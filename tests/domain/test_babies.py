"""Tests for child-related spending attribution."""

from datetime import datetime
from decimal import Decimal

from src.domain.models.categories import Category, TransactionType
from src.domain.models.ledger import Baby, Transaction
from src.domain.services.babies import compute_baby_spend


def _tx(tx_id, amount, category=Category.OTHER, baby_id=None,
        tx_type=TransactionType.EXPENSE) -> Transaction:
    return Transaction(
        id=tx_id,
        amount=Decimal(amount),
        type=tx_type,
        category=category,
        date=datetime(2024, 6, 1),
        note="",
        user_id="u1",
        baby_id=baby_id,
    )


BABIES = [Baby(id="b1", name="Mia"), Baby(id="b2", name="Leo")]


def test_tagged_and_categorized_entry_counts_once():
    ledger = [_tx("a", "100", Category.TOYS, baby_id="b1")]

    summary = compute_baby_spend(ledger, BABIES)

    assert summary.per_baby[0].amount == Decimal("100")
    assert summary.per_baby[0].transaction_count == 1
    assert summary.unattributed == Decimal("0")
    assert summary.total == Decimal("100")


def test_untagged_baby_category_goes_to_unattributed():
    ledger = [
        _tx("a", "40", Category.EDUCATION),
        _tx("b", "60", Category.FOOD),
        _tx("c", "25", Category.DAILY, baby_id="b2"),
    ]

    summary = compute_baby_spend(ledger, BABIES)

    assert summary.per_baby[1].amount == Decimal("25")
    assert summary.unattributed == Decimal("40")
    assert summary.total == Decimal("65")


def test_deleted_baby_reference_is_unattributed():
    ledger = [_tx("a", "30", Category.FOOD, baby_id="gone")]

    summary = compute_baby_spend(ledger, BABIES)

    assert [b.amount for b in summary.per_baby] == [Decimal("0"), Decimal("0")]
    assert summary.unattributed == Decimal("30")
    assert summary.total == Decimal("30")


def test_only_expenses_qualify():
    ledger = [
        _tx("a", "500", Category.BABY, baby_id="b1",
            tx_type=TransactionType.INCOME),
    ]

    summary = compute_baby_spend(ledger, BABIES)

    assert summary.total == Decimal("0")
    assert summary.per_baby[0].transaction_count == 0


def test_total_equals_per_baby_plus_unattributed():
    ledger = [
        _tx("a", "10", Category.BABY, baby_id="b1"),
        _tx("b", "20", Category.ALLOWANCE, baby_id="b2"),
        _tx("c", "30", Category.TOYS),
        _tx("d", "40", Category.FOOD, baby_id="b1"),
    ]

    summary = compute_baby_spend(ledger, BABIES)

    per_baby = sum((b.amount for b in summary.per_baby), Decimal("0"))
    assert summary.total == per_baby + summary.unattributed
    assert summary.total == Decimal("100")
