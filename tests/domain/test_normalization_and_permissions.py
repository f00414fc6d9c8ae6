"""Tests for value normalization and member permissions."""

import pytest

from src.domain.models.categories import (
    Category,
    TransactionType,
    UnrecognizedCategory,
)
from src.domain.models.finance import VisibilityScope
from src.domain.models.ledger import Permissions, User
from src.domain.errors import PermissionDeniedError
from src.domain.policies import can_edit, can_view, ensure_can_edit
from src.domain.services.normalization import (
    parse_category,
    parse_scope,
    parse_transaction_type,
)


@pytest.mark.parametrize(
    "raw",
    ["FOOD", "food", " Food ", "餐饮美食", Category.FOOD],
)
def test_parse_category_accepts_name_and_label(raw):
    assert parse_category(raw) is Category.FOOD


def test_parse_category_keeps_unknown_text():
    result = parse_category("  Pet grooming ")

    assert result == UnrecognizedCategory(raw="Pet grooming")
    assert result.label == "Pet grooming"


@pytest.mark.parametrize("raw", [None, "", "   "])
def test_parse_category_defaults_empty_to_other(raw):
    assert parse_category(raw) is Category.OTHER


def test_parse_transaction_type():
    assert parse_transaction_type(" repayment ") is TransactionType.REPAYMENT
    assert parse_transaction_type("TRANSFER") is None
    assert parse_transaction_type(None) is None


def test_parse_scope():
    assert parse_scope("SELF") is VisibilityScope.SELF
    assert parse_scope("family") is VisibilityScope.FAMILY
    assert parse_scope("team") is None


def test_admin_can_always_edit():
    admin = User(
        id="u1",
        name="Ann",
        is_family_admin=True,
        permissions=Permissions(can_view=False, can_edit=False),
    )

    assert can_view(admin)
    assert can_edit(admin)


def test_missing_permissions_default_to_view_only():
    member = User(id="u2", name="Bo")

    assert can_view(member)
    assert not can_edit(member)


def test_explicit_permissions_are_respected():
    editor = User(
        id="u3",
        name="Cy",
        permissions=Permissions(can_view=True, can_edit=True),
    )
    hidden = User(
        id="u4",
        name="Di",
        permissions=Permissions(can_view=False, can_edit=True),
    )

    assert can_edit(editor)
    assert not can_view(hidden)
    assert not can_edit(hidden)


def test_edit_gate_resolves_the_acting_member():
    members = [
        User(id="u1", name="Dad", is_family_admin=True),
        User(id="u2", name="Kid"),
    ]

    ensure_can_edit(members, "u1")
    with pytest.raises(PermissionDeniedError):
        ensure_can_edit(members, "u2")
    with pytest.raises(PermissionDeniedError):
        ensure_can_edit(members, "ghost")
    ensure_can_edit([], "ghost")
