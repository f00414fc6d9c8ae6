"""Member access policies."""

from collections.abc import Iterable

from src.domain.errors import PermissionDeniedError
from src.domain.models.ledger import User


def can_view(user: User) -> bool:
    """Return True when the member may see the family ledger."""
    if user.is_family_admin:
        return True
    if user.permissions is None:
        return True
    return user.permissions.can_view


def can_edit(user: User) -> bool:
    """Return True when the member may add or change entries."""
    if user.is_family_admin:
        return True
    if user.permissions is None:
        return False
    return user.permissions.can_view and user.permissions.can_edit


def ensure_can_edit(users: Iterable[User], user_id: str) -> None:
    """Raise when ``user_id`` may not write to the ledger.

    A ledger without registered members is single-user and always writable.
    Otherwise the acting member must be registered and pass ``can_edit``.

    Args:
        users: Registered family members.
        user_id: Member attempting the write.

    Raises:
        PermissionDeniedError: If the member is unknown or read-only.
    """
    members = list(users)
    if not members:
        return
    user = next((member for member in members if member.id == user_id), None)
    if user is None:
        raise PermissionDeniedError(f"Unknown member: {user_id!r}")
    if not can_edit(user):
        raise PermissionDeniedError(f"Member {user_id!r} may not edit the ledger")


__all__ = ["can_view", "can_edit", "ensure_can_edit"]
