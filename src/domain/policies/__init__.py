"""Domain policies package."""

from .permissions import can_edit, can_view, ensure_can_edit

__all__ = ["can_edit", "can_view", "ensure_can_edit"]
