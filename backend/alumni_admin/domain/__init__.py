"""UI state types used by the list views and dialogs."""

from .models import (
    DialogMode,
    DialogState,
    ListField,
    LoadState,
    Notification,
    NotificationLevel,
)

__all__ = [
    "DialogMode",
    "DialogState",
    "ListField",
    "LoadState",
    "Notification",
    "NotificationLevel",
]
