"""UI state types shared by list views and dialogs."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Iterable, Iterator


class LoadState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    ERROR = "error"


class DialogMode(str, Enum):
    CREATE = "create"
    EDIT = "edit"


class NotificationLevel(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(slots=True)
class Notification:
    """Transient message surfaced to the user after an action."""

    level: NotificationLevel
    message: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(slots=True)
class DialogState:
    mode: DialogMode
    entity: dict[str, Any] | None = None

    @property
    def entity_id(self) -> str | None:
        if not self.entity or self.entity.get("id") is None:
            return None
        return str(self.entity["id"])


class ListField:
    """Ordered, editable sequence of single-line entries.

    Backs list-valued form fields such as areas of expertise or
    achievements. Entries may be blank while the user is editing;
    :meth:`pruned` returns the submittable values.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[str] | None = None) -> None:
        self._entries: list[str] = [str(entry) for entry in entries or ()]

    def append(self, value: str = "") -> int:
        self._entries.append(value)
        return len(self._entries) - 1

    def remove_at(self, index: int) -> str:
        return self._entries.pop(index)

    def set(self, index: int, value: str) -> None:
        self._entries[index] = value

    def pruned(self) -> list[str]:
        return [entry.strip() for entry in self._entries if entry and entry.strip()]

    def __getitem__(self, index: int) -> str:
        return self._entries[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ListField):
            return self._entries == other._entries
        if isinstance(other, list):
            return self._entries == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"ListField({self._entries!r})"
