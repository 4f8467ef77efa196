from __future__ import annotations

from typing import Callable

from loguru import logger

from alumni_admin.domain import Notification, NotificationLevel

Listener = Callable[[Notification], None]


class Notifier:
    """Collects transient success/error messages for the current page visit."""

    def __init__(self, *, history_size: int = 50) -> None:
        if history_size < 1:
            raise ValueError("history_size must be at least 1")
        self.history_size = history_size
        self._history: list[Notification] = []
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def success(self, message: str) -> Notification:
        logger.info("{}", message)
        return self._emit(Notification(NotificationLevel.SUCCESS, message))

    def error(self, message: str) -> Notification:
        logger.error("{}", message)
        return self._emit(Notification(NotificationLevel.ERROR, message))

    def _emit(self, notification: Notification) -> Notification:
        self._history.append(notification)
        del self._history[: -self.history_size]
        for listener in self._listeners:
            listener(notification)
        return notification

    @property
    def history(self) -> tuple[Notification, ...]:
        return tuple(self._history)

    def errors(self) -> list[Notification]:
        return [item for item in self._history if item.level is NotificationLevel.ERROR]

    def clear(self) -> None:
        self._history.clear()
