import pytest

from alumni_admin.domain import NotificationLevel
from alumni_admin.services.notifications import Notifier


def test_history_is_capped():
    notifier = Notifier(history_size=2)
    for index in range(5):
        notifier.success(f"saved {index}")

    assert [note.message for note in notifier.history] == ["saved 3", "saved 4"]


def test_history_size_must_be_positive():
    with pytest.raises(ValueError):
        Notifier(history_size=0)


def test_listeners_and_error_filter():
    received = []
    notifier = Notifier()
    notifier.subscribe(received.append)

    notifier.success("ok")
    notifier.error("failed")

    assert [note.level for note in received] == [
        NotificationLevel.SUCCESS,
        NotificationLevel.ERROR,
    ]
    assert [note.message for note in notifier.errors()] == ["failed"]
    notifier.clear()
    assert notifier.history == ()
