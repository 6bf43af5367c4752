import logging

from token_traveler.notify import (
    LoggingNotifier,
    Notification,
    NotificationToggle,
    RecordingNotifier,
)
from token_traveler.store import TravelerStore
from token_traveler.types import Outcome, TraversalMode


def make_notification(outcome: Outcome) -> Notification:
    return Notification(
        entity_name="Hero",
        group="City",
        node_id=1,
        mode=TraversalMode.ASCENDING,
        outcome=outcome,
        destination_node_id=2,
        context_name="Harbor",
    )


def test_warning_outcomes() -> None:
    assert make_notification(Outcome.NO_EXIT).is_warning
    assert make_notification(Outcome.CLONE_FAILED).is_warning
    assert not make_notification(Outcome.MOVED).is_warning
    assert not make_notification(Outcome.TELEPORTED).is_warning


def test_logging_notifier_levels(caplog) -> None:
    notifier = LoggingNotifier(logging.getLogger("test-notifier"))
    with caplog.at_level(logging.INFO, logger="test-notifier"):
        notifier.notify(make_notification(Outcome.MOVED))
        notifier.notify(make_notification(Outcome.NO_EXIT))
    levels = [record.levelno for record in caplog.records]
    assert levels == [logging.INFO, logging.WARNING]
    assert "Hero" in caplog.records[0].getMessage()


def test_recording_notifier() -> None:
    notifier = RecordingNotifier()
    notifier.notify(make_notification(Outcome.MOVED))
    assert [n.outcome for n in notifier.notifications] == [Outcome.MOVED]


def test_toggle_is_backed_by_store() -> None:
    persistent: dict = {}
    toggle = NotificationToggle(TravelerStore(persistent))
    assert toggle.enabled
    toggle.disable()
    assert not toggle.enabled
    assert persistent["TokenTraveler"]["notify"] is False
    toggle.enable()
    assert toggle.enabled
