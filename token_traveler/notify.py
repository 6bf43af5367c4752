"""Notification payloads for the external notifier.

The engine reports what happened as structured :class:`Notification` values;
turning them into chat text or markup is the notifier's job. Whether the
notifier is called at all is controlled by :class:`NotificationToggle`, which
never affects relocation itself.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Protocol

from token_traveler.store import TravelerStore
from token_traveler.types import Outcome, TraversalMode

logger = logging.getLogger(__name__)

WARNING_OUTCOMES = frozenset({Outcome.NO_EXIT, Outcome.CLONE_FAILED})


@dataclass(frozen=True)
class Notification:
    """What happened to one entity on one trigger.

    Attributes:
        entity_name: Display name of the traveling entity.
        group: Group of the triggered marker.
        node_id: Node id of the triggered marker.
        mode: Traversal mode of the triggered marker.
        outcome: Result of the trigger.
        destination_node_id: Node id of the destination, when one was resolved.
        context_name: Display name of the destination context, when known.
    """

    entity_name: str
    group: str
    node_id: int
    mode: TraversalMode
    outcome: Outcome
    destination_node_id: Optional[int] = None
    context_name: Optional[str] = None

    @property
    def is_warning(self) -> bool:
        return self.outcome in WARNING_OUTCOMES


class Notifier(Protocol):
    def notify(self, notification: Notification) -> None: ...


class LoggingNotifier:
    """Default notifier: writes payloads to the ``logging`` module."""

    def __init__(self, log: Optional[logging.Logger] = None) -> None:
        self._log = log or logger

    def notify(self, notification: Notification) -> None:
        level = logging.WARNING if notification.is_warning else logging.INFO
        self._log.log(
            level,
            "%s: %s (%s node %s, %s) -> node %s in %s",
            notification.outcome,
            notification.entity_name,
            notification.group,
            notification.node_id,
            notification.mode,
            notification.destination_node_id,
            notification.context_name,
        )


class RecordingNotifier:
    """Keeps every payload in :attr:`notifications`."""

    def __init__(self) -> None:
        self.notifications: List[Notification] = []

    def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)


class NotificationToggle:
    """Command-style switch for notifier invocation, backed by the store flag."""

    def __init__(self, store: TravelerStore) -> None:
        self._store = store

    @property
    def enabled(self) -> bool:
        return self._store.notifications_enabled

    def enable(self) -> None:
        self._store.notifications_enabled = True
        logger.info("Traveler notifications enabled")

    def disable(self) -> None:
        self._store.notifications_enabled = False
        logger.info("Traveler notifications disabled")
