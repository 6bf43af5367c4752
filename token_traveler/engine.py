"""Trigger evaluation and orchestration.

:meth:`TravelerEngine.on_position_change` is the single entry point; the host
adapter calls it once per entity position change and must finish one call
before starting the next. Processing order:

1. Candidate check: only tokens that are not portal markers travel.
2. Cooldown check: armed entities are ignored entirely.
3. Spatial search over portal markers in the entity's context; first hit wins.
4. Group build and destination resolution for the hit marker.
5. Cooldown arm, relocation, then camera follow and notification.

Recoverable failures (circle entry without exit, clone construction failure)
leave the entity where it is and are reported to the notifier as warnings.
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional

from token_traveler.camera import Camera, CameraFollow, NullCamera
from token_traveler.config import TravelerConfig
from token_traveler.cooldown import CooldownGuard
from token_traveler.descriptor import Descriptor, parse_descriptor
from token_traveler.host import Host
from token_traveler.notify import (
    LoggingNotifier,
    Notification,
    NotificationToggle,
    Notifier,
)
from token_traveler.scheduler import Scheduler
from token_traveler.store import TravelerStore
from token_traveler.systems.graph import Node, build_group, find_node_index, portal_markers
from token_traveler.systems.relocation import CloneError, Relocation, relocate
from token_traveler.systems.traversal import CircleExitNotFound, resolve
from token_traveler.systems.trigger import find_triggered_marker, is_traveler_candidate
from token_traveler.types import EntityID, Outcome

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TravelResult:
    """Outcome of a trigger that reached the resolver.

    Attributes:
        outcome: What happened.
        entity_id: Identity of the entity afterwards (new id after a clone).
        source_marker_id: Marker that was triggered.
        destination: Resolved node, ``None`` for ``NO_EXIT``.
    """

    outcome: Outcome
    entity_id: EntityID
    source_marker_id: EntityID
    destination: Optional[Node] = None


class TravelerEngine:
    """Portal trigger handler bound to one host.

    The store defaults to one over ``host.persistent``; pass a
    :class:`TravelerStore` explicitly to share it with other components.
    Leftover cooldowns are dropped only when the engine builds its own store;
    a passed-in store is left as it is.
    """

    def __init__(
        self,
        host: Host,
        scheduler: Scheduler,
        store: Optional[TravelerStore] = None,
        notifier: Optional[Notifier] = None,
        camera: Optional[Camera] = None,
        config: Optional[TravelerConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.host = host
        self.config = config or TravelerConfig()
        self.notifier: Notifier = notifier or LoggingNotifier()
        owns_store = store is None
        if store is None:
            store = TravelerStore(host.persistent, self.config.notifications_default)
        self.store = store
        self.notifications = NotificationToggle(store)
        self.cooldown = CooldownGuard(store, scheduler, self.config.cooldown_ms)
        self.camera = CameraFollow(camera or NullCamera(), scheduler, self.config.camera_delay_ms)
        self.rng = rng or random.Random(host.scene.seed)
        # Entries left over from a previous process have no live expiry timer
        if owns_store:
            self.cooldown.clear()

    def on_position_change(self, entity_id: EntityID) -> Optional[TravelResult]:
        """Evaluate portals for ``entity_id`` after it moved.

        Returns:
            TravelResult | None: ``None`` when no portal was triggered or the
            resolution intentionally produced no move.
        """
        scene = self.host.scene
        keyword = self.config.keyword
        if not is_traveler_candidate(scene, entity_id, keyword):
            return None

        entity_name = scene.name_of(entity_id)
        if self.cooldown.is_cooling_down(entity_id, entity_name):
            logger.debug("Ignoring %s (%r): cooling down", entity_id, entity_name)
            return None

        markers = portal_markers(scene, keyword)
        marker_id = find_triggered_marker(scene, entity_id, markers)
        if marker_id is None:
            return None

        descriptor = parse_descriptor(scene.name_of(marker_id), keyword)
        nodes = build_group(scene, markers, descriptor.group, keyword)
        current_index = find_node_index(nodes, marker_id)
        try:
            destination = resolve(
                nodes,
                current_index,
                descriptor.mode,
                descriptor.node_id,
                len(nodes),
                self.rng,
            )
        except CircleExitNotFound as exc:
            logger.warning("%s entered %s: %s", entity_name, descriptor.group, exc)
            self._notify(entity_name, descriptor, Outcome.NO_EXIT)
            return TravelResult(Outcome.NO_EXIT, entity_id, marker_id)

        if destination is None:
            logger.debug(
                "No destination for %s at %s node %s (%s)",
                entity_name,
                descriptor.group,
                descriptor.node_id,
                descriptor.mode,
            )
            return None

        self.cooldown.arm(entity_id, entity_name)
        try:
            relocation = relocate(self.host, entity_id, destination, self.config)
        except CloneError as exc:
            logger.warning(
                "Could not move %s to %s node %s: %s",
                entity_name,
                descriptor.group,
                destination.node_id,
                exc,
            )
            self._notify(entity_name, descriptor, Outcome.CLONE_FAILED, destination)
            return TravelResult(Outcome.CLONE_FAILED, entity_id, marker_id, destination)

        outcome = Outcome.TELEPORTED if relocation.cross_context else Outcome.MOVED
        if relocation.cross_context:
            self._after_clone(relocation, entity_name)
        logger.info(
            "%s %s from %s node %s to node %s",
            entity_name,
            outcome,
            descriptor.group,
            descriptor.node_id,
            destination.node_id,
        )
        self._notify(entity_name, descriptor, outcome, destination)
        return TravelResult(outcome, relocation.entity_id, marker_id, destination)

    def _after_clone(self, relocation: Relocation, entity_name: str) -> None:
        # The clone keeps the source name; an unnamed source gets no name key
        self.cooldown.arm(relocation.entity_id, entity_name)
        viewers = self.host.controllers(relocation.entity_id)
        if viewers:
            self.camera.follow(relocation.context_id, relocation.position, viewers)

    def _notify(
        self,
        entity_name: str,
        descriptor: Descriptor,
        outcome: Outcome,
        destination: Optional[Node] = None,
    ) -> None:
        if not self.notifications.enabled:
            return
        self.notifier.notify(
            Notification(
                entity_name=entity_name,
                group=descriptor.group,
                node_id=descriptor.node_id,
                mode=descriptor.mode,
                outcome=outcome,
                destination_node_id=destination.node_id if destination else None,
                context_name=(
                    self.host.context_name(destination.context_id) if destination else None
                ),
            )
        )
