"""Camera-follow sequencing for remote viewers.

After a token changes context its controllers should see the destination.
Switching a viewer's context and focusing their camera in the same instant is
unreliable on hosts, so the request runs as a timed state machine::

    PENDING -> VIEWERS_MOVED -> (delay) -> FOCUSED -> (delay) -> DONE

Each phase is a scheduler callback; nothing waits on the sequence. A failing
camera collaborator ends the sequence in ``FAILED`` and is only logged.
"""

import logging
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Callable, List, Protocol, Tuple

from token_traveler.components import Position
from token_traveler.config import DEFAULT_CAMERA_DELAY_MS
from token_traveler.scheduler import Scheduler
from token_traveler.types import ContextID, Millis, ViewerID

logger = logging.getLogger(__name__)


class FollowPhase(StrEnum):
    PENDING = auto()
    VIEWERS_MOVED = auto()
    FOCUSED = auto()
    DONE = auto()
    FAILED = auto()


@dataclass(frozen=True)
class FollowRequest:
    context_id: ContextID
    position: Position
    viewer_ids: Tuple[ViewerID, ...]


class Camera(Protocol):
    def move_viewers(self, viewer_ids: Tuple[ViewerID, ...], context_id: ContextID) -> None: ...

    def focus(
        self, context_id: ContextID, position: Position, viewer_ids: Tuple[ViewerID, ...]
    ) -> None: ...

    def settled(self, request: FollowRequest) -> None: ...


class NullCamera:
    """Camera collaborator that does nothing."""

    def move_viewers(self, viewer_ids: Tuple[ViewerID, ...], context_id: ContextID) -> None:
        pass

    def focus(
        self, context_id: ContextID, position: Position, viewer_ids: Tuple[ViewerID, ...]
    ) -> None:
        pass

    def settled(self, request: FollowRequest) -> None:
        pass


class FollowSequence:
    """One camera-follow request in flight."""

    def __init__(
        self,
        request: FollowRequest,
        camera: Camera,
        scheduler: Scheduler,
        delay_ms: Millis,
    ) -> None:
        self.request = request
        self.phase = FollowPhase.PENDING
        self._camera = camera
        self._scheduler = scheduler
        self._delay_ms = delay_ms

    def start(self) -> None:
        self._run(self._move_viewers)

    def _run(self, phase_fn: Callable[[], None]) -> None:
        try:
            phase_fn()
        except Exception:
            self.phase = FollowPhase.FAILED
            logger.exception("Camera follow failed for %s", self.request)

    def _move_viewers(self) -> None:
        self._camera.move_viewers(self.request.viewer_ids, self.request.context_id)
        self.phase = FollowPhase.VIEWERS_MOVED
        self._scheduler.call_later(self._delay_ms, lambda: self._run(self._focus))

    def _focus(self) -> None:
        request = self.request
        self._camera.focus(request.context_id, request.position, request.viewer_ids)
        self.phase = FollowPhase.FOCUSED
        self._scheduler.call_later(self._delay_ms, lambda: self._run(self._settle))

    def _settle(self) -> None:
        self._camera.settled(self.request)
        self.phase = FollowPhase.DONE


class CameraFollow:
    """Starts :class:`FollowSequence` objects for relocated entities."""

    def __init__(
        self,
        camera: Camera,
        scheduler: Scheduler,
        delay_ms: Millis = DEFAULT_CAMERA_DELAY_MS,
    ) -> None:
        self._camera = camera
        self._scheduler = scheduler
        self._delay_ms = delay_ms
        self.sequences: List[FollowSequence] = []

    def follow(
        self,
        context_id: ContextID,
        position: Position,
        viewer_ids: List[ViewerID],
    ) -> FollowSequence:
        sequence = FollowSequence(
            FollowRequest(context_id, position, tuple(viewer_ids)),
            self._camera,
            self._scheduler,
            self._delay_ms,
        )
        # Finished sequences are dropped on the next request
        self.sequences = [
            s for s in self.sequences if s.phase not in (FollowPhase.DONE, FollowPhase.FAILED)
        ]
        self.sequences.append(sequence)
        sequence.start()
        return sequence
