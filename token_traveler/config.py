"""Engine configuration.

All durations are milliseconds on the scheduler's clock.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping

from token_traveler.descriptor import DEFAULT_KEYWORD
from token_traveler.types import Millis


DEFAULT_COOLDOWN_MS: Millis = 1500
DEFAULT_CAMERA_DELAY_MS: Millis = 500
DEFAULT_PLACEHOLDER_IMGSRC = "placeholder.png"
DEFAULT_UNNAMED_NAME = "Unnamed Token"


@dataclass(frozen=True)
class TravelerConfig:
    """Tunables of :class:`token_traveler.engine.TravelerEngine`.

    Attributes:
        keyword: Reserved first name segment of portal markers.
        cooldown_ms: Debounce window armed after every relocation.
        camera_delay_ms: Pause between camera-follow phases.
        placeholder_imgsrc: Image given to clones whose source has none.
        unnamed_name: Name given to clones whose source has none.
        notifications_default: Notification flag used when the store has none.
    """

    keyword: str = DEFAULT_KEYWORD
    cooldown_ms: Millis = DEFAULT_COOLDOWN_MS
    camera_delay_ms: Millis = DEFAULT_CAMERA_DELAY_MS
    placeholder_imgsrc: str = DEFAULT_PLACEHOLDER_IMGSRC
    unnamed_name: str = DEFAULT_UNNAMED_NAME
    notifications_default: bool = True

    def __post_init__(self) -> None:
        for name in ("keyword", "placeholder_imgsrc", "unnamed_name"):
            if not isinstance(getattr(self, name), str):
                raise ValueError(f"{name} must be a string")
        for name in ("cooldown_ms", "camera_delay_ms"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer number of milliseconds")
        if not isinstance(self.notifications_default, bool):
            raise ValueError("notifications_default must be a boolean")
        if not self.keyword or ":" in self.keyword:
            raise ValueError(f"Invalid marker keyword: {self.keyword!r}")
        if self.cooldown_ms < 0:
            raise ValueError("cooldown_ms must be non-negative")
        if self.camera_delay_ms < 0:
            raise ValueError("camera_delay_ms must be non-negative")

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> TravelerConfig:
        """Build a config from a plain mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in values.items() if k in known})
