"""Process-wide traveler state.

The host owns a persistent mapping that may be reset between sessions (or not
exist yet when the first event arrives). :class:`TravelerStore` claims one
entry in it and re-creates that entry, with its default keys, before every
access, so callers never see a missing store.
"""

from typing import Any, Dict, MutableMapping


STORE_KEY = "TokenTraveler"


class TravelerStore:
    """Init-if-absent view over the host's persistent mapping.

    Layout of the owned entry::

        {"cooldown": {<key>: <generation>}, "notify": <bool>}
    """

    def __init__(
        self,
        persistent: MutableMapping[str, Any],
        notifications_default: bool = True,
    ) -> None:
        self._persistent = persistent
        self._notifications_default = notifications_default

    def _root(self) -> Dict[str, Any]:
        root = self._persistent.get(STORE_KEY)
        if not isinstance(root, dict):
            root = {}
            self._persistent[STORE_KEY] = root
        if not isinstance(root.get("cooldown"), dict):
            root["cooldown"] = {}
        if not isinstance(root.get("notify"), bool):
            root["notify"] = self._notifications_default
        return root

    @property
    def cooldown(self) -> Dict[str, int]:
        return self._root()["cooldown"]

    @property
    def notifications_enabled(self) -> bool:
        return self._root()["notify"]

    @notifications_enabled.setter
    def notifications_enabled(self, enabled: bool) -> None:
        self._root()["notify"] = bool(enabled)
