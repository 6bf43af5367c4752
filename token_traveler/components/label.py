from dataclasses import dataclass


@dataclass(frozen=True)
class Label:
    """Display name. Portal markers encode their metadata here."""

    name: str
