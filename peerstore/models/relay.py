"""Relay allow-list entry."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class AllowRelayListEntry:
    """An identifier permitted to use the relay."""
    identifier: str

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "AllowRelayListEntry":
        return cls(identifier=row["identifier"])
