"""Peer domain model — one registered remote endpoint."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


def clean_text(value: Any) -> Optional[str]:
    """Return stripped text, or ``None`` for non-strings and blank strings."""
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value or None


@dataclass
class Peer:
    """A row of the ``peer`` table."""

    guid: bytes
    id: str
    uuid: bytes
    pk: bytes
    user: Optional[bytes] = None
    info: str = ""
    status: Optional[int] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "guid": self.guid.hex(),
            "id": self.id,
            "uuid": self.uuid.hex(),
            "pk": self.pk.hex(),
            "user": self.user.hex() if self.user is not None else None,
            "info": self.info,
            "status": self.status,
        }

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Peer":
        user = row.get("user")
        status = row.get("status")
        return cls(
            guid=bytes(row["guid"]),
            id=row["id"],
            uuid=bytes(row["uuid"]),
            pk=bytes(row["pk"]),
            user=bytes(user) if user is not None else None,
            info=row.get("info") or "",
            status=int(status) if status is not None else None,
        )


@dataclass
class PeerUpdate:
    """
    Typed partial update for a peer row.  Each field left as ``None`` means
    "leave the column alone"; blank text counts as ``None``.
    """

    note: Optional[str] = None

    def __post_init__(self) -> None:
        self.note = clean_text(self.note)

    @property
    def is_empty(self) -> bool:
        return self.note is None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "PeerUpdate":
        """Pick the recognised attributes out of a JSON-like payload; others are ignored."""
        return cls(note=clean_text(payload.get("note")))
