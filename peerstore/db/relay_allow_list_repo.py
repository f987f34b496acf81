"""Repository for the ``allow_relay_list`` table."""

from __future__ import annotations

from peerstore.db.database import Database
from peerstore.models.relay import AllowRelayListEntry


class RelayAllowListRepository:
    """Membership checks against the relay allow-list."""

    def __init__(self, db: Database):
        self._db = db

    def exists(self, identifier: str) -> bool:
        count = self._db.scalar(
            "SELECT COUNT(*) FROM allow_relay_list WHERE identifier = :identifier",
            {"identifier": identifier},
        )
        return count > 0

    def add(self, identifier: str) -> AllowRelayListEntry:
        self._db.execute(
            "INSERT INTO allow_relay_list (identifier) VALUES (:identifier)",
            {"identifier": identifier},
        )
        return AllowRelayListEntry(identifier)

    def list_all(self) -> list[AllowRelayListEntry]:
        rows = self._db.fetchall(
            "SELECT identifier FROM allow_relay_list ORDER BY identifier"
        )
        return [AllowRelayListEntry.from_row(r) for r in rows]
