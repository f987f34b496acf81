"""Repository for the ``peer`` table — lookup, insert and field updates."""

from __future__ import annotations

import logging
import uuid
from typing import Any, Optional

from sqlalchemy import text

from peerstore.db.database import Database
from peerstore.exceptions import QueryError
from peerstore.models.peer import Peer, PeerUpdate

logger = logging.getLogger(__name__)

_PEER_COLUMNS = "guid, id, uuid, pk, user, status, info"


class PeerRepository:
    """Single-Responsibility repository for peer persistence."""

    def __init__(self, db: Database):
        self._db = db

    # -- Create ----------------------------------------------------------------

    def insert(self, id: str, uuid_: bytes, pk: bytes, info: str) -> bytes:
        """Insert a peer under a fresh random guid and return that guid.

        ``user`` and ``status`` keep their column defaults.  ``id`` is not
        checked for duplicates.
        """
        guid = uuid.uuid4().bytes
        self._db.execute(
            """INSERT INTO peer (guid, id, uuid, pk, info)
               VALUES (:guid, :id, :uuid, :pk, :info)""",
            {"guid": guid, "id": id, "uuid": uuid_, "pk": pk, "info": info},
        )
        return guid

    # -- Read ------------------------------------------------------------------

    def get_by_id(self, id: str) -> Optional[Peer]:
        row = self._db.fetchone(
            f"SELECT {_PEER_COLUMNS} FROM peer WHERE id = :id", {"id": id}
        )
        return self._to_peer(row) if row else None

    def get_by_guid(self, guid: bytes) -> Optional[Peer]:
        row = self._db.fetchone(
            f"SELECT {_PEER_COLUMNS} FROM peer WHERE guid = :guid", {"guid": guid}
        )
        return self._to_peer(row) if row else None

    # -- Update ----------------------------------------------------------------

    def update_pk(self, guid: bytes, id: str, pk: bytes, info: str) -> int:
        """Overwrite ``id``, ``pk`` and ``info``; returns the matched row count."""
        count = self._db.execute(
            "UPDATE peer SET id = :id, pk = :pk, info = :info WHERE guid = :guid",
            {"id": id, "pk": pk, "info": info, "guid": guid},
        )
        if not count:
            logger.debug(f"update_pk matched no peer for guid {guid.hex()}")
        return count

    def apply_update(self, update: PeerUpdate, guid: bytes) -> None:
        """Apply every set field of ``update`` inside one transaction."""
        if update.is_empty:
            logger.debug(f"nothing to update for guid {guid.hex()}")
            return
        with self._db.transaction() as conn:
            if update.note is not None:
                result = conn.execute(
                    text("UPDATE peer SET note = :note WHERE guid = :guid"),
                    {"note": update.note, "guid": guid},
                )
                if not result.rowcount:
                    logger.debug(f"note update matched no peer for guid {guid.hex()}")

    # -- internal --------------------------------------------------------------

    @staticmethod
    def _to_peer(row: dict[str, Any]) -> Peer:
        try:
            return Peer.from_row(row)
        except (KeyError, TypeError, ValueError) as exc:
            raise QueryError(f"Cannot decode peer row: {exc}") from exc
