"""Peer store — the facade callers use for peer records and relay permissions.

Wraps one pooled ``Database`` and the repositories built on it.  A store is
safe to share between threads; ``copy.copy`` of a store shares its pool.
"""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import Any, Mapping, Optional, Union

from sqlalchemy.engine import Connection

from peerstore.config import Settings
from peerstore.db.database import Database
from peerstore.db.peer_repo import PeerRepository
from peerstore.db.relay_allow_list_repo import RelayAllowListRepository
from peerstore.models.peer import Peer, PeerUpdate


class PeerStore:
    """Facade for peer CRUD and relay allow-list lookup."""

    def __init__(self, db: Database):
        self._db = db
        self._peers = PeerRepository(db)
        self._allow_list = RelayAllowListRepository(db)

    @classmethod
    def open(cls, url: Optional[str] = None, settings: Optional[Settings] = None) -> "PeerStore":
        """Connect to ``url`` (default: ``DATABASE_URL``) and probe the pool once.

        Raises ``StoreConnectionError`` when the pool cannot be built or probed.
        """
        return cls(Database.open(url, settings))

    @property
    def db(self) -> Database:
        return self._db

    def close(self) -> None:
        self._db.close()

    # -- Peers -----------------------------------------------------------------

    def get_peer(self, id: str) -> Optional[Peer]:
        return self._peers.get_by_id(id)

    def get_peer_by_guid(self, guid: bytes) -> Optional[Peer]:
        return self._peers.get_by_guid(guid)

    def insert_peer(self, id: str, uuid: bytes, pk: bytes, info: str) -> bytes:
        return self._peers.insert(id, uuid, pk, info)

    def update_pk(self, guid: bytes, id: str, pk: bytes, info: str) -> None:
        self._peers.update_pk(guid, id, pk, info)

    def update_peer(self, payload: Union[Mapping[str, Any], PeerUpdate], guid: bytes) -> None:
        """
        Apply the recognised attributes of ``payload`` to the peer ``guid``.

        Only ``note`` is recognised; other keys are ignored, and a blank note
        means "no change" rather than "clear".
        """
        update = payload if isinstance(payload, PeerUpdate) else PeerUpdate.from_payload(payload)
        self._peers.apply_update(update, guid)

    # -- Relay allow-list ------------------------------------------------------

    def exists_in_relay_allow_list(self, identifier: str) -> bool:
        return self._allow_list.exists(identifier)

    # -- Raw access ------------------------------------------------------------

    def acquire_connection(self) -> AbstractContextManager[Connection]:
        """Borrow a pooled connection for use in a ``with`` block."""
        return self._db.connect()
