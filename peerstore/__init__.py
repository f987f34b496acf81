"""Peer registry data-access layer: pooled peer CRUD plus relay allow-list lookup."""

from peerstore.exceptions import (
    PeerStoreError,
    PoolExhaustedError,
    QueryError,
    StoreConnectionError,
    TransactionError,
)
from peerstore.models import AllowRelayListEntry, Peer, PeerUpdate
from peerstore.services.peer_store import PeerStore

__all__ = [
    "PeerStore",
    "Peer", "PeerUpdate", "AllowRelayListEntry",
    "PeerStoreError", "StoreConnectionError", "PoolExhaustedError",
    "QueryError", "TransactionError",
]
