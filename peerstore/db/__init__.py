"""Database layer — pooled SQLAlchemy engine with transactions and repository pattern."""

from peerstore.db.database import Database
from peerstore.db.peer_repo import PeerRepository
from peerstore.db.relay_allow_list_repo import RelayAllowListRepository
from peerstore.db.schema import SCHEMA_BY_DIALECT, schema_statements

__all__ = [
    "Database", "PeerRepository", "RelayAllowListRepository",
    "SCHEMA_BY_DIALECT", "schema_statements",
]
