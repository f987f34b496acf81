"""Error taxonomy for the peer store.

Every failure reaches the caller as a ``PeerStoreError`` subclass with the
driver or SQLAlchemy exception chained as ``__cause__``.
"""

from __future__ import annotations


class PeerStoreError(Exception):
    """Base class for all peer store failures."""


class StoreConnectionError(PeerStoreError):
    """The pool could not be built, probed, or a connection borrowed."""


class PoolExhaustedError(StoreConnectionError):
    """No pooled connection became free within the pool timeout."""


class QueryError(PeerStoreError):
    """A statement failed to execute or its rows failed to decode."""


class TransactionError(PeerStoreError):
    """A transaction could not be started or committed."""
