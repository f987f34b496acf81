"""Service layer — facades over the repositories."""

from peerstore.services.peer_store import PeerStore

__all__ = ["PeerStore"]
