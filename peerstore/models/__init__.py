"""Domain models for the peer registry."""

from peerstore.models.peer import Peer, PeerUpdate, clean_text
from peerstore.models.relay import AllowRelayListEntry

__all__ = ["Peer", "PeerUpdate", "clean_text", "AllowRelayListEntry"]
