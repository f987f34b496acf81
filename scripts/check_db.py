#!/usr/bin/env python3
"""Quick check of database state: look up a peer and/or relay permission."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from peerstore.db.relay_allow_list_repo import RelayAllowListRepository
from peerstore.exceptions import PeerStoreError
from peerstore.services.peer_store import PeerStore


def main():
    parser = argparse.ArgumentParser(description="Inspect the peer database")
    parser.add_argument("--url", type=str, help="Override DATABASE_URL")
    parser.add_argument("--id", type=str, help="Peer id to look up")
    parser.add_argument("--relay", type=str, help="Identifier to check against the relay allow-list")
    parser.add_argument("--list-allowed", action="store_true", help="Print the whole allow-list")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)

    try:
        store = PeerStore.open(args.url)
    except PeerStoreError as e:
        print(f"Cannot open database: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        if args.id:
            peer = store.get_peer(args.id)
            print("=== Peer ===")
            print(json.dumps(peer.to_dict(), indent=2) if peer else f"No peer with id {args.id!r}")

        if args.relay:
            allowed = store.exists_in_relay_allow_list(args.relay)
            print(f"\n=== Relay ===\n  {args.relay}: {'allowed' if allowed else 'not allowed'}")

        if args.list_allowed:
            entries = RelayAllowListRepository(store.db).list_all()
            print(f"\n=== Allow-list ===\nTotal: {len(entries)}")
            for entry in entries:
                print(f"  {entry.identifier}")
    except PeerStoreError as e:
        print(f"Query failed: {e}", file=sys.stderr)
        sys.exit(1)
    finally:
        store.close()


if __name__ == "__main__":
    main()
