#!/usr/bin/env python3
"""Initialize the database schema and optionally seed the relay allow-list from YAML."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

import yaml

from peerstore.db.database import Database
from peerstore.db.relay_allow_list_repo import RelayAllowListRepository
from peerstore.exceptions import PeerStoreError


def main():
    parser = argparse.ArgumentParser(description="Initialize the peer database")
    parser.add_argument("--url", type=str, help="Override DATABASE_URL")
    parser.add_argument("--seed-allow-list", type=str,
                        help="YAML file with an 'allow_relay_list' list of identifiers")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        db = Database.open(args.url)
        db.init_schema()
    except PeerStoreError as e:
        print(f"Database initialization failed: {e}", file=sys.stderr)
        sys.exit(1)
    print(f"Database initialized ({db.dialect})")

    if args.seed_allow_list:
        _seed_allow_list(db, Path(args.seed_allow_list))

    db.close()
    print("Done.")


def _seed_allow_list(db: Database, path: Path):
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    repo = RelayAllowListRepository(db)
    for identifier in data.get("allow_relay_list", []):
        identifier = str(identifier).strip()
        if not identifier:
            continue
        if repo.exists(identifier):
            print(f"  Already allowed: {identifier}")
            continue
        try:
            repo.add(identifier)
            print(f"  Allowed relay for: {identifier}")
        except PeerStoreError as e:
            print(f"  Skipping {identifier}: {e}")


if __name__ == "__main__":
    main()
