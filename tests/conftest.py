"""Pytest configuration and shared fixtures."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv
load_dotenv()


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "live_db: mark test as requiring a real database server")
    config.addinivalue_line("markers", "slow: mark test as slow running")


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--live-db",
        action="store_true",
        default=False,
        help="Run tests against PEERSTORE_TEST_DATABASE_URL",
    )


def pytest_collection_modifyitems(config, items):
    """Skip live_db tests unless --live-db flag is provided."""
    if config.getoption("--live-db"):
        return

    skip_live = pytest.mark.skip(reason="Need --live-db option to run")
    for item in items:
        if "live_db" in item.keywords:
            item.add_marker(skip_live)
