"""Pytest configuration and shared fixtures.

Provides common test fixtures and configuration for the test suite.
"""

import json
import sys
from pathlib import Path
from typing import Any, Generator

import pytest

# Add parent directory to path so imports work
# This allows: from enums import ... to find /project/enums.py
sys.path.insert(0, str(Path(__file__).parent.parent))

from logging_config import setup_logging
from models import Interface, InterfaceAddress, Route
from routing import Router


# Configure logging once for entire test session
@pytest.fixture(scope="session", autouse=True)
def configure_logging() -> Generator[None, None, None]:
    """Configure logging for all tests (runs once per session)."""
    setup_logging(verbose=False)
    yield


@pytest.fixture
def eth0() -> Interface:
    """Interface with two addresses on 192.168.1.0/24."""
    return Interface(
        id=0,
        name="eth0",
        addresses=(
            InterfaceAddress.create("192.168.1.2", 24, "192.168.1.255", "192.168.1.1"),
            InterfaceAddress.create("192.168.1.3", 24, "192.168.1.255", "192.168.1.1"),
        ),
    )


@pytest.fixture
def eth1() -> Interface:
    """Interface with one address on 10.0.0.0/8."""
    return Interface(
        id=1,
        name="eth1",
        addresses=(
            InterfaceAddress.create("10.0.0.2", 8, "10.255.255.255", "10.0.0.1"),
        ),
    )


@pytest.fixture
def eth6() -> Interface:
    """IPv6-only interface."""
    return Interface(
        id=2,
        name="eth6",
        addresses=(
            InterfaceAddress.create("2001:db8:1::2", 64, None, "2001:db8:1::1"),
        ),
    )


@pytest.fixture
def sample_routes(eth0: Interface, eth1: Interface) -> list[Route]:
    """Default route plus overlapping /24 and /26 routes."""
    return [
        Route(interface=eth0, dst="0.0.0.0/0", src="0.0.0.0/0", next_hop="192.168.1.3"),
        Route(interface=eth0, dst="172.16.1.0/24", src="0.0.0.0/0", next_hop="192.168.1.2"),
        Route(interface=eth1, dst="172.16.1.0/26", src="0.0.0.0/0", next_hop="10.0.0.1"),
        Route(interface=eth1, dst="172.16.2.0/24", src="0.0.0.0/0", next_hop="10.0.0.10"),
        Route(interface=eth1, dst="172.16.3.0/24", src="0.0.0.0/0", next_hop="10.0.0.1"),
    ]


@pytest.fixture
def sample_router(sample_routes: list[Route]) -> Router:
    """Finalized router built from sample_routes."""
    router = Router()
    router.add_routes(0, *sample_routes)
    router.update()
    return router


@pytest.fixture
def sample_config() -> dict[str, Any]:
    """Configuration document equivalent to sample_router (plus IPv6)."""
    return {
        "interfaces": [
            {
                "id": 0,
                "name": "eth0",
                "addresses": [
                    {"ip": "192.168.1.2", "netmask": 24,
                     "broadcast": "192.168.1.255", "gateway": "192.168.1.1"},
                    {"ip": "192.168.1.3", "netmask": "255.255.255.0",
                     "broadcast": "192.168.1.255", "gateway": "192.168.1.1"},
                ],
            },
            {
                "id": 1,
                "name": "eth1",
                "addresses": [
                    {"ip": "10.0.0.2", "netmask": 8,
                     "broadcast": "10.255.255.255", "gateway": "10.0.0.1"},
                ],
            },
            {
                "id": 2,
                "name": "eth6",
                "addresses": [
                    {"ip": "2001:db8:1::2", "netmask": 64, "gateway": "2001:db8:1::1"},
                ],
            },
        ],
        "batches": [
            {
                "priority_offset": 0,
                "routes": [
                    {"interface": 0, "src": "0.0.0.0/0", "dst": "0.0.0.0/0",
                     "next_hop": "192.168.1.3"},
                    {"interface": 0, "src": "0.0.0.0/0", "dst": "172.16.1.0/24",
                     "next_hop": "192.168.1.2"},
                    {"interface": 1, "src": "0.0.0.0/0", "dst": "172.16.1.0/26",
                     "next_hop": "10.0.0.1"},
                ],
            },
            {
                "priority_offset": 100,
                "routes": [
                    {"interface": 2, "dst": "::/0", "next_hop": "2001:db8:1::1",
                     "selector": "fit"},
                ],
            },
        ],
    }


@pytest.fixture
def config_file(tmp_path: Path, sample_config: dict[str, Any]) -> Path:
    """sample_config written to a temporary JSON file."""
    path = tmp_path / "routes.json"
    path.write_text(json.dumps(sample_config))
    return path
