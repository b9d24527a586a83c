"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import json

import pytest


@pytest.fixture
def mock_compose_ps_output() -> str:
    """Sample `docker compose ps -a --format {{ .ID }}` output."""
    return "3f2a9c1b7d4e\n9b8c7d6e5f4a\n"


@pytest.fixture
def mock_inspect_output() -> str:
    """Mounts of a container with one bind mount and one volume."""
    return json.dumps(
        [
            {
                "Type": "bind",
                "Source": "/host/src",
                "Destination": "/app/src",
                "Mode": "rw",
                "RW": True,
                "Propagation": "rprivate",
            },
            {"Type": "volume", "Source": "vol1", "Destination": "/data"},
        ]
    )


@pytest.fixture
def mock_second_inspect_output() -> str:
    """Mounts of a second container sharing /app/src with the first."""
    return json.dumps(
        [
            {
                "Type": "bind",
                "Source": "/other/src",
                "Destination": "/app/src",
                "Mode": "",
                "RW": True,
                "Propagation": "rprivate",
            },
            {
                "Type": "bind",
                "Source": "/host/config",
                "Destination": "/etc/app",
                "Mode": "ro",
                "RW": False,
                "Propagation": "rprivate",
            },
            {"Type": "tmpfs", "Source": "", "Destination": "/tmp"},
        ]
    )


@pytest.fixture
def mock_empty_output() -> str:
    """Empty output for testing edge cases."""
    return ""
