"""Fixtures for hook tests."""

import pytest
from dapmapper.models.mount import BindMount

from .fakes import FakeInspector


@pytest.fixture
def fake_inspector() -> FakeInspector:
    """Inspector reporting a single /host/src -> /app/src bind mount."""
    return FakeInspector([BindMount(source="/host/src", destination="/app/src")])
