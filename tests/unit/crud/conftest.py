"""Shared fixtures for crud unit tests"""

import pytest

from docstore.crud.memory_repo import MemoryRepo


@pytest.fixture(name="fixed_now")
def fixed_now_fixture(t0, day):
    """A clock reading ten days after T0."""
    return t0 + 10 * day


@pytest.fixture(name="repo")
def repo_fixture(fixed_now):
    """Empty store whose clock is pinned to fixed_now."""
    return MemoryRepo(clock=lambda: fixed_now)
