"""Shared fixtures for unit tests."""

from typing import Any
from unittest.mock import AsyncMock

import pytest

from domain.entities.group import Group


class FakeUnitOfWork:
    """Fake Unit of Work with repository mocks for unit testing."""

    def __init__(self) -> None:
        self.groups = AsyncMock()
        self.memberships = AsyncMock()
        self.entered = 0

    async def __aenter__(self) -> "FakeUnitOfWork":
        self.entered += 1
        return self

    async def __aexit__(self, *args: Any) -> None:
        pass


def stored_groups(uow: FakeUnitOfWork, *groups: Group) -> None:
    """Make ``uow.groups.get`` answer from the given groups by id."""
    by_id = {g.uuid: g for g in groups}

    async def _get(id: str) -> Group | None:
        return by_id.get(id)

    uow.groups.get.side_effect = _get


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """Create a fresh FakeUnitOfWork."""
    return FakeUnitOfWork()


@pytest.fixture
def user_id() -> str:
    """A user ID."""
    return "user-123"
