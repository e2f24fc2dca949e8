"""Unit of Work protocol."""

from typing import Protocol

from domain.repositories.group_repository import IGroupRepository
from domain.repositories.membership_repository import IMembershipRepository


class IUnitOfWork(Protocol):
    """Unit of Work interface scoping repository access to one store connection.

    The key-value store applies each write immediately, so there is no
    commit or rollback step.
    """

    groups: IGroupRepository
    memberships: IMembershipRepository

    async def __aenter__(self) -> "IUnitOfWork":
        """Enter the context manager."""
        ...

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # type: ignore
        """Exit the context manager."""
        ...
