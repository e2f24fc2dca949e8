"""Group repository protocol."""

from typing import Protocol

from domain.entities.group import Group


class IGroupRepository(Protocol):
    """Repository interface for Group entities."""

    async def get(self, id: str) -> Group | None:
        """Get a group by ID."""
        ...

    async def save(self, group: Group) -> Group:
        """Insert or overwrite a group record."""
        ...

    async def delete(self, group: Group) -> None:
        """Delete a group record and its index entries."""
        ...

    async def get_children(self, parent_id: str) -> list[Group]:
        """Get groups whose parent is ``parent_id``."""
        ...
