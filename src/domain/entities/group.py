"""Group domain entities."""

from dataclasses import dataclass, field, replace
from enum import Enum
from uuid import uuid4

# Fields a group takes from its nearest ancestor when left unset.
INHERITABLE_FIELDS = ("space_id", "location", "language", "segments")


class GroupStatus(str, Enum):
    """Lifecycle status of a group."""

    ACTIVE = "ACTIVE"
    DEACTIVATED = "DEACTIVATED"


@dataclass
class Group:
    """Domain entity for an organizational group."""

    name: str
    uuid: str = field(default_factory=lambda: str(uuid4()))
    parent_uuid: str | None = None
    display_name: str | None = None
    status: GroupStatus = GroupStatus.ACTIVE
    space_id: str | None = None
    location: str | None = None
    language: str | None = None
    segments: list[str] | None = None

    def copy(self) -> "Group":
        """Return an independent copy (the segments list is not shared)."""
        return replace(
            self,
            segments=list(self.segments) if self.segments is not None else None,
        )

    def missing_inheritable_fields(self) -> list[str]:
        """Names of inheritable fields that are still unset."""
        return [name for name in INHERITABLE_FIELDS if getattr(self, name) is None]

    @property
    def is_fully_resolved(self) -> bool:
        """True when every inheritable field has a value."""
        return not self.missing_inheritable_fields()
