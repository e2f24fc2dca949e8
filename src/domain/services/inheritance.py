"""Read-time resolution of inherited group properties."""

from collections.abc import Awaitable, Callable

import structlog

from domain.entities.group import Group

logger = structlog.get_logger()

GroupLookup = Callable[[str], Awaitable[Group | None]]


async def resolve_inheritance(group: Group, lookup: GroupLookup) -> Group:
    """Return a copy of ``group`` with unset inheritable fields filled from ancestors.

    Ancestors are visited nearest first, so a value set closer to the group
    always wins over one set further up. The walk ends at the root, at a
    parent id that no longer resolves, or when the chain loops back on
    itself; the latter two are logged and yield a partially resolved view
    rather than an error.

    The input is never mutated and the result is never written back.
    """
    resolved = group.copy()
    if resolved.is_fully_resolved:
        return resolved

    visited = {group.uuid}
    current_id = group.parent_uuid

    while current_id:
        if current_id in visited:
            logger.warning(
                "group_hierarchy_cycle_detected",
                group_id=group.uuid,
                ancestor_id=current_id,
            )
            break
        visited.add(current_id)

        ancestor = await lookup(current_id)
        if ancestor is None:
            logger.warning(
                "ancestor_group_not_found",
                group_id=group.uuid,
                ancestor_id=current_id,
            )
            break

        for name in resolved.missing_inheritable_fields():
            value = getattr(ancestor, name)
            if value is not None:
                setattr(resolved, name, list(value) if name == "segments" else value)

        if resolved.is_fully_resolved:
            break

        current_id = ancestor.parent_uuid

    return resolved
