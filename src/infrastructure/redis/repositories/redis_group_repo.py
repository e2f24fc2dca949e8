"""Redis implementation of Group repository."""

import orjson
from redis.asyncio import Redis

from domain.entities.group import Group, GroupStatus

# Hash field name for each entity attribute
_FIELDS = {
    "uuid": "uuid",
    "parent_uuid": "parentUuid",
    "name": "name",
    "display_name": "displayName",
    "status": "status",
    "space_id": "spaceId",
    "location": "location",
    "language": "language",
    "segments": "segments",
}


class RedisGroupRepository:
    """Redis implementation of IGroupRepository.

    Each group is a hash at ``{prefix}:{uuid}``. The ids of all groups are
    kept in the ``{prefix}`` set and children are indexed by parent in
    ``{prefix}:parentUuid:{parent_uuid}`` sets.
    """

    def __init__(self, client: Redis, key_prefix: str = "Group") -> None:
        self._client = client
        self._prefix = key_prefix

    async def get(self, id: str) -> Group | None:
        """Get a group by ID."""
        data = await self._client.hgetall(self._key(id))
        return self._to_entity(data) if data else None

    async def save(self, group: Group) -> Group:
        """Insert or overwrite a group, keeping the parent index current."""
        key = self._key(group.uuid)
        previous_parent = await self._client.hget(key, _FIELDS["parent_uuid"])

        async with self._client.pipeline(transaction=True) as pipe:
            pipe.delete(key)
            pipe.hset(key, mapping=self._to_mapping(group))
            pipe.sadd(self._prefix, group.uuid)
            if previous_parent and previous_parent != group.parent_uuid:
                pipe.srem(self._parent_index_key(previous_parent), group.uuid)
            if group.parent_uuid:
                pipe.sadd(self._parent_index_key(group.parent_uuid), group.uuid)
            await pipe.execute()

        return group.copy()

    async def delete(self, group: Group) -> None:
        """Delete a group record and its index entries."""
        async with self._client.pipeline(transaction=True) as pipe:
            pipe.delete(self._key(group.uuid))
            pipe.srem(self._prefix, group.uuid)
            if group.parent_uuid:
                pipe.srem(self._parent_index_key(group.parent_uuid), group.uuid)
            await pipe.execute()

    async def get_children(self, parent_id: str) -> list[Group]:
        """Get groups whose parent is ``parent_id``."""
        child_ids = await self._client.smembers(self._parent_index_key(parent_id))
        children = []
        for child_id in sorted(child_ids):
            child = await self.get(child_id)
            # Index entries can outlive records written by other clients
            if child is not None:
                children.append(child)
        return children

    def _key(self, id: str) -> str:
        return f"{self._prefix}:{id}"

    def _parent_index_key(self, parent_id: str) -> str:
        return f"{self._prefix}:parentUuid:{parent_id}"

    @staticmethod
    def _to_mapping(group: Group) -> dict[str, str]:
        """Convert entity to a hash mapping, omitting unset fields."""
        mapping: dict[str, str] = {}
        for attr, hash_field in _FIELDS.items():
            value = getattr(group, attr)
            if value is None:
                continue
            if attr == "segments":
                mapping[hash_field] = orjson.dumps(value).decode()
            elif attr == "status":
                mapping[hash_field] = GroupStatus(value).value
            else:
                mapping[hash_field] = value
        return mapping

    @staticmethod
    def _to_entity(data: dict[str, str]) -> Group:
        """Convert a stored hash to a domain entity."""
        segments = data.get(_FIELDS["segments"])
        status = data.get(_FIELDS["status"])
        return Group(
            uuid=data[_FIELDS["uuid"]],
            parent_uuid=data.get(_FIELDS["parent_uuid"]),
            name=data.get(_FIELDS["name"], ""),
            display_name=data.get(_FIELDS["display_name"]),
            status=GroupStatus(status) if status else GroupStatus.ACTIVE,
            space_id=data.get(_FIELDS["space_id"]),
            location=data.get(_FIELDS["location"]),
            language=data.get(_FIELDS["language"]),
            segments=orjson.loads(segments) if segments is not None else None,
        )
