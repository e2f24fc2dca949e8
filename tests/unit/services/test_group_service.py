"""Unit tests for GroupService."""

import pytest

from core.exceptions import (
    GroupHasChildrenError,
    GroupNotFoundError,
    ParentGroupNotFoundError,
    UserNotFoundError,
)
from domain.entities.group import Group, GroupStatus
from domain.services.group_service import GroupService
from tests.unit.conftest import FakeUnitOfWork, stored_groups


@pytest.fixture
def service(uow: FakeUnitOfWork) -> GroupService:
    return GroupService(lambda: uow)


@pytest.fixture
def group() -> Group:
    return Group(uuid="g-1", name="Dev Team")


def _echo_save(uow: FakeUnitOfWork) -> None:
    async def _save(group: Group) -> Group:
        return group

    uow.groups.save.side_effect = _save


# --- create ---


class TestCreate:
    @pytest.mark.asyncio
    async def test_applies_defaults(self, service: GroupService, uow: FakeUnitOfWork):
        _echo_save(uow)

        result = await service.create(name="Test Group")

        assert result.uuid
        assert result.display_name == "Test Group"
        assert result.status == GroupStatus.ACTIVE
        assert result.parent_uuid is None
        uow.groups.get.assert_not_called()
        uow.groups.save.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_keeps_given_values_without_inheriting(
        self, service: GroupService, uow: FakeUnitOfWork, group: Group
    ):
        group.location = "USA"
        stored_groups(uow, group)
        _echo_save(uow)

        result = await service.create(
            name="Child",
            parent_uuid=group.uuid,
            display_name="Child Display",
            status=GroupStatus.DEACTIVATED,
            segments=["Corporate"],
        )

        assert result.parent_uuid == group.uuid
        assert result.display_name == "Child Display"
        assert result.status == GroupStatus.DEACTIVATED
        assert result.segments == ["Corporate"]
        assert result.location is None

    @pytest.mark.asyncio
    async def test_generates_unique_ids(self, service: GroupService, uow: FakeUnitOfWork):
        _echo_save(uow)

        first = await service.create(name="A")
        second = await service.create(name="A")

        assert first.uuid != second.uuid

    @pytest.mark.asyncio
    async def test_raises_parent_not_found_before_saving(
        self, service: GroupService, uow: FakeUnitOfWork
    ):
        uow.groups.get.return_value = None

        with pytest.raises(ParentGroupNotFoundError) as exc_info:
            await service.create(name="Orphan", parent_uuid="non-existent-uuid")

        assert exc_info.value.status_code == 404
        uow.groups.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_empty_parent_id_means_root(self, service: GroupService, uow: FakeUnitOfWork):
        _echo_save(uow)

        result = await service.create(name="Root", parent_uuid="")

        assert result.parent_uuid is None
        uow.groups.get.assert_not_called()


# --- get_with_inheritance ---


class TestGetWithInheritance:
    @pytest.mark.asyncio
    async def test_resolves_from_parent(self, service: GroupService, uow: FakeUnitOfWork):
        parent = Group(uuid="p", name="Parent", location="USA", segments=["Corporate"])
        child = Group(uuid="c", parent_uuid="p", name="Child", language="en-US")
        stored_groups(uow, parent, child)

        result = await service.get_with_inheritance("c")

        assert result.location == "USA"
        assert result.language == "en-US"
        assert result.segments == ["Corporate"]
        uow.groups.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_raises_group_not_found(self, service: GroupService, uow: FakeUnitOfWork):
        uow.groups.get.return_value = None

        with pytest.raises(GroupNotFoundError):
            await service.get_with_inheritance("non-existent-uuid")


# --- update ---


class TestUpdate:
    @pytest.mark.asyncio
    async def test_overwrites_given_fields_only(
        self, service: GroupService, uow: FakeUnitOfWork, group: Group
    ):
        group.language = "en-US"
        uow.groups.get.return_value = group
        _echo_save(uow)

        result = await service.update(
            group.uuid,
            name="Updated Group",
            location="Germany",
            segments=["Healthcare", "Finance"],
        )

        assert result.name == "Updated Group"
        assert result.location == "Germany"
        assert result.segments == ["Healthcare", "Finance"]
        assert result.language == "en-US"
        assert result.display_name is None

    @pytest.mark.asyncio
    async def test_none_does_not_clear_fields(
        self, service: GroupService, uow: FakeUnitOfWork, group: Group
    ):
        group.space_id = "space-1"
        uow.groups.get.return_value = group
        _echo_save(uow)

        result = await service.update(group.uuid, space_id=None)

        assert result.space_id == "space-1"

    @pytest.mark.asyncio
    async def test_returns_stored_not_inherited_view(
        self, service: GroupService, uow: FakeUnitOfWork
    ):
        parent = Group(uuid="p", name="Parent", location="USA")
        child = Group(uuid="c", parent_uuid="p", name="Child")
        stored_groups(uow, parent, child)
        _echo_save(uow)

        result = await service.update("c", language="fr-FR")

        assert result.language == "fr-FR"
        assert result.location is None

    @pytest.mark.asyncio
    async def test_raises_group_not_found(self, service: GroupService, uow: FakeUnitOfWork):
        uow.groups.get.return_value = None

        with pytest.raises(GroupNotFoundError):
            await service.update("missing", name="x")

        uow.groups.save.assert_not_called()


# --- delete ---


class TestDelete:
    @pytest.mark.asyncio
    async def test_deletes_childless_group_and_members(
        self, service: GroupService, uow: FakeUnitOfWork, group: Group
    ):
        uow.groups.get.return_value = group
        uow.groups.get_children.return_value = []

        await service.delete(group.uuid)

        uow.memberships.delete_members.assert_awaited_once_with(group.uuid)
        uow.groups.delete.assert_awaited_once_with(group)
        uow.memberships.delete_user_group.assert_not_called()

    @pytest.mark.asyncio
    async def test_raises_has_children(
        self, service: GroupService, uow: FakeUnitOfWork, group: Group
    ):
        uow.groups.get.return_value = group
        uow.groups.get_children.return_value = [
            Group(uuid="child", parent_uuid=group.uuid, name="Child")
        ]

        with pytest.raises(GroupHasChildrenError) as exc_info:
            await service.delete(group.uuid)

        assert exc_info.value.status_code == 409
        uow.groups.delete.assert_not_called()
        uow.memberships.delete_members.assert_not_called()

    @pytest.mark.asyncio
    async def test_raises_group_not_found(self, service: GroupService, uow: FakeUnitOfWork):
        uow.groups.get.return_value = None

        with pytest.raises(GroupNotFoundError):
            await service.delete("missing")

        uow.groups.get_children.assert_not_called()


# --- add_user ---


class TestAddUser:
    @pytest.mark.asyncio
    async def test_adds_member_and_sets_pointer(
        self, service: GroupService, uow: FakeUnitOfWork, group: Group, user_id: str
    ):
        uow.groups.get.return_value = group

        await service.add_user(group.uuid, user_id)

        uow.memberships.add_member.assert_awaited_once_with(group.uuid, user_id)
        uow.memberships.set_user_group.assert_awaited_once_with(user_id, group.uuid)
        uow.memberships.remove_member.assert_not_called()

    @pytest.mark.asyncio
    async def test_raises_group_not_found(
        self, service: GroupService, uow: FakeUnitOfWork, user_id: str
    ):
        uow.groups.get.return_value = None

        with pytest.raises(GroupNotFoundError):
            await service.add_user("missing", user_id)

        uow.memberships.add_member.assert_not_called()


# --- remove_user ---


class TestRemoveUser:
    @pytest.mark.asyncio
    async def test_removes_member_and_pointer(
        self, service: GroupService, uow: FakeUnitOfWork, group: Group, user_id: str
    ):
        uow.groups.get.return_value = group
        uow.memberships.is_member.return_value = True

        await service.remove_user(group.uuid, user_id)

        uow.memberships.remove_member.assert_awaited_once_with(group.uuid, user_id)
        uow.memberships.delete_user_group.assert_awaited_once_with(user_id)

    @pytest.mark.asyncio
    async def test_raises_user_not_found(
        self, service: GroupService, uow: FakeUnitOfWork, group: Group, user_id: str
    ):
        uow.groups.get.return_value = group
        uow.memberships.is_member.return_value = False

        with pytest.raises(UserNotFoundError) as exc_info:
            await service.remove_user(group.uuid, user_id)

        assert exc_info.value.details == {"user_id": user_id}
        uow.memberships.remove_member.assert_not_called()
        uow.memberships.delete_user_group.assert_not_called()

    @pytest.mark.asyncio
    async def test_raises_group_not_found(
        self, service: GroupService, uow: FakeUnitOfWork, user_id: str
    ):
        uow.groups.get.return_value = None

        with pytest.raises(GroupNotFoundError):
            await service.remove_user("missing", user_id)

        uow.memberships.is_member.assert_not_called()


# --- move_user ---


class TestMoveUser:
    @pytest.mark.asyncio
    async def test_moves_from_current_group(
        self, service: GroupService, uow: FakeUnitOfWork, group: Group, user_id: str
    ):
        uow.groups.get.return_value = group
        uow.memberships.get_user_group.return_value = "old-group"

        await service.move_user(user_id, group.uuid)

        uow.memberships.remove_member.assert_awaited_once_with("old-group", user_id)
        uow.memberships.add_member.assert_awaited_once_with(group.uuid, user_id)
        uow.memberships.set_user_group.assert_awaited_once_with(user_id, group.uuid)

    @pytest.mark.asyncio
    async def test_user_without_group_is_added(
        self, service: GroupService, uow: FakeUnitOfWork, group: Group, user_id: str
    ):
        uow.groups.get.return_value = group
        uow.memberships.get_user_group.return_value = None

        await service.move_user(user_id, group.uuid)

        uow.memberships.remove_member.assert_not_called()
        uow.memberships.add_member.assert_awaited_once_with(group.uuid, user_id)

    @pytest.mark.asyncio
    async def test_raises_target_not_found(
        self, service: GroupService, uow: FakeUnitOfWork, user_id: str
    ):
        uow.groups.get.return_value = None

        with pytest.raises(GroupNotFoundError):
            await service.move_user(user_id, "missing")

        uow.memberships.get_user_group.assert_not_called()
        uow.memberships.add_member.assert_not_called()


# --- get_users ---


class TestGetUsers:
    @pytest.mark.asyncio
    async def test_returns_members(
        self, service: GroupService, uow: FakeUnitOfWork, group: Group
    ):
        uow.groups.get.return_value = group
        uow.memberships.get_members.return_value = {"user-1", "user-2"}

        result = await service.get_users(group.uuid)

        assert result == {"user-1", "user-2"}

    @pytest.mark.asyncio
    async def test_raises_group_not_found(self, service: GroupService, uow: FakeUnitOfWork):
        uow.groups.get.return_value = None

        with pytest.raises(GroupNotFoundError):
            await service.get_users("missing")
