"""Group API routes."""

from typing import List

from fastapi import APIRouter, Depends, Request, Response, status

from api.v1.dependencies import get_group_service
from api.v1.schemas.common import ErrorResponse
from api.v1.schemas.group import AddUserRequest, GroupCreate, GroupResponse, GroupUpdate
from core.rate_limit import READ_LIMIT, WRITE_LIMIT, limiter
from domain.entities.group import Group
from domain.services.group_service import GroupService

router = APIRouter(
    prefix="/groups",
    tags=["groups"],
)


@router.post(
    "",
    response_model=GroupResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new group",
    responses={
        201: {"description": "Group created"},
        404: {"model": ErrorResponse, "description": "Parent group not found"},
        422: {"model": ErrorResponse, "description": "Invalid input"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def create_group(
    request: Request,
    body: GroupCreate,
    service: GroupService = Depends(get_group_service),
) -> GroupResponse:
    """Create a group, optionally under an existing parent.

    Stored values are returned as given; nothing is inherited at creation.
    """
    group = await service.create(
        name=body.name,
        parent_uuid=body.parent_uuid,
        display_name=body.display_name,
        status=body.status,
        space_id=body.space_id,
        location=body.location,
        language=body.language,
        segments=body.segments,
    )
    return _build_group_response(group)


@router.get(
    "/{group_uuid}",
    response_model=GroupResponse,
    summary="Get a group by UUID",
    responses={
        200: {"description": "Group with inherited properties resolved"},
        404: {"model": ErrorResponse, "description": "Group not found"},
    },
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def get_group(
    request: Request,
    group_uuid: str,
    service: GroupService = Depends(get_group_service),
) -> GroupResponse:
    """Get a group with unset properties inherited from its parent hierarchy."""
    group = await service.get_with_inheritance(group_uuid)
    return _build_group_response(group)


@router.put(
    "/{group_uuid}",
    response_model=GroupResponse,
    summary="Update a group",
    responses={
        200: {"description": "Group updated"},
        404: {"model": ErrorResponse, "description": "Group not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def update_group(
    request: Request,
    group_uuid: str,
    body: GroupUpdate,
    service: GroupService = Depends(get_group_service),
) -> GroupResponse:
    """Update the given properties of a group. Returns the stored values."""
    group = await service.update(
        group_uuid,
        name=body.name,
        display_name=body.display_name,
        status=body.status,
        space_id=body.space_id,
        location=body.location,
        language=body.language,
        segments=body.segments,
    )
    return _build_group_response(group)


@router.delete(
    "/{group_uuid}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a group",
    responses={
        204: {"description": "Group deleted"},
        404: {"model": ErrorResponse, "description": "Group not found"},
        409: {"model": ErrorResponse, "description": "Group has child groups and cannot be deleted"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def delete_group(
    request: Request,
    group_uuid: str,
    service: GroupService = Depends(get_group_service),
) -> None:
    """Delete a group that has no child groups."""
    await service.delete(group_uuid)
    return None


# --- Group Membership ---


@router.get(
    "/{group_uuid}/users",
    response_model=List[str],
    summary="Get users in a group",
    responses={
        200: {"description": "User ids in the group"},
        404: {"model": ErrorResponse, "description": "Group not found"},
    },
)
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def list_group_users(
    request: Request,
    group_uuid: str,
    service: GroupService = Depends(get_group_service),
) -> List[str]:
    """Get the ids of all users in a group (unordered)."""
    users = await service.get_users(group_uuid)
    return list(users)


@router.post(
    "/{group_uuid}/users",
    status_code=status.HTTP_200_OK,
    summary="Add a user to a group",
    responses={
        200: {"description": "User added"},
        404: {"model": ErrorResponse, "description": "Group not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def add_group_user(
    request: Request,
    group_uuid: str,
    body: AddUserRequest,
    service: GroupService = Depends(get_group_service),
) -> Response:
    """Add a user to a group and make it the user's current group."""
    await service.add_user(group_uuid, body.user_id)
    return Response(status_code=status.HTTP_200_OK)


@router.delete(
    "/{group_uuid}/users/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove a user from a group",
    responses={
        204: {"description": "User removed"},
        404: {"model": ErrorResponse, "description": "Group or user not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def remove_group_user(
    request: Request,
    group_uuid: str,
    user_id: str,
    service: GroupService = Depends(get_group_service),
) -> None:
    """Remove a user from a group."""
    await service.remove_user(group_uuid, user_id)
    return None


def _build_group_response(group: Group) -> GroupResponse:
    """Convert domain entity to response schema."""
    return GroupResponse(
        uuid=group.uuid,
        parent_uuid=group.parent_uuid,
        name=group.name,
        display_name=group.display_name,
        status=group.status,
        space_id=group.space_id,
        location=group.location,
        language=group.language,
        segments=group.segments,
    )
