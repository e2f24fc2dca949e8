"""User membership API routes."""

from fastapi import APIRouter, Depends, Request, Response, status

from api.v1.dependencies import get_group_service
from api.v1.schemas.common import ErrorResponse
from api.v1.schemas.group import MoveUserRequest
from core.rate_limit import WRITE_LIMIT, limiter
from domain.services.group_service import GroupService

router = APIRouter(
    prefix="/users",
    tags=["users"],
)


@router.put(
    "/{user_id}/move",
    status_code=status.HTTP_200_OK,
    summary="Move a user to another group",
    responses={
        200: {"description": "User moved"},
        404: {"model": ErrorResponse, "description": "Target group not found"},
    },
)
@limiter.limit(WRITE_LIMIT)  # type: ignore[untyped-decorator]
async def move_user(
    request: Request,
    user_id: str,
    body: MoveUserRequest,
    service: GroupService = Depends(get_group_service),
) -> Response:
    """Move a user from their current group to the target group.

    The three underlying writes are not applied atomically.
    """
    await service.move_user(user_id, body.target_group_uuid)
    return Response(status_code=status.HTTP_200_OK)
