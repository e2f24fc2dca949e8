"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Not found errors (404)
    GROUP_NOT_FOUND = "GROUP_NOT_FOUND"
    PARENT_GROUP_NOT_FOUND = "PARENT_GROUP_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"

    # Validation errors (422)
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Generic HTTP errors raised by the framework
    HTTP_ERROR = "HTTP_ERROR"

    # Conflict errors (409)
    GROUP_HAS_CHILDREN = "GROUP_HAS_CHILDREN"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Store errors (503)
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class GroupNotFoundError(AppException):
    """Group not found."""

    def __init__(self, group_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.GROUP_NOT_FOUND,
            message=f"Group not found with UUID: {group_id}",
            status_code=404,
            details={"group_id": group_id},
        )


class ParentGroupNotFoundError(AppException):
    """Referenced parent group does not exist."""

    def __init__(self, parent_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.PARENT_GROUP_NOT_FOUND,
            message=f"Parent group not found with UUID: {parent_id}",
            status_code=404,
            details={"parent_uuid": parent_id},
        )


class UserNotFoundError(AppException):
    """User is not a member of the group."""

    def __init__(self, user_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.USER_NOT_FOUND,
            message=f"User not found with ID: {user_id}",
            status_code=404,
            details={"user_id": user_id},
        )


class GroupHasChildrenError(AppException):
    """Group still has child groups and cannot be deleted."""

    def __init__(self, group_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.GROUP_HAS_CHILDREN,
            message=f"Cannot delete group with UUID: {group_id} as it has child groups",
            status_code=409,
            details={"group_id": group_id},
        )
