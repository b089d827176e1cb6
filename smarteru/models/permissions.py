from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, List, Optional, Tuple

from pydantic import Field, field_validator

from .base import ExclusiveFieldsModel, SmarterUModel, enum_choice, list_of

PERMISSION_CODES = (
    "MANAGE_GROUP",
    "CREATE_COURSE",
    "MANAGE_GROUP_COURSES",
    "MANAGE_USERS",
    "MANAGE_GROUP_USERS",
    "VIEW_LEARNER_RESULTS",
    "PROCTOR",
    "MARKER",
    "INSTRUCTOR",
)


class PermissionAction(str, Enum):
    GRANT = "Grant"
    DENY = "Deny"


class Permission(SmarterUModel):
    """A single group-level permission and whether to grant or deny it."""

    action: Optional[PermissionAction] = None
    code: Optional[str] = None

    @field_validator("action", mode="before")
    @classmethod
    def _validate_action(cls, value: Any) -> Optional[PermissionAction]:
        return enum_choice(value, PermissionAction)


class GroupPermissions(ExclusiveFieldsModel):
    """Membership of one user in one group.

    The group is referenced by ``group_name`` or ``group_id`` and the user by
    ``email`` or ``employee_id``. Only one side of each pair is kept: setting
    ``employee_id`` clears ``email`` and so on.
    """

    exclusive_fields: ClassVar[Tuple[Tuple[str, ...], ...]] = (
        ("group_name", "group_id"),
        ("email", "employee_id"),
    )

    group_name: Optional[str] = None
    group_id: Optional[str] = None
    email: Optional[str] = None
    employee_id: Optional[str] = None
    home_group: Optional[bool] = None
    action: Optional[str] = None
    permissions: List[Permission] = Field(default_factory=list)

    @field_validator("permissions", mode="before")
    @classmethod
    def _validate_permissions(cls, value: Any) -> List[Permission]:
        return list_of(value, Permission, "GroupPermissions.permissions")
