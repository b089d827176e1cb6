from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, List, Optional, Tuple

from pydantic import Field, field_validator

from ..exceptions import InvalidArgumentException
from ..models.base import ExclusiveFieldsModel, SmarterUModel, enum_choice, list_of
from .tags import DateRangeTag, MatchTag

MAX_PAGE_SIZE = 1000


class QueryStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    ALL = "All"


def clamp_page_size(value: Any) -> Any:
    if isinstance(value, int) and value > MAX_PAGE_SIZE:
        return MAX_PAGE_SIZE
    return value


class GetUserQuery(ExclusiveFieldsModel):
    """Identify a single user by ID, email or employee ID.

    The same query drives both getUser and getUserGroups; the client sets
    ``method`` accordingly.
    """

    exclusive_fields: ClassVar[Tuple[Tuple[str, ...], ...]] = (("id", "email", "employee_id"),)

    id: Optional[str] = None
    email: Optional[str] = None
    employee_id: Optional[str] = None
    method: str = "getUser"

    @field_validator("method")
    @classmethod
    def _validate_method(cls, value: str) -> str:
        if value not in ("getUser", "getUserGroups"):
            raise InvalidArgumentException(f'"{value}" is not one of getUser, getUserGroups')
        return value


class ListUsersQuery(SmarterUModel):
    page: int = 1
    page_size: int = 50
    sort_field: Optional[str] = None
    sort_order: Optional[str] = None
    email: Optional[MatchTag] = None
    employee_id: Optional[MatchTag] = None
    name: Optional[MatchTag] = None
    home_group: Optional[str] = None
    group_name: Optional[str] = None
    user_status: QueryStatus = QueryStatus.ALL
    created_date: Optional[DateRangeTag] = None
    modified_date: Optional[DateRangeTag] = None
    teams: List[str] = Field(default_factory=list)

    @field_validator("page_size", mode="before")
    @classmethod
    def _cap_page_size(cls, value: Any) -> Any:
        return clamp_page_size(value)

    @field_validator("user_status", mode="before")
    @classmethod
    def _validate_user_status(cls, value: Any) -> Optional[QueryStatus]:
        return enum_choice(value, QueryStatus)

    @field_validator("teams", mode="before")
    @classmethod
    def _validate_teams(cls, value: Any) -> List[str]:
        return list_of(value, str, "ListUsersQuery.teams", "strings")

    @property
    def has_user_identifier(self) -> bool:
        return any((self.email, self.employee_id, self.name))
