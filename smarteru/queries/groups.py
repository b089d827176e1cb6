from __future__ import annotations

from typing import Any, ClassVar, List, Optional, Tuple

from pydantic import Field, field_validator

from ..models.base import ExclusiveFieldsModel, SmarterUModel, enum_choice, list_of
from ..models.common import Status, Tag
from .tags import MatchTag


class GetGroupQuery(ExclusiveFieldsModel):
    exclusive_fields: ClassVar[Tuple[Tuple[str, ...], ...]] = (("name", "group_id"),)

    name: Optional[str] = None
    group_id: Optional[str] = None


class ListGroupsQuery(SmarterUModel):
    group_name: Optional[MatchTag] = None
    group_status: Optional[Status] = None
    tags: List[Tag] = Field(default_factory=list)

    @field_validator("group_status", mode="before")
    @classmethod
    def _validate_group_status(cls, value: Any) -> Optional[Status]:
        return enum_choice(value, Status)

    @field_validator("tags", mode="before")
    @classmethod
    def _validate_tags(cls, value: Any) -> List[Tag]:
        return list_of(value, Tag, "ListGroupsQuery.tags")
