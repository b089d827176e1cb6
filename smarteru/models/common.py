from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import field_validator

from .base import SmarterUModel, enum_choice


class Status(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


class MembershipAction(str, Enum):
    ADD = "Add"
    REMOVE = "Remove"


class ErrorCode(SmarterUModel):
    """One ``<Error>`` entry of a SmarterU response."""

    error_code: str
    error_message: str = ""


class ExternalAuthorization(SmarterUModel):
    """Keys returned by requestExternalAuthorization for single sign-on."""

    auth_key: Optional[str] = None
    request_key: Optional[str] = None
    redirect_path: Optional[str] = None


class CustomField(SmarterUModel):
    name: Optional[str] = None
    value: Optional[str] = None


class Tag(SmarterUModel):
    """A group tag. SmarterU needs either ``tag_id`` or ``tag_name``."""

    tag_id: Optional[str] = None
    tag_name: Optional[str] = None
    tag_values: Optional[str] = None

    @field_validator("tag_values", mode="before")
    @classmethod
    def _join_values(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return ",".join(str(item).strip() for item in value)
        return value

    @property
    def has_identifier(self) -> bool:
        return bool(self.tag_id or self.tag_name)


class LearningModule(SmarterUModel):
    """Course assignment for a group. ``action`` is only sent on updates."""

    id: Optional[str] = None
    action: Optional[MembershipAction] = None
    allow_self_enroll: Optional[bool] = None
    auto_enroll: Optional[bool] = None

    @field_validator("action", mode="before")
    @classmethod
    def _validate_action(cls, value: Any) -> Optional[MembershipAction]:
        return enum_choice(value, MembershipAction)


class SubscriptionVariant(SmarterUModel):
    id: Optional[str] = None
    action: Optional[MembershipAction] = None
    requires_credits: Optional[bool] = None

    @field_validator("action", mode="before")
    @classmethod
    def _validate_action(cls, value: Any) -> Optional[MembershipAction]:
        return enum_choice(value, MembershipAction)
