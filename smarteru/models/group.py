from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

from pydantic import Field, ValidationInfo, field_validator

from .base import SmarterUModel, enum_choice, list_of
from .common import LearningModule, Status, SubscriptionVariant, Tag
from .permissions import GroupPermissions


class Group(SmarterUModel):
    """A SmarterU group.

    As with :class:`~smarteru.models.user.User`, ``old_name`` and
    ``old_group_id`` only serve to target a rename in updateGroup.
    """

    old_name: Optional[str] = None
    old_group_id: Optional[str] = None
    name: Optional[str] = None
    group_id: Optional[str] = None
    created_date: Optional[datetime] = None
    modified_date: Optional[datetime] = None
    description: Optional[str] = None
    home_group_message: Optional[str] = None
    notification_emails: List[str] = Field(default_factory=list)
    user_help_override_default: Optional[bool] = None
    user_help_enabled: Optional[bool] = None
    user_help_email: List[str] = Field(default_factory=list)
    user_help_text: Optional[str] = None
    tags: List[Tag] = Field(default_factory=list)
    user_limit_enabled: Optional[bool] = None
    user_limit_amount: Optional[int] = None
    status: Optional[Status] = None
    users: List[GroupPermissions] = Field(default_factory=list)
    learning_modules: List[LearningModule] = Field(default_factory=list)
    user_count: Optional[int] = None
    learning_module_count: Optional[int] = None
    subscription_variants: List[SubscriptionVariant] = Field(default_factory=list)
    dashboard_set_id: Optional[str] = None
    permissions: List[str] = Field(default_factory=list)

    @field_validator("status", mode="before")
    @classmethod
    def _validate_status(cls, value: Any) -> Optional[Status]:
        return enum_choice(value, Status)

    @field_validator("notification_emails", "user_help_email", mode="before")
    @classmethod
    def _validate_emails(cls, value: Any, info: ValidationInfo) -> List[str]:
        return list_of(value, str, f"Group.{info.field_name}", "email addresses as strings")

    @field_validator("tags", mode="before")
    @classmethod
    def _validate_tags(cls, value: Any) -> List[Tag]:
        return list_of(value, Tag, "Group.tags")

    @field_validator("users", mode="before")
    @classmethod
    def _validate_users(cls, value: Any) -> List[GroupPermissions]:
        return list_of(value, GroupPermissions, "Group.users")

    @field_validator("learning_modules", mode="before")
    @classmethod
    def _validate_learning_modules(cls, value: Any) -> List[LearningModule]:
        return list_of(value, LearningModule, "Group.learning_modules")

    @field_validator("subscription_variants", mode="before")
    @classmethod
    def _validate_subscription_variants(cls, value: Any) -> List[SubscriptionVariant]:
        return list_of(value, SubscriptionVariant, "Group.subscription_variants")

    @field_validator("permissions", mode="before")
    @classmethod
    def _validate_permissions(cls, value: Any) -> List[str]:
        return list_of(value, str, "Group.permissions", "strings")

    @property
    def has_identifier(self) -> bool:
        return bool(self.name or self.group_id)
