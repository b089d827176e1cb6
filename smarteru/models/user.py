from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

from pydantic import Field, ValidationInfo, field_validator

from .base import SmarterUModel, enum_choice, list_of
from .common import CustomField, Status
from .permissions import GroupPermissions


class User(SmarterUModel):
    """A SmarterU learner account.

    ``old_email`` and ``old_employee_id`` are only used by updateUser to
    locate a user whose email or employee ID is being changed. The client
    clears them once the update has been accepted.
    """

    id: Optional[str] = None
    old_email: Optional[str] = None
    old_employee_id: Optional[str] = None
    email: Optional[str] = None
    employee_id: Optional[str] = None
    given_name: Optional[str] = None
    surname: Optional[str] = None
    password: Optional[str] = None
    timezone: Optional[str] = None
    learner_notifications: Optional[bool] = None
    supervisor_notifications: Optional[bool] = None
    send_email_to: Optional[str] = None
    alternate_email: Optional[str] = None
    authentication_type: Optional[str] = None
    supervisors: List[str] = Field(default_factory=list)
    organization: Optional[str] = None
    teams: List[str] = Field(default_factory=list)
    custom_fields: List[CustomField] = Field(default_factory=list)
    language: Optional[str] = None
    status: Optional[Status] = Status.ACTIVE
    title: Optional[str] = None
    division: Optional[str] = None
    allow_feedback: Optional[bool] = False
    phone_primary: Optional[str] = None
    phone_alternate: Optional[str] = None
    phone_mobile: Optional[str] = None
    fax: Optional[str] = None
    website: Optional[str] = None
    address1: Optional[str] = None
    address2: Optional[str] = None
    city: Optional[str] = None
    province: Optional[str] = None
    country: Optional[str] = None
    postal_code: Optional[str] = None
    send_mail_to: Optional[str] = None
    roles: List[str] = Field(default_factory=list)
    receive_notifications: Optional[bool] = True
    home_group: Optional[str] = None
    groups: List[GroupPermissions] = Field(default_factory=list)
    venues: List[str] = Field(default_factory=list)
    wages: List[str] = Field(default_factory=list)
    created_date: Optional[datetime] = None
    modified_date: Optional[datetime] = None

    @field_validator("status", mode="before")
    @classmethod
    def _validate_status(cls, value: Any) -> Optional[Status]:
        return enum_choice(value, Status)

    @field_validator("custom_fields", mode="before")
    @classmethod
    def _validate_custom_fields(cls, value: Any) -> List[CustomField]:
        return list_of(value, CustomField, "User.custom_fields")

    @field_validator("groups", mode="before")
    @classmethod
    def _validate_groups(cls, value: Any) -> List[GroupPermissions]:
        return list_of(value, GroupPermissions, "User.groups")

    @field_validator("supervisors", "teams", "roles", "venues", "wages", mode="before")
    @classmethod
    def _validate_strings(cls, value: Any, info: ValidationInfo) -> List[str]:
        return list_of(value, str, f"User.{info.field_name}", "strings")

    @property
    def has_identifier(self) -> bool:
        return bool(self.email or self.employee_id)
