from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, List, Optional, Tuple

from pydantic import Field, ValidationInfo, field_validator

from ..models.base import ExclusiveFieldsModel, enum_choice, list_of, strings_in
from ..models.common import CustomField, Tag
from ..models.learner_report import LEARNER_REPORT_COLUMNS
from .tags import DateRangeTag
from .users import QueryStatus, clamp_page_size

ENROLLMENT_STATUSES = (
    "Enrolled",
    "Unconfirmed",
    "In Progress",
    "Warning",
    "Overdue",
    "Attending",
    "Not Attending",
    "Attended",
    "Did Not Attend",
    "Cancelled",
    "Completed",
)


class LearningModuleStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    ARCHIVED = "Archived"


class GetLearnerReportQuery(ExclusiveFieldsModel):
    """Filters for getLearnerReport.

    Groups are selected either by ``group_status`` or by ``group_names`` and
    users either by ``user_status`` or by explicit email addresses and
    employee IDs. Setting one side of either choice resets the other.
    """

    exclusive_fields: ClassVar[Tuple[Tuple[str, ...], ...]] = (
        ("group_status", "group_names"),
        ("user_status", "user_email_addresses"),
        ("user_status", "user_employee_ids"),
    )

    page: int = 1
    page_size: int = 50
    enrollment_id: Optional[str] = None
    group_status: Optional[QueryStatus] = None
    group_names: List[str] = Field(default_factory=list)
    group_tags: List[Tag] = Field(default_factory=list)
    learning_module_status: Optional[LearningModuleStatus] = None
    learning_module_names: List[str] = Field(default_factory=list)
    enrollment_statuses: List[str] = Field(default_factory=list)
    completed_dates: List[DateRangeTag] = Field(default_factory=list)
    due_dates: List[DateRangeTag] = Field(default_factory=list)
    enrolled_dates: List[DateRangeTag] = Field(default_factory=list)
    grace_period_dates: List[DateRangeTag] = Field(default_factory=list)
    last_accessed_dates: List[DateRangeTag] = Field(default_factory=list)
    started_dates: List[DateRangeTag] = Field(default_factory=list)
    created_date: Optional[DateRangeTag] = None
    modified_date: Optional[DateRangeTag] = None
    user_status: Optional[QueryStatus] = None
    user_email_addresses: List[str] = Field(default_factory=list)
    user_employee_ids: List[str] = Field(default_factory=list)
    columns: List[str] = Field(default_factory=list)
    custom_fields: List[CustomField] = Field(default_factory=list)

    @field_validator("page_size", mode="before")
    @classmethod
    def _cap_page_size(cls, value: Any) -> Any:
        return clamp_page_size(value)

    @field_validator("group_status", "user_status", mode="before")
    @classmethod
    def _validate_status(cls, value: Any) -> Optional[QueryStatus]:
        return enum_choice(value, QueryStatus)

    @field_validator("learning_module_status", mode="before")
    @classmethod
    def _validate_learning_module_status(cls, value: Any) -> Optional[LearningModuleStatus]:
        return enum_choice(value, LearningModuleStatus)

    @field_validator(
        "group_names",
        "learning_module_names",
        "user_email_addresses",
        "user_employee_ids",
        mode="before",
    )
    @classmethod
    def _validate_strings(cls, value: Any, info: ValidationInfo) -> List[str]:
        return list_of(value, str, f"GetLearnerReportQuery.{info.field_name}", "strings")

    @field_validator("group_tags", mode="before")
    @classmethod
    def _validate_group_tags(cls, value: Any) -> List[Tag]:
        return list_of(value, Tag, "GetLearnerReportQuery.group_tags")

    @field_validator("enrollment_statuses", mode="before")
    @classmethod
    def _validate_enrollment_statuses(cls, value: Any) -> List[str]:
        return strings_in(value, ENROLLMENT_STATUSES, "GetLearnerReportQuery.enrollment_statuses")

    @field_validator(
        "completed_dates",
        "due_dates",
        "enrolled_dates",
        "grace_period_dates",
        "last_accessed_dates",
        "started_dates",
        mode="before",
    )
    @classmethod
    def _validate_date_ranges(cls, value: Any, info: ValidationInfo) -> List[DateRangeTag]:
        return list_of(value, DateRangeTag, f"GetLearnerReportQuery.{info.field_name}")

    @field_validator("columns", mode="before")
    @classmethod
    def _validate_columns(cls, value: Any) -> List[str]:
        return strings_in(value, LEARNER_REPORT_COLUMNS, "GetLearnerReportQuery.columns")

    @field_validator("custom_fields", mode="before")
    @classmethod
    def _validate_custom_fields(cls, value: Any) -> List[CustomField]:
        return list_of(value, CustomField, "GetLearnerReportQuery.custom_fields")

    @property
    def has_group_filter(self) -> bool:
        return self.group_status is not None or bool(self.group_names)

    @property
    def has_user_filter(self) -> bool:
        return self.user_status is not None or bool(self.user_email_addresses or self.user_employee_ids)
