from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

from pydantic import Field, field_validator

from .base import SmarterUModel, list_of, strings_in
from .common import CustomField

# Optional columns that can be requested on top of the default report.
LEARNER_REPORT_COLUMNS = (
    "ALTERNATE_EMAIL",
    "COMPLETED_DATE",
    "COURSE_DURATION",
    "COURSE_SESSION_ID",
    "DIVISION",
    "DUE_DATE",
    "EMPLOYEE_ID",
    "ENROLLED_DATE",
    "GRADE",
    "GRADE_PERCENTAGE",
    "GROUP_ID",
    "GROUP_NAME",
    "LAST_ACCESSED_DATE",
    "POINTS",
    "PROGRESS",
    "ROLE_ID",
    "STARTED_DATE",
    "SUBSCRIPTION_NAME",
    "TITLE",
    "USER_EMAIL",
    "VARIANT_END_DATE",
    "VARIANT_NAME",
    "VARIANT_START_DATE",
)


class LearnerReport(SmarterUModel):
    """One row of a getLearnerReport answer: a user's enrollment in a course."""

    id: Optional[str] = None
    course_name: Optional[str] = None
    surname: Optional[str] = None
    given_name: Optional[str] = None
    learning_module_id: Optional[str] = None
    user_id: Optional[str] = None
    created_date: Optional[datetime] = None
    modified_date: Optional[datetime] = None
    alternate_email: Optional[str] = None
    completed_date: Optional[datetime] = None
    course_duration: Optional[str] = None
    course_session_id: Optional[str] = None
    division: Optional[str] = None
    due_date: Optional[datetime] = None
    employee_id: Optional[str] = None
    enrolled_date: Optional[datetime] = None
    grade: Optional[str] = None
    grade_percentage: Optional[float] = None
    group_id: Optional[str] = None
    group_name: Optional[str] = None
    last_accessed_date: Optional[datetime] = None
    points: Optional[int] = None
    progress: Optional[str] = None
    role_id: Optional[str] = None
    started_date: Optional[datetime] = None
    subscription_name: Optional[str] = None
    title: Optional[str] = None
    user_email: Optional[str] = None
    variant_end_date: Optional[datetime] = None
    variant_name: Optional[str] = None
    variant_start_date: Optional[datetime] = None
    columns: List[str] = Field(default_factory=list)
    custom_fields: List[CustomField] = Field(default_factory=list)

    @field_validator("columns", mode="before")
    @classmethod
    def _validate_columns(cls, value: Any) -> List[str]:
        return strings_in(value, LEARNER_REPORT_COLUMNS, "LearnerReport.columns")

    @field_validator("custom_fields", mode="before")
    @classmethod
    def _validate_custom_fields(cls, value: Any) -> List[CustomField]:
        return list_of(value, CustomField, "LearnerReport.custom_fields")
