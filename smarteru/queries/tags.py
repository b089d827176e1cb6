"""Filter tags shared by the list and report queries."""
from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Any, Optional, Union

from pydantic import field_validator

from ..models.base import SmarterUModel, enum_choice


class MatchType(str, Enum):
    EXACT = "EXACT"
    CONTAINS = "CONTAINS"


class MatchTag(SmarterUModel):
    """Match a text field either exactly or by substring."""

    match_type: MatchType = MatchType.EXACT
    value: str

    @field_validator("match_type", mode="before")
    @classmethod
    def _validate_match_type(cls, value: Any) -> Optional[MatchType]:
        return enum_choice(value, MatchType)


class DateRangeTag(SmarterUModel):
    date_from: Union[datetime, date]
    date_to: Union[datetime, date]
