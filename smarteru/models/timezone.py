"""Conversions between SmarterU time zone names and display values.

SmarterU is not consistent about the format it accepts or returns for a
time zone: some calls use the provided name (``America/New_York``), others
the display value (``(GMT-5:00) - America/New_York``). ``Timezone`` maps
between the two using the vendor's published table.
"""
from __future__ import annotations

from typing import Dict, Mapping

from pydantic import BaseModel, ConfigDict

from ..exceptions import InvalidArgumentException
from ._timezones import PROVIDED_NAME_TO_DISPLAY_VALUE


def _invert(table: Mapping[str, str]) -> Dict[str, str]:
    inverse: Dict[str, str] = {}
    for provided_name, display_value in table.items():
        if display_value in inverse:
            raise ValueError(
                f'Display value "{display_value}" is shared by '
                f'"{inverse[display_value]}" and "{provided_name}"'
            )
        inverse[display_value] = provided_name
    return inverse


DISPLAY_VALUE_TO_PROVIDED_NAME = _invert(PROVIDED_NAME_TO_DISPLAY_VALUE)


def get_display_value_from_provided_name(provided_name: str) -> str:
    try:
        return PROVIDED_NAME_TO_DISPLAY_VALUE[provided_name]
    except KeyError:
        raise InvalidArgumentException(f'Provided name "{provided_name}" is not valid.') from None


def get_provided_name_from_display_value(display_value: str) -> str:
    try:
        return DISPLAY_VALUE_TO_PROVIDED_NAME[display_value]
    except KeyError:
        raise InvalidArgumentException(f'Display value "{display_value}" is not valid') from None


class Timezone(BaseModel):
    """An immutable (provided name, display value) pair from the table."""

    model_config = ConfigDict(frozen=True)

    provided_name: str
    display_value: str

    @classmethod
    def from_provided_name(cls, provided_name: str) -> "Timezone":
        return cls(
            provided_name=provided_name,
            display_value=get_display_value_from_provided_name(provided_name),
        )

    @classmethod
    def from_display_value(cls, display_value: str) -> "Timezone":
        return cls(
            provided_name=get_provided_name_from_display_value(display_value),
            display_value=display_value,
        )
