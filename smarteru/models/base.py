"""Shared base model and validation helpers for SmarterU records."""
from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Iterable, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, ConfigDict

from ..exceptions import InvalidArgumentException

E = TypeVar("E", bound=Enum)


class SmarterUModel(BaseModel):
    """Base record: assignments are validated exactly like construction."""

    model_config = ConfigDict(validate_assignment=True, arbitrary_types_allowed=True)

    def to_dict(self) -> dict:
        return self.model_dump(exclude_none=True)


class ExclusiveFieldsModel(SmarterUModel):
    """Record holding groups of fields of which at most one may be set.

    Assigning a value to one member of a group clears the others, so the
    most recent assignment wins. Passing more than one member of a group to
    the constructor is rejected.
    """

    exclusive_fields: ClassVar[Tuple[Tuple[str, ...], ...]] = ()

    def _is_set(self, field: str) -> bool:
        value = getattr(self, field)
        return value is not None and value != []

    def model_post_init(self, __context: Any) -> None:
        for group in self.exclusive_fields:
            populated = [field for field in group if self._is_set(field)]
            if len(populated) > 1:
                raise InvalidArgumentException(
                    f"{type(self).__name__} accepts only one of {', '.join(group)}; "
                    f"got {', '.join(populated)}"
                )

    def __setattr__(self, name: str, value: Any) -> None:
        super().__setattr__(name, value)
        if not self._is_set(name):
            return
        for group in self.exclusive_fields:
            if name not in group:
                continue
            for sibling in group:
                if sibling != name and self._is_set(sibling):
                    default = type(self).model_fields[sibling].get_default(call_default_factory=True)
                    super().__setattr__(sibling, default)


def enum_choice(value: Any, enum_cls: Type[E]) -> Optional[E]:
    """Coerce ``value`` to a member of ``enum_cls`` or raise."""

    if value is None or isinstance(value, enum_cls):
        return value
    for member in enum_cls:
        if member.value == value:
            return member
    choices = ", ".join(member.value for member in enum_cls)
    raise InvalidArgumentException(f'"{value}" is not one of {choices}')


def list_of(value: Any, item_type: type, owner: str, description: Optional[str] = None) -> List[Any]:
    """Validate that ``value`` is a homogeneous list of ``item_type``."""

    if value is None:
        return []
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, item_type) for item in value):
        description = description or f"{item_type.__name__} instances"
        raise InvalidArgumentException(f"Parameter to {owner} must be a list of {description}")
    return list(value)


def strings_in(values: Iterable[str], allowed: Iterable[str], owner: str) -> List[str]:
    """Validate that every string in ``values`` is one of ``allowed``."""

    values = list_of(values, str, owner, "strings")
    allowed = tuple(allowed)
    for value in values:
        if value not in allowed:
            raise InvalidArgumentException(f'"{value}" is not one of the valid values for {owner}.')
    return values
