"""Exception hierarchy raised by the SmarterU client."""
from __future__ import annotations

import re
from typing import TYPE_CHECKING, List, Optional, Sequence

if TYPE_CHECKING:
    from .models.common import ErrorCode

_ACCOUNT_API_PATTERN = re.compile(r"<AccountAPI>.*?</AccountAPI>", re.DOTALL)
_USER_API_PATTERN = re.compile(r"<UserAPI>.*?</UserAPI>", re.DOTALL)

REDACTED = "********"


def sanitize_request(request: Optional[str]) -> Optional[str]:
    """Replace both API keys in a request envelope with a fixed mask."""

    if request is None:
        return None
    request = _ACCOUNT_API_PATTERN.sub(f"<AccountAPI>{REDACTED}</AccountAPI>", request)
    return _USER_API_PATTERN.sub(f"<UserAPI>{REDACTED}</UserAPI>", request)


class SmarterUError(Exception):
    """Base class for every error raised by this package."""


class MissingValueException(SmarterUError):
    """A value required to build the request was not provided."""


class InvalidArgumentException(SmarterUError):
    """A value was provided but is not acceptable to the SmarterU API."""


class SmarterUException(SmarterUError):
    """SmarterU answered with a fatal ``<Result>`` and refused the request.

    ``error_codes`` keeps the ``<Error>`` entries in document order. The
    request is stored with the API keys masked so the exception can be
    logged or displayed safely.
    """

    def __init__(
        self,
        message: str = "",
        error_codes: Optional[Sequence["ErrorCode"]] = None,
        request: Optional[str] = None,
        response: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_codes: List["ErrorCode"] = list(error_codes or [])
        self.request = sanitize_request(request)
        self.response = response

    def __str__(self) -> str:
        lines = [f"{self.__class__.__name__}: {self.message}"]
        for error_code in self.error_codes:
            lines.append(f"\t{{{error_code.error_code}: {error_code.error_message}}}")
        return "\n".join(lines)
