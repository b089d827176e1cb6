"""Python client for the SmarterU learning management system API."""
from .client import POST_URL, SMARTERU_EXCEPTION_MESSAGE, ApiResponse, Client
from .exceptions import InvalidArgumentException, MissingValueException, SmarterUError, SmarterUException

__all__ = [
    "ApiResponse",
    "Client",
    "InvalidArgumentException",
    "MissingValueException",
    "POST_URL",
    "SMARTERU_EXCEPTION_MESSAGE",
    "SmarterUError",
    "SmarterUException",
]

__version__ = "0.1.0"
