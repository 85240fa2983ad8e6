"""Authentication schemes for requests to the server list API."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass, field
from typing import Any

# Names accepted on the command line, in the order of the AuthType members.
_TYPE_NAMES = ("apikey", "none")


class AuthType(str, enum.Enum):
    """Supported authentication types."""

    APIKEY = _TYPE_NAMES[0]
    NONE = _TYPE_NAMES[1]


class InvalidAuthTypeError(ValueError):
    """Raised for an unknown authentication type name."""

    def __init__(self, message: str = "invalid auth type") -> None:
        super().__init__(message)


class Auth(abc.ABC):
    """Adds credentials to an outgoing request; also usable as a requests auth hook."""

    @abc.abstractmethod
    def authenticate_request(self, request: Any) -> None:
        """Modify the request's headers in place."""

    def __call__(self, request: Any) -> Any:
        self.authenticate_request(request)
        return request


@dataclass(frozen=True)
class ApiKeyAuth(Auth):
    """Sends the key as a bearer token."""

    token: str = field(repr=False)

    def authenticate_request(self, request: Any) -> None:
        request.headers["Authorization"] = f"Bearer {self.token}"


class NoneAuth(Auth):
    """Leaves requests untouched."""

    def authenticate_request(self, request: Any) -> None:
        return None


def get_auth_type(value: str) -> AuthType:
    """Return the auth type named by ``value``."""
    try:
        return AuthType(value)
    except ValueError:
        raise InvalidAuthTypeError() from None