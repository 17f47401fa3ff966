"""Tagged results returned by the login and upload flows."""

from dataclasses import dataclass
from enum import Enum
from typing import Union

INVALID_CREDENTIALS = "invalid_credentials"


class SubmissionState(Enum):
    """Where a component is in its request/response cycle."""

    IDLE = "idle"
    SUBMITTING = "submitting"


@dataclass(frozen=True)
class Success:
    """The server accepted the request."""

    message: str
    token: str | None = None
    filename: str | None = None
    size: int | None = None

    @property
    def size_kb(self) -> str | None:
        if self.size is None:
            return None
        return f"{self.size / 1024:.2f} KB"


@dataclass(frozen=True)
class AuthError:
    """The server refused the credentials."""

    reason: str
    message: str


@dataclass(frozen=True)
class ValidationError:
    """The request was rejected, either locally or by the server."""

    message: str


@dataclass(frozen=True)
class NetworkError:
    """The server could not be reached at all."""

    cause: str
    message: str = "Could not connect to the server."


@dataclass(frozen=True)
class MissingToken:
    """No session token is stored; the user has to log in again."""

    message: str = "You must log in first."


Outcome = Union[Success, AuthError, ValidationError, NetworkError, MissingToken]
