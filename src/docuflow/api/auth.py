"""Exchange a username and password for a session token."""

import logging
from dataclasses import dataclass

import requests

from docuflow.api.client import get_session, read_json
from docuflow.config import ClientConfig
from docuflow.outcomes import (
    INVALID_CREDENTIALS,
    AuthError,
    NetworkError,
    Outcome,
    SubmissionState,
    Success,
    ValidationError,
)
from docuflow.store import CredentialStore

logger = logging.getLogger(__name__)


@dataclass
class Credential:
    """Username and password for a single login attempt. Never persisted."""

    username: str
    password: str

    def __repr__(self) -> str:
        return f"Credential(username={self.username!r}, password='***')"


def interpret_login_response(response: requests.Response) -> Outcome:
    """
    Map a ``/login`` response to an outcome.

    Args:
        response: Response from the authentication endpoint

    Returns:
        Success carrying the issued token, or AuthError
    """
    if not response.ok:
        return AuthError(reason=INVALID_CREDENTIALS, message="Invalid credentials")

    body = read_json(response) or {}
    token = body.get("token")
    if not isinstance(token, str) or not token:
        return AuthError(reason="malformed_response", message="Server did not return a session token")

    return Success(message="Login successful", token=token)


class Authenticator:
    """Log in against the backend and keep the issued token in the store."""

    def __init__(
        self,
        store: CredentialStore,
        config: ClientConfig,
        session: requests.Session | None = None,
    ):
        self.store = store
        self.config = config
        self.session = session
        self.state = SubmissionState.IDLE
        self.last_outcome: Outcome | None = None

    def authenticate(self, credential: Credential) -> Outcome:
        """
        Submit the credential once and store the token on success.

        Nothing is written to the store unless the server issued a token.
        """
        if not credential.username or not credential.password:
            self.last_outcome = ValidationError(message="Username and password are required")
            return self.last_outcome

        session = self.session or get_session()
        self.state = SubmissionState.SUBMITTING
        try:
            response = session.post(
                self.config.login_url,
                json={"username": credential.username, "password": credential.password},
            )
        except requests.RequestException as e:
            logger.error("Could not reach %s: %s", self.config.login_url, e, exc_info=True)
            outcome: Outcome = NetworkError(cause=str(e))
        else:
            outcome = interpret_login_response(response)
            if isinstance(outcome, Success):
                self.store.set(outcome.token)
                logger.info("Logged in as %s", credential.username)
            else:
                logger.info("Login rejected for %s (HTTP %s)", credential.username, response.status_code)
        finally:
            self.state = SubmissionState.IDLE

        self.last_outcome = outcome
        return outcome
