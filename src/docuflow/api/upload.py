"""Upload a single file with the stored session token."""

import logging
from pathlib import Path

import requests

from docuflow.api.client import get_session, read_json
from docuflow.config import ClientConfig
from docuflow.outcomes import (
    MissingToken,
    NetworkError,
    Outcome,
    SubmissionState,
    Success,
    ValidationError,
)
from docuflow.store import CredentialStore

logger = logging.getLogger(__name__)

DEFAULT_SUCCESS_MESSAGE = "File uploaded successfully"
DEFAULT_ERROR_MESSAGE = "Error uploading file"


def interpret_upload_response(response: requests.Response) -> Outcome:
    """
    Map an ``/upload`` response to an outcome.

    The server reports success as ``{"mensaje": ...}`` and failure as
    ``{"error": ...}``; a body without either falls back to a generic message.

    Args:
        response: Response from the upload endpoint

    Returns:
        Success or ValidationError
    """
    body = read_json(response) or {}

    if response.ok:
        return Success(message=body.get("mensaje") or DEFAULT_SUCCESS_MESSAGE)

    return ValidationError(message=body.get("error") or DEFAULT_ERROR_MESSAGE)


class UploadSession:
    """Send one file to the backend on behalf of the logged-in user."""

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

    def upload(self, file_path: Path | None) -> Outcome:
        """
        Upload ``file_path`` as the single multipart file field.

        The token gate runs first: without a stored token nothing is read from
        disk and no request is made.
        """
        token = self.store.get()
        if not token:
            self.last_outcome = MissingToken()
            return self.last_outcome

        if file_path is None or not file_path.is_file():
            self.last_outcome = ValidationError(message="Select a file to upload")
            return self.last_outcome

        try:
            size = file_path.stat().st_size
            f = open(file_path, "rb")
        except OSError as e:
            logger.warning("Cannot read %s: %s", file_path, e)
            self.last_outcome = ValidationError(message=f"Could not read {file_path.name}")
            return self.last_outcome

        session = self.session or get_session()
        self.state = SubmissionState.SUBMITTING
        try:
            with f:
                response = session.post(
                    self.config.upload_url,
                    headers={"Authorization": f"Bearer {token}"},
                    files={self.config.file_field: (file_path.name, f)},
                )
        except requests.RequestException as e:
            logger.error("Could not reach %s: %s", self.config.upload_url, e, exc_info=True)
            outcome: Outcome = NetworkError(cause=str(e))
        else:
            outcome = interpret_upload_response(response)
            if isinstance(outcome, Success):
                outcome = Success(message=outcome.message, filename=file_path.name, size=size)
                logger.info("Uploaded %s (%d bytes)", file_path.name, size)
            else:
                logger.info("Upload of %s rejected (HTTP %s)", file_path.name, response.status_code)
        finally:
            self.state = SubmissionState.IDLE

        self.last_outcome = outcome
        return outcome
