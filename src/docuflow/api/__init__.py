"""Backend client and the login/upload flows."""

from docuflow.api.auth import Authenticator, Credential, interpret_login_response
from docuflow.api.client import get_session, reset_session
from docuflow.api.upload import UploadSession, interpret_upload_response

__all__ = [
    "Authenticator",
    "Credential",
    "UploadSession",
    "get_session",
    "interpret_login_response",
    "interpret_upload_response",
    "reset_session",
]
