"""HTTP session initialization and management."""

import requests

from docuflow import __version__

_session: requests.Session | None = None


def get_session() -> requests.Session:
    """Get the shared HTTP session, creating it if needed."""
    global _session

    if _session is None:
        _session = requests.Session()
        _session.headers["User-Agent"] = f"docuflow/{__version__}"

    return _session


def reset_session():
    """Close the shared session (useful for testing or switching environments)."""
    global _session
    if _session is not None:
        _session.close()
        _session = None


def read_json(response: requests.Response) -> dict | None:
    """Decode a JSON object body, or None when the body is not one."""
    try:
        data = response.json()
    except ValueError:
        return None
    return data if isinstance(data, dict) else None
