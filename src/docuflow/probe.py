"""Liveness probe for a DocuFlow backend.

Diagnostic only: login and upload never depend on it.
"""

import logging

import requests

from docuflow.api.client import get_session

logger = logging.getLogger(__name__)


def probe_backend(
    base_url: str,
    paths: list[str],
    timeout: float = 5.0,
    session: requests.Session | None = None,
) -> str | None:
    """
    Check which health endpoint of the backend answers.

    Args:
        base_url: Backend root, e.g. http://localhost:8080
        paths: Health paths to try, in order
        timeout: Per-request timeout in seconds
        session: HTTP session to use (defaults to the shared one)

    Returns:
        The first URL that responded with a success status, or None
    """
    session = session or get_session()

    for path in paths:
        url = f"{base_url.rstrip('/')}{path}"
        logger.info("Probing %s", url)
        try:
            response = session.get(url, timeout=timeout)
        except requests.RequestException as e:
            logger.warning("%s unavailable: %s", url, e)
            continue

        if response.ok:
            logger.info("Backend available at %s: %s", url, response.text[:200])
            return url

        logger.warning("%s responded with HTTP %s", url, response.status_code)

    logger.error("Backend not available on any health endpoint of %s", base_url)
    return None
