"""Persistent storage for the session token.

A single shared slot: the authenticator writes it, the upload session reads it,
and a later login simply overwrites the previous value.
"""

import json
import logging
from pathlib import Path
from typing import Protocol

from docuflow.config import StoreConfig

logger = logging.getLogger(__name__)


class CredentialStore(Protocol):
    """Key/value slot holding the current session token."""

    def get(self) -> str | None: ...

    def set(self, token: str) -> None: ...

    def clear(self) -> None: ...


class MemoryCredentialStore:
    """Process-local store, used when nothing should touch the disk."""

    def __init__(self, token: str | None = None):
        self._token = token

    def get(self) -> str | None:
        return self._token

    def set(self, token: str) -> None:
        self._token = token

    def clear(self) -> None:
        self._token = None


class FileCredentialStore:
    """Token stored in a small JSON document on disk."""

    def __init__(self, path: Path, token_key: str = "token"):
        self.path = path
        self.token_key = token_key

    @classmethod
    def from_config(cls, config: StoreConfig) -> "FileCredentialStore":
        return cls(config.path, config.token_key)

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        with open(self.path, encoding="utf-8") as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError:
                logger.warning("Ignoring unreadable session file %s", self.path)
                return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        self.path.chmod(0o600)

    def get(self) -> str | None:
        token = self._read().get(self.token_key)
        if not isinstance(token, str) or not token:
            return None
        return token

    def set(self, token: str) -> None:
        data = self._read()
        data[self.token_key] = token
        self._write(data)
        logger.debug("Stored session token in %s", self.path)

    def clear(self) -> None:
        data = self._read()
        if self.token_key not in data:
            return
        del data[self.token_key]
        self._write(data)
        logger.debug("Cleared session token from %s", self.path)
