"""Shared fixtures: a fake HTTP session and an isolated config."""

import json

import pytest
import requests

from docuflow.config import ClientConfig, StoreConfig
from docuflow.store import FileCredentialStore, MemoryCredentialStore


def make_response(status_code: int, body=None, raw: bytes | None = None) -> requests.Response:
    """Build a real requests.Response with a JSON (or raw) body."""
    response = requests.Response()
    response.status_code = status_code
    if raw is not None:
        response._content = raw
    elif body is not None:
        response._content = json.dumps(body).encode("utf-8")
    else:
        response._content = b""
    return response


class FakeSession:
    """Stands in for requests.Session; replays queued responses or errors."""

    def __init__(self, *results):
        self.results = list(results)
        self.calls: list[dict] = []

    def _next(self, method: str, url: str, **kwargs):
        files = kwargs.get("files")
        if files:
            kwargs["files"] = {
                field: (name, fh.read()) for field, (name, fh) in files.items()
            }
        self.calls.append({"method": method, "url": url, **kwargs})

        result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    def post(self, url, **kwargs):
        return self._next("POST", url, **kwargs)

    def get(self, url, **kwargs):
        return self._next("GET", url, **kwargs)


@pytest.fixture
def config(tmp_path) -> ClientConfig:
    return ClientConfig(
        base_url="http://backend.test",
        store=StoreConfig(path=tmp_path / "session.json"),
    )


@pytest.fixture
def memory_store() -> MemoryCredentialStore:
    return MemoryCredentialStore()


@pytest.fixture
def file_store(config) -> FileCredentialStore:
    return FileCredentialStore.from_config(config.store)


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / "report.pdf"
    path.write_bytes(b"%PDF-1.4 sample" * 100)
    return path
