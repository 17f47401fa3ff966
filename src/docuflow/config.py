"""Configuration loading and validation."""

import os
from pathlib import Path
from typing import Literal

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

load_dotenv()

Env = Literal["prod", "dev"]

DEFAULT_BASE_URLS: dict[str, str] = {
    "dev": "http://localhost:8080",
    "prod": "https://docuflow-backend.onrender.com",
}


class StoreConfig(BaseModel):
    """Where the session token lives on disk."""

    path: Path = Path("~/.docuflow/session.json")
    token_key: str = "token"

    @field_validator("path", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Expand environment variables and ~ in path."""
        expanded = os.path.expandvars(os.path.expanduser(str(v)))
        return Path(expanded)


class ClientConfig(BaseModel):
    """Backend endpoints for a specific environment."""

    base_url: str
    login_path: str = "/login"
    upload_path: str = "/upload"
    file_field: str = "file"
    health_paths: list[str] = ["/health/simple", "/health", "/api/health"]
    probe_timeout: float = 5.0
    store: StoreConfig = StoreConfig()

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @property
    def login_url(self) -> str:
        return f"{self.base_url}{self.login_path}"

    @property
    def upload_url(self) -> str:
        return f"{self.base_url}{self.upload_path}"


def _apply_env_overrides(data: dict) -> dict:
    base_url = os.getenv("DOCUFLOW_BASE_URL")
    if base_url:
        data["base_url"] = base_url

    store_path = os.getenv("DOCUFLOW_STORE")
    if store_path:
        data["store"] = {**(data.get("store") or {}), "path": store_path}

    return data


def load_client_config(config_path: Path | None, env: Env = "dev") -> ClientConfig:
    """Load client config for the specified environment.

    A missing config file falls back to the built-in defaults for ``env``.
    """
    if config_path is None or not config_path.exists():
        data: dict = {"base_url": DEFAULT_BASE_URLS[env]}
        return ClientConfig(**_apply_env_overrides(data))

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    if env not in data:
        raise ValueError(f"Environment '{env}' not found in config. Available: {list(data.keys())}")

    return ClientConfig(**_apply_env_overrides(dict(data[env])))
