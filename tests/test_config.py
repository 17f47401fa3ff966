"""Tests for client configuration loading."""

from pathlib import Path

import pytest

from docuflow.config import DEFAULT_BASE_URLS, ClientConfig, StoreConfig, load_client_config


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    monkeypatch.delenv("DOCUFLOW_BASE_URL", raising=False)
    monkeypatch.delenv("DOCUFLOW_STORE", raising=False)


class TestLoadClientConfig:
    """Tests for load_client_config() function."""

    def test_missing_file_uses_defaults(self, tmp_path):
        """A missing config file should fall back to the built-in URL for the env."""
        config = load_client_config(tmp_path / "absent.yaml", "prod")
        assert config.base_url == DEFAULT_BASE_URLS["prod"]
        assert config.login_url == f"{DEFAULT_BASE_URLS['prod']}/login"

    def test_reads_environment_section(self, tmp_path):
        """Values should come from the section named by env."""
        path = tmp_path / "client.yaml"
        path.write_text(
            "dev:\n"
            "  base_url: http://localhost:9000/\n"
            "  upload_path: /files\n"
            "  store:\n"
            "    path: " + str(tmp_path / "s.json") + "\n"
            "    token_key: authToken\n"
        )
        config = load_client_config(path, "dev")

        assert config.upload_url == "http://localhost:9000/files"
        assert config.store.token_key == "authToken"
        assert config.store.path == tmp_path / "s.json"

    def test_unknown_environment(self, tmp_path):
        """An env missing from the file should raise ValueError."""
        path = tmp_path / "client.yaml"
        path.write_text("dev:\n  base_url: http://localhost:8080\n")
        with pytest.raises(ValueError, match="Environment 'prod' not found"):
            load_client_config(path, "prod")

    def test_env_overrides(self, tmp_path, monkeypatch):
        """DOCUFLOW_BASE_URL and DOCUFLOW_STORE should override the config."""
        monkeypatch.setenv("DOCUFLOW_BASE_URL", "http://override.test")
        monkeypatch.setenv("DOCUFLOW_STORE", str(tmp_path / "other.json"))

        config = load_client_config(None, "dev")

        assert config.base_url == "http://override.test"
        assert config.store.path == tmp_path / "other.json"

    def test_store_override_with_empty_store_section(self, tmp_path, monkeypatch):
        """DOCUFLOW_STORE should apply even when the YAML store key is empty."""
        monkeypatch.setenv("DOCUFLOW_STORE", str(tmp_path / "other.json"))
        path = tmp_path / "client.yaml"
        path.write_text("dev:\n  base_url: http://localhost:8080\n  store:\n")

        config = load_client_config(path, "dev")

        assert config.store.path == tmp_path / "other.json"

    def test_repo_config_file_loads(self):
        """The shipped configs/client.yaml should load for dev."""
        repo_config = Path(__file__).parent.parent / "configs" / "client.yaml"
        assert load_client_config(repo_config, "dev").base_url == "http://localhost:8080"


class TestStoreConfig:
    """Tests for StoreConfig and ClientConfig defaults."""

    def test_expands_user(self):
        """~ in the store path should be expanded."""
        config = StoreConfig(path="~/session.json")
        assert config.path == Path.home() / "session.json"

    def test_defaults(self):
        """ClientConfig should default to the file field and health paths."""
        config = ClientConfig(base_url="http://x")
        assert config.file_field == "file"
        assert config.health_paths[0] == "/health/simple"
