"""Unit tests for application settings configuration."""

from pathlib import Path

from chimchat.config import Settings


def test_settings_uses_project_env_file_independent_of_cwd():
    """Settings should always include the project .env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_project_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_project_env in normalized
    assert str(Path(".env")) in normalized


def test_chim_key_is_read_from_environment(monkeypatch):
    monkeypatch.setenv("CHIM_KEY", "secret-token")
    monkeypatch.setenv("CHIM_BASE_URL", "https://proxy.test/v1")

    settings = Settings()

    assert settings.chim_key == "secret-token"
    assert settings.chim_base_url == "https://proxy.test/v1"
    assert settings.chim_proxy is None
