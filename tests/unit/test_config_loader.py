"""
Unit tests for environment file selection and the run.py maintenance helpers.
"""
import pytest

from travel_lens.config.loader import ConfigLoader
from travel_lens.config.settings import Environment


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for name in ("ENV_FILE", "ENVIRONMENT", "PORT", "OPENCAGE_API_KEY"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path


def test_env_file_for_existing_and_missing(workdir):
    (workdir / ".env.staging").write_text("PORT=4000\n")

    assert ConfigLoader.env_file_for("Staging") == ".env.staging"
    assert ConfigLoader.env_file_for("production") is None


def test_env_file_for_rejects_unknown_environment(workdir):
    with pytest.raises(ValueError):
        ConfigLoader.env_file_for("qa")


def test_available_environments_skip_samples(workdir):
    (workdir / ".env.production").write_text("")
    (workdir / ".env.staging").write_text("")
    (workdir / ".env.staging.sample").write_text("")

    assert ConfigLoader.get_available_environments() == ["production", "staging"]


def test_create_sample_env_file(workdir):
    path = ConfigLoader.create_sample_env_file("production")

    assert path == ".env.production.sample"
    content = (workdir / path).read_text(encoding="utf-8")
    assert "ENVIRONMENT=production" in content
    assert "LOG_FORMAT=json" in content
    assert "PORT=3000" in content
    assert "OPENCAGE_API_KEY=\n" in content
    assert "AI_PROVIDER_BASE_URL=https://api.openai.com/v1" in content


def test_load_environment_config_reads_env_file(workdir):
    (workdir / ".env.staging").write_text("PORT=4000\nOPENCAGE_API_KEY=oc-staging\n")

    settings = ConfigLoader.load_environment_config("staging")

    assert settings.environment == Environment.STAGING
    assert settings.port == 4000
    assert settings.geocoding.api_key == "oc-staging"
