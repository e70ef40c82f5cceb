import pytest
from pydantic import ValidationError

from api_virtualization.utils.config_loader import (
    DEFAULT_REMOTE_BASE_URL,
    default_config_path,
    load_virtualization_config,
)


def test_repository_config_loads():
    config = load_virtualization_config(default_config_path())

    assert config.mocks.extension == ".json"
    assert config.journey.max_tracked_ids == 10000


def test_defaults_fill_missing_sections(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("mocks:\n  root_dir: fixtures\n", encoding="utf-8")

    config = load_virtualization_config(path)

    assert config.mocks.root_dir == "fixtures"
    assert config.mocks.output_file == "mocks.json"
    assert config.journey.remote_base_url == DEFAULT_REMOTE_BASE_URL


def test_unbounded_retention_is_explicit(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("journey:\n  max_tracked_ids: null\n", encoding="utf-8")

    assert load_virtualization_config(path).journey.max_tracked_ids is None


def test_environment_overrides(tmp_path, monkeypatch):
    path = tmp_path / "config.yml"
    path.write_text("", encoding="utf-8")
    monkeypatch.setenv("MOCKS_DIR", "/srv/mocks")
    monkeypatch.setenv("JOURNEY_REMOTE_BASE_URL", "https://remote.example/responses")

    config = load_virtualization_config(path)

    assert config.mocks.root_dir == "/srv/mocks"
    assert config.journey.remote_base_url == "https://remote.example/responses"


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_virtualization_config(tmp_path / "missing.yml")


def test_invalid_values_raise(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("journey:\n  fetch_timeout_seconds: -1\n", encoding="utf-8")

    with pytest.raises(ValidationError):
        load_virtualization_config(path)
