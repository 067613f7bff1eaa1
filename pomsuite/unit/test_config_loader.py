import pytest
import yaml

from pomsuite.ui_testing.framework.config_loader import (
    DEFAULT_CONFIG_PATH,
    ConfigLoader,
    ConfigurationError,
)


@pytest.fixture
def config_path(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        yaml.dump({
            "browser": "firefox",
            "url": "https://example.test/login",
            "username": "tomsmith",
            "password": "secret",
        }),
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def _clear_ui_env(monkeypatch):
    for key in ("UI_BROWSER", "UI_URL", "UI_USERNAME", "UI_PASSWORD", "UI_HEADLESS"):
        monkeypatch.delenv(key, raising=False)


def test_getters_read_file(config_path):
    config = ConfigLoader(config_path)

    assert config.get_browser() == "firefox"
    assert config.get_url() == "https://example.test/login"
    assert config.get_username() == "tomsmith"
    assert config.get_password() == "secret"
    assert config.get("retries", 3) == 3


def test_missing_file_gives_absent_values(tmp_path, log_messages):
    config = ConfigLoader(tmp_path / "missing.yaml")

    assert config.get_browser() is None
    assert config.get_url() is None
    assert config.get_username() is None
    assert config.get_password() is None
    assert config.as_dict() == {}
    assert any("Configuration file not found" in message for message in log_messages)


def test_env_override(monkeypatch, config_path):
    monkeypatch.setenv("UI_BROWSER", "edge")
    monkeypatch.setenv("UI_HEADLESS", "false")

    config = ConfigLoader(config_path)

    assert config.get_browser() == "edge"
    assert config.is_headless() is False


def test_headless_defaults_to_true(config_path):
    assert ConfigLoader(config_path).is_headless() is True


def test_invalid_yaml_raises(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("browser: [unclosed", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        ConfigLoader(path)


def test_non_mapping_raises(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- chrome\n- firefox\n", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        ConfigLoader(path)


def test_as_dict_is_a_copy(config_path):
    config = ConfigLoader(config_path)
    config.as_dict()["browser"] = "edge"

    assert config.get_browser() == "firefox"


def test_shipped_config_has_required_keys():
    config = ConfigLoader(DEFAULT_CONFIG_PATH)

    for key in ("browser", "url", "username", "password"):
        assert config.as_dict().get(key), key
