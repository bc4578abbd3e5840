"""
Unit tests for configuration loading (utils.py, config.py)
"""

import pytest

from config import get_config, get_config_section
from utils import load_config


CONFIG_YAML = """
database:
  host: db.local
  port: 3307
  name: xbee
  user: xbee
  password: ""
auth:
  cookie_key: ""
"""


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    for name in ("XBEEWEB_DB_USER", "XBEEWEB_DB_PASSWORD", "XBEEWEB_DB_HOST", "XBEEWEB_COOKIE_KEY"):
        monkeypatch.delenv(name, raising=False)
    path = tmp_path / "config.yaml"
    path.write_text(CONFIG_YAML, encoding="utf-8")
    return path


def test_load_whole_file(config_file):
    config = load_config(str(config_file))

    assert config["database"]["port"] == 3307
    assert "auth" in config


def test_load_section(config_file):
    assert load_config(str(config_file), subconfig="database")["host"] == "db.local"


def test_missing_section(config_file):
    with pytest.raises(KeyError):
        load_config(str(config_file), subconfig="api")


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "nope.yaml"))


def test_env_overrides_secrets(config_file, monkeypatch):
    monkeypatch.setenv("XBEEWEB_DB_PASSWORD", "hunter2")
    monkeypatch.setenv("XBEEWEB_COOKIE_KEY", "key-from-env")

    config = get_config(str(config_file))

    assert config["database"]["password"] == "hunter2"
    assert config["auth"]["cookie_key"] == "key-from-env"
    assert config["database"]["host"] == "db.local"


def test_env_override_creates_missing_section(tmp_path, monkeypatch):
    path = tmp_path / "config.yaml"
    path.write_text("database:\n  host: h\n", encoding="utf-8")
    monkeypatch.setenv("XBEEWEB_COOKIE_KEY", "k")

    assert get_config_section("auth", str(path)) == {"cookie_key": "k"}


def test_get_config_section_unknown_is_empty(config_file):
    assert get_config_section("api", str(config_file)) == {}
