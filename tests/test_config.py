"""Configuration - settings defaults and the fail-fast JSON config loader.

Tests:
    - Valid file yields MongoConfig and the connection URI
    - Missing, malformed and incomplete files raise ConfigurationError
    - decode_error_status only accepts error statuses
"""

import json

import pytest
from pydantic import ValidationError

from object_service.config import MongoConfig, Settings, load_config
from object_service.core.errors import ConfigurationError

VALID = {
    "mongo": {
        "host": "localhost",
        "port": 27017,
        "database": "test_db",
        "collection": "test_collection",
    },
}


def _write(tmp_path, content: str):
    path = tmp_path / "config.json"
    path.write_text(content)
    return path


def test_load_valid_config(tmp_path):
    config = load_config(_write(tmp_path, json.dumps(VALID)))

    assert config.mongo == MongoConfig(
        host="localhost", port=27017, database="test_db", collection="test_collection",
    )
    assert config.mongo.uri == "mongodb://localhost:27017"


def test_load_accepts_str_path(tmp_path):
    path = _write(tmp_path, json.dumps(VALID))
    assert load_config(str(path)).mongo.database == "test_db"


def test_missing_file_raises(tmp_path):
    with pytest.raises(ConfigurationError) as exc_info:
        load_config(tmp_path / "absent.json")

    assert exc_info.value.message.startswith("unable to open configuration file: ")
    assert exc_info.value.path.endswith("absent.json")


def test_directory_instead_of_file_raises(tmp_path):
    with pytest.raises(ConfigurationError, match="unable to open configuration file"):
        load_config(tmp_path)


def test_malformed_json_raises(tmp_path):
    with pytest.raises(ConfigurationError) as exc_info:
        load_config(_write(tmp_path, '{"mongo": {'))

    assert exc_info.value.message.startswith("unable to parse configuration: ")


def test_missing_mongo_section_raises(tmp_path):
    with pytest.raises(ConfigurationError, match="unable to parse configuration"):
        load_config(_write(tmp_path, "{}"))


def test_non_integer_port_raises(tmp_path):
    bad = {"mongo": dict(VALID["mongo"], port="not-a-port")}
    with pytest.raises(ConfigurationError):
        load_config(_write(tmp_path, json.dumps(bad)))


def test_settings_defaults(monkeypatch):
    for name in ("CONFIG_PATH", "PORT", "DECODE_ERROR_STATUS", "LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.config_path == "config.json"
    assert settings.port == 8000
    assert settings.decode_error_status == 500
    assert settings.log_format == "json"


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("CONFIG_PATH", "/etc/objects/config.json")
    monkeypatch.setenv("PORT", "9000")

    settings = Settings(_env_file=None)

    assert settings.config_path == "/etc/objects/config.json"
    assert settings.port == 9000


def test_decode_error_status_must_be_error_status():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, decode_error_status=200)
