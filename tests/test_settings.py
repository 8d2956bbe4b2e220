"""Tests for configuration loading."""
import pytest

from drainwatch.loader.settings import Config, SourceConfig, load_config
from drainwatch.shared import config as shared_config
from drainwatch.shared.config import find_config_file, get_config_path, get_log_level, load_yaml_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("DRAINWATCH_ENV", "DRAINWATCH_DATA_PATH", "DRAINWATCH_DATA_URL", "LOG_LEVEL", "DB_HOST"):
        monkeypatch.delenv(name, raising=False)


def test_load_config_from_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "log_level: debug\n"
        "source:\n"
        "  type: http\n"
        "  url: http://example.invalid/battery.json\n"
        "  timeout: 10\n"
        "cache_duration: 60\n"
        "page_size: 25\n"
    )

    config = load_config(str(path))

    assert config.log_level == "DEBUG"
    assert config.source.type == "http"
    assert config.source.url == "http://example.invalid/battery.json"
    assert config.source.timeout == 10
    assert config.cache_duration == 60
    assert config.page_size == 25
    assert config.export_dir == "exports"


def test_missing_explicit_config(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "nope.yaml"))


def test_env_overrides(tmp_path, monkeypatch):
    path = tmp_path / "config.yaml"
    path.write_text("source:\n  type: mysql\n")
    monkeypatch.setenv("DRAINWATCH_DATA_PATH", "/srv/battery.json")
    monkeypatch.setenv("LOG_LEVEL", "warning")

    config = load_config(str(path))

    assert config.source.type == "file"
    assert config.source.path == "/srv/battery.json"
    assert config.log_level == "WARNING"


def test_db_config_from_env(monkeypatch):
    monkeypatch.setenv("DB_HOST", "mysql.internal")
    config = Config.from_dict({})

    assert config.db_config.host == "mysql.internal"
    assert config.source == SourceConfig()


def test_unknown_source_type():
    with pytest.raises(ValueError):
        SourceConfig.from_dict({"type": "ftp"})


def test_config_path_uses_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("DRAINWATCH_ENV", "staging")
    assert get_config_path(config_dir=tmp_path) == tmp_path / "config-staging.yaml"


def test_yaml_helpers(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")

    assert load_yaml_config(path, load_env=False) == {}
    assert get_log_level({"log_level": "debug"}) == "DEBUG"
    assert get_log_level({}) == "INFO"


def test_explicit_config_must_exist(tmp_path):
    with pytest.raises(FileNotFoundError):
        find_config_file(tmp_path / "missing.yaml")


def test_config_falls_back_to_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(shared_config, "DEFAULT_CONFIG_DIR", tmp_path / "config")

    assert find_config_file() is None
    assert load_config().source == SourceConfig()

    (tmp_path / "config-drainwatch.yaml").write_text("page_size: 5\n")
    assert find_config_file() == tmp_path / "config-drainwatch.yaml"
    assert load_config().page_size == 5

    (tmp_path / "config").mkdir()
    (tmp_path / "config" / "config-drainwatch.yaml").write_text("page_size: 7\n")
    assert load_config().page_size == 7
