"""Test configuration loader."""

import logging

import pytest

from moonc.domain.exceptions import ConfigurationError
from moonc.infrastructure.config import ConfigLoader, DriverSettings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ("MOONC_CONFIG", "MOONC_EXECUTABLE", "MOONC_WORKERS", "MOONC_TIMEOUT",
                 "MOONC_SERIALIZE_WRITES", "MOONC_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    # Keep a stray moonc.yaml in the working directory out of the tests
    monkeypatch.chdir(tmp_path)


def test_defaults_without_file():
    settings = ConfigLoader().load()

    assert settings.compiler_executable == "moonc"
    assert settings.compile_args == ["-p", "{input}"]
    assert settings.parse_args == ["-T", "{input}"]
    assert settings.version_args == ["-v"]
    assert settings.max_workers is None
    assert settings.serialize_writes is True
    assert settings.log_level_value == logging.WARNING


def test_load_from_yaml(tmp_path):
    config_file = tmp_path / "custom.yaml"
    config_file.write_text(
        "compiler_executable: moonp\n"
        "compile_args: ['{input}', '-p']\n"
        "line_number_args: ['-l']\n"
        "max_workers: 4\n"
    )

    settings = ConfigLoader(config_path=config_file).load()

    assert settings.compiler_executable == "moonp"
    assert settings.compile_args == ["{input}", "-p"]
    assert settings.line_number_args == ["-l"]
    assert settings.max_workers == 4


def test_default_file_in_working_directory(tmp_path):
    (tmp_path / "moonc.yaml").write_text("timeout_seconds: 30\n")

    assert ConfigLoader().load().timeout_seconds == 30


def test_env_overrides_file(tmp_path, monkeypatch):
    config_file = tmp_path / "moonc.yaml"
    config_file.write_text("compiler_executable: from-file\nmax_workers: 2\n")
    monkeypatch.setenv("MOONC_EXECUTABLE", "from-env")
    monkeypatch.setenv("MOONC_SERIALIZE_WRITES", "no")

    settings = ConfigLoader(config_path=config_file).load()

    assert settings.compiler_executable == "from-env"
    assert settings.max_workers == 2
    assert settings.serialize_writes is False


def test_overrides_win(monkeypatch):
    monkeypatch.setenv("MOONC_WORKERS", "8")

    settings = ConfigLoader().load(overrides={"max_workers": 3, "log_level": None})

    assert settings.max_workers == 3


def test_config_path_from_env(tmp_path, monkeypatch):
    config_file = tmp_path / "elsewhere.yaml"
    config_file.write_text("log_level: debug\n")
    monkeypatch.setenv("MOONC_CONFIG", str(config_file))

    settings = ConfigLoader().load()

    assert settings.log_level == "DEBUG"


def test_invalid_env_number_is_ignored(monkeypatch):
    monkeypatch.setenv("MOONC_WORKERS", "many")

    assert ConfigLoader().load().max_workers is None


def test_missing_explicit_file(tmp_path):
    with pytest.raises(ConfigurationError, match="not found"):
        ConfigLoader(config_path=tmp_path / "nope.yaml").load()


def test_yaml_must_be_mapping(tmp_path):
    config_file = tmp_path / "list.yaml"
    config_file.write_text("- a\n- b\n")

    with pytest.raises(ConfigurationError):
        ConfigLoader(config_path=config_file).load()


def test_unknown_keys_ignored(tmp_path):
    config_file = tmp_path / "moonc.yaml"
    config_file.write_text("watch: true\nmax_workers: 1\n")

    assert ConfigLoader(config_path=config_file).load().max_workers == 1


@pytest.mark.parametrize("kwargs", [
    {"compiler_executable": ""},
    {"max_workers": 0},
    {"timeout_seconds": -1},
    {"log_level": "LOUD"},
    {"compile_args": "-p {input}"},
])
def test_validation(kwargs):
    with pytest.raises(ConfigurationError):
        DriverSettings(**kwargs)


def test_compiler_config():
    settings = DriverSettings(extra_args=["--target", "5.1"])

    config = settings.compiler_config(reserve_line_numbers=True)

    assert config.reserve_line_numbers is True
    assert config.extra_args == ("--target", "5.1")
