"""Configuration loading and validation."""

import logging
import os
import yaml
from pathlib import Path
from typing import Optional, Dict, Any, List
from dataclasses import dataclass, field, fields

from moonc.domain.exceptions import ConfigurationError
from moonc.domain.models import CompilerConfig
from moonc.infrastructure.compilers.command import (
    DEFAULT_COMPILE_ARGS, DEFAULT_PARSE_ARGS, DEFAULT_VERSION_ARGS,
)
from moonc.shared.logging import get_logger

DEFAULT_CONFIG_FILE = Path("moonc.yaml")

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_TRUE_VALUES = ("true", "1", "yes", "on")


@dataclass
class DriverSettings:
    """Settings for the compiler backend and the worker pool."""

    # Compiler backend
    compiler_executable: str = "moonc"
    compile_args: List[str] = field(default_factory=lambda: list(DEFAULT_COMPILE_ARGS))
    parse_args: List[str] = field(default_factory=lambda: list(DEFAULT_PARSE_ARGS))
    version_args: List[str] = field(default_factory=lambda: list(DEFAULT_VERSION_ARGS))
    line_number_args: List[str] = field(default_factory=list)
    extra_args: List[str] = field(default_factory=list)
    timeout_seconds: Optional[float] = None

    # Scheduling
    max_workers: Optional[int] = None
    serialize_writes: bool = True

    # Misc
    log_level: str = "WARNING"

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self):
        """Validate configuration values."""
        if not self.compiler_executable:
            raise ConfigurationError("compiler_executable must not be empty")

        for name in ('compile_args', 'parse_args', 'version_args', 'line_number_args', 'extra_args'):
            value = getattr(self, name)
            if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
                raise ConfigurationError(f"{name} must be a list of strings, got: {value!r}")

        if self.max_workers is not None and self.max_workers < 1:
            raise ConfigurationError(f"max_workers must be positive, got: {self.max_workers}")

        if self.timeout_seconds is not None and self.timeout_seconds <= 0:
            raise ConfigurationError(f"timeout_seconds must be positive, got: {self.timeout_seconds}")

        self.log_level = str(self.log_level).upper()
        if self.log_level not in _LOG_LEVELS:
            raise ConfigurationError(f"Invalid log_level: {self.log_level}")

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)

    def compiler_config(self, reserve_line_numbers: bool = False) -> CompilerConfig:
        """Build the immutable per-batch compiler options."""
        return CompilerConfig(
            reserve_line_numbers=reserve_line_numbers,
            extra_args=tuple(self.extra_args),
        )


class ConfigLoader:
    """Loads and validates settings from a YAML file and environment variables."""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize config loader.

        Args:
            config_path: Optional path to YAML config file. Falls back to
                MOONC_CONFIG, then to moonc.yaml in the working directory.
        """
        self._explicit = config_path is not None or bool(os.getenv("MOONC_CONFIG"))
        if config_path is None and os.getenv("MOONC_CONFIG"):
            config_path = Path(os.environ["MOONC_CONFIG"])
        self.config_path = Path(config_path) if config_path else DEFAULT_CONFIG_FILE
        self._logger = get_logger(__name__)

    def load(self, overrides: Optional[Dict[str, Any]] = None) -> DriverSettings:
        """
        Load settings from file and environment.

        Environment variables take precedence over the config file, and
        overrides (from the CLI) over both.

        Returns:
            DriverSettings instance

        Raises:
            ConfigurationError: If configuration is invalid
        """
        config_dict: Dict[str, Any] = {}

        if self.config_path.exists():
            self._logger.info(f"Loading config from {self.config_path}")
            config_dict.update(self._load_yaml())
        elif self._explicit:
            raise ConfigurationError(f"Config file not found: {self.config_path}")
        else:
            self._logger.debug(f"No config file at {self.config_path}, using defaults")

        config_dict.update(self._load_from_env())

        if overrides:
            for k, v in overrides.items():
                if v is None:
                    continue
                config_dict[k] = v

        valid_fields = {f.name for f in fields(DriverSettings)}
        unknown = sorted(set(config_dict) - valid_fields)
        if unknown:
            self._logger.warning(f"Ignoring unknown config keys: {', '.join(unknown)}")

        filtered_config = {k: v for k, v in config_dict.items() if k in valid_fields}

        try:
            return DriverSettings(**filtered_config)
        except TypeError as e:
            raise ConfigurationError(f"Invalid configuration: {e}")

    def _load_yaml(self) -> Dict[str, Any]:
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Cannot load {self.config_path}: {e}")

        if not isinstance(data, dict):
            raise ConfigurationError(f"{self.config_path} must contain a mapping")
        return data

    def _load_from_env(self) -> Dict[str, Any]:
        """Load configuration from environment variables."""
        env_config: Dict[str, Any] = {}

        if executable := os.getenv("MOONC_EXECUTABLE"):
            env_config["compiler_executable"] = executable

        if workers := os.getenv("MOONC_WORKERS"):
            try:
                env_config["max_workers"] = int(workers)
            except ValueError:
                self._logger.warning(f"Invalid MOONC_WORKERS value: {workers}")

        if timeout := os.getenv("MOONC_TIMEOUT"):
            try:
                env_config["timeout_seconds"] = float(timeout)
            except ValueError:
                self._logger.warning(f"Invalid MOONC_TIMEOUT value: {timeout}")

        if serialize := os.getenv("MOONC_SERIALIZE_WRITES"):
            env_config["serialize_writes"] = serialize.lower() in _TRUE_VALUES

        if level := os.getenv("MOONC_LOG_LEVEL"):
            env_config["log_level"] = level

        return env_config
