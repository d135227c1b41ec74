"""Configuration module for the ClickUp Progress Step migration.

Handles loading and validating configuration settings.
"""

import os
from pathlib import Path
from typing import Any, cast

import yaml
from dotenv import load_dotenv

from clickup_migration.display import logger
from clickup_migration.models import ConfigurationError
from clickup_migration.type_definitions import ConfigValue, MigrationConfig

DEFAULT_CONFIG_FILE = Path("clickup_config.yml")
DEFAULT_BASE_URL = "https://api.clickup.com/api/v2"
ENV_PREFIX = "CLICKUP_"

REQUIRED_KEYS = ("api_token", "space_id")

DEFAULTS: dict[str, Any] = {
    "base_url": DEFAULT_BASE_URL,
    "request_timeout": 30.0,
    "request_delay": 0.1,
    "dry_run": False,
    "log_level": "INFO",
    "log_file": None,
    "progress_step_field": "progress step",
    "include_closed": False,
    "subtasks": False,
    "match_space_statuses": False,
}

LOG_LEVELS = ("DEBUG", "INFO", "NOTICE", "WARNING", "ERROR", "CRITICAL", "SUCCESS")


class ConfigLoader:
    """Loads configuration from a YAML file, .env files and environment variables."""

    def __init__(self, config_file_path: Path = DEFAULT_CONFIG_FILE) -> None:
        """Initialize the configuration loader.

        Args:
            config_file_path: Path to the YAML configuration file

        Raises:
            ConfigurationError: If the file is missing, is not valid YAML,
                or lacks a required key

        """
        self.config_file_path = Path(config_file_path)

        self._load_environment_configuration()

        raw = self._load_yaml_config(self.config_file_path)
        self.config: dict[str, Any] = {**DEFAULTS, **raw}

        self._apply_environment_overrides()
        self._validate()

    def _load_environment_configuration(self) -> None:
        """Load environment variables from .env and then .env.local.

        Later files override values from earlier files.
        """
        load_dotenv(".env")
        if Path(".env.local").exists():
            load_dotenv(".env.local", override=True)
            logger.debug("Loaded local overrides from .env.local")

    def _load_yaml_config(self, config_file_path: Path) -> dict[str, Any]:
        """Load configuration from a YAML file.

        Returns:
            dict: Configuration settings

        """
        try:
            with config_file_path.open("r") as config_file:
                data = yaml.safe_load(config_file)
        except FileNotFoundError:
            msg = f"Configuration file '{config_file_path}' not found"
            raise ConfigurationError(msg) from None
        except (OSError, UnicodeDecodeError) as e:
            msg = f"Cannot read configuration file '{config_file_path}': {e}"
            raise ConfigurationError(msg) from e
        except yaml.YAMLError as e:
            msg = f"Invalid YAML in configuration file: {e}"
            raise ConfigurationError(msg) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            msg = f"Configuration file '{config_file_path}' must contain a mapping"
            raise ConfigurationError(msg)
        return data

    def _apply_environment_overrides(self) -> None:
        """Override configuration settings with CLICKUP_* environment variables."""
        for env_var, env_value in os.environ.items():
            if not env_var.startswith(ENV_PREFIX):
                continue

            key = env_var[len(ENV_PREFIX) :].lower()
            match key:
                case "api_token" | "space_id" | "base_url" | "progress_step_field" | "log_file":
                    self.config[key] = env_value
                case "log_level":
                    self.config[key] = env_value.upper()
                case _ if key in DEFAULTS:
                    self.config[key] = self._convert_value(env_value)
                case _:
                    continue
            logger.debug("Applied environment override for %s", key)

    def _convert_value(self, value: str) -> ConfigValue:
        """Convert string value to appropriate type."""
        match value.strip().lower():
            case "true" | "yes" | "y":
                return True
            case "false" | "no" | "n":
                return False

        try:
            return int(value)
        except ValueError:
            pass
        try:
            return float(value)
        except ValueError:
            return value

    def _validate(self) -> None:
        missing = [key for key in REQUIRED_KEYS if not self.config.get(key)]
        if missing:
            msg = f"Missing {', '.join(repr(key) for key in missing)} in configuration"
            raise ConfigurationError(msg)

        # Space ids are numeric in YAML more often than not
        self.config["space_id"] = str(self.config["space_id"])
        self.config["api_token"] = str(self.config["api_token"])
        self.config["base_url"] = str(self.config["base_url"]).rstrip("/")

        for key in ("request_timeout", "request_delay"):
            try:
                value = float(self.config[key])
            except (TypeError, ValueError):
                msg = f"'{key}' must be a number, got {self.config[key]!r}"
                raise ConfigurationError(msg) from None
            if value < 0:
                msg = f"'{key}' must not be negative"
                raise ConfigurationError(msg)
            self.config[key] = value

        level = str(self.config["log_level"]).upper()
        if level not in LOG_LEVELS:
            msg = f"Unknown log_level {self.config['log_level']!r}"
            raise ConfigurationError(msg)
        self.config["log_level"] = level

        for key in ("dry_run", "include_closed", "subtasks", "match_space_statuses"):
            self.config[key] = self._to_flag(key, self.config[key])

    def _to_flag(self, key: str, value: Any) -> bool:
        """Interpret a boolean option; quoted YAML strings like "false" are honored."""
        if isinstance(value, str):
            value = self._convert_value(value)
        if isinstance(value, bool):
            return value
        if isinstance(value, int) and value in (0, 1):
            return bool(value)
        msg = f"'{key}' must be true or false, got {value!r}"
        raise ConfigurationError(msg)

    def get_config(self) -> MigrationConfig:
        """Get the validated configuration dictionary."""
        return cast(MigrationConfig, self.config)

    def get_value(self, key: str, default: Any = None) -> Any:
        """Get a specific configuration value."""
        return self.config.get(key, default)


def load_config(config_file_path: Path = DEFAULT_CONFIG_FILE) -> MigrationConfig:
    """Load and validate the migration configuration."""
    return ConfigLoader(config_file_path).get_config()
