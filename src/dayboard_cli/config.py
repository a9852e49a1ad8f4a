"""Configuration management for Dayboard CLI."""

import json
import os
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir, user_data_dir
from pydantic import BaseModel, Field, ValidationError

ENV_STORE_URL = "DAYBOARD_STORE_URL"
ENV_STORE_KEY = "DAYBOARD_STORE_KEY"


class StoreConfig(BaseModel):
    """Remote task store configuration."""

    url: str = Field(default="")
    table: str = Field(default="tasks")
    timeout: int = Field(default=30)


class BoardConfig(BaseModel):
    """Board view configuration."""

    default_time: str = Field(default="23:59")
    swipe_threshold: int = Field(default=10)


class OutputConfig(BaseModel):
    """Output configuration."""

    format: str = Field(default="pretty")
    color: bool = Field(default=True)


class LoggingConfig(BaseModel):
    """Log file configuration."""

    level: str = Field(default="INFO")


class Config(BaseModel):
    """Main configuration."""

    store: StoreConfig = Field(default_factory=StoreConfig)
    board: BoardConfig = Field(default_factory=BoardConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class ConfigManager:
    """Manages Dayboard CLI configuration and the store key."""

    def __init__(self, profile: str = "default"):
        self.profile = profile
        self.config_dir = Path(user_config_dir("dayboard-cli"))
        self.data_dir = Path(user_data_dir("dayboard-cli"))
        self.config_file = self.config_dir / f"{profile}.json"
        self.credentials_file = self.data_dir / f"{profile}.credentials.json"

        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.data_dir.mkdir(parents=True, exist_ok=True)

        self._config: Config | None = None

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> Config:
        """Load configuration from file, falling back to defaults if unreadable."""
        if self.config_file.exists():
            try:
                with open(self.config_file, encoding="utf-8") as f:
                    data = json.load(f)
                return Config(**data)
            except (OSError, ValueError, TypeError, ValidationError):
                return Config()
        return Config()

    def save_config(self, config: Config | None = None) -> None:
        """Save configuration to file."""
        if config is None:
            config = self.config

        with open(self.config_file, "w", encoding="utf-8") as f:
            json.dump(config.model_dump(), f, indent=2)

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key."""
        return self.get_from_config(self.config, key)

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key.

        Raises:
            KeyError: If the key does not name an existing setting
        """
        if self.get(key) is None:
            raise KeyError(key)

        keys = key.split(".")
        config_dict = self.config.model_dump()
        current = config_dict
        for k in keys[:-1]:
            current = current[k]
        current[keys[-1]] = value

        self._config = Config(**config_dict)
        self.save_config()

    def reset(self, key: str | None = None) -> None:
        """Reset configuration (or a single key) to defaults."""
        if key is None:
            self._config = Config()
            self.save_config()
            return
        default_value = self.get_from_config(Config(), key)
        if default_value is None:
            raise KeyError(key)
        self.set(key, default_value)

    @staticmethod
    def get_from_config(config: Config, key: str) -> Any:
        """Get value from a config object using dot notation."""
        value: Any = config
        for k in key.split("."):
            if isinstance(value, BaseModel) and k in type(value).model_fields:
                value = getattr(value, k)
            else:
                return None
        return value

    def save_store_key(self, key: str) -> None:
        """Save the store API key, readable only by the owner."""
        with open(self.credentials_file, "w", encoding="utf-8") as f:
            json.dump({"key": key}, f, indent=2)
        self.credentials_file.chmod(0o600)

    def load_store_key(self) -> str | None:
        """Load the store API key from the credentials file."""
        if self.credentials_file.exists():
            try:
                with open(self.credentials_file, encoding="utf-8") as f:
                    return json.load(f).get("key")
            except (OSError, ValueError, AttributeError):
                return None
        return None

    def clear_store_key(self) -> None:
        """Remove the saved store API key."""
        if self.credentials_file.exists():
            self.credentials_file.unlink()

    def store_url(self) -> str:
        """Store URL, with DAYBOARD_STORE_URL taking precedence."""
        return os.environ.get(ENV_STORE_URL) or self.config.store.url

    def store_key(self) -> str | None:
        """Store API key, with DAYBOARD_STORE_KEY taking precedence."""
        return os.environ.get(ENV_STORE_KEY) or self.load_store_key()


def parse_config_value(value: str) -> str | int | bool:
    """Convert a command-line string to bool or int where it looks like one."""
    if value.lower() in ("true", "false"):
        return value.lower() == "true"
    try:
        return int(value)
    except ValueError:
        return value


_config_manager: ConfigManager | None = None


def get_config_manager(profile: str = "default") -> ConfigManager:
    """Get or create the global config manager."""
    global _config_manager
    if _config_manager is None or _config_manager.profile != profile:
        _config_manager = ConfigManager(profile)
    return _config_manager
