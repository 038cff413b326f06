"""
Configuration service for store settings.

Settings come from an optional JSON file and are overridden by
environment variables, so a test suite can pick the store behaviour
without touching code.
"""

import json
import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from recordstore.models.domain import IdStrategy

logger = logging.getLogger(__name__)

ENV_CONFIG_PATH = "RECORDSTORE_CONFIG"
ENV_ID_STRATEGY = "RECORDSTORE_ID_STRATEGY"
ENV_FALSY_ID_LISTS_ALL = "RECORDSTORE_FALSY_ID_LISTS_ALL"
ENV_LOG_LEVEL = "RECORDSTORE_LOG_LEVEL"


@dataclass(frozen=True)
class StoreSettings:
    """Typed view of the store configuration."""

    id_strategy: IdStrategy = IdStrategy.POSITIONAL
    # When True, list() treats any falsy id (including 0) as "list everything".
    falsy_id_lists_all: bool = False
    log_level: str = "INFO"


def _bool(value: Any, default: bool = False) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in {"1", "true", "yes", "on"}


def _id_strategy(value: Any) -> IdStrategy:
    try:
        return IdStrategy(str(value).strip().lower())
    except ValueError:
        valid = ", ".join(s.value for s in IdStrategy)
        raise ValueError(f"Invalid id strategy: {value!r}. Valid: {valid}") from None


class ConfigService:
    """Service for loading and providing store configuration."""

    def __init__(
        self,
        config_path: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
    ):
        """Initialize the configuration service.

        Args:
            config_path: Path to a JSON configuration file.
                        Defaults to $RECORDSTORE_CONFIG, or no file at all.
            environ: Environment mapping to read overrides from.
                    Defaults to os.environ.
        """
        self.environ = os.environ if environ is None else environ
        if config_path is None and self.environ.get(ENV_CONFIG_PATH):
            config_path = Path(self.environ[ENV_CONFIG_PATH])

        self.config_path = config_path
        self._config = None

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from JSON file.

        Returns:
            Dictionary containing the file configuration, empty without a file

        Raises:
            FileNotFoundError: If the configured file doesn't exist
            json.JSONDecodeError: If the file is invalid JSON
        """
        if self.config_path is None:
            return {}

        if not self.config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        with open(self.config_path, 'r', encoding='utf-8') as f:
            return json.load(f)

    @property
    def config(self) -> Dict[str, Any]:
        """Get the file configuration (cached)."""
        if self._config is None:
            self._config = self._load_config()
        return self._config

    @property
    def settings(self) -> StoreSettings:
        """Build settings from the file, then apply environment overrides."""
        settings = StoreSettings()
        config = self.config

        if "idStrategy" in config:
            settings = replace(settings, id_strategy=_id_strategy(config["idStrategy"]))
        if "falsyIdListsAll" in config:
            settings = replace(settings, falsy_id_lists_all=_bool(config["falsyIdListsAll"]))
        if "logLevel" in config:
            settings = replace(settings, log_level=str(config["logLevel"]).upper())

        if self.environ.get(ENV_ID_STRATEGY):
            settings = replace(settings, id_strategy=_id_strategy(self.environ[ENV_ID_STRATEGY]))
        if self.environ.get(ENV_FALSY_ID_LISTS_ALL) is not None:
            settings = replace(
                settings,
                falsy_id_lists_all=_bool(self.environ[ENV_FALSY_ID_LISTS_ALL], settings.falsy_id_lists_all),
            )
        if self.environ.get(ENV_LOG_LEVEL):
            settings = replace(settings, log_level=self.environ[ENV_LOG_LEVEL].upper())

        logger.debug("Resolved store settings: %s", settings)
        return settings


# Global instance for easy import
_config_service = None


def get_config_service() -> ConfigService:
    """Get the global configuration service instance."""
    global _config_service
    if _config_service is None:
        _config_service = ConfigService()
    return _config_service


def reset_config_service() -> None:
    """Drop the global instance so the next call re-reads the environment."""
    global _config_service
    _config_service = None
