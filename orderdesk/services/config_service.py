### Description ###
# OrderDesk - Local-first Order Intake
# - Configuration Service -
# Author: Bailey Dixon
# Date: 10/18/2026
# Python: 3.11
####################

"""
Configuration Service

Provides read/write access to config.yaml while preserving comments and formatting.
Uses ruamel.yaml for comment-preserving YAML operations.
Includes Pydantic validation for config structure.
"""

from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap

from orderdesk.config import DEFAULT_CONFIG, DEFAULT_TENANT_NAME, DEFAULT_WEBHOOK_URL, get_config_path
from orderdesk.config_schema import get_validation_errors, validate_editable_config
from orderdesk.utils import get_logger

logger = get_logger(__name__)


class ConfigService:
    """
    Service for managing config.yaml with comment preservation.

    Uses ruamel.yaml to load and save YAML while keeping all comments,
    formatting, and structure intact.
    """

    def __init__(self, config_path: str | Path | None = None):
        if config_path is None:
            self.config_path = get_config_path()
        else:
            self.config_path = Path(config_path)
        self.yaml = YAML()
        self.yaml.preserve_quotes = True
        self.yaml.indent(mapping=2, sequence=4, offset=2)
        self._config: CommentedMap | None = None

        self._ensure_config_exists()

    def _ensure_config_exists(self) -> None:
        """Create default config file if it doesn't exist"""
        if not self.config_path.exists():
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(DEFAULT_CONFIG)
            logger.info(f"Created default configuration file: {self.config_path}")

    def _ensure_loaded(self) -> CommentedMap:
        """Ensure config is loaded, load if not"""
        if self._config is None:
            self.reload()
        return self._config

    def reload(self, validate: bool = True) -> CommentedMap:
        """
        Reload config from disk.

        Validation problems are logged as warnings so a partial config still loads.
        """
        self._ensure_config_exists()

        with open(self.config_path, encoding="utf-8") as f:
            self._config = self.yaml.load(f) or CommentedMap()

        if validate:
            for error in get_validation_errors(dict(self._config)):
                logger.warning(f"Config validation warning: {error}")

        return self._config

    def save(self) -> None:
        """Save config to disk, preserving comments and formatting"""
        if self._config is None:
            raise ValueError("No config loaded to save")

        with open(self.config_path, "w", encoding="utf-8") as f:
            self.yaml.dump(self._config, f)

    def get(self, path: str, default: Any = None) -> Any:
        """
        Get a config value by dot-notation path.

        Example: get("sync.webhook_url") -> "https://script.google.com/..."
        """
        value = self._ensure_loaded()

        for key in path.split("."):
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    def set(self, path: str, value: Any) -> None:
        """
        Set a config value by dot-notation path.

        Example: set("sync.auto_sync", False)
        """
        config = self._ensure_loaded()
        keys = path.split(".")

        current = config
        for key in keys[:-1]:
            if key not in current:
                current[key] = CommentedMap()
            current = current[key]

        current[keys[-1]] = value

    def get_editable_config(self) -> dict:
        """
        Get config suitable for the Settings endpoint.

        The returned dict matches EditableConfig.
        """
        self._ensure_loaded()

        return {
            "tenant": {
                "default_name": self.get("tenant.default_name", DEFAULT_TENANT_NAME),
            },
            "sync": {
                "webhook_url": self.get("sync.webhook_url", DEFAULT_WEBHOOK_URL),
                "auto_sync": self.get("sync.auto_sync", True),
                "timeout": self.get("sync.timeout", 30),
            },
            "application": {
                "logging": {
                    "level": self.get("application.logging.level", "INFO"),
                    "log_to_file": self.get("application.logging.log_to_file", True),
                    "log_to_console": self.get("application.logging.log_to_console", True),
                },
            },
        }

    def validate_update(self, updates: dict) -> list[str]:
        """
        Validate an update dict before applying.

        Args:
            updates: Partial config update

        Returns:
            List of validation error messages (empty if valid)
        """
        current = self.get_editable_config()

        def deep_merge(base: dict, update: dict) -> dict:
            result = base.copy()
            for key, value in update.items():
                if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                    result[key] = deep_merge(result[key], value)
                else:
                    result[key] = value
            return result

        merged = deep_merge(current, updates)

        try:
            validate_editable_config(merged)
            return []
        except Exception as e:
            from pydantic import ValidationError

            if isinstance(e, ValidationError):
                return [
                    f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
                    for err in e.errors()
                ]
            return [str(e)]

    def update_from_dict(self, updates: dict, prefix: str = "") -> list[str]:
        """
        Update config from a nested dict, returning list of changed paths.

        Only updates values that have actually changed.
        """
        changed = []

        for key, value in updates.items():
            path = f"{prefix}.{key}" if prefix else key

            if isinstance(value, dict):
                changed.extend(self.update_from_dict(value, path))
            else:
                if self.get(path) != value:
                    self.set(path, value)
                    changed.append(path)

        return changed


# Singleton instance
_config_service: ConfigService | None = None


def get_config_service() -> ConfigService:
    """Get the singleton config service instance"""
    global _config_service
    if _config_service is None:
        _config_service = ConfigService()
    return _config_service


def clear_config_cache() -> None:
    """Drop the singleton so the next access re-reads the config path"""
    global _config_service
    _config_service = None
