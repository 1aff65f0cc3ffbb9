### Description ###
# OrderDesk - Local-first Order Intake
# - Application Configuration -
# Author: Bailey Dixon
# Date: 10/18/2026
# Python: 3.11
####################

"""
Application Configuration Management

Uses Pydantic Settings for configuration with environment variable support.
Loads settings from .env file and data/config.yaml.

Config file location (in order of precedence):
1. ORDERDESK_CONFIG_PATH environment variable
2. data/config.yaml (default)
"""

import os
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic_settings import BaseSettings

# Hard-coded Google Sheets webhook every client syncs to unless config.yaml overrides it
DEFAULT_WEBHOOK_URL = (
    "https://script.google.com/macros/s/"
    "AKfycbyZAQ90WOa28d-6qTJ5icXwTUALJmMEArzCnyeSdLr7/dev"
)
DEFAULT_TENANT_NAME = "Bolos Crew"


def get_project_root() -> Path:
    """Get the project root directory"""
    return Path(__file__).parent.parent


def get_config_path() -> Path:
    """
    Get the path to config.yaml.

    Priority:
    1. ORDERDESK_CONFIG_PATH environment variable (if set)
    2. data/config.yaml (default location)
    """
    env_path = os.environ.get("ORDERDESK_CONFIG_PATH")
    if env_path:
        return Path(env_path)

    return get_project_root() / "data" / "config.yaml"


def get_version() -> str:
    """Read version from VERSION file"""
    version_file = get_project_root() / "VERSION"
    if version_file.exists():
        return version_file.read_text().strip()
    return "0.0.0"


class AppSettings(BaseSettings):
    """Application Settings"""

    # API Configuration
    api_title: str = "OrderDesk API"
    api_version: str = get_version()
    api_prefix: str = "/api/v1"
    debug: bool = False

    # Server Configuration
    host: str = "127.0.0.1"
    port: int = 8000

    # Logging
    log_level: str = "INFO"
    log_to_file: bool = True
    log_to_console: bool = True

    class Config:
        env_prefix = "ORDERDESK_"
        env_file = ".env"
        extra = "ignore"


DEFAULT_CONFIG = f"""# OrderDesk Configuration
# Settings for tenant defaults, Google Sheets sync and logging

# Tenant Settings
tenant:
  # Client name used on first start (data is stored per client name)
  default_name: "{DEFAULT_TENANT_NAME}"

# Google Sheets Sync
# Orders are POSTed as JSON to a Google Apps Script web app:
#   {{ "type": "order",  "order":  {{ ... }} }}
#   {{ "type": "orders", "orders": [ {{ ... }}, {{ ... }} ] }}
sync:
  webhook_url: "{DEFAULT_WEBHOOK_URL}"
  auto_sync: true            # Push every new order right after it is saved
  timeout: 30                # Request timeout in seconds

# Application Settings
application:
  logging:
    level: "INFO"             # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_to_file: true         # Enable file logging
    log_to_console: true      # Enable console logging
"""


def load_yaml_config(config_path: str | None = None) -> dict:
    """Load configuration from YAML file, creating default if missing"""
    config_file = get_config_path() if config_path is None else Path(config_path)

    if not config_file.exists():
        config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(config_file, "w", encoding="utf-8") as f:
            f.write(DEFAULT_CONFIG)

    with open(config_file, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


@lru_cache
def get_app_settings() -> AppSettings:
    """Get cached application settings instance"""
    config = load_yaml_config()
    logging_config = (config.get("application") or {}).get("logging") or {}

    overrides = {}
    if "ORDERDESK_LOG_LEVEL" not in os.environ and logging_config.get("level"):
        overrides["log_level"] = logging_config["level"]
    if "ORDERDESK_LOG_TO_FILE" not in os.environ and "log_to_file" in logging_config:
        overrides["log_to_file"] = bool(logging_config["log_to_file"])
    if "ORDERDESK_LOG_TO_CONSOLE" not in os.environ and "log_to_console" in logging_config:
        overrides["log_to_console"] = bool(logging_config["log_to_console"])

    return AppSettings(**overrides)
