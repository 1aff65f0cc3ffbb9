"""
Config Schema Validation

Pydantic models for validating config.yaml structure.
Provides clear error messages when configuration is invalid.
"""

from typing import List, Literal

import httpx
from pydantic import BaseModel, Field, field_validator

from orderdesk.config import DEFAULT_TENANT_NAME, DEFAULT_WEBHOOK_URL


class TenantConfig(BaseModel):
    """Tenant defaults"""

    default_name: str = Field(
        default=DEFAULT_TENANT_NAME,
        description="Client name used when no client has been chosen yet",
    )


class SyncConfig(BaseModel):
    """Google Sheets sync configuration"""

    webhook_url: str = Field(
        default=DEFAULT_WEBHOOK_URL,
        description="Google Apps Script web app URL (empty disables sync)",
    )
    auto_sync: bool = Field(default=True, description="Push each new order after it is saved")
    timeout: int = Field(default=30, ge=1, le=300, description="Request timeout in seconds")

    @field_validator("webhook_url")
    @classmethod
    def validate_webhook_url(cls, v: str) -> str:
        """Webhook must be empty or an http(s) URL"""
        v = v.strip()
        if v and not v.startswith(("http://", "https://")):
            raise ValueError(f"Invalid webhook URL '{v}'. Use an http:// or https:// URL")
        if v:
            try:
                httpx.URL(v)
            except httpx.InvalidURL as e:
                raise ValueError(f"Invalid webhook URL: {e}") from e
        return v


class LoggingConfig(BaseModel):
    """Logging configuration"""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Log level"
    )
    log_to_file: bool = Field(default=True, description="Enable file logging")
    log_to_console: bool = Field(default=True, description="Enable console logging")


class ApplicationConfig(BaseModel):
    """Application settings"""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class AppConfig(BaseModel):
    """
    Root configuration model for config.yaml

    Validates the entire configuration structure on load.
    """

    tenant: TenantConfig = Field(default_factory=TenantConfig)
    sync: SyncConfig = Field(default_factory=SyncConfig)
    application: ApplicationConfig = Field(default_factory=ApplicationConfig)

    model_config = {"populate_by_name": True}


def validate_config(config_dict: dict) -> AppConfig:
    """
    Validate a config dictionary against the schema.

    Args:
        config_dict: Raw dictionary loaded from config.yaml

    Returns:
        Validated AppConfig instance

    Raises:
        pydantic.ValidationError: If config is invalid
    """
    return AppConfig.model_validate(config_dict)


def get_validation_errors(config_dict: dict) -> List[str]:
    """
    Get a list of validation errors for a config dictionary.

    Args:
        config_dict: Raw dictionary loaded from config.yaml

    Returns:
        List of error messages (empty if valid)
    """
    try:
        validate_config(config_dict)
        return []
    except Exception as e:
        from pydantic import ValidationError

        if isinstance(e, ValidationError):
            return [
                f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
                for err in e.errors()
            ]
        return [str(e)]


# Editable config schema (what the Settings endpoint accepts)
class EditableTenantConfig(BaseModel):
    """Tenant config for editing"""
    default_name: str = Field(min_length=1)


class EditableSyncConfig(SyncConfig):
    """Sync config for editing"""


class EditableLoggingConfig(BaseModel):
    """Logging config for editing"""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    log_to_file: bool
    log_to_console: bool


class EditableApplicationConfig(BaseModel):
    """Application config for editing"""
    logging: EditableLoggingConfig


class EditableConfig(BaseModel):
    """
    Config schema matching GET /settings.

    Used to validate updates from the Settings endpoint.
    """
    tenant: EditableTenantConfig
    sync: EditableSyncConfig
    application: EditableApplicationConfig


def validate_editable_config(config_dict: dict) -> EditableConfig:
    """
    Validate an editable config update.

    Raises:
        pydantic.ValidationError: If config is invalid
    """
    return EditableConfig.model_validate(config_dict)
