"""Kong Admin API connection configuration."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from kong_admin_client.exceptions import KongConfigError

_TRUE_VALUES = {"1", "true", "yes", "on"}


class KongConnectionConfig(BaseModel):
    """Kong Admin API connection configuration.

    Instances are frozen: a client built from a config never sees it change.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    base_url: str = "http://localhost:8001"
    timeout: float = 30
    verify_ssl: bool = True

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate base URL format."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate timeout is positive."""
        if v <= 0:
            raise ValueError("timeout must be positive")
        return v

    @classmethod
    def from_env(cls, base_config: dict[str, Any] | None = None) -> KongConnectionConfig:
        """Create configuration with environment variable overrides.

        Environment variables take precedence over base_config values.

        Supported environment variables:
            KONG_ADMIN_URL: Kong Admin API base URL
            KONG_ADMIN_TIMEOUT: Request timeout in seconds
            KONG_ADMIN_VERIFY_SSL: Verify TLS certificates (true/false)
        """
        config_dict = base_config.copy() if base_config else {}

        if base_url := os.environ.get("KONG_ADMIN_URL"):
            config_dict["base_url"] = base_url

        if timeout := os.environ.get("KONG_ADMIN_TIMEOUT"):
            config_dict["timeout"] = timeout

        if verify_ssl := os.environ.get("KONG_ADMIN_VERIFY_SSL"):
            config_dict["verify_ssl"] = verify_ssl.strip().lower() in _TRUE_VALUES

        return cls.model_validate(config_dict)

    @classmethod
    def from_file(cls, path: str | Path) -> KongConnectionConfig:
        """Load configuration from a YAML file, then apply env overrides.

        Args:
            path: Path to a YAML file holding a mapping of config fields.

        Returns:
            Loaded configuration.

        Raises:
            KongConfigError: If the file is missing, unreadable or invalid.
        """
        config_path = Path(path)
        if not config_path.exists():
            raise KongConfigError(
                "Kong configuration file not found",
                details=str(config_path),
            )

        try:
            with config_path.open() as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise KongConfigError("Invalid config file format", details=str(e)) from e

        if not isinstance(data, dict):
            raise KongConfigError(
                "Invalid config file format",
                details="top-level YAML value must be a mapping",
            )

        try:
            return cls.from_env(data)
        except ValidationError as e:
            raise KongConfigError("Invalid Kong configuration", details=str(e)) from e
