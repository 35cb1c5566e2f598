"""Logging configuration for kong_admin_client."""

from kong_admin_client.logging.config import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
