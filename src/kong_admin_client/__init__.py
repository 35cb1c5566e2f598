"""Typed Python client for the Kong Admin API certificate and plugin resources."""

from kong_admin_client.__version__ import __version__
from kong_admin_client.client import KongAdminClient, KongResponse
from kong_admin_client.config import KongConnectionConfig
from kong_admin_client.exceptions import (
    KongAPIError,
    KongAuthError,
    KongConfigError,
    KongConflictError,
    KongConnectionError,
    KongDecodeError,
    KongNotFoundError,
    KongRequestError,
    KongStatusError,
    KongValidationError,
)
from kong_admin_client.normalizer import flatten_config, is_zero
from kong_admin_client.services import CertificateManager, PluginManager

__all__ = [
    "CertificateManager",
    "KongAPIError",
    "KongAdminClient",
    "KongAuthError",
    "KongConfigError",
    "KongConflictError",
    "KongConnectionConfig",
    "KongConnectionError",
    "KongDecodeError",
    "KongNotFoundError",
    "KongRequestError",
    "KongResponse",
    "KongStatusError",
    "KongValidationError",
    "PluginManager",
    "__version__",
    "flatten_config",
    "is_zero",
]
