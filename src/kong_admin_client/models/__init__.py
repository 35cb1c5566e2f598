"""Kong API entity models.

This package contains Pydantic models for the certificate and plugin
resources of the Kong Admin API.
"""

from kong_admin_client.models.base import (
    ConfigValue,
    Envelope,
    KongEntityBase,
    ListOptions,
    PluginConfigMap,
)
from kong_admin_client.models.certificate import (
    Certificate,
    CertificateListOptions,
    CertificateRequest,
    Certificates,
)
from kong_admin_client.models.plugin import (
    EnabledPlugins,
    Plugin,
    PluginBase,
    PluginListOptions,
    Plugins,
    TypedPlugin,
)
from kong_admin_client.models.plugin_configs import (
    ACLConfig,
    ACLPlugin,
    CorrelationIDConfig,
    CorrelationIDPlugin,
    FileLogConfig,
    FileLogPlugin,
    JWTConfig,
    JWTPlugin,
    KeyAuthenticationConfig,
    KeyAuthenticationPlugin,
    PluginConfig,
    RateLimitingConfig,
    RateLimitingPlugin,
    RequestSizeLimitingConfig,
    RequestSizeLimitingPlugin,
)

__all__ = [
    # Typed plugins
    "ACLConfig",
    "ACLPlugin",
    # Certificates
    "Certificate",
    "CertificateListOptions",
    "CertificateRequest",
    "Certificates",
    # Base models
    "ConfigValue",
    "CorrelationIDConfig",
    "CorrelationIDPlugin",
    # Plugins
    "EnabledPlugins",
    "Envelope",
    "FileLogConfig",
    "FileLogPlugin",
    "JWTConfig",
    "JWTPlugin",
    "KeyAuthenticationConfig",
    "KeyAuthenticationPlugin",
    "KongEntityBase",
    "ListOptions",
    "Plugin",
    "PluginBase",
    "PluginConfig",
    "PluginConfigMap",
    "PluginListOptions",
    "Plugins",
    "RateLimitingConfig",
    "RateLimitingPlugin",
    "RequestSizeLimitingConfig",
    "RequestSizeLimitingPlugin",
    "TypedPlugin",
]
