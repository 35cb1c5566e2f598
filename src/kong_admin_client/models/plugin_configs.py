"""Typed configurations for bundled Kong plugins.

Each ``*Config`` model mirrors the ``config`` object of one plugin; field
names are the wire keys. Every field defaults to its type's zero value so
that only what the caller sets is sent (see ``normalizer.flatten_config``).
"""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from kong_admin_client.models.plugin import TypedPlugin


class PluginConfig(BaseModel):
    """Base for typed plugin configurations."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


# https://docs.konghq.com/hub/kong-inc/acl/
class ACLConfig(PluginConfig):
    whitelist: list[str] = Field(default_factory=list)
    blacklist: list[str] = Field(default_factory=list)


class ACLPlugin(TypedPlugin[ACLConfig]):
    plugin_name: ClassVar[str] = "acl"

    config: ACLConfig = Field(default_factory=ACLConfig)


# https://docs.konghq.com/hub/kong-inc/request-size-limiting/
class RequestSizeLimitingConfig(PluginConfig):
    allowed_payload_size: int = 0


class RequestSizeLimitingPlugin(TypedPlugin[RequestSizeLimitingConfig]):
    plugin_name: ClassVar[str] = "request-size-limiting"

    config: RequestSizeLimitingConfig = Field(default_factory=RequestSizeLimitingConfig)


# https://docs.konghq.com/hub/kong-inc/correlation-id/
class CorrelationIDConfig(PluginConfig):
    header_name: str = ""
    generator: str = ""
    echo_downstream: bool = False


class CorrelationIDPlugin(TypedPlugin[CorrelationIDConfig]):
    plugin_name: ClassVar[str] = "correlation-id"

    config: CorrelationIDConfig = Field(default_factory=CorrelationIDConfig)


# https://docs.konghq.com/hub/kong-inc/rate-limiting/
class RateLimitingConfig(PluginConfig):
    """Rate limiting configuration.

    Limits of 0 are omitted, which means "no limit for this window" to Kong.
    """

    second: int = 0
    minute: int = 0
    hour: int = 0
    day: int = 0
    month: int = 0
    year: int = 0
    limit_by: str = ""
    policy: str = ""
    fault_tolerant: bool = False
    redis_host: str = ""
    redis_port: int = 0
    redis_password: str = ""  # pragma: allowlist secret
    redis_timeout: int = 0


class RateLimitingPlugin(TypedPlugin[RateLimitingConfig]):
    plugin_name: ClassVar[str] = "rate-limiting"

    config: RateLimitingConfig = Field(default_factory=RateLimitingConfig)


# https://docs.konghq.com/hub/kong-inc/jwt/
class JWTConfig(PluginConfig):
    uri_param_names: list[str] = Field(default_factory=list)
    claims_to_verify: list[str] = Field(default_factory=list)
    key_claim_name: str = ""
    secret_is_base64: bool = False


class JWTPlugin(TypedPlugin[JWTConfig]):
    plugin_name: ClassVar[str] = "jwt"

    config: JWTConfig = Field(default_factory=JWTConfig)


# https://docs.konghq.com/hub/kong-inc/file-log/
class FileLogConfig(PluginConfig):
    path: str = ""


class FileLogPlugin(TypedPlugin[FileLogConfig]):
    plugin_name: ClassVar[str] = "file-log"

    config: FileLogConfig = Field(default_factory=FileLogConfig)


# https://docs.konghq.com/hub/kong-inc/key-auth/
class KeyAuthenticationConfig(PluginConfig):
    key_names: list[str] = Field(default_factory=list)
    hide_credentials: bool = False


class KeyAuthenticationPlugin(TypedPlugin[KeyAuthenticationConfig]):
    plugin_name: ClassVar[str] = "key-auth"

    config: KeyAuthenticationConfig = Field(default_factory=KeyAuthenticationConfig)
