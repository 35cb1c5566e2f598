"""Pydantic models for Kong Plugins.

A plugin is a named behavior attached to an API, a Consumer, both, or
globally (neither). Because every plugin kind has its own configuration
shape, the generic ``Plugin`` carries an untyped ``config`` mapping. Typed
variants in ``plugin_configs`` convert into it with ``to_plugin()``.
"""

from __future__ import annotations

from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, Field

from kong_admin_client.models.base import (
    Envelope,
    IdentifierStr,
    KongEntityBase,
    ListOptions,
    PluginConfigMap,
)
from kong_admin_client.normalizer import flatten_config

C = TypeVar("C", bound=BaseModel)


class PluginBase(KongEntityBase):
    """Identity and scope fields shared by generic and typed plugins.

    Attributes:
        name: Plugin name, selects the behavior (e.g. 'rate-limiting').
        enabled: Whether the plugin is active. None leaves Kong's default.
        api_id: API the plugin is scoped to (optional).
        consumer_id: Consumer the plugin is scoped to (optional).
    """

    _entity_name: ClassVar[str] = "plugin"

    name: IdentifierStr | None = Field(default=None, description="Plugin name")
    enabled: bool | None = Field(default=None, description="Whether plugin is active")
    api_id: IdentifierStr | None = Field(default=None, description="API scope")
    consumer_id: IdentifierStr | None = Field(default=None, description="Consumer scope")

    @property
    def is_global(self) -> bool:
        """True when the plugin applies to every API and Consumer."""
        return not self.api_id and not self.consumer_id


class Plugin(PluginBase):
    """Kong Plugin entity in its generic, wire-level form."""

    config: PluginConfigMap | None = Field(default=None, description="Plugin configuration")


class TypedPlugin(PluginBase, Generic[C]):
    """Base for plugin variants with a strongly-typed configuration.

    Subclasses set ``plugin_name`` and narrow ``config`` to their config
    model. Conversion is one-way: typed variants are never rebuilt from a
    generic ``Plugin``.
    """

    plugin_name: ClassVar[str] = ""

    config: C

    def to_plugin(self) -> Plugin:
        """Convert to the generic Plugin sent to the Admin API.

        Zero-valued config fields are dropped; ``name`` defaults to the
        variant's ``plugin_name``.

        Returns:
            Generic Plugin with a flattened config mapping.
        """
        identity = self.model_dump(include=set(PluginBase.model_fields))
        plugin = Plugin.model_validate(identity)
        plugin.name = plugin.name or self.plugin_name or None
        plugin.config = flatten_config(self.config)
        return plugin

    def to_create_payload(self) -> dict[str, Any]:
        """Payload of the equivalent generic plugin."""
        return self.to_plugin().to_create_payload()


class PluginListOptions(ListOptions):
    """Optional filters for ``GET /plugins``."""

    id: str = Field(default="", description="Filter on the id field")
    name: str = Field(default="", description="Filter on the name field")
    api_id: str = Field(default="", description="Filter on the api_id field")
    consumer_id: str = Field(default="", description="Filter on the consumer_id field")
    size: int = Field(default=0, description="Maximum number of objects to return")
    offset: str = Field(default="", description="Pagination cursor from a previous page")


class EnabledPlugins(BaseModel):
    """Response of ``GET /plugins/enabled``."""

    enabled_plugins: list[str] = Field(default_factory=list)


Plugins = Envelope[Plugin]
