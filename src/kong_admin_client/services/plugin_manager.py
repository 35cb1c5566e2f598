"""Plugin manager for Kong Plugins.

This module provides the PluginManager class for managing Kong Plugin
entities through the Admin API.
"""

from __future__ import annotations

from typing import Any

from kong_admin_client.exceptions import KongDecodeError, KongRequestError
from kong_admin_client.models.plugin import (
    EnabledPlugins,
    Plugin,
    PluginListOptions,
    Plugins,
    TypedPlugin,
)
from kong_admin_client.services.base import BaseEntityManager


class PluginManager(BaseEntityManager[Plugin]):
    """Manager for the ``/plugins`` resource.

    Typed plugin variants are normalized into the generic form before they
    are sent. Plugins are updated and deleted through the owning API's
    ``/apis/{api}/plugins`` sub-resource.

    Example:
        >>> manager = PluginManager(client)
        >>> manager.create(
        ...     RateLimitingPlugin(api_id="my-api", config=RateLimitingConfig(minute=100))
        ... )
        >>> manager.list(PluginListOptions(api_id="my-api"))
    """

    _endpoint = "plugins"
    _entity_name = "plugin"
    _model_class = Plugin

    def list(self, options: PluginListOptions | None = None) -> Plugins:  # type: ignore[override]
        """List plugins, optionally filtered.

        Equivalent to GET /plugins?id=&name=&api_id=&consumer_id=&size=&offset=
        """
        return super().list(options)

    def get_enabled(self) -> list[str]:
        """Get the names of all plugins enabled on the Kong node.

        Equivalent to GET /plugins/enabled
        """
        self._log.debug("listing_enabled_plugins")
        enabled: EnabledPlugins | None = self._client.get(
            f"{self._endpoint}/enabled",
            result_type=EnabledPlugins,
        )
        names = enabled.enabled_plugins if enabled else []
        self._log.debug("listed_enabled_plugins", count=len(names))
        return names

    def get_schema(self, plugin_name: str) -> dict[str, Any]:
        """Get the configuration schema of a plugin as an untyped mapping.

        Equivalent to GET /plugins/schema/{name}

        Raises:
            KongDecodeError: If Kong answers with an empty body.
        """
        self._log.debug("getting_plugin_schema", plugin=plugin_name)
        endpoint = f"{self._endpoint}/schema/{plugin_name}"
        schema: dict[str, Any] | None = self._client.get(endpoint, result_type=dict[str, Any])
        if schema is None:
            raise KongDecodeError("Kong returned an empty plugin schema", endpoint=endpoint)
        return schema

    def create(self, plugin: Plugin | TypedPlugin[Any]) -> Plugin | None:
        """Create a plugin.

        The plugin's ``api_id`` and ``consumer_id`` decide its scope; with
        neither set the plugin is global.

        Equivalent to POST /plugins
        """
        generic = plugin.to_plugin() if isinstance(plugin, TypedPlugin) else plugin
        self._log.info("creating_plugin", name=generic.name, api_id=generic.api_id)
        return self._create(self._endpoint, generic.to_create_payload())

    def update(self, api_id_or_name: str, plugin: Plugin | TypedPlugin[Any]) -> Plugin | None:
        """Update a plugin attached to an API.

        Equivalent to PATCH /apis/{api id or name}/plugins/{plugin id}

        Raises:
            KongRequestError: If the plugin has no id.
        """
        generic = plugin.to_plugin() if isinstance(plugin, TypedPlugin) else plugin
        if not generic.id:
            raise KongRequestError("Plugin id is required for update")
        endpoint = f"apis/{api_id_or_name}/{self._endpoint}/{generic.id}"
        return self._update(endpoint, generic.to_update_payload())

    def delete(self, api_id_or_name: str, plugin_id: str) -> None:
        """Delete a plugin attached to an API.

        Equivalent to DELETE /apis/{api id or name}/plugins/{plugin id}
        """
        self._delete(f"apis/{api_id_or_name}/{self._endpoint}/{plugin_id}")
