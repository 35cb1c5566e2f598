"""Plugin configuration normalizer.

Typed plugin configurations (``ACLConfig``, ``RateLimitingConfig``, ...) are
flattened into the generic ``config`` mapping the Admin API expects. Fields
holding their type's zero value are left out so Kong applies its own
defaults.

A field deliberately set to its zero value (``RateLimitingConfig(second=0)``)
cannot be told apart from an unset one and is omitted as well.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

import structlog
from pydantic import BaseModel

if TYPE_CHECKING:
    from pydantic.fields import FieldInfo

    from kong_admin_client.models.base import ConfigValue, PluginConfigMap

logger = structlog.get_logger()


def is_zero(value: Any) -> bool:
    """Check whether a value equals the zero value of its type.

    Args:
        value: Any field value of a typed configuration.

    Returns:
        True if the value should be treated as unset.
    """
    if value is None:
        return True
    if isinstance(value, Enum):
        return is_zero(value.value)
    # bool is an int subclass, so it must be checked first
    if isinstance(value, bool):
        return value is False
    if isinstance(value, int | float | complex):
        return value == 0
    if isinstance(value, str | bytes | bytearray):
        return len(value) == 0
    if isinstance(value, tuple):
        return all(is_zero(item) for item in value)
    if isinstance(value, list | set | frozenset | dict):
        return len(value) == 0
    if isinstance(value, BaseModel):
        return all(is_zero(getattr(value, name)) for name in type(value).model_fields)
    if callable(value):
        return False
    try:
        return bool(value == type(value)())
    except (TypeError, ValueError):
        return False


def wire_key(name: str, field: FieldInfo) -> str:
    """Return the JSON key a model field is sent under.

    Args:
        name: Python attribute name of the field.
        field: The pydantic field definition.

    Returns:
        The serialization alias, the alias, or the attribute name.
    """
    return field.serialization_alias or field.alias or name


def _to_config_value(value: Any) -> ConfigValue:
    if isinstance(value, Enum):
        return _to_config_value(value.value)
    if isinstance(value, BaseModel):
        dumped: dict[str, ConfigValue] = value.model_dump(mode="json", by_alias=True)
        return dumped
    if isinstance(value, set | frozenset):
        # sorted so the payload does not depend on hash order
        return [_to_config_value(item) for item in sorted(value, key=str)]
    if isinstance(value, tuple | list):
        return [_to_config_value(item) for item in value]
    if isinstance(value, dict):
        return {str(k): _to_config_value(v) for k, v in value.items()}
    return value  # type: ignore[no-any-return]


def flatten_config(config: BaseModel | None) -> PluginConfigMap:
    """Flatten a typed plugin configuration into a generic mapping.

    Fields are visited in declaration order. Each non-zero field is stored
    under its wire key; zero-valued fields are omitted. Nested models are
    dumped one level deep with their own aliases.

    Args:
        config: A typed configuration model, or None.

    Returns:
        Mapping from wire key to value, suitable for ``Plugin.config``.

    Example:
        >>> flatten_config(ACLConfig(whitelist=["a"], blacklist=[]))
        {'whitelist': ['a']}
    """
    flattened: PluginConfigMap = {}
    if config is None:
        return flattened

    for name, field in type(config).model_fields.items():
        value = getattr(config, name)
        if is_zero(value):
            continue
        flattened[wire_key(name, field)] = _to_config_value(value)

    logger.debug(
        "flattened_plugin_config",
        config_type=type(config).__name__,
        keys=sorted(flattened),
    )
    return flattened
