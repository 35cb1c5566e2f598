"""Query string encoding for list filter options."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import TYPE_CHECKING, Any

import httpx

from kong_admin_client.exceptions import KongRequestError
from kong_admin_client.normalizer import is_zero, wire_key

if TYPE_CHECKING:
    from kong_admin_client.models.base import ListOptions


def _encode_value(key: str, value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str | int | float):
        return str(value)
    if isinstance(value, Sequence) and not isinstance(value, bytes | bytearray):
        return ",".join(_encode_value(key, item) for item in value)
    raise KongRequestError(
        f"Option '{key}' of type {type(value).__name__} cannot be encoded as a query parameter"
    )


def encode_options(options: ListOptions | None) -> dict[str, str]:
    """Encode an options model into query parameters.

    Only fields holding a non-zero value are included, keyed by their wire
    name.

    Args:
        options: Filter options, or None.

    Returns:
        Mapping of query parameter name to encoded value.

    Raises:
        KongRequestError: If a value cannot be expressed as a query parameter.
    """
    params: dict[str, str] = {}
    if options is None:
        return params

    for name, field in type(options).model_fields.items():
        value = getattr(options, name)
        if is_zero(value):
            continue
        key = wire_key(name, field)
        params[key] = _encode_value(key, value)
    return params


def add_options(endpoint: str, options: ListOptions | None) -> str:
    """Append encoded options to an endpoint path.

    Args:
        endpoint: Relative endpoint, e.g. ``"plugins"``.
        options: Filter options, or None.

    Returns:
        The endpoint with a query string, or unchanged if no option is set.

    Raises:
        KongRequestError: If the endpoint already has a query string, or an
            option value cannot be encoded.
    """
    params = encode_options(options)
    if not params:
        return endpoint
    if "?" in endpoint:
        raise KongRequestError(
            "Endpoint already contains query parameters; pass filters through options only",
            endpoint=endpoint,
        )
    return f"{endpoint}?{httpx.QueryParams(params)}"
