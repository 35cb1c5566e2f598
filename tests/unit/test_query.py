"""Unit tests for list option query encoding."""

from __future__ import annotations

from typing import Any

import pytest
from pydantic import Field

from kong_admin_client.exceptions import KongRequestError
from kong_admin_client.models.base import ListOptions
from kong_admin_client.models.certificate import CertificateListOptions
from kong_admin_client.models.plugin import PluginListOptions
from kong_admin_client.query import add_options, encode_options


class TagOptions(ListOptions):
    tags: list[str] = Field(default_factory=list)
    enabled: bool = False
    ratio: float = 0.0
    extra: dict[str, Any] = Field(default_factory=dict)
    renamed: str = Field(default="", serialization_alias="wire_name")


@pytest.mark.unit
class TestEncodeOptions:
    """Tests for encode_options."""

    def test_none_options(self) -> None:
        """No options yields no parameters."""
        assert encode_options(None) == {}

    def test_all_zero_options_yield_no_parameters(self) -> None:
        """Every field at its zero value means an empty query."""
        assert encode_options(PluginListOptions()) == {}
        assert encode_options(CertificateListOptions()) == {}

    @pytest.mark.parametrize(
        ("field", "value", "expected"),
        [
            ("id", "p-1", "p-1"),
            ("name", "acl", "acl"),
            ("api_id", "x", "x"),
            ("consumer_id", "c-1", "c-1"),
            ("size", 10, "10"),
            ("offset", "cursor123", "cursor123"),
        ],
    )
    def test_single_field_yields_single_key(self, field: str, value: Any, expected: str) -> None:
        """Exactly one non-zero field yields exactly one parameter."""
        params = encode_options(PluginListOptions(**{field: value}))

        assert params == {field: expected}

    def test_value_encodings(self) -> None:
        """Booleans, floats and sequences have fixed encodings."""
        params = encode_options(TagOptions(tags=["a", "b"], enabled=True, ratio=0.5))

        assert params == {"tags": "a,b", "enabled": "true", "ratio": "0.5"}

    def test_serialization_alias_is_parameter_name(self) -> None:
        """Aliased fields use their wire name."""
        assert encode_options(TagOptions(renamed="v")) == {"wire_name": "v"}

    def test_unencodable_value_raises(self) -> None:
        """Mappings cannot be expressed as a query parameter."""
        with pytest.raises(KongRequestError) as exc_info:
            encode_options(TagOptions(extra={"k": "v"}))

        assert "extra" in str(exc_info.value)


@pytest.mark.unit
class TestAddOptions:
    """Tests for add_options."""

    def test_no_options_returns_endpoint(self) -> None:
        """Zero options leave the endpoint untouched."""
        assert add_options("plugins", PluginListOptions()) == "plugins"

    def test_api_id_filter(self) -> None:
        """Filtering by api_id appends a single parameter."""
        assert add_options("plugins", PluginListOptions(api_id="x")) == "plugins?api_id=x"

    def test_multiple_filters_in_field_order(self) -> None:
        """Parameters follow field declaration order."""
        path = add_options("plugins", PluginListOptions(size=2, name="jwt"))

        assert path == "plugins?name=jwt&size=2"

    def test_values_are_url_encoded(self) -> None:
        """Reserved characters are percent-encoded."""
        path = add_options("plugins", PluginListOptions(offset="a&b"))

        assert path == "plugins?offset=a%26b"

    def test_endpoint_with_query_conflicts(self) -> None:
        """Options may not be combined with a hand-written query string."""
        with pytest.raises(KongRequestError):
            add_options("plugins?size=1", PluginListOptions(api_id="x"))

    def test_endpoint_with_query_and_no_options(self) -> None:
        """A query string is kept when no option is set."""
        assert add_options("plugins?size=1", None) == "plugins?size=1"
