"""Unit tests for the plugin configuration normalizer."""

from __future__ import annotations

from enum import Enum

import pytest
from pydantic import BaseModel, Field

from kong_admin_client.models.plugin_configs import (
    ACLConfig,
    CorrelationIDConfig,
    FileLogConfig,
    JWTConfig,
    KeyAuthenticationConfig,
    RateLimitingConfig,
    RequestSizeLimitingConfig,
)
from kong_admin_client.normalizer import flatten_config, is_zero


class Policy(Enum):
    EMPTY = ""
    LOCAL = "local"


class Upstream(BaseModel):
    host: str = ""
    port: int = 0


class AliasedConfig(BaseModel):
    header: str = Field(default="", serialization_alias="header_name")
    limit: int = Field(default=0, alias="max_limit")
    plain: bool = False
    window: tuple[int, int] = (0, 0)
    upstream: Upstream = Field(default_factory=Upstream)
    policy: Policy = Policy.EMPTY
    tags: set[str] = Field(default_factory=set)


@pytest.mark.unit
class TestIsZero:
    """Tests for zero-value classification."""

    @pytest.mark.parametrize(
        "value",
        [None, 0, 0.0, False, "", b"", [], {}, set(), (), (0, "", False), Policy.EMPTY],
    )
    def test_zero_values(self, value: object) -> None:
        """Defaults, empty containers and all-zero tuples are zero."""
        assert is_zero(value) is True

    @pytest.mark.parametrize(
        "value",
        [1, -1, 0.5, True, "x", b"x", ["a"], {"k": 0}, {0}, (0, 1), Policy.LOCAL],
    )
    def test_non_zero_values(self, value: object) -> None:
        """Set scalars and non-empty containers are not zero."""
        assert is_zero(value) is False

    def test_list_of_zero_items_is_not_zero(self) -> None:
        """A sequence is zero only when it has no elements."""
        assert is_zero([0, ""]) is False

    def test_model_with_all_zero_fields_is_zero(self) -> None:
        """A nested model is zero when every field is zero."""
        assert is_zero(Upstream()) is True

    def test_model_with_one_set_field_is_not_zero(self) -> None:
        """A nested model with any set field is not zero."""
        assert is_zero(Upstream(port=80)) is False

    def test_callable_is_not_zero(self) -> None:
        """A function reference is only zero when absent."""
        assert is_zero(len) is False

    def test_unknown_object_compares_to_default(self) -> None:
        """Other objects are zero when equal to their default instance."""

        class Box:
            def __init__(self, value: int = 0) -> None:
                self.value = value

            def __eq__(self, other: object) -> bool:
                return isinstance(other, Box) and other.value == self.value

            __hash__ = None  # type: ignore[assignment]

        assert is_zero(Box()) is True
        assert is_zero(Box(3)) is False


@pytest.mark.unit
class TestFlattenConfig:
    """Tests for flatten_config."""

    def test_none_config_flattens_to_empty(self) -> None:
        """A missing config yields an empty mapping."""
        assert flatten_config(None) == {}

    @pytest.mark.parametrize(
        "config_class",
        [
            ACLConfig,
            RequestSizeLimitingConfig,
            CorrelationIDConfig,
            RateLimitingConfig,
            JWTConfig,
            FileLogConfig,
            KeyAuthenticationConfig,
        ],
    )
    def test_all_zero_config_flattens_to_empty(self, config_class: type[BaseModel]) -> None:
        """Every bundled config with default values flattens to {}."""
        assert flatten_config(config_class()) == {}

    def test_acl_omits_empty_blacklist(self) -> None:
        """Empty sequences are omitted."""
        config = ACLConfig(whitelist=["a"], blacklist=[])

        assert flatten_config(config) == {"whitelist": ["a"]}

    def test_rate_limiting_single_field(self) -> None:
        """Only the one non-default limit is sent."""
        assert flatten_config(RateLimitingConfig(second=5)) == {"second": 5}

    def test_rate_limiting_explicit_zero_is_omitted(self) -> None:
        """An explicit 0 is indistinguishable from unset."""
        assert flatten_config(RateLimitingConfig(second=0, minute=10)) == {"minute": 10}

    def test_booleans_only_sent_when_true(self) -> None:
        """False booleans are zero and omitted."""
        assert flatten_config(CorrelationIDConfig(echo_downstream=True)) == {
            "echo_downstream": True
        }
        assert flatten_config(CorrelationIDConfig(echo_downstream=False)) == {}

    def test_multiple_fields_keep_declaration_order(self) -> None:
        """Keys are emitted in field declaration order."""
        config = JWTConfig(secret_is_base64=True, uri_param_names=["jwt"], key_claim_name="iss")

        assert list(flatten_config(config)) == [
            "uri_param_names",
            "key_claim_name",
            "secret_is_base64",
        ]

    def test_serialization_alias_is_wire_key(self) -> None:
        """serialization_alias takes precedence over the field name."""
        assert flatten_config(AliasedConfig(header="X-Id")) == {"header_name": "X-Id"}

    def test_alias_is_wire_key(self) -> None:
        """alias is used when no serialization_alias is set."""
        assert flatten_config(AliasedConfig(max_limit=3)) == {"max_limit": 3}

    def test_untagged_field_uses_name(self) -> None:
        """Fields without an alias use their own name."""
        assert flatten_config(AliasedConfig(plain=True)) == {"plain": True}

    def test_tuple_with_zero_elements_is_omitted(self) -> None:
        """Fixed-size tuples are zero when every element is zero."""
        assert flatten_config(AliasedConfig(window=(0, 0))) == {}

    def test_tuple_with_set_element_becomes_list(self) -> None:
        """Non-zero tuples are sent as JSON lists."""
        assert flatten_config(AliasedConfig(window=(0, 60))) == {"window": [0, 60]}

    def test_nested_model_is_dumped(self) -> None:
        """Nested models are dumped one level deep."""
        config = AliasedConfig(upstream=Upstream(host="redis"))

        assert flatten_config(config) == {"upstream": {"host": "redis", "port": 0}}

    def test_enum_is_sent_as_value(self) -> None:
        """Enum members are sent as their value."""
        assert flatten_config(AliasedConfig(policy=Policy.LOCAL)) == {"policy": "local"}

    def test_set_becomes_list(self) -> None:
        """Sets are sent as JSON lists."""
        assert flatten_config(AliasedConfig(tags={"a"})) == {"tags": ["a"]}

    def test_set_order_is_stable(self) -> None:
        """Set members are sent sorted, independent of hash order."""
        config = AliasedConfig(tags={"zeta", "alpha", "mid", "beta"})

        assert flatten_config(config) == {"tags": ["alpha", "beta", "mid", "zeta"]}
