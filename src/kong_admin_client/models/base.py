"""Base models for Kong entities.

This module provides the common base classes shared by all Kong entity
models, the paginated list envelope, the option base class used for list
filters, and the generic plugin configuration value type.
"""

from __future__ import annotations

from typing import Annotated, Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

# Values the Admin API accepts in a generic plugin ``config`` mapping.
# Strings inside are sent exactly as given.
type ConfigValue = str | bool | int | float | None | list[ConfigValue] | dict[str, ConfigValue]
type PluginConfigMap = dict[str, ConfigValue]

# Names and foreign keys are trimmed; payload text (PEM bodies, config) never is.
IdentifierStr = Annotated[str, StringConstraints(strip_whitespace=True)]

T = TypeVar("T", bound=BaseModel)


class KongEntityBase(BaseModel):
    """Base class for all Kong entity models.

    Provides common fields and configuration for Kong entities. Unknown keys
    returned by newer Kong versions are ignored on decode.

    Attributes:
        id: Unique identifier (UUID string).
        created_at: Unix timestamp of creation.
    """

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
    )

    id: IdentifierStr | None = Field(default=None, description="Unique identifier")
    created_at: int | None = Field(default=None, description="Unix timestamp of creation")

    # Subclasses should define this for better error messages
    _entity_name: ClassVar[str] = "entity"

    def to_create_payload(self) -> dict[str, Any]:
        """Convert model to payload for create operations.

        Excludes id, created_at, and None values.
        This ensures only user-provided fields are sent to the API.

        Returns:
            Dictionary suitable for POST request body.
        """
        exclude_fields = {"id", "created_at"}
        return self.model_dump(
            mode="json",
            by_alias=True,
            exclude=exclude_fields,
            exclude_none=True,
        )

    def to_update_payload(self) -> dict[str, Any]:
        """Convert model to payload for update operations.

        Returns:
            Dictionary suitable for PATCH request body.
        """
        return self.to_create_payload()


class ListOptions(BaseModel):
    """Base class for list filter options.

    Every field left at its zero value is omitted from the query string;
    see ``kong_admin_client.query.encode_options``.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class Envelope(BaseModel, Generic[T]):
    """Paginated list response from Kong Admin API.

    Kong uses cursor-based pagination. ``next`` and ``offset`` are opaque
    server strings: they are stored and resubmitted verbatim, never parsed.

    Attributes:
        data: Items on this page.
        total: Total number of items, when Kong reports it.
        next: URI of the next page, if any.
        offset: Offset token for the next page, if any.
    """

    model_config = ConfigDict(extra="ignore")

    data: list[T] = Field(default_factory=list)
    total: int | None = None
    next: str | None = None
    offset: str | None = None

    @property
    def has_more(self) -> bool:
        """Check if there are more results available."""
        return self.offset is not None or self.next is not None
