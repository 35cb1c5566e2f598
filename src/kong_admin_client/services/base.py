"""Base entity manager for Kong resources.

This module provides an abstract base class implementing the Repository
pattern for Kong entities. Resource managers inherit from BaseEntityManager
and only add fixed endpoints and resource-specific operations.
"""

from __future__ import annotations

from abc import ABC
from typing import TYPE_CHECKING, Any

import structlog

from kong_admin_client.models.base import Envelope, KongEntityBase

if TYPE_CHECKING:
    from kong_admin_client.client import KongAdminClient
    from kong_admin_client.models.base import ListOptions

logger = structlog.get_logger()


class BaseEntityManager[T: KongEntityBase](ABC):
    """Abstract base class for Kong entity managers.

    Type Parameters:
        T: The Pydantic model class for this entity type.

    Class Attributes:
        _endpoint: API endpoint path (e.g., "certificates", "plugins").
        _entity_name: Human-readable entity name for logging.
        _model_class: Pydantic model class for deserializing responses.

    Example:
        >>> class CertificateManager(BaseEntityManager[Certificate]):
        ...     _endpoint = "certificates"
        ...     _entity_name = "certificate"
        ...     _model_class = Certificate
    """

    _endpoint: str = ""
    _entity_name: str = ""
    _model_class: type[T]

    def __init__(self, client: KongAdminClient) -> None:
        """Initialize the entity manager.

        Args:
            client: Kong Admin API client instance.
        """
        self._client = client
        self._log = logger.bind(entity=self._entity_name)

    @property
    def endpoint(self) -> str:
        """Return the API endpoint for this entity type."""
        return self._endpoint

    def list(self, options: ListOptions | None = None) -> Envelope[T]:
        """List entities, one page at a time.

        The returned envelope exposes ``next``/``offset``; pass the offset
        back in ``options`` to fetch the following page.

        Args:
            options: Optional filters; zero-valued fields are not sent.

        Returns:
            Envelope holding the page of entities.
        """
        self._log.debug("listing_entities")
        envelope: Envelope[T] = self._client.get(
            self._endpoint,
            params=options,
            result_type=Envelope[self._model_class],  # type: ignore[name-defined]
        )
        self._log.debug(
            "listed_entities",
            count=len(envelope.data),
            has_more=envelope.has_more,
        )
        return envelope

    def get(self, id_or_name: str) -> T:
        """Get a single entity by ID or name.

        Args:
            id_or_name: Entity ID (UUID) or unique name.

        Returns:
            The entity model.

        Raises:
            KongNotFoundError: If entity doesn't exist.
        """
        self._log.debug("getting_entity", id_or_name=id_or_name)
        entity: T = self._client.get(
            f"{self._endpoint}/{id_or_name}",
            result_type=self._model_class,
        )
        self._log.debug("got_entity", id=entity.id)
        return entity

    def _create(self, endpoint: str, payload: dict[str, Any]) -> T | None:
        self._log.info("creating_entity", endpoint=endpoint)
        created: T | None = self._client.post(endpoint, payload, result_type=self._model_class)
        self._log.info("created_entity", id=created.id if created else None)
        return created

    def _update(self, endpoint: str, payload: dict[str, Any]) -> T | None:
        self._log.info("updating_entity", endpoint=endpoint)
        updated: T | None = self._client.patch(endpoint, payload, result_type=self._model_class)
        self._log.info("updated_entity", id=updated.id if updated else None)
        return updated

    def _delete(self, endpoint: str) -> None:
        self._log.info("deleting_entity", endpoint=endpoint)
        self._client.delete(endpoint)
        self._log.info("deleted_entity", endpoint=endpoint)
