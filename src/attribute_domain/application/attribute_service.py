# attribute_domain/application/attribute_service.py
"""Application services for customer and vendor attributes."""

import logging
from typing import Generic, TypeVar

from src.attribute_domain.domain.attribute_defaults import (
    CUSTOMER_ATTRIBUTE_DEFAULTS,
    VENDOR_ATTRIBUTE_DEFAULTS,
    AttributeFamilyDefaults,
)
from src.attribute_domain.domain.entities.attribute import (
    BaseAttribute,
    BaseAttributeValue,
    CustomerAttribute,
    CustomerAttributeValue,
    VendorAttribute,
    VendorAttributeValue,
)
from src.attribute_domain.domain.repositories.repository import IRepository
from src.common.caching.cache_manager import ICacheManager
from src.common.events.event_publisher import IEventPublisher
from src.common.exceptions.custom_exceptions import MissingRequiredArgumentError

logger = logging.getLogger(__name__)

A = TypeVar("A", bound=BaseAttribute)
V = TypeVar("V", bound=BaseAttributeValue)


def _display_order_key(entity: BaseAttribute | BaseAttributeValue) -> tuple[int, int]:
    return entity.display_order, entity.id


class AttributeApplicationService(Generic[A, V]):
    """
    CRUD over an attribute family and its values.

    Reads go through the cache; every write clears both the attribute and the
    attribute value namespaces and then publishes one entity event.
    """

    def __init__(
        self,
        cache_manager: ICacheManager,
        attribute_repo: IRepository[A],
        attribute_value_repo: IRepository[V],
        event_publisher: IEventPublisher,
        defaults: AttributeFamilyDefaults,
    ) -> None:
        self.cache_manager = cache_manager
        self.attribute_repo = attribute_repo
        self.attribute_value_repo = attribute_value_repo
        self.event_publisher = event_publisher
        self.defaults = defaults

    def _clear_cache(self) -> None:
        # Value listings depend on their attributes, so both namespaces go together
        self.cache_manager.clear_namespace(self.defaults.attributes_namespace)
        self.cache_manager.clear_namespace(self.defaults.attribute_values_namespace)

    # Attributes

    def get_all_attributes(self) -> list[A]:
        """Gets all attributes ordered by display order, then id."""
        return self.cache_manager.get(
            self.defaults.attributes_all_key,
            lambda: sorted(self.attribute_repo.table(), key=_display_order_key),
        )

    def get_attribute_by_id(self, attribute_id: int) -> A | None:
        if attribute_id == 0:
            return None

        key = self.defaults.attributes_by_id_key.create(attribute_id)
        return self.cache_manager.get(key, lambda: self.attribute_repo.get_by_id(attribute_id))

    def insert_attribute(self, attribute: A) -> None:
        if attribute is None:
            raise MissingRequiredArgumentError("attribute")

        self.attribute_repo.insert(attribute)
        self._clear_cache()
        logger.info(f"Inserted {self.defaults.entity_label} {attribute.id} ({attribute.name})")

        self.event_publisher.entity_inserted(attribute)

    def update_attribute(self, attribute: A) -> None:
        if attribute is None:
            raise MissingRequiredArgumentError("attribute")

        self.attribute_repo.update(attribute)
        self._clear_cache()
        logger.info(f"Updated {self.defaults.entity_label} {attribute.id} ({attribute.name})")

        self.event_publisher.entity_updated(attribute)

    def delete_attribute(self, attribute: A) -> None:
        if attribute is None:
            raise MissingRequiredArgumentError("attribute")

        self.attribute_repo.delete(attribute)
        self._clear_cache()
        logger.info(f"Deleted {self.defaults.entity_label} {attribute.id} ({attribute.name})")

        self.event_publisher.entity_deleted(attribute)

    # Attribute values

    def get_attribute_values(self, attribute_id: int) -> list[V]:
        """Gets the values of an attribute ordered by display order, then id."""
        key = self.defaults.attribute_values_all_key.create(attribute_id)
        return self.cache_manager.get(
            key,
            lambda: sorted(
                (value for value in self.attribute_value_repo.table() if value.attribute_id == attribute_id),
                key=_display_order_key,
            ),
        )

    def get_attribute_value_by_id(self, attribute_value_id: int) -> V | None:
        if attribute_value_id == 0:
            return None

        key = self.defaults.attribute_values_by_id_key.create(attribute_value_id)
        return self.cache_manager.get(key, lambda: self.attribute_value_repo.get_by_id(attribute_value_id))

    def insert_attribute_value(self, attribute_value: V) -> None:
        if attribute_value is None:
            raise MissingRequiredArgumentError("attribute_value")

        self.attribute_value_repo.insert(attribute_value)
        self._clear_cache()
        logger.info(f"Inserted {self.defaults.entity_label} value {attribute_value.id} ({attribute_value.name})")

        self.event_publisher.entity_inserted(attribute_value)

    def update_attribute_value(self, attribute_value: V) -> None:
        if attribute_value is None:
            raise MissingRequiredArgumentError("attribute_value")

        self.attribute_value_repo.update(attribute_value)
        self._clear_cache()
        logger.info(f"Updated {self.defaults.entity_label} value {attribute_value.id} ({attribute_value.name})")

        self.event_publisher.entity_updated(attribute_value)

    def delete_attribute_value(self, attribute_value: V) -> None:
        if attribute_value is None:
            raise MissingRequiredArgumentError("attribute_value")

        self.attribute_value_repo.delete(attribute_value)
        self._clear_cache()
        logger.info(f"Deleted {self.defaults.entity_label} value {attribute_value.id} ({attribute_value.name})")

        self.event_publisher.entity_deleted(attribute_value)


class CustomerAttributeApplicationService(AttributeApplicationService[CustomerAttribute, CustomerAttributeValue]):
    def __init__(
        self,
        cache_manager: ICacheManager,
        attribute_repo: IRepository[CustomerAttribute],
        attribute_value_repo: IRepository[CustomerAttributeValue],
        event_publisher: IEventPublisher,
    ) -> None:
        super().__init__(
            cache_manager, attribute_repo, attribute_value_repo, event_publisher, CUSTOMER_ATTRIBUTE_DEFAULTS
        )


class VendorAttributeApplicationService(AttributeApplicationService[VendorAttribute, VendorAttributeValue]):
    def __init__(
        self,
        cache_manager: ICacheManager,
        attribute_repo: IRepository[VendorAttribute],
        attribute_value_repo: IRepository[VendorAttributeValue],
        event_publisher: IEventPublisher,
    ) -> None:
        super().__init__(
            cache_manager, attribute_repo, attribute_value_repo, event_publisher, VENDOR_ATTRIBUTE_DEFAULTS
        )
