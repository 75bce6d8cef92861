"""Main application entry point for the customer and vendor attribute services."""

import logging

from src.attribute_domain.application.attribute_service import (
    AttributeApplicationService,
    CustomerAttributeApplicationService,
    VendorAttributeApplicationService,
)
from src.attribute_domain.infrastructure.persistence.mysql_attribute_repository import (
    MySQLCustomerAttributeRepository,
    MySQLCustomerAttributeValueRepository,
    MySQLRepository,
    MySQLVendorAttributeRepository,
    MySQLVendorAttributeValueRepository,
)
from src.common.caching.memory_cache_manager import MemoryCacheManager
from src.common.events.entity_events import EntityEvent
from src.common.events.event_publisher import EventPublisher, log_entity_event
from src.common.exceptions.custom_exceptions import ApplicationError, DatabaseError
from src.common.logger_config import setup_logging

logger = logging.getLogger(__name__)


def create_repositories() -> dict[str, MySQLRepository]:
    return {
        "customer_attribute": MySQLCustomerAttributeRepository(),
        "customer_attribute_value": MySQLCustomerAttributeValueRepository(),
        "vendor_attribute": MySQLVendorAttributeRepository(),
        "vendor_attribute_value": MySQLVendorAttributeValueRepository(),
    }


def create_attribute_tables(repositories: dict[str, MySQLRepository]) -> None:
    """Creates the attribute tables (idempotent)."""
    for repository in repositories.values():
        try:
            repository.create_tables()
        except DatabaseError as e:
            logger.error(f"Error creating attribute database tables: {e}")
            raise


def setup_dependencies(
    repositories: dict[str, MySQLRepository],
) -> tuple[CustomerAttributeApplicationService, VendorAttributeApplicationService]:
    """Initializes and wires up application dependencies."""
    cache_manager = MemoryCacheManager()

    event_publisher = EventPublisher()
    event_publisher.subscribe(EntityEvent, log_entity_event)

    customer_attribute_service = CustomerAttributeApplicationService(
        cache_manager=cache_manager,
        attribute_repo=repositories["customer_attribute"],
        attribute_value_repo=repositories["customer_attribute_value"],
        event_publisher=event_publisher,
    )
    vendor_attribute_service = VendorAttributeApplicationService(
        cache_manager=cache_manager,
        attribute_repo=repositories["vendor_attribute"],
        attribute_value_repo=repositories["vendor_attribute_value"],
        event_publisher=event_publisher,
    )
    return customer_attribute_service, vendor_attribute_service


def log_attributes(service: AttributeApplicationService) -> None:
    attributes = service.get_all_attributes()
    logger.info(f"{len(attributes)} {service.defaults.entity_label}(s) configured")
    for attribute in attributes:
        values = service.get_attribute_values(attribute.id) if attribute.should_have_values else []
        required = " (required)" if attribute.is_required else ""
        logger.info(
            f"  [{attribute.id}] {attribute.name}{required}: {attribute.attribute_control_type.name}"
            f"{' -> ' + ', '.join(value.name for value in values) if values else ''}"
        )


def main() -> None:
    setup_logging()
    repositories = create_repositories()

    try:
        create_attribute_tables(repositories)
        customer_attribute_service, vendor_attribute_service = setup_dependencies(repositories)
        log_attributes(customer_attribute_service)
        log_attributes(vendor_attribute_service)
    except ApplicationError as e:
        logger.error(f"Attribute service failed: {e}")
        raise


if __name__ == "__main__":
    main()
