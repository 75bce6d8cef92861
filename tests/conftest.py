# tests/conftest.py
from unittest.mock import Mock

import pytest

from src.attribute_domain.application.attribute_service import CustomerAttributeApplicationService
from src.attribute_domain.domain.entities.attribute import (
    AttributeControlType,
    CustomerAttribute,
    CustomerAttributeValue,
)
from src.attribute_domain.domain.repositories.repository import IRepository
from src.attribute_domain.infrastructure.persistence.in_memory_repository import InMemoryRepository
from src.common.caching.cache_manager import ICacheManager
from src.common.caching.memory_cache_manager import MemoryCacheManager
from src.common.config.settings import settings
from src.common.events.event_publisher import EventPublisher, IEventPublisher


@pytest.fixture(autouse=True)
def mock_settings_database(mocker) -> None:
    """Keeps table names and connection settings stable across environments."""
    mocker.patch.object(settings, "DB_TABLE_PREFIX", "pds_")
    mocker.patch.object(settings, "DB_HOST", "localhost")
    mocker.patch.object(settings, "CACHE_DEFAULT_TIME_MINUTES", 60)


@pytest.fixture
def mock_cache_manager() -> Mock:
    """Cache double that always runs the loader."""
    cache_manager = Mock(spec=ICacheManager)
    cache_manager.get.side_effect = lambda key, acquire: acquire()
    return cache_manager


@pytest.fixture
def mock_attribute_repo() -> Mock:
    return Mock(spec=IRepository)


@pytest.fixture
def mock_attribute_value_repo() -> Mock:
    return Mock(spec=IRepository)


@pytest.fixture
def mock_event_publisher() -> Mock:
    return Mock(spec=IEventPublisher)


@pytest.fixture
def mocked_customer_attribute_service(
    mock_cache_manager, mock_attribute_repo, mock_attribute_value_repo, mock_event_publisher
) -> CustomerAttributeApplicationService:
    """Instance of CustomerAttributeApplicationService with mocked dependencies."""
    return CustomerAttributeApplicationService(
        cache_manager=mock_cache_manager,
        attribute_repo=mock_attribute_repo,
        attribute_value_repo=mock_attribute_value_repo,
        event_publisher=mock_event_publisher,
    )


@pytest.fixture
def event_publisher() -> EventPublisher:
    return EventPublisher()


@pytest.fixture
def published_events(event_publisher) -> list:
    """Collects every event published through the ``event_publisher`` fixture."""
    events = []
    event_publisher.subscribe(object, events.append)
    return events


@pytest.fixture
def customer_attribute_service(event_publisher) -> CustomerAttributeApplicationService:
    """Service over in-memory repositories and a real memory cache."""
    return CustomerAttributeApplicationService(
        cache_manager=MemoryCacheManager(),
        attribute_repo=InMemoryRepository(),
        attribute_value_repo=InMemoryRepository(),
        event_publisher=event_publisher,
    )


@pytest.fixture
def sample_customer_attribute() -> CustomerAttribute:
    return CustomerAttribute(
        name="Preferred store",
        is_required=True,
        attribute_control_type=AttributeControlType.DROPDOWN_LIST,
        display_order=1,
    )


@pytest.fixture
def sample_customer_attribute_value() -> CustomerAttributeValue:
    return CustomerAttributeValue(attribute_id=1, name="Berlin", is_pre_selected=True, display_order=1)
