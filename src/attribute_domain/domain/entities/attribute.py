"""Attribute and attribute value entities for the customer and vendor families."""

from dataclasses import dataclass
from enum import IntEnum


class AttributeControlType(IntEnum):
    """How an attribute is rendered on a form. Persisted as its integer value."""

    DROPDOWN_LIST = 1
    RADIO_LIST = 2
    CHECKBOXES = 3
    TEXTBOX = 4
    MULTILINE_TEXTBOX = 10
    DATEPICKER = 20
    FILE_UPLOAD = 30
    COLOR_SQUARES = 40
    IMAGE_SQUARES = 45
    READONLY_CHECKBOXES = 50


VALUE_CONTROL_TYPES = frozenset(
    {
        AttributeControlType.DROPDOWN_LIST,
        AttributeControlType.RADIO_LIST,
        AttributeControlType.CHECKBOXES,
        AttributeControlType.READONLY_CHECKBOXES,
    }
)


@dataclass
class BaseAttribute:
    """A configurable property a customer or vendor can have. id 0 means not yet persisted."""

    name: str
    is_required: bool = False
    attribute_control_type: AttributeControlType = AttributeControlType.DROPDOWN_LIST
    display_order: int = 0
    id: int = 0

    def __post_init__(self) -> None:
        # Rows come back from the database with the plain integer
        self.attribute_control_type = AttributeControlType(self.attribute_control_type)
        self.is_required = bool(self.is_required)

    @property
    def should_have_values(self) -> bool:
        """Whether the attribute is answered by picking from predefined values."""
        return self.attribute_control_type in VALUE_CONTROL_TYPES


@dataclass
class BaseAttributeValue:
    """One allowed value of a parent attribute."""

    attribute_id: int
    name: str
    is_pre_selected: bool = False
    display_order: int = 0
    id: int = 0

    def __post_init__(self) -> None:
        self.is_pre_selected = bool(self.is_pre_selected)


@dataclass
class CustomerAttribute(BaseAttribute):
    pass


@dataclass
class CustomerAttributeValue(BaseAttributeValue):
    pass


@dataclass
class VendorAttribute(BaseAttribute):
    pass


@dataclass
class VendorAttributeValue(BaseAttributeValue):
    pass
