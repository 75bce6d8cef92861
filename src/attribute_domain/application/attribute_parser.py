# attribute_domain/application/attribute_parser.py
"""Reads and writes the serialized attribute selections of customers and vendors."""

import json
import logging
from typing import Generic

from src.attribute_domain.application.attribute_service import A, V, AttributeApplicationService
from src.common.exceptions.custom_exceptions import ApplicationError, MissingRequiredArgumentError

logger = logging.getLogger(__name__)


class AttributeSelectionParser(Generic[A, V]):
    """
    Works with selections stored as JSON, e.g.::

        {"attributes": [{"id": 1, "values": ["3"]}, {"id": 2, "values": ["free text"]}]}

    For attributes that should have values the stored values are value ids,
    otherwise they are the text entered by the user.
    """

    def __init__(self, attribute_service: AttributeApplicationService[A, V]) -> None:
        self.attribute_service = attribute_service

    @property
    def storage_key(self) -> str:
        """Generic attribute under which an owner's selection string is stored."""
        return self.attribute_service.defaults.generic_attribute_key

    def _load(self, selection: str | None) -> list[dict]:
        if not selection or not selection.strip():
            return []
        try:
            data = json.loads(selection)
        except json.JSONDecodeError as e:
            raise ApplicationError("Error decoding attribute selection", original_exception=e)

        if not isinstance(data, dict) or not isinstance(data.get("attributes", []), list):
            raise ApplicationError("Invalid attribute selection format")
        entries = data.get("attributes", [])
        for entry in entries:
            if not isinstance(entry, dict) or not isinstance(entry.get("values", []), list):
                raise ApplicationError("Invalid attribute selection format")
        return entries

    @staticmethod
    def _entry_id(entry: dict) -> int | None:
        """The entry's attribute id, None when missing or not an integer."""
        try:
            return int(entry["id"])
        except (KeyError, TypeError, ValueError):
            return None

    def _dump(self, entries: list[dict]) -> str:
        return json.dumps({"attributes": entries})

    def parse_attribute_ids(self, selection: str | None) -> list[int]:
        ids = []
        for entry in self._load(selection):
            attribute_id = self._entry_id(entry)
            if attribute_id is None:
                logger.warning(f"Skipping attribute selection entry without a valid id: {entry!r}")
                continue
            ids.append(attribute_id)
        return ids

    def parse_attributes(self, selection: str | None) -> list[A]:
        """Gets the selected attributes, skipping ids that no longer exist."""
        attributes = []
        for attribute_id in self.parse_attribute_ids(selection):
            attribute = self.attribute_service.get_attribute_by_id(attribute_id)
            if attribute is not None:
                attributes.append(attribute)
        return attributes

    def parse_values(self, selection: str | None, attribute_id: int) -> list[str]:
        values = []
        for entry in self._load(selection):
            if self._entry_id(entry) != attribute_id:
                continue
            values.extend(str(value) for value in entry.get("values", []))
        return values

    def parse_attribute_values(self, selection: str | None) -> list[V]:
        """Gets the selected predefined values of value-bearing attributes."""
        attribute_values = []
        for attribute in self.parse_attributes(selection):
            if not attribute.should_have_values:
                continue
            for value in self.parse_values(selection, attribute.id):
                if not value.strip().isdigit():
                    continue
                attribute_value = self.attribute_service.get_attribute_value_by_id(int(value))
                if attribute_value is not None:
                    attribute_values.append(attribute_value)
        return attribute_values

    def add_attribute(self, selection: str | None, attribute: A, value: str) -> str:
        """Returns the selection with ``value`` added to the attribute's entry."""
        if attribute is None:
            raise MissingRequiredArgumentError("attribute")

        entries = self._load(selection)
        for entry in entries:
            if self._entry_id(entry) == attribute.id:
                entry.setdefault("values", []).append(value)
                break
        else:
            entries.append({"id": attribute.id, "values": [value]})
        return self._dump(entries)

    def get_attribute_warnings(self, selection: str | None) -> list[str]:
        """Lists a warning for each required attribute that was left empty."""
        warnings = []
        selected_ids = set(self.parse_attribute_ids(selection))

        for attribute in self.attribute_service.get_all_attributes():
            if not attribute.is_required:
                continue

            found = attribute.id in selected_ids and any(
                value.strip() for value in self.parse_values(selection, attribute.id)
            )
            if not found:
                warnings.append(f"Please select {attribute.name}")
        return warnings

    def format_attributes(self, selection: str | None, separator: str = ", ") -> str:
        """Renders the selection as ``Name: value`` items."""
        parts = []
        for attribute in self.parse_attributes(selection):
            for value in self.parse_values(selection, attribute.id):
                if attribute.should_have_values:
                    if not value.strip().isdigit():
                        continue
                    attribute_value = self.attribute_service.get_attribute_value_by_id(int(value))
                    if attribute_value is None:
                        continue
                    value = attribute_value.name
                parts.append(f"{attribute.name}: {value}")
        return separator.join(parts)
