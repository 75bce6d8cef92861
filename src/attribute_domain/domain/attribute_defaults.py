"""Cache keys, namespaces and storage keys of each attribute family."""

from dataclasses import dataclass

from src.common.caching.cache_key import CacheKey


@dataclass(frozen=True)
class AttributeFamilyDefaults:
    entity_label: str
    attributes_namespace: str
    attribute_values_namespace: str
    attributes_all_key: CacheKey
    attributes_by_id_key: CacheKey
    attribute_values_all_key: CacheKey
    attribute_values_by_id_key: CacheKey
    # Generic attribute under which an owner's selected attributes are stored
    generic_attribute_key: str


def _family_defaults(prefix: str, entity_label: str, generic_attribute_key: str) -> AttributeFamilyDefaults:
    attributes_namespace = f"{prefix}attributes."
    attribute_values_namespace = f"{prefix}attributevalues."
    return AttributeFamilyDefaults(
        entity_label=entity_label,
        attributes_namespace=attributes_namespace,
        attribute_values_namespace=attribute_values_namespace,
        attributes_all_key=CacheKey(f"{attributes_namespace}all", attributes_namespace),
        attributes_by_id_key=CacheKey(f"{attributes_namespace}id-{{0}}", attributes_namespace),
        attribute_values_all_key=CacheKey(f"{attribute_values_namespace}all-{{0}}", attribute_values_namespace),
        attribute_values_by_id_key=CacheKey(f"{attribute_values_namespace}id-{{0}}", attribute_values_namespace),
        generic_attribute_key=generic_attribute_key,
    )


CUSTOMER_ATTRIBUTE_DEFAULTS = _family_defaults("customer", "customer attribute", "CustomCustomerAttributes")

VENDOR_ATTRIBUTE_DEFAULTS = _family_defaults("vendor", "vendor attribute", "VendorAttributes")
