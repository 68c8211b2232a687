"""Pickup-type and customer-classification codes."""

from __future__ import annotations

from .constants import CUSTOMER_CLASSIFICATIONS, PICKUP_CODES
from .models import CustomerClassification, PickupType

_DEFAULT_CLASSIFICATIONS = {
    PickupType.DAILY_PICKUP.value: CustomerClassification.WHOLESALE,
    PickupType.CUSTOMER_COUNTER.value: CustomerClassification.RETAIL,
}


def _key(value: PickupType | CustomerClassification | str) -> str:
    if isinstance(value, (PickupType, CustomerClassification)):
        return value.value
    return str(value).strip().lower()


def pickup_code(pickup_type: PickupType | str) -> str:
    key = _key(pickup_type)
    if key not in PICKUP_CODES:
        allowed = ", ".join(sorted(PICKUP_CODES))
        raise ValueError(f"Invalid pickup type '{pickup_type}'. Allowed values: {allowed}")
    return PICKUP_CODES[key]


def default_classification(pickup_type: PickupType | str | None) -> CustomerClassification:
    """UPS documents these defaults but does not always apply them, so we send them explicitly."""
    if pickup_type is None:
        return CustomerClassification.OCCASIONAL
    return _DEFAULT_CLASSIFICATIONS.get(_key(pickup_type), CustomerClassification.OCCASIONAL)


def classification_code(classification: CustomerClassification | str) -> str:
    key = _key(classification)
    if key not in CUSTOMER_CLASSIFICATIONS:
        allowed = ", ".join(sorted(CUSTOMER_CLASSIFICATIONS))
        raise ValueError(f"Invalid customer classification '{classification}'. Allowed values: {allowed}")
    return CUSTOMER_CLASSIFICATIONS[key]


def resolve_classification(
    pickup_type: PickupType | str | None,
    classification: CustomerClassification | str | None = None,
) -> CustomerClassification:
    """Explicit classification wins, else the default for the pickup type (daily pickup if unset)."""
    if classification:
        classification_code(classification)
        return CustomerClassification(_key(classification))
    return default_classification(pickup_type or PickupType.DAILY_PICKUP)
