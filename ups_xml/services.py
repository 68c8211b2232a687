"""Human-readable service names for UPS service codes.

The name for a code depends on where the shipment originates. Lookup walks
``SERVICE_NAME_POLICY`` in order: the region table picked by the origin
country, then the table for other non-US origins, then the default table.
"""

from __future__ import annotations

from typing import Callable, Mapping

from .constants import (
    CANADA_ORIGIN_SERVICES,
    DEFAULT_SERVICES,
    EU_COUNTRY_CODES,
    EU_ORIGIN_SERVICES,
    MEXICO_ORIGIN_SERVICES,
    OTHER_NON_US_ORIGIN_SERVICES,
)

OriginPredicate = Callable[[str], bool]

REGION_SERVICE_TABLES: tuple[tuple[OriginPredicate, Mapping[str, str]], ...] = (
    (lambda origin: origin == "CA", CANADA_ORIGIN_SERVICES),
    (lambda origin: origin == "MX", MEXICO_ORIGIN_SERVICES),
    (lambda origin: origin in EU_COUNTRY_CODES, EU_ORIGIN_SERVICES),
)

FALLBACK_SERVICE_TABLES: tuple[Mapping[str, str], ...] = (
    OTHER_NON_US_ORIGIN_SERVICES,
    DEFAULT_SERVICES,
)


def _region_table(origin: str) -> Mapping[str, str] | None:
    for predicate, table in REGION_SERVICE_TABLES:
        if predicate(origin):
            return table
    return None


def service_name_for(origin_country: str | None, service_code: str) -> str | None:
    origin = (origin_country or "").upper()
    tables: list[Mapping[str, str]] = []
    region = _region_table(origin)
    if region is not None:
        tables.append(region)
    tables.extend(FALLBACK_SERVICE_TABLES)

    for table in tables:
        name = table.get(service_code)
        if name:
            return name
    return None
