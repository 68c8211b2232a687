"""Per-call option resolution.

Each operation resolves one immutable ``RequestOptions`` value by layering
``DEFAULT_OPTIONS``, the adapter's options and the call's options, highest
layer first. Nothing is written back to the adapter.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, fields, replace
from datetime import datetime, time, timedelta
from typing import Any

from .constants import DEFAULT_PICKUP_CUTOFF
from .models import CustomerClassification, Location, PickupType


@dataclass(frozen=True)
class RequestOptions:
    key: str | None = None
    login: str | None = None
    password: str | None = None
    test: bool | None = None
    origin_account: str | None = None
    destination_account: str | None = None
    pickup_type: PickupType | str | None = None
    customer_classification: CustomerClassification | str | None = None
    shipper: Location | None = None
    service: str | None = None
    saturday: bool | None = None
    delivery_confirmation_type: str | None = None
    return_service_code: str | None = None
    nonvalidate: bool | None = None
    pickup_cutoff: str | time | None = None
    pickup_days_postpone: int | None = None

    @classmethod
    def from_mapping(cls, values: dict[str, Any] | None) -> "RequestOptions":
        values = values or {}
        known = {item.name for item in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise TypeError(f"Unknown option(s): {', '.join(unknown)}")
        return cls(**values)

    def merged_over(self, lower: "RequestOptions") -> "RequestOptions":
        """Return ``lower`` with every non-None value of ``self`` laid on top."""
        overrides = {item.name: getattr(self, item.name) for item in fields(self)}
        return replace(lower, **{name: value for name, value in overrides.items() if value is not None})


DEFAULT_OPTIONS = RequestOptions(
    test=False,
    pickup_type=PickupType.DAILY_PICKUP,
    saturday=False,
    nonvalidate=False,
    pickup_cutoff=DEFAULT_PICKUP_CUTOFF,
    pickup_days_postpone=0,
)


def resolve_options(
    adapter_options: RequestOptions | None = None,
    call_options: RequestOptions | dict[str, Any] | None = None,
) -> RequestOptions:
    if not isinstance(call_options, RequestOptions):
        call_options = RequestOptions.from_mapping(call_options)
    resolved = DEFAULT_OPTIONS
    for layer in (adapter_options, call_options):
        if layer is not None:
            resolved = layer.merged_over(resolved)
    return resolved


# ---------------------------------------------------------------------------
# Pickup dates for time-in-transit
# ---------------------------------------------------------------------------

_CUTOFF_PATTERN = re.compile(r"^\s*(\d{1,2})(?::(\d{2}))?\s*([ap]\.?m\.?)?\s*$", re.IGNORECASE)


def parse_cutoff(cutoff: str | time) -> time:
    """Parse ``3pm``, ``3:30pm`` or ``15:00`` style cutoffs."""
    if isinstance(cutoff, time):
        return cutoff
    match = _CUTOFF_PATTERN.match(str(cutoff))
    if not match:
        raise ValueError(f"Invalid pickup cutoff: {cutoff!r}")
    hour = int(match.group(1))
    minute = int(match.group(2) or 0)
    meridiem = (match.group(3) or "").lower().replace(".", "")
    if meridiem:
        if not 1 <= hour <= 12:
            raise ValueError(f"Invalid pickup cutoff: {cutoff!r}")
        hour = hour % 12 + (12 if meridiem == "pm" else 0)
    if hour > 23 or minute > 59:
        raise ValueError(f"Invalid pickup cutoff: {cutoff!r}")
    return time(hour, minute)


def pickup_date(now: datetime, cutoff: str | time = DEFAULT_PICKUP_CUTOFF, postpone_days: int | None = 0) -> datetime:
    """Next pickup: two days out when past today's cutoff, otherwise tomorrow, plus any postponement."""
    cutoff_at = datetime.combine(now.date(), parse_cutoff(cutoff), tzinfo=now.tzinfo)
    days = 2 if now > cutoff_at else 1
    return now + timedelta(days=days + int(postpone_days or 0))
