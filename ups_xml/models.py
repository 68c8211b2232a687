from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Generic, TypeVar

from .constants import CARRIER_NAME
from .errors import UPSCarrierError

T = TypeVar("T")

CENTIMETRES_PER_INCH = 2.54
KILOGRAMS_PER_POUND = 0.45359237

AXES = ("length", "width", "height")


class PickupType(str, Enum):
    DAILY_PICKUP = "daily_pickup"
    CUSTOMER_COUNTER = "customer_counter"
    ONE_TIME_PICKUP = "one_time_pickup"
    ON_CALL_AIR = "on_call_air"
    SUGGESTED_RETAIL_RATES = "suggested_retail_rates"
    LETTER_CENTER = "letter_center"
    AIR_SERVICE_CENTER = "air_service_center"


class CustomerClassification(str, Enum):
    WHOLESALE = "wholesale"
    OCCASIONAL = "occasional"
    RETAIL = "retail"


class UnitSystem(str, Enum):
    IMPERIAL = "imperial"
    METRIC = "metric"


# ---------------------------------------------------------------------------
# Request entities
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Location:
    country: str = ""
    postal_code: str = ""
    province: str = ""
    city: str = ""
    address1: str = ""
    address2: str = ""
    address3: str = ""
    name: str = ""
    attention_name: str = ""
    company_name: str = ""
    phone: str = ""
    fax: str = ""
    address_type: str | None = None

    @property
    def commercial(self) -> bool:
        return self.address_type == "commercial"


@dataclass(frozen=True)
class Reference:
    code: str
    value: str
    barcode: bool = False


@dataclass(frozen=True)
class Package:
    """One parcel. ``units`` names the system the stored numbers are in."""

    length: float
    width: float
    height: float
    weight: float
    units: UnitSystem = UnitSystem.METRIC
    package_type: str | None = None
    description: str | None = None
    delivery_confirmation_type: str | None = None
    references: tuple[Reference, ...] = ()

    def _dimension(self, axis: str) -> float:
        if axis not in AXES:
            raise ValueError(f"Unknown package axis: {axis}")
        return float(getattr(self, axis))

    def inches(self, axis: str) -> float:
        value = self._dimension(axis)
        if UnitSystem(self.units) is UnitSystem.IMPERIAL:
            return value
        return value / CENTIMETRES_PER_INCH

    def centimetres(self, axis: str) -> float:
        value = self._dimension(axis)
        if UnitSystem(self.units) is UnitSystem.METRIC:
            return value
        return value * CENTIMETRES_PER_INCH

    def pounds(self) -> float:
        if UnitSystem(self.units) is UnitSystem.IMPERIAL:
            return float(self.weight)
        return float(self.weight) / KILOGRAMS_PER_POUND

    def kilograms(self) -> float:
        if UnitSystem(self.units) is UnitSystem.METRIC:
            return float(self.weight)
        return float(self.weight) * KILOGRAMS_PER_POUND


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CarrierError:
    """Uniform descriptor for a failure UPS reported in its response."""

    status: str
    error_severity: str
    error_code: str
    error_description: str
    minimum_retry_seconds: str = ""
    error_location_element_name: str = ""
    error_location_attribute_name: str = ""


@dataclass(frozen=True)
class CarrierResponse(Generic[T]):
    success: bool
    message: str
    value: T | None = None
    error: CarrierError | None = None
    xml: str = ""
    request: str = ""

    def unwrap(self) -> T:
        if not self.success or self.error is not None:
            raise UPSCarrierError(self.error or CarrierError(self.message, "", "", self.message))
        return self.value  # type: ignore[return-value]


@dataclass(frozen=True)
class RateEstimate:
    origin: Location
    destination: Location
    service_code: str
    service_name: str | None
    total_price: float
    currency: str
    packages: tuple[Package, ...]
    delivery_date: date | None = None
    carrier: str = CARRIER_NAME

    @property
    def delivery_range(self) -> list[date | None]:
        return [self.delivery_date]


@dataclass(frozen=True)
class Activity:
    status_code: str
    status_description: str
    timestamp: datetime
    location: str


@dataclass(frozen=True)
class TrackingDetail:
    tracking_number: str
    estimated_delivery_date: date | None = None
    activities: tuple[Activity, ...] = ()


@dataclass(frozen=True)
class ShipConfirmResult:
    shipment_digest: str


@dataclass(frozen=True)
class ShipAcceptResult:
    charges: str
    shipment_id: str
    tracking_numbers: tuple[str, ...]
    labels: tuple[str, ...]
    success: bool = True


@dataclass(frozen=True)
class PackageVoidResult:
    tracking_number: str
    status_code: str
    status_code_description: str


@dataclass(frozen=True)
class VoidResult:
    status_type_code: str
    status_type_description: str
    response_status_code: str
    response_status_description: str
    error_severity: str = ""
    error_code: str = ""
    error_description: str = ""
    minimum_retry_seconds: str = ""
    error_location_element_name: str = ""
    error_location_attribute_name: str = ""
    error_digest: str = ""
    status_code: str = ""
    status_code_description: str = ""
    package_results: tuple[PackageVoidResult, ...] = ()


@dataclass(frozen=True)
class AddressValidationResult:
    rank: str
    quality: str
    city: str
    state: str
    postal_code_low: str
    postal_code_high: str

    @property
    def postal_code_range(self) -> tuple[str, str]:
        return (self.postal_code_low, self.postal_code_high)


@dataclass(frozen=True)
class AddressValidationStreetResult:
    address_lines: tuple[str, ...]
    region: str
    city: str
    state: str
    postal_code: str
    postal_code_extended: str
    country_code: str

    def numbered_lines(self) -> dict[str, str]:
        return {f"address_{index}": line for index, line in enumerate(self.address_lines, start=1)}


TransitTimeTable = dict[str, int]
