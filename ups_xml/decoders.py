"""Decoding of UPS XML API responses.

Every decoder first checks ``Response/ResponseStatusCode``. A failed
response becomes a ``CarrierResponse`` carrying a ``CarrierError``; a
successful one has its fields extracted. Responses that cannot be parsed,
or that lack a node the success path needs, raise ``UPSDecodeError``.
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from datetime import date, datetime, timedelta, timezone
from typing import Callable, Sequence, TypeVar

from .constants import SUCCESS_STATUS_CODE
from .errors import UPSDecodeError
from .models import (
    Activity,
    AddressValidationResult,
    AddressValidationStreetResult,
    CarrierError,
    CarrierResponse,
    Location,
    Package,
    PackageVoidResult,
    RateEstimate,
    ShipAcceptResult,
    ShipConfirmResult,
    TrackingDetail,
    TransitTimeTable,
    VoidResult,
)
from .services import service_name_for

T = TypeVar("T")

_TWO_DIGITS = re.compile(r"\d{2}")


def parse_document(operation: str, response: str | bytes) -> ET.Element:
    try:
        return ET.fromstring(response)
    except ET.ParseError as exc:
        raise UPSDecodeError(operation, f"response is not well-formed XML ({exc})") from exc


def response_success(root: ET.Element, operation: str = "response") -> bool:
    status = root.find("Response/ResponseStatusCode")
    if status is None:
        raise UPSDecodeError(operation, "missing Response/ResponseStatusCode")
    return (status.text or "").strip() == SUCCESS_STATUS_CODE


def response_message(root: ET.Element) -> str:
    description = root.findtext("Response/Error/ErrorDescription")
    if description:
        return description
    return root.findtext("Response/ResponseStatusDescription") or ""


def carrier_error(root: ET.Element) -> CarrierError:
    return CarrierError(
        status=root.findtext("Response/ResponseStatusDescription") or "",
        error_severity=root.findtext("Response/Error/ErrorSeverity") or "",
        error_code=root.findtext("Response/Error/ErrorCode") or "",
        error_description=root.findtext("Response/Error/ErrorDescription") or "",
        minimum_retry_seconds=root.findtext("Response/Error/MinimumRetrySeconds") or "",
        error_location_element_name=root.findtext("Response/Error/ErrorLocation/ErrorLocationElementName") or "",
        error_location_attribute_name=root.findtext("Response/Error/ErrorLocation/ErrorLocationAttributeName") or "",
    )


def _required_text(node: ET.Element, path: str, operation: str) -> str:
    found = node.find(path)
    if found is None:
        raise UPSDecodeError(operation, f"missing {node.tag}/{path}")
    return (found.text or "").strip()


def _text(node: ET.Element, path: str) -> str:
    return (node.findtext(path) or "").strip()


def _status_code(status: ET.Element | None) -> str:
    """Read a StatusCode element in either its nested ``<Code>`` or flat text form."""
    if status is None:
        return ""
    if status.find("Code") is not None:
        return _text(status, "Code")
    return (status.text or "").strip()


def _decode(
    operation: str,
    response: str | bytes,
    extract: Callable[[ET.Element], T],
) -> CarrierResponse[T]:
    root = parse_document(operation, response)
    xml = response.decode() if isinstance(response, bytes) else response
    message = response_message(root)
    if not response_success(root, operation):
        return CarrierResponse(success=False, message=message, error=carrier_error(root), xml=xml)
    return CarrierResponse(success=True, message=message, value=extract(root), xml=xml)


def _parse_yyyymmdd(value: str, operation: str) -> date:
    try:
        return datetime.strptime(value, "%Y%m%d").date()
    except ValueError as exc:
        raise UPSDecodeError(operation, f"invalid date {value!r}") from exc


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------

def parse_rate_response(
    origin: Location,
    destination: Location,
    packages: Sequence[Package],
    response: str | bytes,
    today: date | None = None,
) -> CarrierResponse[list[RateEstimate]]:
    operation = "rate"
    today = today or date.today()

    def extract(root: ET.Element) -> list[RateEstimate]:
        estimates = []
        for rated_shipment in root.findall("RatedShipment"):
            service_code = _required_text(rated_shipment, "Service/Code", operation)
            days_text = _text(rated_shipment, "GuaranteedDaysToDelivery")
            days = int(days_text) if days_text.lstrip("-").isdigit() else 0
            total = _required_text(rated_shipment, "TotalCharges/MonetaryValue", operation)
            try:
                total_price = float(total)
            except ValueError as exc:
                raise UPSDecodeError(operation, f"invalid monetary value {total!r}") from exc
            estimates.append(RateEstimate(
                origin=origin,
                destination=destination,
                service_code=service_code,
                service_name=service_name_for(origin.country, service_code),
                total_price=total_price,
                currency=_text(rated_shipment, "TotalCharges/CurrencyCode"),
                packages=tuple(packages),
                delivery_date=today + timedelta(days=days) if days >= 1 else None,
            ))
        return estimates

    return _decode(operation, response, extract)


def parse_transit_time_response(response: str | bytes) -> CarrierResponse[TransitTimeTable]:
    operation = "timeintransit"

    def extract(root: ET.Element) -> TransitTimeTable:
        table: TransitTimeTable = {}
        for summary in root.iter("ServiceSummary"):
            code = _required_text(summary, "Service/Code", operation)
            days = _required_text(summary, "EstimatedArrival/BusinessTransitDays", operation)
            if not days.isdigit():
                raise UPSDecodeError(operation, f"invalid business transit days {days!r} for service {code}")
            table[code] = int(days)
        return table

    return _decode(operation, response, extract)


def activity_timestamp(date_text: str, time_text: str, operation: str = "track") -> datetime:
    """Combine a ``YYYYMMDD`` date and ``HHMMSS`` time into a UTC timestamp."""
    parts = _TWO_DIGITS.findall(time_text)
    if len(date_text) != 8 or not date_text.isdigit() or len(parts) < 3:
        raise UPSDecodeError(operation, f"invalid activity date/time {date_text!r} {time_text!r}")
    hour, minute, second = (int(part) for part in parts[:3])
    try:
        return datetime(
            int(date_text[0:4]), int(date_text[4:6]), int(date_text[6:8]),
            hour, minute, second,
            tzinfo=timezone.utc,
        )
    except ValueError as exc:
        raise UPSDecodeError(operation, f"invalid activity date/time {date_text!r} {time_text!r}") from exc


def parse_tracking_response(response: str | bytes) -> CarrierResponse[TrackingDetail]:
    operation = "track"

    def extract(root: ET.Element) -> TrackingDetail:
        tracking_number = _required_text(root, "Shipment/Package/TrackingNumber", operation)

        estimated = _text(root, "Shipment/ScheduledDeliveryDate") or _text(root, "Shipment/Package/RescheduledDeliveryDate")
        estimated_delivery_date = _parse_yyyymmdd(estimated, operation) if estimated else None

        activities = []
        for activity in root.findall("Shipment/Package/Activity"):
            address = "ActivityLocation/Address/"
            location = " ".join((
                _text(activity, address + "City"),
                _text(activity, address + "StateProvinceCode"),
                _text(activity, address + "CountryCode"),
            ))
            activities.append(Activity(
                status_code=_status_code(activity.find("Status/StatusCode")),
                status_description=_text(activity, "Status/StatusType/Description"),
                timestamp=activity_timestamp(
                    _required_text(activity, "Date", operation),
                    _required_text(activity, "Time", operation),
                    operation,
                ),
                location=location,
            ))
        return TrackingDetail(
            tracking_number=tracking_number,
            estimated_delivery_date=estimated_delivery_date,
            activities=tuple(activities),
        )

    return _decode(operation, response, extract)


def parse_ship_confirm_response(response: str | bytes) -> CarrierResponse[ShipConfirmResult]:
    operation = "shipconfirm"

    def extract(root: ET.Element) -> ShipConfirmResult:
        digest = root.find(".//ShipmentDigest")
        if digest is None:
            raise UPSDecodeError(operation, "missing ShipmentDigest")
        return ShipConfirmResult(shipment_digest=(digest.text or "").strip())

    return _decode(operation, response, extract)


def parse_ship_accept_response(response: str | bytes) -> CarrierResponse[ShipAcceptResult]:
    operation = "shipaccept"

    def extract(root: ET.Element) -> ShipAcceptResult:
        results = root.find("ShipmentResults")
        if results is None:
            raise UPSDecodeError(operation, "missing ShipmentResults")
        tracking_numbers = tuple((node.text or "").strip() for node in results.findall("*/TrackingNumber"))
        labels = tuple((node.text or "").strip() for node in results.findall("*/LabelImage/GraphicImage"))
        if not tracking_numbers:
            raise UPSDecodeError(operation, "missing ShipmentResults/PackageResults/TrackingNumber")
        if not labels:
            raise UPSDecodeError(operation, "missing ShipmentResults/PackageResults/LabelImage/GraphicImage")
        return ShipAcceptResult(
            charges=_required_text(results, "*/TotalCharges/MonetaryValue", operation),
            shipment_id=_required_text(results, "ShipmentIdentificationNumber", operation),
            tracking_numbers=tracking_numbers,
            labels=labels,
            success=True,
        )

    return _decode(operation, response, extract)


def _package_void_result(node: ET.Element, operation: str) -> PackageVoidResult:
    description = node.find(".//Description")
    return PackageVoidResult(
        tracking_number=_required_text(node, "TrackingNumber", operation),
        status_code=_status_code(node.find("StatusCode")),
        status_code_description=(description.text or "").strip() if description is not None else "",
    )


def parse_void_response(response: str | bytes) -> CarrierResponse[VoidResult]:
    operation = "shipvoid"

    def extract(root: ET.Element) -> VoidResult:
        error = "Response/Error/"
        return VoidResult(
            status_type_code=_text(root, "Status/StatusType/Code"),
            status_type_description=_text(root, "Status/StatusType/Description"),
            response_status_code=_text(root, "Response/ResponseStatusCode"),
            response_status_description=_text(root, "Response/ResponseStatusDescription"),
            error_severity=_text(root, error + "ErrorSeverity"),
            error_code=_text(root, error + "ErrorCode"),
            error_description=_text(root, error + "ErrorDescription"),
            minimum_retry_seconds=_text(root, error + "MinimumRetrySeconds"),
            error_location_element_name=_text(root, error + "ErrorLocation/ErrorLocationElementName"),
            error_location_attribute_name=_text(root, error + "ErrorLocation/ErrorLocationAttributeName"),
            error_digest=_text(root, error + "ErrorDigest"),
            status_code=_text(root, "Status/StatusCode/Code"),
            status_code_description=_text(root, "Status/StatusCode/Description"),
            package_results=tuple(_package_void_result(node, operation) for node in root.findall("PackageLevelResults")),
        )

    return _decode(operation, response, extract)


def parse_address_validation_response(response: str | bytes) -> CarrierResponse[list[AddressValidationResult]]:
    """Every AddressValidationResult candidate, in response order."""
    operation = "valid_address"

    def extract(root: ET.Element) -> list[AddressValidationResult]:
        return [
            AddressValidationResult(
                rank=_required_text(node, "Rank", operation),
                quality=_required_text(node, "Quality", operation),
                city=_text(node, "Address/City"),
                state=_text(node, "Address/StateProvinceCode"),
                postal_code_low=_required_text(node, "PostalCodeLowEnd", operation),
                postal_code_high=_required_text(node, "PostalCodeHighEnd", operation),
            )
            for node in root.findall("AddressValidationResult")
        ]

    return _decode(operation, response, extract)


def parse_address_validation_street_response(
    response: str | bytes,
) -> CarrierResponse[list[AddressValidationStreetResult]]:
    """Every AddressKeyFormat candidate, in response order; address lines are numbered per candidate."""

    def extract(root: ET.Element) -> list[AddressValidationStreetResult]:
        return [
            AddressValidationStreetResult(
                address_lines=tuple((line.text or "").strip() for line in node.findall("AddressLine")),
                region=_text(node, "Region"),
                city=_text(node, "PoliticalDivision2"),
                state=_text(node, "PoliticalDivision1"),
                postal_code=_text(node, "PostcodePrimaryLow"),
                postal_code_extended=_text(node, "PostcodeExtendedLow"),
                country_code=_text(node, "CountryCode"),
            )
            for node in root.findall("AddressKeyFormat")
        ]

    return _decode("valid_address_street", response, extract)
