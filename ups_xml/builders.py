"""XML request documents for the UPS XML API.

One function per operation, each returning a serialized document. The
access document is sent in front of every operation document; see
``join_request``.
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from datetime import datetime
from typing import Iterable, Sequence

from . import constants
from .classification import classification_code, pickup_code, resolve_classification
from .models import Location, Package
from .options import RequestOptions, pickup_date
from .units import format_measure, package_dimensions, package_weight, units_for_origin

XML_DECLARATION = '<?xml version="1.0"?>'

_NON_DIGITS = re.compile(r"[^\d]")


def _sub(parent: ET.Element, tag: str, text: object | None = None) -> ET.Element:
    element = ET.SubElement(parent, tag)
    if text is not None:
        element.text = str(text)
    return element


def _sub_if(parent: ET.Element, tag: str, text: str | None) -> None:
    if text is not None and str(text).strip():
        _sub(parent, tag, text)


def _code_block(parent: ET.Element, tag: str, code: str | None) -> ET.Element:
    block = _sub(parent, tag)
    _sub(block, "Code", code)
    return block


def _request_block(root: ET.Element, action: str, option: str | None = None) -> ET.Element:
    request = _sub(root, "Request")
    _sub(request, "RequestAction", action)
    if option is not None:
        _sub(request, "RequestOption", option)
    return request


def to_xml(root: ET.Element) -> str:
    return XML_DECLARATION + ET.tostring(root, encoding="unicode")


def join_request(access_request: str, operation_request: str) -> str:
    """Request body: both documents with newlines removed, back to back."""
    return access_request.replace("\n", "") + operation_request.replace("\n", "")


# ---------------------------------------------------------------------------
# Shared fragments
# ---------------------------------------------------------------------------

def build_access_request(options: RequestOptions) -> str:
    root = ET.Element("AccessRequest")
    _sub(root, "AccessLicenseNumber", options.key or "")
    _sub(root, "UserId", options.login or "")
    _sub(root, "Password", options.password or "")
    return to_xml(root)


def build_location_node(parent: ET.Element, role: str, location: Location, options: RequestOptions) -> ET.Element:
    node = _sub(parent, role)
    _sub_if(node, "Name", location.name)
    _sub_if(node, "AttentionName", location.attention_name)
    _sub_if(node, "CompanyName", location.company_name)
    _sub_if(node, "PhoneNumber", _NON_DIGITS.sub("", location.phone or ""))
    _sub_if(node, "FaxNumber", _NON_DIGITS.sub("", location.fax or ""))

    if role == "Shipper" and options.origin_account:
        _sub(node, "ShipperNumber", options.origin_account)
    elif role == "ShipTo" and options.destination_account:
        _sub(node, "ShipperAssignedIdentificationNumber", options.destination_account)

    address = _sub(node, "Address")
    _sub_if(address, "AddressLine1", location.address1)
    _sub_if(address, "AddressLine2", location.address2)
    _sub_if(address, "AddressLine3", location.address3)
    _sub_if(address, "City", location.city)
    _sub_if(address, "StateProvinceCode", location.province)
    _sub_if(address, "PostalCode", location.postal_code)
    _sub_if(address, "CountryCode", location.country)
    if not location.commercial:
        _sub(address, "ResidentialAddress")
    return node


def _build_parties(shipment: ET.Element, origin: Location, destination: Location, options: RequestOptions) -> None:
    build_location_node(shipment, "Shipper", options.shipper or origin, options)
    build_location_node(shipment, "ShipTo", destination, options)
    if options.shipper is not None and options.shipper != origin:
        build_location_node(shipment, "ShipFrom", origin, options)


def _build_measurements(node: ET.Element, package: Package, origin: Location) -> None:
    units = units_for_origin(origin.country)
    dimensions = _sub(node, "Dimensions")
    _code_block(dimensions, "UnitOfMeasurement", units.length_unit)
    for axis, value in package_dimensions(package, units).items():
        _sub(dimensions, axis.capitalize(), format_measure(value))

    weight = _sub(node, "PackageWeight")
    _code_block(weight, "UnitOfMeasurement", units.weight_unit)
    _sub(weight, "Weight", format_measure(package_weight(package, units)))


def _build_delivery_confirmation(parent: ET.Element, confirmation_type: str | None) -> None:
    if confirmation_type:
        confirmation = _sub(parent, "DeliveryConfirmation")
        _sub(confirmation, "DCISType", confirmation_type)


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------

def build_rate_request(
    origin: Location,
    destination: Location,
    packages: Sequence[Package],
    options: RequestOptions,
) -> str:
    root = ET.Element("RatingServiceSelectionRequest")
    # Only rate shopping is supported; single-service "Rate" requests are not.
    _request_block(root, "Rate", "Shop")

    pickup_type = options.pickup_type or "daily_pickup"
    _code_block(root, "PickupType", pickup_code(pickup_type))
    classification = resolve_classification(pickup_type, options.customer_classification)
    _code_block(root, "CustomerClassification", classification_code(classification))

    shipment = _sub(root, "Shipment")
    _build_parties(shipment, origin, destination, options)
    for package in packages:
        node = _sub(shipment, "Package")
        _code_block(node, "PackagingType", constants.RATE_PACKAGING_TYPE)
        _build_measurements(node, package, origin)
        service_options = _sub(node, "PackageServiceOptions")
        _build_delivery_confirmation(service_options, package.delivery_confirmation_type)
    return to_xml(root)


def build_transit_time_request(
    origin_postcode: str,
    destination_postcode: str,
    options: RequestOptions,
    now: datetime | None = None,
) -> str:
    now = now or datetime.now()
    pickup = pickup_date(
        now,
        options.pickup_cutoff or constants.DEFAULT_PICKUP_CUTOFF,
        options.pickup_days_postpone,
    )

    root = ET.Element("TimeInTransitRequest")
    request = _request_block(root, "TimeInTransit")
    reference = _sub(request, "TransactionReference")
    _sub(reference, "XpciVersion", constants.XPCI_VERSION)

    _sub(root, "TotalPackagesInShipment", constants.TRANSIT_PACKAGE_COUNT)
    weight = _sub(root, "ShipmentWeight")
    _code_block(weight, "UnitOfMeasurement", constants.TRANSIT_WEIGHT_UNIT)
    _sub(weight, "Weight", constants.TRANSIT_WEIGHT)
    _sub(root, "PickupDate", pickup.strftime("%Y%m%d"))

    for tag, postcode in (("TransitFrom", origin_postcode), ("TransitTo", destination_postcode)):
        artifact = _sub(_sub(root, tag), "AddressArtifactFormat")
        _sub(artifact, "CountryCode", constants.TRANSIT_COUNTRY_CODE)
        _sub(artifact, "PostcodePrimaryLow", postcode)
    return to_xml(root)


def build_tracking_request(tracking_number: str) -> str:
    root = ET.Element("TrackRequest")
    request = _sub(root, "Request")
    _sub(request, "TransactionReference")
    _sub(request, "RequestAction", "Track")
    _sub(root, "TrackingNumber", str(tracking_number))
    _code_block(root, "ShipmentType", constants.TRACK_SHIPMENT_TYPE)
    return to_xml(root)


def build_ship_confirm_request(
    origin: Location,
    destination: Location,
    packages: Sequence[Package],
    options: RequestOptions,
) -> str:
    root = ET.Element("ShipmentConfirmRequest")
    _request_block(root, "ShipConfirm", "nonvalidate" if options.nonvalidate else "validate")

    shipment = _sub(root, "Shipment")
    _build_parties(shipment, origin, destination, options)

    payment = _sub(shipment, "PaymentInformation")
    bill_shipper = _sub(_sub(payment, "Prepaid"), "BillShipper")
    _sub(bill_shipper, "AccountNumber", options.origin_account or "")

    if options.return_service_code:
        if options.return_service_code not in constants.RETURN_SERVICE_CODES:
            raise ValueError(f"Unknown return service code: {options.return_service_code!r}")
        _code_block(shipment, "ReturnService", options.return_service_code)
    _code_block(shipment, "Service", options.service or "")

    service_options = _sub(shipment, "ShipmentServiceOptions")
    if options.saturday is True:
        _sub(service_options, "SaturdayDelivery")
    _build_delivery_confirmation(service_options, options.delivery_confirmation_type)

    for package in packages:
        node = _sub(shipment, "Package")
        _code_block(node, "PackagingType", package.package_type or "")
        _build_measurements(node, package, origin)
        _sub_if(node, "Description", package.description)
        package_options = _sub(node, "PackageServiceOptions")
        _build_delivery_confirmation(package_options, package.delivery_confirmation_type)
        for reference in package.references:
            reference_node = _sub(node, "ReferenceNumber")
            _sub(reference_node, "Code", reference.code)
            _sub(reference_node, "Value", reference.value)
            if reference.barcode:
                _sub(reference_node, "BarCodeIndicator")

    label = _sub(shipment, "LabelSpecification")
    _code_block(label, "LabelPrintMethod", constants.LABEL_PRINT_METHOD)
    _code_block(label, "LabelImageFormat", constants.LABEL_IMAGE_FORMAT)
    return to_xml(root)


def build_ship_accept_request(digest: str) -> str:
    root = ET.Element("ShipmentAcceptRequest")
    _request_block(root, "ShipAccept")
    _sub(root, "ShipmentDigest", digest)
    return to_xml(root)


def build_void_request(shipment_id: str, tracking_numbers: Iterable[str] = ()) -> str:
    root = ET.Element("VoidShipmentRequest")
    _request_block(root, "Void")
    expanded = _sub(root, "ExpandedVoidShipment")
    _sub(expanded, "ShipmentIdentificationNumber", shipment_id)
    for tracking_number in tracking_numbers:
        _sub(expanded, "TrackingNumber", tracking_number)
    return to_xml(root)


def build_address_validation_request(city: str, state: str, postal_code: str, country_code: str) -> str:
    root = ET.Element("AddressValidationRequest")
    _request_block(root, "AV")
    address = _sub(root, "Address")
    _sub(address, "City", city)
    _sub(address, "StateProvinceCode", state)
    _sub(address, "CountryCode", country_code)
    _sub(address, "PostalCode", postal_code)
    return to_xml(root)


def build_address_validation_street_request(
    address: str,
    city: str,
    state: str,
    postal_code: str,
    country_code: str,
) -> str:
    root = ET.Element("AddressValidationRequest")
    _request_block(root, "XAV")
    key_format = _sub(root, "AddressKeyFormat")
    _sub(key_format, "AddressLine", address)
    _sub(key_format, "PoliticalDivision2", city)
    _sub(key_format, "PoliticalDivision1", state)
    _sub(key_format, "PostcodePrimaryLow", postal_code)
    _sub(key_format, "CountryCode", country_code)
    return to_xml(root)
