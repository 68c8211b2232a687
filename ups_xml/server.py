from typing import Any, Callable
from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from enum import Enum
from mcp.server.fastmcp import FastMCP
from mcp.server.fastmcp.exceptions import ToolError
from dotenv import load_dotenv
from pydantic import BaseModel, Field
import json
import logging
import os
import sys
from . import carrier
from .errors import UPSError
from .models import AddressValidationStreetResult, CarrierResponse, Location, Package, Reference, UnitSystem

# Initialize FastMCP server
mcp = FastMCP("ups-xml")

load_dotenv()
test_mode = True
access_key: str | None = None
username: str | None = None
password: str | None = None
account_number: str | None = None
timeout = 30.0
ups_carrier: carrier.UPSCarrier | None = None


class LocationInput(BaseModel):
    country: str = Field(description="ISO alpha-2 country code, e.g. US")
    postal_code: str = ""
    province: str = Field("", description="State or province code, e.g. GA")
    city: str = ""
    address1: str = ""
    address2: str = ""
    address3: str = ""
    name: str = ""
    attention_name: str = ""
    company_name: str = ""
    phone: str = ""
    fax: str = ""
    commercial: bool = False

    def to_location(self) -> Location:
        data = self.model_dump(exclude={"commercial"})
        return Location(**data, address_type="commercial" if self.commercial else "residential")


class ReferenceInput(BaseModel):
    code: str
    value: str
    barcode: bool = False


class PackageInput(BaseModel):
    length: float = Field(gt=0)
    width: float = Field(gt=0)
    height: float = Field(gt=0)
    weight: float = Field(gt=0)
    units: UnitSystem = UnitSystem.METRIC
    package_type: str | None = Field(None, description="UPS packaging type code, e.g. 02 for customer packaging")
    description: str | None = None
    delivery_confirmation_type: str | None = None
    references: list[ReferenceInput] = Field(default_factory=list)

    def to_package(self) -> Package:
        return Package(
            length=self.length,
            width=self.width,
            height=self.height,
            weight=self.weight,
            units=self.units,
            package_type=self.package_type,
            description=self.description,
            delivery_confirmation_type=self.delivery_confirmation_type,
            references=tuple(Reference(**item.model_dump()) for item in self.references),
        )


def _refresh_runtime_configuration() -> None:
    global test_mode, access_key, username, password, account_number, timeout
    test_mode = os.getenv("ENVIRONMENT") != "production"
    access_key = os.getenv("UPS_ACCESS_KEY")
    username = os.getenv("UPS_USERNAME")
    password = os.getenv("UPS_PASSWORD")
    account_number = os.getenv("UPS_ACCOUNT_NUMBER")
    timeout = float(os.getenv("UPS_TIMEOUT") or 30.0)


def _validate_runtime_configuration() -> None:
    if not access_key or not username or not password:
        raise RuntimeError(
            "Missing required env vars: UPS_ACCESS_KEY, UPS_USERNAME and UPS_PASSWORD must be set before starting the server."
        )


def _initialize_carrier() -> None:
    global ups_carrier
    ups_carrier = carrier.UPSCarrier(
        key=access_key,
        login=username,
        password=password,
        origin_account=account_number,
        options=carrier.RequestOptions(test=test_mode),
        http_client=carrier.UPSHTTPClient(timeout=timeout),
    )


def _require_carrier() -> carrier.UPSCarrier:
    if ups_carrier is None:
        raise RuntimeError("UPS carrier is not initialized. Start the server via server.main().")
    return ups_carrier


def _jsonable(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return _jsonable(asdict(value))
    if isinstance(value, dict):
        return {key: _jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Enum):
        return value.value
    return value


def _street_candidates(candidates: list[AddressValidationStreetResult]) -> list[dict[str, Any]]:
    return [{**_jsonable(candidate), **candidate.numbered_lines()} for candidate in candidates]


def _payload(response: CarrierResponse, serialize: Callable[[Any], Any] = _jsonable) -> dict[str, Any]:
    if not response.success:
        return {"success": False, "message": response.message, "error": _jsonable(response.error)}
    return {"success": True, "message": response.message, "result": serialize(response.value)}


def _call(operation: str, serialize: Callable[[Any], Any] = _jsonable, **kwargs: Any) -> dict[str, Any]:
    try:
        return _payload(getattr(_require_carrier(), operation)(**kwargs), serialize)
    except UPSError as exc:
        raise ToolError(json.dumps(exc.to_payload()))
    except ValueError as exc:
        raise ToolError(json.dumps({"code": "VALIDATION_ERROR", "message": str(exc)}))


@mcp.tool()
async def find_rates(
    origin: LocationInput,
    destination: LocationInput,
    packages: list[PackageInput],
    shipper: LocationInput | None = None,
    pickup_type: str = "",
    customer_classification: str = "",
    origin_account: str = "",
    destination_account: str = "",
) -> dict[str, Any]:
    """
    Shop UPS rates for every eligible service between two locations.

    Args:
        origin (LocationInput): Where the shipment leaves from. Its country selects inches/pounds (US, LR, MM) or centimetres/kilograms.
        destination (LocationInput): Where the shipment is delivered.
        packages (list[PackageInput]): One entry per parcel. Required.
        shipper (LocationInput): Shipper of record when different from origin; origin is then sent as ShipFrom. Optional.
        pickup_type (str): One of daily_pickup, customer_counter, one_time_pickup, on_call_air, suggested_retail_rates, letter_center, air_service_center. Default daily_pickup.
        customer_classification (str): wholesale, occasional or retail. Defaults from the pickup type.
        origin_account (str): Shipper number. Falls back to UPS_ACCOUNT_NUMBER.
        destination_account (str): Ship-to assigned identification number.

    Returns:
        dict[str, Any]: {"success", "message", "result": [rate estimates]} or {"success": false, "error": {...}}.
        On transport or decode failure, raises ToolError with JSON containing code and message.
    """
    return _call(
        "find_rates",
        origin=origin.to_location(),
        destination=destination.to_location(),
        packages=[package.to_package() for package in packages],
        shipper=shipper.to_location() if shipper else None,
        pickup_type=pickup_type or None,
        customer_classification=customer_classification or None,
        origin_account=origin_account or None,
        destination_account=destination_account or None,
    )


@mcp.tool()
async def get_transit_time(
    origin_postcode: str,
    destination_postcode: str,
    pickup_cutoff: str = "",
    pickup_days_postpone: int = 0,
) -> dict[str, Any]:
    """
    Estimate business transit days per UPS service between two US postal codes.

    Args:
        origin_postcode (str): Origin ZIP code. Required.
        destination_postcode (str): Destination ZIP code. Required.
        pickup_cutoff (str): Local time after which pickup moves a day later, e.g. 3pm. Default 3pm.
        pickup_days_postpone (int): Extra days to add to the pickup date. Default 0.

    Returns:
        dict[str, Any]: {"success", "message", "result": {service_code: business_days}}.
    """
    return _call(
        "transit_time",
        origin_postcode=origin_postcode,
        destination_postcode=destination_postcode,
        pickup_cutoff=pickup_cutoff or None,
        pickup_days_postpone=pickup_days_postpone,
    )


@mcp.tool()
async def track_shipment(tracking_number: str) -> dict[str, Any]:
    """
    Look up tracking activity for a UPS tracking number.

    Args:
        tracking_number (str): The 1Z tracking number. Required.

    Returns:
        dict[str, Any]: {"success", "message", "result": {"tracking_number", "estimated_delivery_date", "activities"}}.
    """
    return _call("find_tracking_info", tracking_number=tracking_number)


@mcp.tool()
async def create_shipment(
    origin: LocationInput,
    destination: LocationInput,
    packages: list[PackageInput],
    service: str,
    shipper: LocationInput | None = None,
    origin_account: str = "",
    destination_account: str = "",
    saturday: bool = False,
    delivery_confirmation_type: str = "",
    return_service_code: str = "",
    nonvalidate: bool = False,
) -> dict[str, Any]:
    """
    Confirm a shipment (first phase of shipment creation) and return its digest.

    Args:
        origin (LocationInput): Ship-from location.
        destination (LocationInput): Ship-to location.
        packages (list[PackageInput]): One entry per parcel, each with its packaging type code. Required.
        service (str): UPS service code, e.g. 03 for Ground. Required.
        shipper (LocationInput): Shipper of record when different from origin. Optional.
        origin_account (str): Account billed for the shipment. Falls back to UPS_ACCOUNT_NUMBER.
        destination_account (str): Ship-to assigned identification number.
        saturday (bool): Request Saturday delivery.
        delivery_confirmation_type (str): Shipment-level DCIS type.
        return_service_code (str): 2, 3, 5, 8 or 9 for return shipments.
        nonvalidate (bool): Skip UPS street-level address validation.

    Returns:
        dict[str, Any]: {"success", "message", "result": {"shipment_digest"}}. Pass the digest to accept_shipment.
    """
    return _call(
        "create_shipment",
        origin=origin.to_location(),
        destination=destination.to_location(),
        packages=[package.to_package() for package in packages],
        service=service,
        shipper=shipper.to_location() if shipper else None,
        origin_account=origin_account or None,
        destination_account=destination_account or None,
        saturday=saturday,
        delivery_confirmation_type=delivery_confirmation_type or None,
        return_service_code=return_service_code or None,
        nonvalidate=nonvalidate,
    )


@mcp.tool()
async def accept_shipment(shipment_digest: str) -> dict[str, Any]:
    """
    Accept a confirmed shipment, returning charges, tracking numbers and base64 label images.

    Args:
        shipment_digest (str): Digest returned by create_shipment. Required.
    """
    return _call("accept_shipment", digest=shipment_digest)


@mcp.tool()
async def void_shipment(shipment_id: str, tracking_numbers: list[str] | None = None) -> dict[str, Any]:
    """
    Void a shipment, or only some of its packages when tracking numbers are given.

    Args:
        shipment_id (str): Shipment identification number. Required.
        tracking_numbers (list[str]): Packages to void. Optional.
    """
    return _call("void_shipment", shipment_id=shipment_id, tracking_numbers=tracking_numbers or [])


@mcp.tool()
async def validate_address(city: str, state: str, postal_code: str, country_code: str = "US") -> dict[str, Any]:
    """
    City/state/postal-code validation. Returns every candidate with rank, quality and postal-code range.
    """
    return _call(
        "validate_address",
        city=city,
        state=state,
        postal_code=postal_code,
        country_code=country_code,
    )


@mcp.tool()
async def validate_address_street(
    address: str,
    city: str,
    state: str,
    postal_code: str,
    country_code: str = "US",
) -> dict[str, Any]:
    """
    Street-level address validation. Returns every candidate address with its numbered address lines.
    """
    return _call(
        "validate_address_street",
        serialize=_street_candidates,
        address=address,
        city=city,
        state=state,
        postal_code=postal_code,
        country_code=country_code,
    )


def main():
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    print("Starting UPS XML MCP Server...", file=sys.stderr)
    _refresh_runtime_configuration()
    try:
        _validate_runtime_configuration()
    except RuntimeError as exc:
        print(str(exc), file=sys.stderr)
        raise SystemExit(1) from exc
    _initialize_carrier()

    try:
        mcp.run(transport='stdio')
    except KeyboardInterrupt:
        pass

if __name__ == "__main__":
    main()
