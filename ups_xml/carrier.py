from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Any, Callable, Iterable, Sequence

from . import builders, constants, decoders
from .http_client import UPSHTTPClient
from .locations import normalize_location
from .models import (
    AddressValidationResult,
    AddressValidationStreetResult,
    CarrierResponse,
    Location,
    Package,
    RateEstimate,
    ShipAcceptResult,
    ShipConfirmResult,
    TrackingDetail,
    TransitTimeTable,
    VoidResult,
)
from .options import RequestOptions, resolve_options

logger = logging.getLogger(__name__)


class UPSCarrier:
    name = constants.CARRIER_NAME

    def __init__(
        self,
        key: str | None = None,
        login: str | None = None,
        password: str | None = None,
        origin_account: str | None = None,
        options: RequestOptions | None = None,
        http_client: UPSHTTPClient | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        credentials = RequestOptions(key=key, login=login, password=password, origin_account=origin_account)
        self.options = credentials.merged_over(options or RequestOptions())
        self.http_client = http_client or UPSHTTPClient()
        self.clock = clock

    def _resolve(self, call_options: dict[str, Any]) -> RequestOptions:
        return resolve_options(self.options, call_options)

    def _commit(self, action: str, operation_request: str, options: RequestOptions) -> tuple[str, str]:
        base_url = constants.TEST_URL if options.test else constants.LIVE_URL
        url = f"{base_url}/{constants.RESOURCES[action]}"
        body = builders.join_request(builders.build_access_request(options), operation_request)
        logger.info("UPS %s request (test=%s)", action, bool(options.test))
        return body, self.http_client.post(url, body)

    @staticmethod
    def _finish(action: str, body: str, response: CarrierResponse) -> CarrierResponse:
        if not response.success:
            logger.warning("UPS %s failed: %s", action, response.message)
        return replace(response, request=body)

    @staticmethod
    def _require_packages(packages: Package | Sequence[Package]) -> tuple[Package, ...]:
        items = (packages,) if isinstance(packages, Package) else tuple(packages)
        if not items:
            raise ValueError("At least one package is required")
        return items

    def find_rates(
        self,
        origin: Location,
        destination: Location,
        packages: Package | Sequence[Package],
        **options: Any,
    ) -> CarrierResponse[list[RateEstimate]]:
        resolved = self._resolve(options)
        origin, destination = normalize_location(origin), normalize_location(destination)
        items = self._require_packages(packages)
        rate_request = builders.build_rate_request(origin, destination, items, resolved)
        body, response = self._commit("rates", rate_request, resolved)
        decoded = decoders.parse_rate_response(origin, destination, items, response, today=self.clock().date())
        return self._finish("rates", body, decoded)

    def transit_time(
        self,
        origin_postcode: str,
        destination_postcode: str,
        **options: Any,
    ) -> CarrierResponse[TransitTimeTable]:
        resolved = self._resolve(options)
        transit_request = builders.build_transit_time_request(
            origin_postcode, destination_postcode, resolved, now=self.clock(),
        )
        body, response = self._commit("timeintransit", transit_request, resolved)
        return self._finish("timeintransit", body, decoders.parse_transit_time_response(response))

    def find_tracking_info(self, tracking_number: str, **options: Any) -> CarrierResponse[TrackingDetail]:
        resolved = self._resolve(options)
        body, response = self._commit("track", builders.build_tracking_request(tracking_number), resolved)
        return self._finish("track", body, decoders.parse_tracking_response(response))

    def create_shipment(
        self,
        origin: Location,
        destination: Location,
        packages: Package | Sequence[Package],
        **options: Any,
    ) -> CarrierResponse[ShipConfirmResult]:
        resolved = self._resolve(options)
        origin, destination = normalize_location(origin), normalize_location(destination)
        items = self._require_packages(packages)
        confirm_request = builders.build_ship_confirm_request(origin, destination, items, resolved)
        body, response = self._commit("shipconfirm", confirm_request, resolved)
        return self._finish("shipconfirm", body, decoders.parse_ship_confirm_response(response))

    def accept_shipment(self, digest: str, **options: Any) -> CarrierResponse[ShipAcceptResult]:
        resolved = self._resolve(options)
        body, response = self._commit("shipaccept", builders.build_ship_accept_request(digest), resolved)
        return self._finish("shipaccept", body, decoders.parse_ship_accept_response(response))

    def void_shipment(
        self,
        shipment_id: str,
        tracking_numbers: Iterable[str] = (),
        **options: Any,
    ) -> CarrierResponse[VoidResult]:
        resolved = self._resolve(options)
        void_request = builders.build_void_request(shipment_id, list(tracking_numbers))
        body, response = self._commit("shipvoid", void_request, resolved)
        return self._finish("shipvoid", body, decoders.parse_void_response(response))

    def validate_address(
        self,
        city: str,
        state: str,
        postal_code: str,
        country_code: str,
        **options: Any,
    ) -> CarrierResponse[list[AddressValidationResult]]:
        resolved = self._resolve(options)
        request = builders.build_address_validation_request(city, state, postal_code, country_code)
        body, response = self._commit("valid_address", request, resolved)
        return self._finish("valid_address", body, decoders.parse_address_validation_response(response))

    def validate_address_street(
        self,
        address: str,
        city: str,
        state: str,
        postal_code: str,
        country_code: str,
        **options: Any,
    ) -> CarrierResponse[list[AddressValidationStreetResult]]:
        resolved = self._resolve(options)
        request = builders.build_address_validation_street_request(address, city, state, postal_code, country_code)
        body, response = self._commit("valid_address_street", request, resolved)
        return self._finish(
            "valid_address_street", body, decoders.parse_address_validation_street_response(response),
        )
