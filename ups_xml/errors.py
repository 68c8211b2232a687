"""Error kinds raised by the adapter.

Carrier-reported failures are returned as values (see ``CarrierResponse``);
the exceptions here cover the transport, malformed responses, and
``CarrierResponse.unwrap()`` on a failed response.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .models import CarrierError


class UPSError(Exception):
    code = "UPS_ERROR"

    def to_payload(self) -> dict[str, Any]:
        return {"code": self.code, "message": str(self)}


class UPSTransportError(UPSError):
    code = "REQUEST_ERROR"

    def __init__(self, url: str, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code

    def to_payload(self) -> dict[str, Any]:
        payload = super().to_payload()
        payload["url"] = self.url
        if self.status_code is not None:
            payload["status_code"] = self.status_code
        return payload


class UPSDecodeError(UPSError):
    code = "DECODE_ERROR"

    def __init__(self, operation: str, message: str) -> None:
        super().__init__(f"{operation}: {message}")
        self.operation = operation


class UPSCarrierError(UPSError):
    code = "CARRIER_ERROR"

    def __init__(self, error: CarrierError) -> None:
        super().__init__(error.error_description or error.status or "UPS reported a failure")
        self.error = error

    def to_payload(self) -> dict[str, Any]:
        payload = super().to_payload()
        payload["error_code"] = self.error.error_code
        payload["error_severity"] = self.error.error_severity
        return payload
