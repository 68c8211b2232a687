from __future__ import annotations

import logging

import requests

from .errors import UPSTransportError

logger = logging.getLogger(__name__)


class UPSHTTPClient:
    """Posts XML request bodies to UPS and returns the raw response body."""

    def __init__(self, timeout: float = 30.0) -> None:
        self.timeout = timeout

    def post(self, url: str, body: str) -> str:
        logger.debug("POST %s (%d bytes)", url, len(body))
        try:
            response = requests.post(
                url,
                data=body.encode("utf-8"),
                headers={"Content-Type": "application/x-www-form-urlencoded"},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.warning("UPS request to %s failed: %s", url, exc)
            raise UPSTransportError(url, str(exc)) from exc

        if not 200 <= response.status_code < 300:
            logger.warning("UPS returned HTTP %s for %s", response.status_code, url)
            raise UPSTransportError(
                url,
                _extract_error_message(response),
                status_code=response.status_code,
            )
        return response.text


def _extract_error_message(response: requests.Response) -> str:
    text = (response.text or "").strip()
    if text:
        return f"UPS API returned HTTP {response.status_code}: {text[:200]}"
    return f"UPS API returned HTTP {response.status_code}"
