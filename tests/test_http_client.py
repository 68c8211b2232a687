import unittest
from unittest.mock import Mock, patch

import requests

from ups_xml.errors import UPSTransportError
from ups_xml.http_client import UPSHTTPClient

URL = "https://wwwcie.ups.com/ups.app/xml/Rate"


def make_response(status_code: int, text: str) -> Mock:
    response = Mock()
    response.status_code = status_code
    response.text = text
    response.content = text.encode()
    return response


class UPSHTTPClientTests(unittest.TestCase):
    def setUp(self) -> None:
        self.client = UPSHTTPClient(timeout=12.5)

    @patch("ups_xml.http_client.requests.post")
    def test_success_returns_response_body(self, mock_post: Mock) -> None:
        mock_post.return_value = make_response(200, "<RatingServiceSelectionResponse/>")

        result = self.client.post(URL, "<AccessRequest/><RatingServiceSelectionRequest/>")

        self.assertEqual(result, "<RatingServiceSelectionResponse/>")
        called_args, called_kwargs = mock_post.call_args
        self.assertEqual(called_args[0], URL)
        self.assertEqual(called_kwargs["data"], b"<AccessRequest/><RatingServiceSelectionRequest/>")
        self.assertEqual(called_kwargs["timeout"], 12.5)

    @patch("ups_xml.http_client.requests.post")
    def test_error_status_raises_transport_error(self, mock_post: Mock) -> None:
        mock_post.return_value = make_response(503, "Service Unavailable")

        with self.assertRaises(UPSTransportError) as ctx:
            self.client.post(URL, "<AccessRequest/>")

        self.assertEqual(ctx.exception.status_code, 503)
        self.assertEqual(ctx.exception.url, URL)
        self.assertIn("Service Unavailable", str(ctx.exception))
        payload = ctx.exception.to_payload()
        self.assertEqual(payload["code"], "REQUEST_ERROR")
        self.assertEqual(payload["status_code"], 503)

    @patch("ups_xml.http_client.requests.post")
    def test_request_exception_raises_transport_error(self, mock_post: Mock) -> None:
        mock_post.side_effect = requests.ConnectionError("network down")

        with self.assertRaises(UPSTransportError) as ctx:
            self.client.post(URL, "<AccessRequest/>")

        self.assertIsNone(ctx.exception.status_code)
        self.assertIn("network down", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
