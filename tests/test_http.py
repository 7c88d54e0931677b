from __future__ import annotations

import unittest
from unittest.mock import patch

import requests

from squadboard.errors import UpstreamError
from squadboard.fixtures.http import get_json


class _FakeResponse:
    def __init__(self, status_code: int, payload=None, text: str | None = None):
        self.status_code = status_code
        self._payload = payload
        self.text = text if text is not None else str(payload)

    def json(self):
        if self._payload is None:
            raise ValueError("no json")
        return self._payload


class GetJsonTests(unittest.TestCase):
    def test_returns_decoded_body(self) -> None:
        with patch("squadboard.fixtures.http.requests.get", return_value=_FakeResponse(200, {"ok": 1})):
            self.assertEqual({"ok": 1}, get_json("https://api.example/x"))

    def test_redirect_status_is_an_upstream_error(self) -> None:
        response = _FakeResponse(302, {"moved": True})
        with patch("squadboard.fixtures.http.requests.get", return_value=response):
            with self.assertLogs("squadboard.fixtures.http", level="ERROR"):
                with self.assertRaises(UpstreamError) as ctx:
                    get_json("https://api.example/x")

        self.assertEqual(302, ctx.exception.status)

    def test_client_error_keeps_truncated_body(self) -> None:
        response = _FakeResponse(429, text="x" * 1000)
        with patch("squadboard.fixtures.http.requests.get", return_value=response):
            with self.assertLogs("squadboard.fixtures.http", level="ERROR"):
                with self.assertRaises(UpstreamError) as ctx:
                    get_json("https://api.example/x")

        self.assertEqual(429, ctx.exception.status)
        self.assertLess(len(ctx.exception.body), 1000)

    def test_transport_error_is_wrapped(self) -> None:
        with patch(
            "squadboard.fixtures.http.requests.get",
            side_effect=requests.ConnectionError("refused"),
        ):
            with self.assertRaises(UpstreamError):
                get_json("https://api.example/x")

    def test_non_json_body_is_an_upstream_error(self) -> None:
        with patch("squadboard.fixtures.http.requests.get", return_value=_FakeResponse(200, text="<html>")):
            with self.assertRaises(UpstreamError):
                get_json("https://api.example/x")


if __name__ == "__main__":
    unittest.main()
