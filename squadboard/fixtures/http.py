"""Thin requests wrapper used by the upstream clients."""

from __future__ import annotations

import logging
from typing import Any

import requests

from squadboard.errors import UpstreamError

logger = logging.getLogger(__name__)

CONNECT_TIMEOUT_SECONDS = 5
DEFAULT_USER_AGENT = "squadboard/1.0 (+https://example.local)"


def get_json(
    url: str,
    *,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
    timeout: float = 12,
) -> Any:
    """GET *url* and decode the JSON body.

    Transport errors, non-2xx responses and undecodable bodies all raise
    UpstreamError.
    """
    merged_headers = {"User-Agent": DEFAULT_USER_AGENT, "Accept": "application/json"}
    if headers:
        merged_headers.update(headers)

    try:
        response = requests.get(
            url,
            params=params,
            headers=merged_headers,
            timeout=(CONNECT_TIMEOUT_SECONDS, timeout),
        )
    except requests.RequestException as exc:
        raise UpstreamError(f"Request to {url} failed: {exc}") from exc

    if not 200 <= response.status_code < 300:
        logger.error(
            "Upstream non-2xx url=%s status=%s body=%s",
            url,
            response.status_code,
            response.text[:300],
        )
        raise UpstreamError(
            f"Upstream returned {response.status_code}",
            status=response.status_code,
            body=response.text,
        )

    try:
        return response.json()
    except ValueError as exc:
        raise UpstreamError(
            "Upstream returned non-JSON response",
            status=response.status_code,
            body=response.text,
        ) from exc
