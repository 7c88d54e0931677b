"""Server-side fetch of the TopStrike fixtures feed (the browser hits CORS)."""

from __future__ import annotations

import logging
import os
from typing import Any

from squadboard.fixtures.http import get_json
from squadboard.settings import Settings, load_settings

logger = logging.getLogger(__name__)
TOPSTRIKE_FIXTURES_URL = os.getenv(
    "TOPSTRIKE_FIXTURES_URL", "https://play.topstrike.io/api/fapi-server/fixtures"
)
BROWSER_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
PROXY_CACHE_CONTROL = "public, s-maxage=300, stale-while-revalidate=600"


def build_headers(settings: Settings) -> dict[str, str]:
    headers = {
        "User-Agent": BROWSER_USER_AGENT,
        "Accept": "application/json, text/plain, */*",
        "Accept-Language": "en-US,en;q=0.9",
        "Origin": "https://play.topstrike.io",
        "Referer": "https://play.topstrike.io/",
        "Sec-Fetch-Dest": "empty",
        "Sec-Fetch-Mode": "cors",
        "Sec-Fetch-Site": "same-origin",
    }
    if settings.topstrike_cookies:
        headers["Cookie"] = settings.topstrike_cookies
    return headers


def fetch_topstrike_fixtures(settings: Settings | None = None) -> Any:
    """Return the raw fixtures JSON. Raises UpstreamError on failure."""
    settings = settings or load_settings()
    logger.info("Fetching TopStrike fixtures (authenticated=%s)", bool(settings.topstrike_cookies))
    return get_json(
        TOPSTRIKE_FIXTURES_URL,
        headers=build_headers(settings),
        timeout=settings.http_timeout_seconds,
    )
