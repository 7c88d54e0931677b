from __future__ import annotations

import logging
import os
import unittest
from unittest.mock import patch

from squadboard.log_buffer import BufferHandler
from squadboard.settings import DEFAULT_DATABASE_URL, load_settings


class SettingsTests(unittest.TestCase):
    def test_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            settings = load_settings()

        self.assertIsNone(settings.football_data_api_key)
        self.assertEqual(DEFAULT_DATABASE_URL, settings.database_url)
        self.assertEqual(120, settings.football_data_cache_seconds)
        self.assertEqual(300, settings.api_football_cache_seconds)
        self.assertEqual(12.0, settings.http_timeout_seconds)

    def test_reads_keys_and_falls_back_on_bad_numbers(self) -> None:
        env = {
            "FOOTBALL_DATA_API_KEY": " fd-key ",
            "API_FOOTBALL_KEY": "",
            "FOOTBALL_DATA_CACHE_SECONDS": "abc",
            "API_FOOTBALL_CACHE_SECONDS": "-5",
            "HTTP_TIMEOUT_SECONDS": "2.5",
        }
        with patch.dict(os.environ, env, clear=True):
            with self.assertLogs("squadboard.settings", level="WARNING"):
                settings = load_settings()

        self.assertEqual("fd-key", settings.football_data_api_key)
        self.assertIsNone(settings.api_football_key)
        self.assertEqual(120, settings.football_data_cache_seconds)
        self.assertEqual(300, settings.api_football_cache_seconds)
        self.assertEqual(2.5, settings.http_timeout_seconds)


class BufferHandlerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.handler = BufferHandler(maxlen=3)
        self.handler.setFormatter(logging.Formatter("%(message)s"))
        self.logger = logging.getLogger("squadboard.tests.buffer")
        self.logger.setLevel(logging.INFO)
        self.logger.propagate = False
        self.logger.addHandler(self.handler)

    def tearDown(self) -> None:
        self.logger.removeHandler(self.handler)

    def test_newest_first_and_bounded(self) -> None:
        for index in range(5):
            self.logger.info("message %s", index)

        entries = self.handler.entries()

        self.assertEqual(["message 4", "message 3", "message 2"], [e["message"] for e in entries])
        self.assertEqual(["message 4"], [e["message"] for e in self.handler.entries(limit=1)])

    def test_min_level_filters(self) -> None:
        self.logger.info("fine")
        self.logger.warning("careful")

        entries = self.handler.entries(min_level="warning")

        self.assertEqual(["careful"], [e["message"] for e in entries])
        self.assertEqual("WARNING", entries[0]["level"])

    def test_clear(self) -> None:
        self.logger.info("fine")
        self.handler.clear()
        self.assertEqual([], self.handler.entries())


if __name__ == "__main__":
    unittest.main()
