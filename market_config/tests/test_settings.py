import logging
import os
import unittest
from unittest import mock

from market_config.log_setup import configure_logging
from market_config.settings import MarketSettings, get_settings


class SettingsTests(unittest.TestCase):
    def test_defaults(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=True):
            settings = MarketSettings(_env_file=None)
        self.assertEqual(settings.paid_message_retention_days, 90)
        self.assertEqual(settings.max_paid_message_size, 524_288)
        self.assertEqual(settings.max_free_message_size, 24_000)
        self.assertEqual(settings.log_level, "INFO")

    def test_environment_overrides(self) -> None:
        env = {"PAID_MESSAGE_RETENTION_DAYS": "7", "MAX_FREE_MESSAGE_SIZE": "1000"}
        with mock.patch.dict(os.environ, env, clear=True):
            settings = MarketSettings(_env_file=None)
        self.assertEqual(settings.paid_message_retention_days, 7)
        self.assertEqual(settings.max_free_message_size, 1000)

    def test_retention_must_be_positive(self) -> None:
        with mock.patch.dict(os.environ, {"PAID_MESSAGE_RETENTION_DAYS": "0"}, clear=True):
            with self.assertRaises(ValueError):
                MarketSettings(_env_file=None)

    def test_get_settings_is_cached(self) -> None:
        self.assertIs(get_settings(), get_settings())


class LoggingSetupTests(unittest.TestCase):
    def test_unknown_level_rejected(self) -> None:
        with self.assertRaises(ValueError):
            configure_logging("CHATTY")

    def test_level_applied(self) -> None:
        root = logging.getLogger()
        previous = root.level
        try:
            configure_logging("debug")
            self.assertEqual(root.level, logging.DEBUG)
        finally:
            root.setLevel(previous)


if __name__ == "__main__":
    unittest.main()
