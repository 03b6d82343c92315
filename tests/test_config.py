import os
import unittest
from unittest.mock import patch

from tickerquote.core.config import MatchMode, get_settings
from tickerquote.core.errors import ConfigurationError


class TestSettings(unittest.TestCase):
    def setUp(self):
        get_settings.cache_clear()

    def tearDown(self):
        get_settings.cache_clear()

    def test_missing_api_key_is_a_configuration_error(self):
        with patch.dict(os.environ, {}, clear=True):
            with self.assertRaises(ConfigurationError) as ctx:
                get_settings()

        self.assertIn("PMP_KEY", str(ctx.exception))

    def test_empty_api_key_is_a_configuration_error(self):
        with patch.dict(os.environ, {"PMP_KEY": ""}, clear=True):
            with self.assertRaises(ConfigurationError):
                get_settings()

    def test_defaults(self):
        with patch.dict(os.environ, {"PMP_KEY": "secret"}, clear=True):
            settings = get_settings()

        self.assertEqual(settings.PMP_KEY, "secret")
        self.assertEqual(settings.FMP_BASE_URL, "https://financialmodelingprep.com/api/v3")
        self.assertEqual(settings.QUOTE_MATCH_MODE, MatchMode.STRICT)
        self.assertEqual(settings.LOG_LEVEL, "WARNING")

    def test_overrides_from_env(self):
        env = {
            "PMP_KEY": "secret",
            "FMP_BASE_URL": "https://example.test/api",
            "QUOTE_MATCH_MODE": "set",
            "LOG_LEVEL": "DEBUG",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = get_settings()

        self.assertEqual(settings.FMP_BASE_URL, "https://example.test/api")
        self.assertEqual(settings.QUOTE_MATCH_MODE, MatchMode.SET)
        self.assertEqual(settings.LOG_LEVEL, "DEBUG")

    def test_invalid_match_mode_names_the_field(self):
        env = {"PMP_KEY": "secret", "QUOTE_MATCH_MODE": "fuzzy"}
        with patch.dict(os.environ, env, clear=True):
            with self.assertRaises(ConfigurationError) as ctx:
                get_settings()

        self.assertIn("QUOTE_MATCH_MODE", str(ctx.exception))

    def test_settings_are_cached(self):
        with patch.dict(os.environ, {"PMP_KEY": "secret"}, clear=True):
            self.assertIs(get_settings(), get_settings())


if __name__ == "__main__":
    unittest.main()
