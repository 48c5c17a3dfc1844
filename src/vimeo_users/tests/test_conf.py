import os
from unittest import TestCase
from unittest.mock import patch

from vimeo_users.conf import (
    DEFAULT_API_ROOT,
    ClientConfig,
    config,
    get_logging_config,
    setup_logging,
)

VIMEO_VARS = [
    "VIMEO_API_ROOT",
    "VIMEO_ACCESS_TOKEN",
    "VIMEO_API_VERSION",
    "VIMEO_REQUEST_TIMEOUT",
    "VIMEO_USER_AGENT",
]


class ConfigTests(TestCase):
    @patch.dict(os.environ, {"SOME_NUMBER": "12", "SOME_FLAG": "true"})
    def test_cast_from_default(self):
        self.assertEqual(config("SOME_NUMBER", default=1), 12)
        self.assertIs(config("SOME_FLAG", default=False), True)

    def test_default(self):
        self.assertEqual(config("SURELY_NOT_SET_ANYWHERE", default="x"), "x")

    def test_from_env_defaults(self):
        environ = {key: value for key, value in os.environ.items() if key not in VIMEO_VARS}
        with patch.dict(os.environ, environ, clear=True):
            client_config = ClientConfig.from_env()

        self.assertEqual(client_config, ClientConfig())
        self.assertEqual(client_config.api_root, DEFAULT_API_ROOT)

    @patch.dict(os.environ, {"VIMEO_API_VERSION": "3.2", "VIMEO_USER_AGENT": "tests"})
    def test_from_env(self):
        client_config = ClientConfig.from_env()

        self.assertEqual(client_config.api_version, "3.2")
        self.assertEqual(client_config.user_agent, "tests")

    def test_headers(self):
        headers = ClientConfig(access_token="t").headers

        self.assertEqual(
            headers,
            {
                "Accept": "application/vnd.vimeo.*+json;version=3.4",
                "User-Agent": "vimeo-users",
                "Authorization": "bearer t",
            },
        )

    def test_config_is_immutable(self):
        client_config = ClientConfig()

        with self.assertRaises(AttributeError):
            client_config.access_token = "changed"


class LoggingConfigTests(TestCase):
    def test_null_handler_by_default(self):
        logging_config = get_logging_config(log_level="INFO", log_stdout=False)

        logger = logging_config["loggers"]["vimeo_users"]
        self.assertEqual(logger["handlers"], ["null"])
        self.assertEqual(logger["level"], "INFO")

    def test_stdout(self):
        logging_config = get_logging_config(log_level="DEBUG", log_stdout=True)

        logger = logging_config["loggers"]["vimeo_users"]
        self.assertEqual(logger["handlers"], ["console"])
        self.assertEqual(logger["level"], "DEBUG")

    @patch.dict(os.environ, {"LOG_LEVEL": "WARNING", "LOG_STDOUT": "1"})
    def test_from_env(self):
        logging_config = get_logging_config()

        logger = logging_config["loggers"]["vimeo_users"]
        self.assertEqual(logger["level"], "WARNING")
        self.assertEqual(logger["handlers"], ["console"])

    @patch("vimeo_users.conf.logging.config.dictConfig")
    def test_setup_logging(self, m_dict_config):
        setup_logging({"version": 1})

        m_dict_config.assert_called_once_with({"version": 1})
