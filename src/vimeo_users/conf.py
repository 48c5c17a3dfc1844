"""
Configuration and logging setup.

Settings are pulled from the environment (or a ``.env`` file) with
python-decouple.
"""

import logging
import logging.config
from dataclasses import dataclass

from decouple import config as _config, undefined

DEFAULT_API_ROOT = "https://api.vimeo.com/"
DEFAULT_API_VERSION = "3.4"
DEFAULT_TIMEOUT = 10


def config(option: str, default=undefined, *args, **kwargs):
    """
    Pull a config parameter from the environment.

    Read the config variable ``option``. If it's optional, use the ``default`` value.
    Input is automatically cast to the correct type, where the type is derived from the
    default value if possible.
    """
    if default is not undefined and default is not None:
        kwargs.setdefault("cast", type(default))
    return _config(option, default=default, *args, **kwargs)


@dataclass(frozen=True)
class ClientConfig:
    api_root: str = DEFAULT_API_ROOT
    access_token: str = ""
    api_version: str = DEFAULT_API_VERSION
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = "vimeo-users"

    @classmethod
    def from_env(cls) -> "ClientConfig":
        return cls(
            api_root=config("VIMEO_API_ROOT", default=DEFAULT_API_ROOT),
            access_token=config("VIMEO_ACCESS_TOKEN", default=""),
            api_version=config("VIMEO_API_VERSION", default=DEFAULT_API_VERSION),
            timeout=config("VIMEO_REQUEST_TIMEOUT", default=float(DEFAULT_TIMEOUT)),
            user_agent=config("VIMEO_USER_AGENT", default="vimeo-users"),
        )

    @property
    def accept(self) -> str:
        return f"application/vnd.vimeo.*+json;version={self.api_version}"

    @property
    def headers(self) -> dict:
        headers = {"Accept": self.accept, "User-Agent": self.user_agent}
        if self.access_token:
            headers["Authorization"] = f"bearer {self.access_token}"
        return headers


#
# LOGGING
#
def get_logging_config(
    log_level: str | None = None, log_stdout: bool | None = None
) -> dict:
    if log_level is None:
        log_level = config("LOG_LEVEL", default="INFO")
    if log_stdout is None:
        log_stdout = config("LOG_STDOUT", default=False)

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "verbose": {
                "format": "%(asctime)s %(levelname)s %(name)s %(module)s %(process)d %(thread)d  %(message)s"
            },
            "timestamped": {"format": "%(asctime)s %(levelname)s %(name)s  %(message)s"},
            "simple": {"format": "%(levelname)s  %(message)s"},
        },
        "handlers": {
            "null": {"level": "DEBUG", "class": "logging.NullHandler"},
            "console": {
                "level": "DEBUG",
                "class": "logging.StreamHandler",
                "formatter": "timestamped",
            },
        },
        "loggers": {
            "vimeo_users": {
                "handlers": ["console"] if log_stdout else ["null"],
                "level": log_level,
                "propagate": True,
            },
        },
    }


def setup_logging(logging_config: dict | None = None) -> None:
    logging.config.dictConfig(logging_config or get_logging_config())
