import logging
import os
from typing import Dict, NamedTuple, Optional, Union

from galaxy.http import DEFAULT_LIMIT, DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)

DEFAULT_API_ENDPOINT = "https://api.playerio.com/api"

_TRUE_VALUES = ("1", "true", "yes", "on")


class ChannelSettings(NamedTuple):
    api_endpoint: str = DEFAULT_API_ENDPOINT
    timeout: float = DEFAULT_TIMEOUT  # total seconds for one request, connect + read.
    connection_limit: int = DEFAULT_LIMIT
    log_sensitive_data: bool = False  # tokens and passwords are never logged unless this is set.

    @staticmethod
    def from_env(environ: Optional[Dict[str, str]] = None) -> "ChannelSettings":
        """Build settings from PLAYERIO_* environment variables, falling back to the defaults for anything not set."""
        env = os.environ if environ is None else environ
        settings = ChannelSettings(
            api_endpoint=env.get("PLAYERIO_API_ENDPOINT", DEFAULT_API_ENDPOINT).rstrip("/"),
            timeout=float(env.get("PLAYERIO_TIMEOUT", DEFAULT_TIMEOUT)),
            connection_limit=int(env.get("PLAYERIO_CONNECTION_LIMIT", DEFAULT_LIMIT)),
            log_sensitive_data=env.get("PLAYERIO_LOG_SENSITIVE_DATA", "").strip().lower() in _TRUE_VALUES,
        )
        logger.debug("Loaded channel settings: %s", settings.to_dict())
        return settings

    def to_dict(self) -> Dict[str, Union[str, float, int, bool]]:
        return {
            "api_endpoint": self.api_endpoint,
            "timeout": self.timeout,
            "connection_limit": self.connection_limit,
            "log_sensitive_data": self.log_sensitive_data,
        }
