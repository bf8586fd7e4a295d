"""Client configuration.

Settings are validated once, at construction, and never change afterwards.
"""

import os
from dataclasses import dataclass
from typing import Any, Mapping

from .exceptions import ConfigurationError

REQUIRED_SETTINGS = ("server", "username", "password")

DEFAULT_APP_NAME = "subcl"
DEFAULT_APP_VERSION = "0.0.4"
DEFAULT_PROTOCOL_VERSION = "1.9.0"
DEFAULT_MAX_SEARCH_RESULTS = 20
DEFAULT_RANDOM_SONG_COUNT = 10


@dataclass(frozen=True)
class SubclConfig:
    """Connection and behaviour settings for a Subsonic server.

    Attributes:
        server: Base server URL (e.g., "https://music.example.com")
        username: Subsonic username
        password: Subsonic password, sent as HTTP Basic auth and embedded
            in stream and cover art URLs
        app_name: Client identifier sent as the ``c`` parameter
        app_version: Version of this client application
        protocol_version: Subsonic REST protocol version sent as ``v``
        max_search_results: Per-category result limit for searches
        random_song_count: Default number of songs for random song requests
    """

    server: str
    username: str
    password: str
    app_name: str = DEFAULT_APP_NAME
    app_version: str = DEFAULT_APP_VERSION
    protocol_version: str = DEFAULT_PROTOCOL_VERSION
    max_search_results: int = DEFAULT_MAX_SEARCH_RESULTS
    random_song_count: int = DEFAULT_RANDOM_SONG_COUNT

    def __post_init__(self):
        """Validate configuration on initialization."""
        for setting in REQUIRED_SETTINGS:
            if not getattr(self, setting):
                raise ConfigurationError(f"Missing setting '{setting}'")

        for key in ("max_search_results", "random_song_count"):
            value = getattr(self, key)
            try:
                object.__setattr__(self, key, int(value))
            except (TypeError, ValueError):
                raise ConfigurationError(f"Setting '{key}' must be an integer, got {value!r}")

    @classmethod
    def from_mapping(cls, settings: Mapping[str, Any]) -> "SubclConfig":
        """Build a configuration from a settings mapping.

        Caller-supplied values take precedence; defaults only fill the gaps.
        Keys that are not configuration fields are ignored.

        Args:
            settings: Mapping with at least ``server``, ``username`` and
                ``password``

        Returns:
            SubclConfig: Validated configuration

        Raises:
            ConfigurationError: If a required setting is missing, or a count
                setting is not an integer
        """
        for setting in REQUIRED_SETTINGS:
            if not settings.get(setting):
                raise ConfigurationError(f"Missing setting '{setting}'")

        values = {
            key: settings[key]
            for key in cls.__dataclass_fields__
            if settings.get(key) is not None
        }

        return cls(**values)

    @classmethod
    def from_environment(cls) -> "SubclConfig":
        """Load configuration from environment variables (NO .env files).

        Reads SUBSONIC_URL, SUBSONIC_USER and SUBSONIC_PASSWORD, plus the
        optional SUBCL_MAX_SEARCH_RESULTS and SUBCL_RANDOM_SONG_COUNT.

        Raises:
            ConfigurationError: If a required variable is missing
        """
        return cls.from_mapping(
            {
                "server": os.getenv("SUBSONIC_URL"),
                "username": os.getenv("SUBSONIC_USER"),
                "password": os.getenv("SUBSONIC_PASSWORD"),
                "max_search_results": os.getenv("SUBCL_MAX_SEARCH_RESULTS"),
                "random_song_count": os.getenv("SUBCL_RANDOM_SONG_COUNT"),
            }
        )
