"""Subsonic client for searching a music library and queueing it in mpd."""

import logging

__version__ = "0.0.4"

from .api import SubsonicAPI
from .client import SubsonicClient
from .config import SubclConfig
from .exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    MissingParameterError,
    NotFoundError,
    PlayerError,
    ProtocolError,
    SubclArgumentError,
    SubclError,
    TransportError,
    TrialExpiredError,
    UnsupportedOperationError,
    VersionMismatchError,
)
from .models import Entity, EntityKind, SearchCategory
from .player import MpcPlayer
from .urls import UrlBuilder

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Client
    "SubsonicAPI",
    "SubsonicClient",
    "UrlBuilder",
    "MpcPlayer",
    # Models
    "SubclConfig",
    "Entity",
    "EntityKind",
    "SearchCategory",
    # Exceptions
    "SubclError",
    "ConfigurationError",
    "ProtocolError",
    "MissingParameterError",
    "VersionMismatchError",
    "AuthenticationError",
    "AuthorizationError",
    "TrialExpiredError",
    "NotFoundError",
    "TransportError",
    "SubclArgumentError",
    "UnsupportedOperationError",
    "PlayerError",
]
