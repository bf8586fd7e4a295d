"""HTTP query executor for the Subsonic REST API (XML responses)."""

import logging
import xml.etree.ElementTree as ET
from typing import Any, Mapping, Optional, Protocol

import httpx

from .config import SubclConfig
from .exceptions import ProtocolError, TransportError
from .urls import UrlBuilder

logger = logging.getLogger(__name__)

RESPONSE_ROOT = "subsonic-response"


class DebugLogger(Protocol):
    """Anything with a logging-style ``debug`` method."""

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None: ...


def _strip_namespaces(root: ET.Element) -> ET.Element:
    # Subsonic declares xmlns="http://subsonic.org/restapi"; drop it so
    # element paths can be written as plain "album/song".
    for element in root.iter():
        if isinstance(element.tag, str) and "}" in element.tag:
            element.tag = element.tag.split("}", 1)[1]
    return root


class SubsonicClient:
    """Synchronous query executor for a Subsonic server.

    Each call to query() is one GET round trip: the request URL carries the
    protocol parameters, credentials go in an HTTP Basic Authorization
    header, and the XML body is parsed and checked for errors.

    Attributes:
        config: SubclConfig with server connection details
        urls: UrlBuilder used to compose request URLs
        client: httpx.Client for HTTP requests

    Example:
        >>> config = SubclConfig.from_mapping({
        ...     "server": "https://music.example.com",
        ...     "username": "john",
        ...     "password": "secret",
        ... })
        >>> with SubsonicClient(config) as client:
        ...     root = client.query("getPlaylists.view")
        ...     print(len(root.findall("playlists/playlist")))
    """

    def __init__(
        self,
        config: SubclConfig,
        http_client: Optional[httpx.Client] = None,
        log: Optional[DebugLogger] = None,
    ):
        """Initialize the query executor.

        Args:
            config: SubclConfig with server URL and credentials
            http_client: Optional pre-configured httpx.Client
            log: Optional debug logger; defaults to this module's logger
        """
        self.config = config
        self.urls = UrlBuilder(config)
        self._log = log if log is not None else logger

        self.client = http_client if http_client is not None else httpx.Client()

    def query(self, endpoint: str, params: Optional[Mapping[str, Any]] = None) -> ET.Element:
        """Execute one request and return the parsed ``subsonic-response`` root.

        Args:
            endpoint: REST endpoint (e.g., "getAlbum.view")
            params: Endpoint-specific query parameters

        Returns:
            Root element of the response document, namespace-free

        Raises:
            ProtocolError: If the response contains an ``error`` element, or
                a 200 response body is not a Subsonic XML document
            TransportError: If the HTTP status is not 200 or no response
                was received
        """
        url = self.urls.build_url(endpoint, params)
        self._log.debug(f"query: {url} (basic auth sent per HTTP header)")

        try:
            response = self.client.get(url, auth=(self.config.username, self.config.password))
        except httpx.RequestError as e:
            raise TransportError(f"Request to {endpoint} failed: {e}") from e

        self._log.debug(f"response: {response.text}")

        root = self._parse(response)

        if root is not None:
            error = root.find("error")
            if error is not None:
                raw_code = error.get("code", "")
                raise ProtocolError.from_code(
                    int(raw_code) if raw_code.isdigit() else 0,
                    error.get("message", "Unknown error"),
                )

        if response.status_code != 200:
            raise TransportError.from_status(response.status_code)

        if root is None:
            raise ProtocolError(0, f"Malformed response from {endpoint}")

        return root

    def _parse(self, response: httpx.Response) -> Optional[ET.Element]:
        """Parse the response body, or None when it is not a Subsonic document."""
        try:
            root = _strip_namespaces(ET.fromstring(response.content))
        except ET.ParseError as e:
            self._log.debug(f"unparseable response body: {e}")
            return None

        if root.tag != RESPONSE_ROOT:
            return None
        return root

    def ping(self) -> bool:
        """Test server connectivity and credentials.

        Returns:
            True if the ping succeeded

        Raises:
            ProtocolError: If the server rejected the request
            TransportError: For HTTP or network errors
        """
        self.query("ping.view")
        return True

    def close(self):
        """Close the HTTP client and release its connections."""
        self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
