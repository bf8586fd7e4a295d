"""Request URL construction for the Subsonic REST API."""

from typing import Any, Mapping, Optional

import httpx

from .config import SubclConfig
from .exceptions import SubclArgumentError

STREAM_ENDPOINT = "stream.view"
COVER_ART_ENDPOINT = "getCoverArt.view"


class UrlBuilder:
    """Builds ``{server}/rest/{endpoint}`` URLs with protocol parameters.

    Every URL carries the protocol version (``v``) and the client name
    (``c``). Credentials are never put in the query string; only stream and
    cover art URLs, which are handed to an external player that cannot send
    an Authorization header, carry them as URL user-info.
    """

    def __init__(self, config: SubclConfig):
        self.config = config
        self._base_url = config.server.rstrip("/")

    def build_url(self, endpoint: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """Compose the request URL for ``endpoint``.

        Args:
            endpoint: REST endpoint (e.g., "getAlbum.view")
            params: Endpoint-specific parameters; the mapping is not modified

        Returns:
            Full URL with URL-encoded query string
        """
        query = {key: str(value) for key, value in (params or {}).items()}
        query["v"] = self.config.protocol_version
        query["c"] = self.config.app_name
        return str(httpx.URL(f"{self._base_url}/rest/{endpoint}", params=query))

    def embed_credentials(self, url: str) -> str:
        """Return ``url`` with username and password as URL user-info."""
        return str(
            httpx.URL(url).copy_with(
                username=self.config.username,
                password=self.config.password,
            )
        )

    def stream_url(self, song_id: Optional[str]) -> str:
        """Credential-embedded stream URL for a song.

        Raises:
            SubclArgumentError: If ``song_id`` is empty
        """
        if not song_id:
            raise SubclArgumentError("no song id")
        return self.embed_credentials(self.build_url(STREAM_ENDPOINT, {"id": song_id}))

    def album_art_url(self, stream_url: str, size: Optional[int] = None) -> str:
        """Credential-embedded cover art URL for the song behind ``stream_url``.

        The song id is taken from the ``id`` query parameter of a stream URL
        previously built by stream_url().

        Raises:
            SubclArgumentError: If ``stream_url`` is empty or has no ``id``
        """
        if not stream_url:
            raise SubclArgumentError("no stream url")

        song_id = httpx.URL(stream_url).params.get("id")
        if not song_id:
            raise SubclArgumentError(f"stream url has no id parameter: {stream_url}")

        params = {"id": song_id}
        if size is not None:
            params["size"] = size
        return self.embed_credentials(self.build_url(COVER_ART_ENDPOINT, params))
