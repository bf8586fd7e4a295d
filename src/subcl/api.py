"""High-level Subsonic operations: resolvers, search and lookups.

Every operation is a sequence of independent, synchronous round trips made
through SubsonicClient.query(). Nothing is cached between calls.
"""

import logging
from typing import Callable, Dict, Iterable, List, Optional, Union

import httpx

from .client import DebugLogger, SubsonicClient
from .config import SubclConfig
from .exceptions import SubclArgumentError, UnsupportedOperationError
from .models import Entity, EntityKind, SearchCategory
from .normalize import EntityNormalizer

logger = logging.getLogger(__name__)

# Order in which search3 result categories are returned
SEARCH_RESULT_ORDER = (EntityKind.ARTIST, EntityKind.ALBUM, EntityKind.SONG)

PLAYLIST_FIELDS = ("id", "name", "owner")

_SEARCH_COUNT_PARAMS = {
    EntityKind.SONG: "songCount",
    EntityKind.ALBUM: "albumCount",
    EntityKind.ARTIST: "artistCount",
}


class SubsonicAPI:
    """Subsonic operations returning flat, ordered lists of entities.

    Example:
        >>> config = SubclConfig.from_environment()
        >>> with SubsonicAPI(config) as api:
        ...     albums = api.search("abbey road", "album")
        ...     for song in api.expand_to_songs(albums):
        ...         print(song["title"], song.stream_url)
    """

    def __init__(
        self,
        config: SubclConfig,
        http_client: Optional[httpx.Client] = None,
        log: Optional[DebugLogger] = None,
    ):
        self.config = config
        self.client = SubsonicClient(config, http_client=http_client, log=log)
        self.urls = self.client.urls
        self.normalizer = EntityNormalizer(self.urls)

        self._expanders: Dict[EntityKind, Callable[[str], List[Entity]]] = {
            EntityKind.ALBUM: self.album_songs,
            EntityKind.ARTIST: self.artist_songs,
            EntityKind.PLAYLIST: self.playlist_songs,
        }

    def close(self):
        self.client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    # ------------------------------------------------------------------
    # Resolvers
    # ------------------------------------------------------------------

    def expand_to_songs(self, entities: Iterable[Entity]) -> List[Entity]:
        """Expand a mixed list of entities into songs, preserving order.

        Songs pass through unchanged; albums, artists and playlists are
        replaced in place by their songs.

        Raises:
            UnsupportedOperationError: If an entity has any other kind
        """
        songs: List[Entity] = []
        for entity in entities:
            if entity.kind == EntityKind.SONG:
                songs.append(entity)
                continue

            expand = self._expanders.get(entity.kind)
            if expand is None:
                raise UnsupportedOperationError(f"Cannot get songs for '{entity.kind}'")
            songs.extend(expand(entity.id))

        return songs

    get_songs = expand_to_songs

    def album_songs(self, album_id: str) -> List[Entity]:
        """Songs of an album, in album order."""
        root = self.client.query("getAlbum.view", {"id": album_id})
        return self.normalizer.songs(root, "album/song")

    def artist_songs(self, artist_id: str) -> List[Entity]:
        """Songs of every album of an artist, album by album.

        Issues one getArtist request plus one getAlbum request per album.
        """
        root = self.client.query("getArtist.view", {"id": artist_id})
        songs: List[Entity] = []
        for album in root.findall("artist/album"):
            songs.extend(self.album_songs(album.get("id")))
        logger.debug(f"Resolved {len(songs)} songs for artist {artist_id}")
        return songs

    def playlist_songs(self, playlist_id: str) -> List[Entity]:
        """Entries of a playlist, in playlist order."""
        root = self.client.query("getPlaylist.view", {"id": playlist_id})
        return self.normalizer.songs(root, "playlist/entry")

    # ------------------------------------------------------------------
    # Playlists
    # ------------------------------------------------------------------

    def all_playlists(self) -> List[Entity]:
        """Every playlist visible to the user (id, name and owner only)."""
        root = self.client.query("getPlaylists.view")
        playlists = []
        for element in root.findall("playlists/playlist"):
            attrs = {key: element.get(key) for key in PLAYLIST_FIELDS if key in element.attrib}
            playlists.append(self.normalizer.normalize_generic(attrs, EntityKind.PLAYLIST))
        return playlists

    def find_playlists(self, name: str) -> List[Entity]:
        """Playlists whose name contains ``name``, ignoring case.

        The server has no playlist search, so this lists all playlists and
        filters them locally; cost grows with the total playlist count.
        """
        needle = name.lower()
        return [
            playlist
            for playlist in self.all_playlists()
            if needle in (playlist.name or "").lower()
        ]

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def search(self, term: str, category: Union[SearchCategory, str]) -> List[Entity]:
        """Search the library for ``term``.

        Args:
            term: Search string
            category: One of song, album, artist, playlist or any

        Returns:
            Matches of the requested category. For ``any``: artists, then
            albums, then songs, then matching playlists.

        Raises:
            UnsupportedOperationError: If the category is not supported
        """
        try:
            category = SearchCategory(category)
        except ValueError:
            raise UnsupportedOperationError(f"Cannot search for type '{category}'")

        if category == SearchCategory.PLAYLIST:
            return self.find_playlists(term)

        max_results = self.config.max_search_results
        params = {"query": term, "songCount": 0, "albumCount": 0, "artistCount": 0}
        if category == SearchCategory.ANY:
            for count_param in _SEARCH_COUNT_PARAMS.values():
                params[count_param] = max_results
        else:
            params[_SEARCH_COUNT_PARAMS[EntityKind(category.value)]] = max_results

        root = self.client.query("search3.view", params)

        results: List[Entity] = []
        for kind in SEARCH_RESULT_ORDER:
            for element in root.findall(f"searchResult3/{kind.value}"):
                if kind == EntityKind.SONG:
                    attrs = dict(element.attrib)
                    if "title" in attrs:
                        attrs["name"] = attrs["title"]
                    results.append(self.normalizer.normalize_song(attrs))
                else:
                    results.append(self.normalizer.normalize_generic(element, kind))

        if category == SearchCategory.ANY:
            results.extend(self.find_playlists(term))

        logger.debug(f"Search for '{term}' ({category.value}) returned {len(results)} results")
        return results

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def album_list(self, list_type: str = "random") -> List[Entity]:
        """Albums of a server-defined list type (random, newest, frequent, ...)."""
        root = self.client.query("getAlbumList2.view", {"type": list_type})
        return self.normalizer.entities(root, "albumList2/album", EntityKind.ALBUM)

    def random_songs(self, count: Optional[Union[int, str]] = None) -> List[Entity]:
        """Random songs; ``count`` defaults to the configured random song count.

        Raises:
            SubclArgumentError: If ``count`` is not an integer
        """
        if count is None:
            count = self.config.random_song_count
        try:
            count = int(count)
        except (TypeError, ValueError):
            raise SubclArgumentError(f"invalid song count: {count!r}")

        root = self.client.query("getRandomSongs.view", {"size": count})
        return self.normalizer.songs(root, "randomSongs/song")

    def song_info(self, song_id: str) -> Optional[Entity]:
        """Raw metadata of one song, without a stream URL, or None if absent."""
        root = self.client.query("getSong.view", {"id": song_id})
        song = root.find("song")
        if song is None:
            return None
        return self.normalizer.normalize_generic(song, EntityKind.SONG)

    def stream_url(self, song_id: str) -> str:
        """Credential-embedded stream URL for a song id."""
        return self.urls.stream_url(song_id)

    def album_art_url(self, stream_url: str, size: Optional[int] = None) -> str:
        """Credential-embedded cover art URL for the song behind ``stream_url``."""
        return self.urls.album_art_url(stream_url, size)
