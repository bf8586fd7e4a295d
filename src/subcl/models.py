"""Data models for Subsonic entities."""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional


class EntityKind(str, Enum):
    """Kind tag carried by every entity."""

    SONG = "song"
    ALBUM = "album"
    ARTIST = "artist"
    PLAYLIST = "playlist"


class SearchCategory(str, Enum):
    """Categories accepted by SubsonicAPI.search()."""

    SONG = "song"
    ALBUM = "album"
    ARTIST = "artist"
    PLAYLIST = "playlist"
    ANY = "any"


@dataclass(frozen=True)
class Entity:
    """One song, album, artist or playlist as returned by the server.

    The payload is the raw attribute map of the XML element it was parsed
    from. Entities are immutable values; two entities are the same thing
    when kind and id match.

    Attributes:
        kind: Entity kind tag
        attributes: Read-only mapping of XML attribute name to value
        stream_url: Credential-embedded stream URL (songs only)
    """

    kind: EntityKind
    attributes: Mapping[str, str] = field(default_factory=dict)
    stream_url: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    def __reduce__(self):
        return (self.__class__, (self.kind, dict(self.attributes), self.stream_url))

    def __hash__(self) -> int:
        return hash((self.kind, self.id))

    def __getitem__(self, key: str) -> str:
        return self.attributes[key]

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.attributes.get(key, default)

    @property
    def id(self) -> Optional[str]:
        return self.attributes.get("id")

    @property
    def name(self) -> Optional[str]:
        return self.attributes.get("name")

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict view with the ``type`` tag and ``streamUrl`` if set."""
        data: Dict[str, Any] = dict(self.attributes)
        data["type"] = self.kind.value
        if self.stream_url is not None:
            data["streamUrl"] = self.stream_url
        return data
