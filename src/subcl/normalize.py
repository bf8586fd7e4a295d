"""Conversion of XML elements into tagged entities."""

import xml.etree.ElementTree as ET
from typing import List, Mapping, Union

from .exceptions import SubclArgumentError
from .models import Entity, EntityKind
from .urls import UrlBuilder

Attributes = Union[Mapping[str, str], ET.Element]


def _attributes(source: Attributes) -> Mapping[str, str]:
    if isinstance(source, ET.Element):
        return source.attrib
    return source


class EntityNormalizer:
    """Turns raw attribute maps from any XML element shape into entities."""

    def __init__(self, urls: UrlBuilder):
        self.urls = urls

    def normalize_song(self, attrs: Attributes) -> Entity:
        """Tag ``attrs`` as a song and derive its stream URL.

        Raises:
            SubclArgumentError: If the attributes carry no ``id``
        """
        attrs = _attributes(attrs)
        song_id = attrs.get("id")
        if not song_id:
            raise SubclArgumentError("no song id")
        return Entity(EntityKind.SONG, attrs, stream_url=self.urls.stream_url(song_id))

    def normalize_generic(self, attrs: Attributes, kind: EntityKind) -> Entity:
        """Tag ``attrs`` with ``kind`` without further decoration."""
        return Entity(EntityKind(kind), _attributes(attrs))

    def songs(self, root: ET.Element, path: str) -> List[Entity]:
        """Normalize every element matching ``path`` as a song."""
        return [self.normalize_song(element) for element in root.findall(path)]

    def entities(self, root: ET.Element, path: str, kind: EntityKind) -> List[Entity]:
        """Tag every element matching ``path`` with ``kind``."""
        return [self.normalize_generic(element, kind) for element in root.findall(path)]
