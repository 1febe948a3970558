"""Reading XML documents as a sequence of entities."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from xml.parsers import expat

from .datasource import DataSource
from .xmlentity import EntityType, XMLEntity


class XMLParseError(ValueError):
    """Raised when the input is not well-formed XML."""


class XMLReader:
    """Pulls XML entities out of a data source.

    Character data between tags is gathered into a single CHAR_DATA entity.
    """

    _CHUNK_SIZE = 4096

    def __init__(self, source: DataSource) -> None:
        self._source = source
        self._entities: deque[XMLEntity] = deque()
        self._chars: list[str] = []
        self._complete = False
        parser = expat.ParserCreate()
        parser.ordered_attributes = True
        parser.StartElementHandler = self._on_start
        parser.EndElementHandler = self._on_end
        parser.CharacterDataHandler = self._on_chars
        self._parser = parser

    def _flush_chars(self) -> None:
        if self._chars:
            self._entities.append(XMLEntity(EntityType.CHAR_DATA, "".join(self._chars)))
            self._chars.clear()

    def _on_start(self, name: str, attrs: list[str]) -> None:
        self._flush_chars()
        pairs = list(zip(attrs[0::2], attrs[1::2]))
        self._entities.append(XMLEntity(EntityType.START_ELEMENT, name, pairs))

    def _on_end(self, name: str) -> None:
        self._flush_chars()
        self._entities.append(XMLEntity(EntityType.END_ELEMENT, name))

    def _on_chars(self, data: str) -> None:
        if data:
            self._chars.append(data)

    def _fill(self) -> None:
        while not self._entities and not self._complete:
            chunk = self._source.read(self._CHUNK_SIZE)
            if not chunk:
                self._complete = True
                try:
                    self._parser.Parse("", True)
                except expat.ExpatError:
                    # An unfinished document simply ends here.
                    pass
                return
            try:
                self._parser.Parse(chunk, False)
            except expat.ExpatError as exc:
                raise XMLParseError(str(exc)) from exc

    def end(self) -> bool:
        """Return True once all input is consumed and every entity has been read."""
        return self._complete and not self._entities

    def read_entity(self, skipcdata: bool = False) -> XMLEntity | None:
        """Return the next entity, or None when there are no more.

        With ``skipcdata`` set, character data entities are passed over.
        Raises XMLParseError on malformed input.
        """
        while True:
            self._fill()
            if not self._entities:
                return None
            entity = self._entities.popleft()
            if skipcdata and entity.type is EntityType.CHAR_DATA:
                continue
            return entity

    def __iter__(self) -> Iterator[XMLEntity]:
        while (entity := self.read_entity()) is not None:
            yield entity