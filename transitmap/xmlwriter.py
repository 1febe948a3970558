"""Writing XML entities to a data sink."""

from __future__ import annotations

from .datasink import DataSink
from .xmlentity import EntityType, XMLEntity

_ESCAPES = str.maketrans(
    {"<": "&lt;", ">": "&gt;", "&": "&amp;", "'": "&apos;", '"': "&quot;"}
)


def _escape(text: str) -> str:
    return text.translate(_ESCAPES)


class XMLWriter:
    """Serialises XML entities, remembering which elements are still open."""

    def __init__(self, sink: DataSink) -> None:
        self._sink = sink
        self._open: list[str] = []

    def _tag(self, entity: XMLEntity, closing: str) -> str:
        attrs = "".join(f' {key}="{_escape(value)}"' for key, value in entity.attributes)
        return f"<{entity.name_data}{attrs}{closing}"

    def flush(self) -> None:
        """Close every element that has been started but not ended."""
        while self._open:
            self._sink.write(f"</{self._open.pop()}>")

    def write_entity(self, entity: XMLEntity) -> None:
        """Write one entity; text and attribute values are escaped."""
        kind = entity.type
        if kind is EntityType.START_ELEMENT:
            self._sink.write(self._tag(entity, ">"))
            self._open.append(entity.name_data)
        elif kind is EntityType.END_ELEMENT:
            self._sink.write(f"</{entity.name_data}>")
            if self._open and self._open[-1] == entity.name_data:
                self._open.pop()
        elif kind is EntityType.CHAR_DATA:
            self._sink.write(_escape(entity.name_data))
        elif kind is EntityType.COMPLETE_ELEMENT:
            self._sink.write(self._tag(entity, "/>"))
        else:
            raise ValueError(f"unknown entity type: {kind!r}")