"""XML entities as produced by the reader and consumed by the writer."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class EntityType(enum.Enum):
    """The kind of piece an XML document is broken into."""

    START_ELEMENT = "start"
    END_ELEMENT = "end"
    CHAR_DATA = "chardata"
    COMPLETE_ELEMENT = "complete"


@dataclass
class XMLEntity:
    """One element tag or run of character data.

    ``name_data`` holds the element name for tags and the text for
    character data. ``attributes`` keeps name/value pairs in document order.
    """

    type: EntityType
    name_data: str = ""
    attributes: list[tuple[str, str]] = field(default_factory=list)

    def attribute_exists(self, name: str) -> bool:
        """Return True if an attribute called ``name`` is present."""
        return any(key == name for key, _ in self.attributes)

    def attribute_value(self, name: str) -> str:
        """Return the value of attribute ``name``, or an empty string if absent."""
        return next((value for key, value in self.attributes if key == name), "")

    def set_attribute(self, name: str, value: str) -> None:
        """Set attribute ``name``, replacing an existing value in place.

        Raises ValueError if ``name`` is empty.
        """
        if not name:
            raise ValueError("attribute name must not be empty")
        for position, (key, _) in enumerate(self.attributes):
            if key == name:
                self.attributes[position] = (name, value)
                return
        self.attributes.append((name, value))