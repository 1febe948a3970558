"""The street map interface: nodes, ways and lookups over them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from itertools import islice

INVALID_NODE_ID = 2**64 - 1
INVALID_WAY_ID = 2**64 - 1


def _key_at(attributes: Mapping[str, str], index: int) -> str:
    if not 0 <= index < len(attributes):
        raise IndexError(f"attribute index {index} out of range")
    return next(islice(attributes, index, None))


@dataclass
class Node:
    """A point on the map with a (latitude, longitude) location and tags."""

    id: int
    location: tuple[float, float] = (0.0, 0.0)
    attributes: dict[str, str] = field(default_factory=dict)

    def attribute_count(self) -> int:
        """Return how many attributes the node has."""
        return len(self.attributes)

    def get_attribute_key(self, index: int) -> str:
        """Return the key of the attribute at ``index``; raises IndexError."""
        return _key_at(self.attributes, index)

    def has_attribute(self, key: str) -> bool:
        """Return True if the node has attribute ``key``."""
        return key in self.attributes

    def get_attribute(self, key: str) -> str:
        """Return the value of attribute ``key``; raises KeyError if absent."""
        return self.attributes[key]


@dataclass
class Way:
    """An ordered list of node ids, with tags."""

    id: int
    node_ids: list[int] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)

    def node_count(self) -> int:
        """Return how many nodes the way passes through."""
        return len(self.node_ids)

    def get_node_id(self, index: int) -> int:
        """Return the node id at ``index``; raises IndexError."""
        if not 0 <= index < len(self.node_ids):
            raise IndexError(f"node index {index} out of range")
        return self.node_ids[index]

    def attribute_count(self) -> int:
        """Return how many attributes the way has."""
        return len(self.attributes)

    def get_attribute_key(self, index: int) -> str:
        """Return the key of the attribute at ``index``; raises IndexError."""
        return _key_at(self.attributes, index)

    def has_attribute(self, key: str) -> bool:
        """Return True if the way has attribute ``key``."""
        return key in self.attributes

    def get_attribute(self, key: str) -> str:
        """Return the value of attribute ``key``; raises KeyError if absent."""
        return self.attributes[key]


class StreetMap(ABC):
    """A collection of nodes and ways addressable by position or id."""

    @abstractmethod
    def node_count(self) -> int:
        """Return the number of nodes."""

    @abstractmethod
    def way_count(self) -> int:
        """Return the number of ways."""

    @abstractmethod
    def node_by_index(self, index: int) -> Node:
        """Return the node at ``index``; raises IndexError."""

    @abstractmethod
    def way_by_index(self, index: int) -> Way:
        """Return the way at ``index``; raises IndexError."""

    def node_by_id(self, node_id: int) -> Node | None:
        """Return the node with ``node_id``, or None."""
        nodes = (self.node_by_index(index) for index in range(self.node_count()))
        return next((node for node in nodes if node.id == node_id), None)

    def way_by_id(self, way_id: int) -> Way | None:
        """Return the way with ``way_id``, or None."""
        ways = (self.way_by_index(index) for index in range(self.way_count()))
        return next((way for way in ways if way.id == way_id), None)