"""A street map built from an OpenStreetMap XML document."""

from __future__ import annotations

from collections.abc import Iterable

from .streetmap import Node, StreetMap, Way
from .xmlentity import EntityType, XMLEntity


class OpenStreetMap(StreetMap):
    """Nodes and ways read from OSM ``node``, ``way``, ``nd`` and ``tag`` elements.

    ``source`` is any iterable of XML entities, such as an ``XMLReader``.
    A node or way is only kept once its end tag has been seen. Malformed
    ids, references or coordinates raise ValueError.
    """

    def __init__(self, source: Iterable[XMLEntity]) -> None:
        self._nodes: list[Node] = []
        self._ways: list[Way] = []
        node: Node | None = None
        way: Way | None = None

        for entity in source:
            name = entity.name_data
            if entity.type is EntityType.START_ELEMENT:
                if name == "node":
                    node = self._start_node(entity)
                    way = None
                elif name == "way":
                    way = self._start_way(entity)
                    node = None
                elif name == "nd" and way is not None:
                    way.node_ids.extend(
                        int(value) for key, value in entity.attributes if key == "ref"
                    )
                elif name == "tag":
                    key = value = ""
                    for attr_name, attr_value in entity.attributes:
                        if attr_name == "k":
                            key = attr_value
                        elif attr_name == "v":
                            value = attr_value
                    target = node if node is not None else way
                    if key and target is not None:
                        target.attributes[key] = value
            elif entity.type is EntityType.END_ELEMENT:
                if name == "node" and node is not None:
                    self._nodes.append(node)
                    node = None
                elif name == "way" and way is not None:
                    self._ways.append(way)
                    way = None

        self._nodes_by_id: dict[int, Node] = {}
        for item in self._nodes:
            self._nodes_by_id.setdefault(item.id, item)
        self._ways_by_id: dict[int, Way] = {}
        for item in self._ways:
            self._ways_by_id.setdefault(item.id, item)

    @staticmethod
    def _start_node(entity: XMLEntity) -> Node:
        node = Node(id=0)
        lat, lon = node.location
        for key, value in entity.attributes:
            if key == "id":
                node.id = int(value)
            elif key == "lat":
                lat = float(value)
            elif key == "lon":
                lon = float(value)
            else:
                node.attributes[key] = value
        node.location = (lat, lon)
        return node

    @staticmethod
    def _start_way(entity: XMLEntity) -> Way:
        way = Way(id=0)
        for key, value in entity.attributes:
            if key == "id":
                way.id = int(value)
            else:
                way.attributes[key] = value
        return way

    def node_count(self) -> int:
        return len(self._nodes)

    def way_count(self) -> int:
        return len(self._ways)

    def node_by_index(self, index: int) -> Node:
        if not 0 <= index < len(self._nodes):
            raise IndexError(f"node index {index} out of range")
        return self._nodes[index]

    def node_by_id(self, node_id: int) -> Node | None:
        return self._nodes_by_id.get(node_id)

    def way_by_index(self, index: int) -> Way:
        if not 0 <= index < len(self._ways):
            raise IndexError(f"way index {index} out of range")
        return self._ways[index]

    def way_by_id(self, way_id: int) -> Way | None:
        return self._ways_by_id.get(way_id)