"""The bus system interface: stops, routes and lookups over them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

INVALID_STOP_ID = 2**64 - 1


@dataclass(frozen=True)
class Stop:
    """A bus stop and the street map node it sits on."""

    id: int
    node_id: int


@dataclass
class Route:
    """A named route visiting stops in order."""

    name: str
    stop_ids: list[int] = field(default_factory=list)

    def stop_count(self) -> int:
        """Return how many stops the route visits."""
        return len(self.stop_ids)

    def get_stop_id(self, index: int) -> int:
        """Return the stop id at ``index``; raises IndexError."""
        if not 0 <= index < len(self.stop_ids):
            raise IndexError(f"stop index {index} out of range")
        return self.stop_ids[index]


class BusSystem(ABC):
    """A collection of stops and routes addressable by position, id or name."""

    @abstractmethod
    def stop_count(self) -> int:
        """Return the number of stops."""

    @abstractmethod
    def route_count(self) -> int:
        """Return the number of routes."""

    @abstractmethod
    def stop_by_index(self, index: int) -> Stop:
        """Return the stop at ``index``; raises IndexError."""

    @abstractmethod
    def route_by_index(self, index: int) -> Route:
        """Return the route at ``index``; raises IndexError."""

    def stop_by_id(self, stop_id: int) -> Stop | None:
        """Return the stop with ``stop_id``, or None."""
        stops = (self.stop_by_index(index) for index in range(self.stop_count()))
        return next((stop for stop in stops if stop.id == stop_id), None)

    def route_by_name(self, name: str) -> Route | None:
        """Return the route called ``name``, or None."""
        routes = (self.route_by_index(index) for index in range(self.route_count()))
        return next((route for route in routes if route.name == name), None)