"""A bus system read from stop and route tables."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence

from .bussystem import BusSystem, Route, Stop

_log = logging.getLogger(__name__)

_UINT_PREFIX = re.compile(r"\s*([+-]?)(\d+)")
_UINT_LIMIT = 2**64


def _parse_id(text: str) -> int:
    """Parse a leading unsigned integer, wrapping a negative value as unsigned.

    Trailing characters after the digits are ignored.
    """
    match = _UINT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"invalid id: {text!r}")
    value = int(match.group(2))
    if value >= _UINT_LIMIT:
        raise ValueError(f"id out of range: {text!r}")
    if match.group(1) == "-":
        value = (-value) % _UINT_LIMIT
    return value


class CSVBusSystem(BusSystem):
    """Stops from rows of ``stop_id, node_id`` and routes from rows of ``name, stop_id``.

    The sources are any iterables of rows, such as ``DSVReader`` objects.
    Rows with fewer than two fields are ignored; rows whose ids cannot be
    parsed, such as a header row, are logged and skipped. Routes keep the
    order in which their names first appear.
    """

    def __init__(
        self,
        stop_rows: Iterable[Sequence[str]] | None,
        route_rows: Iterable[Sequence[str]] | None,
    ) -> None:
        self._stops: list[Stop] = []
        self._stops_by_id: dict[int, Stop] = {}
        self._routes_by_name: dict[str, Route] = {}

        for row in stop_rows or ():
            if len(row) < 2:
                continue
            try:
                stop = Stop(_parse_id(row[0]), _parse_id(row[1]))
            except ValueError as exc:
                _log.warning("skipping stop row %r: %s", list(row), exc)
                continue
            self._stops.append(stop)
            self._stops_by_id[stop.id] = stop

        for row in route_rows or ():
            if len(row) < 2:
                continue
            name = row[0]
            try:
                stop_id = _parse_id(row[1])
            except ValueError as exc:
                _log.warning("skipping route row %r: %s", list(row), exc)
                continue
            route = self._routes_by_name.setdefault(name, Route(name))
            route.stop_ids.append(stop_id)

        self._routes: list[Route] = list(self._routes_by_name.values())

    def stop_count(self) -> int:
        return len(self._stops)

    def route_count(self) -> int:
        return len(self._routes)

    def stop_by_index(self, index: int) -> Stop:
        if not 0 <= index < len(self._stops):
            raise IndexError(f"stop index {index} out of range")
        return self._stops[index]

    def stop_by_id(self, stop_id: int) -> Stop | None:
        return self._stops_by_id.get(stop_id)

    def route_by_index(self, index: int) -> Route:
        if not 0 <= index < len(self._routes):
            raise IndexError(f"route index {index} out of range")
        return self._routes[index]

    def route_by_name(self, name: str) -> Route | None:
        return self._routes_by_name.get(name)

    def __str__(self) -> str:
        lines = ["Bus System Details:", f"Stop Count: {self.stop_count()}"]
        lines.extend(
            f"Stop {index}: ID = {stop.id}, NodeID = {stop.node_id}"
            for index, stop in enumerate(self._stops)
        )
        lines.append(f"Route Count: {self.route_count()}")
        for index, route in enumerate(self._routes):
            lines.append(
                f"Route {index}: Name = {route.name}, StopCount = {route.stop_count()}"
            )
            lines.append("Stops: " + ", ".join(str(stop_id) for stop_id in route.stop_ids))
        return "\n".join(lines) + "\n"