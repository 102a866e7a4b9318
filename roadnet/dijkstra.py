"""Shortest routes from one city over a chosen set of roads."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence

from .graph import Graph

UNREACHABLE = 2_147_483_647
"""Distance reported for a city that no road leads to."""


class Dijkstra:
    """Route search from ``city`` over the roads of ``graph``.

    ``roads`` is the list of connection ids forming the restricted network
    (usually a spanning tree) that :meth:`find_route` uses when asked to.
    After a search, ``route`` holds the result table, ``jumps`` the number of
    roads on each route and ``routes`` the cities passed through on the way.
    """

    def __init__(self, city: int, graph: Graph | None, roads: Sequence[int]) -> None:
        if graph is None:
            raise ValueError("no graph given to route search")
        self.graph = graph
        if city < 0 or city > graph.city_count():
            raise ValueError(f"invalid starting city {city}")
        self.city = city
        if not roads:
            raise ValueError("road network for route search is empty")
        self.roads = list(roads)
        self.route: list[int] = []
        self.jumps: list[int] = []
        self.routes: list[list[int]] = []

    def _check_ready(self) -> None:
        if self.graph is None or self.city < 0 or self.city > self.graph.city_count():
            raise RuntimeError("route search does not have full data")

    def _adjacency(self, connection_ids: Iterable[int]) -> list[list[tuple[int, int, int]]]:
        adjacency: list[list[tuple[int, int, int]]] = [
            [] for _ in range(self.graph.city_count())
        ]
        for conn_id in connection_ids:
            road = self.graph.connection(conn_id)
            adjacency[road.first].append((road.second, road.cost, conn_id))
            adjacency[road.second].append((road.first, road.cost, conn_id))
        return adjacency

    def build_adjacency(self, connection_ids: Iterable[int]) -> list[list[tuple[int, int]]]:
        """Neighbour lists ``(city, cost)`` for every city, from the given roads."""
        return [
            [(neighbour, cost) for neighbour, cost, _ in edges]
            for edges in self._adjacency(connection_ids)
        ]

    def find_route_most_visited(self, new_roads: Sequence[int]) -> list[int]:
        """Order candidate roads by how often the search settles a city through them.

        The search runs over every road of the graph. Candidates come back
        least used first and are also stored in ``route``.
        """
        self._check_ready()
        size = self.graph.city_count()
        dist = [UNREACHABLE] * size
        adjacency = self._adjacency(range(self.graph.connection_count()))
        position = {road: i for i, road in enumerate(new_roads)}
        visits = [0] * len(new_roads)

        dist[self.city] = 0
        heap: list[tuple[int, int, int]] = [(self.city, 0, -1)]
        while heap:
            current, _, previous = heapq.heappop(heap)
            for neighbour, cost, conn_id in adjacency[current]:
                candidate = dist[current] + cost
                if dist[neighbour] > candidate:
                    dist[neighbour] = candidate
                    used = position.get(conn_id, -1)
                    heapq.heappush(heap, (neighbour, candidate, used))
                    if used != -1:
                        visits[used] += 1
                    if previous != -1:
                        visits[previous] -= 1

        order = sorted(range(len(new_roads)), key=visits.__getitem__)
        self.route = [new_roads[i] for i in order]
        return self.route

    def find_route(self, use_tree: bool) -> list[int]:
        """Compute distances from ``city`` to every city.

        With ``use_tree`` the search is limited to ``roads``; otherwise every
        road of the graph is used. Returns the distance table.
        """
        self._check_ready()
        size = self.graph.city_count()
        dist = [UNREACHABLE] * size
        if use_tree:
            adjacency = self._adjacency(self.roads)
        else:
            adjacency = self._adjacency(range(self.graph.connection_count()))

        jumps = [0] * size
        routes: list[list[int]] = [[] for _ in range(size)]

        dist[self.city] = 0
        heap: list[tuple[int, int, int]] = [(self.city, 0, 0)]
        while heap:
            current, _, _ = heapq.heappop(heap)
            for neighbour, cost, _ in adjacency[current]:
                candidate = dist[current] + cost
                if dist[neighbour] > candidate:
                    dist[neighbour] = candidate
                    jumps[neighbour] = jumps[current] + 1
                    routes[neighbour] = [*routes[current], current]
                    heapq.heappush(heap, (neighbour, candidate, jumps[neighbour]))

        self.route = dist
        self.jumps = jumps
        self.routes = routes
        return dist

    def format_route(self) -> str:
        """One line per city: ``[start]->[city] = distance``."""
        if not self.route:
            raise RuntimeError("route table is empty")
        start = self.graph.city(self.city).name or "NULL"
        lines = []
        for index, distance in enumerate(self.route):
            name = self.graph.city(index).name or "NULL"
            lines.append(f"[{start}]->[{name}] = {distance}\n")
        return "".join(lines)

    def set_roads(self, roads: Sequence[int]) -> None:
        """Replace the restricted road network."""
        if not roads:
            raise ValueError("new road network is empty")
        self.roads = list(roads)