"""Road network planning: spanning tree, extra roads and a round trip."""

from __future__ import annotations

import heapq
import random
from collections.abc import Sequence
from itertools import pairwise

from .dijkstra import UNREACHABLE, Dijkstra
from .graph import Connection, Graph

TARGET_CITIES: tuple[int, ...] = (
    3, 5, 13, 14, 20, 21, 26, 32, 34, 38, 40, 45, 48, 54, 60, 62, 64, 68,
)
"""Cities that the round trip of :class:`CreateConnections` visits by default."""


class Kruskal:
    """Minimum spanning tree of a graph, built cheapest road first."""

    def __init__(self, graph: Graph) -> None:
        if graph.city_count() == 0 or not graph.city(0).is_set:
            raise ValueError("graph is empty")
        self.graph = graph
        self._order = sorted(
            range(graph.connection_count()),
            key=lambda conn_id: graph.connection(conn_id).cost,
        )
        self._components: list[set[int]] = [{i} for i in range(graph.city_count())]
        self.roads: list[int] = []

    def _component_of(self, city: int) -> int:
        for index, component in enumerate(self._components):
            if city in component:
                return index
        raise RuntimeError(f"city {city} is in no component")

    def _join(self, road: Connection) -> bool:
        first = self._component_of(road.first)
        if road.second in self._components[first]:
            return False
        second = self._component_of(road.second)
        self._components[first] |= self._components[second]
        self._components[second] = set()
        return True

    def create_tree(self) -> list[int]:
        """Pick roads until every city is connected; returns their ids."""
        needed = self.graph.city_count() - 1
        for conn_id in self._order:
            if len(self.roads) >= needed:
                break
            if self._join(self.graph.connection(conn_id)):
                self.roads.append(conn_id)
        return list(self.roads)

    def format_tree(self) -> str:
        """List the tree's roads by first city, then their count and total cost."""
        self.roads.sort(key=lambda conn_id: self.graph.connection(conn_id).first)
        lines = []
        total = 0
        for conn_id in self.roads:
            road = self.graph.connection(conn_id)
            total += road.cost
            lines.append(f"[{road.first}] -> [{road.second}] = {{{road.cost}}}\n")
        lines.append(f"\n\n[{len(self.roads)}], {total}\n")
        return "".join(lines)


class AddRoads:
    """Choose new roads out of one city, ranked by how the route search uses them."""

    def __init__(self, graph: Graph | None, amount: int, existing: Sequence[int]) -> None:
        if graph is None:
            raise ValueError("invalid graph")
        self.graph = graph
        if amount < 1:
            raise ValueError("the amount of new roads is too small")
        self.amount = amount
        if not existing:
            raise ValueError("existing roads are empty")
        self.existing = list(existing)
        self.basic_city: int | None = None
        self.new_roads: list[int] = []

    def set_basic_city(self, name: str) -> None:
        """Select the city new roads start from, by name."""
        if not name:
            raise ValueError("city name is empty")
        for index in range(self.graph.city_count()):
            if self.graph.city(index).name == name:
                self.basic_city = index
                return
        raise LookupError(f"city {name!r} is not in the graph")

    def set_amount(self, amount: int) -> None:
        if amount < 1:
            raise ValueError("too small amount of new roads")
        self.amount = amount

    def create_routes(self) -> list[int]:
        """Rank the roads from the basic city that do not exist yet; keep the first few."""
        if self.basic_city is None:
            raise ValueError("basic city has not been set")
        existing = set(self.existing)
        candidates = [
            conn_id
            for conn_id in range(self.graph.connection_count())
            if conn_id not in existing
            and self.basic_city in (
                self.graph.connection(conn_id).first,
                self.graph.connection(conn_id).second,
            )
        ]
        search = Dijkstra(self.basic_city, self.graph, self.existing + candidates)
        ranked = search.find_route_most_visited(candidates)
        self.new_roads = ranked[: self.amount]
        return list(self.new_roads)


class CreateConnections:
    """A round trip through target cities over an existing road network."""

    def __init__(
        self,
        graph: Graph | None,
        amount: int,
        target_cities: Sequence[int] = TARGET_CITIES,
    ) -> None:
        if graph is None:
            raise ValueError("graph is missing")
        self.graph = graph
        if amount < 0 or amount > graph.city_count():
            raise ValueError(f"invalid amount of new connections: {amount}")
        self.amount = amount
        if not target_cities:
            raise ValueError("no target cities given")
        for city in target_cities:
            if not 0 <= city < graph.city_count():
                raise ValueError(f"target city {city} is not in the graph")
        self.target_cities = list(target_cities)
        self.existing: list[int] = []
        self.cost: list[list[int]] = []
        self.routes: list[list[list[int]]] = []
        self.tour: list[int] = []
        self.mst_cost = 0
        self.connections: list[int] = []

    def set_existing(self, existing: Sequence[int]) -> None:
        """Use these roads and compute all shortest routes over them."""
        self.existing = list(existing)
        search = Dijkstra(0, self.graph, self.existing)
        self.cost = []
        self.routes = []
        for city in range(self.graph.city_count()):
            search.city = city
            self.cost.append(list(search.find_route(True)))
            self.routes.append(search.routes)

    def create_list(self) -> list[list[tuple[int, int]]]:
        """Neighbour lists ``(city, distance)`` between target cities only."""
        targets = set(self.target_cities)
        size = len(self.cost)
        return [
            [
                (v, self.cost[u][v])
                for v in range(size)
                if v != u and u in targets and v in targets
            ]
            for u in range(size)
        ]

    def _find_mst(
        self, adjacency: list[list[tuple[int, int]]], start: int
    ) -> tuple[list[tuple[int, int, int]], int]:
        visited: set[int] = set()
        edges: list[tuple[int, int, int]] = []
        total = 0
        heap: list[tuple[int, int, int]] = [(0, start, -1)]
        while heap:
            weight, u, parent = heapq.heappop(heap)
            if u in visited:
                continue
            total += weight
            visited.add(u)
            if parent != -1:
                edges.append((u, parent, weight))
            for v, w in adjacency[u]:
                if v != parent and v not in visited:
                    heapq.heappush(heap, (w, v, u))
        return edges, total

    @staticmethod
    def _preorder(tree: dict[int, list[int]], start: int) -> list[int]:
        order = [start]
        visited = {start}
        stack = [iter(tree[start])]
        while stack:
            for neighbour in stack[-1]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    order.append(neighbour)
                    stack.append(iter(tree[neighbour]))
                    break
            else:
                stack.pop()
        return order

    def create(self) -> list[int]:
        """Build the round trip and return the ids of the roads it uses."""
        if not self.cost:
            raise RuntimeError("existing roads have not been set")
        start = self.target_cities[0]
        for city in self.target_cities:
            if self.cost[start][city] == UNREACHABLE:
                raise ValueError(f"target city {city} cannot be reached")

        edges, self.mst_cost = self._find_mst(self.create_list(), start)
        tree: dict[int, list[int]] = {city: [] for city in self.target_cities}
        for u, parent, _ in edges:
            tree[u].append(parent)
            tree[parent].append(u)

        self.tour = [*self._preorder(tree, start), start]

        lookup: dict[frozenset[int], int] = {}
        for conn_id in range(self.graph.connection_count()):
            road = self.graph.connection(conn_id)
            lookup.setdefault(frozenset((road.first, road.second)), conn_id)

        used: list[int] = []
        for u, v in pairwise(self.tour):
            path = [*self.routes[u][v], v]
            for a, b in pairwise(path):
                conn_id = lookup.get(frozenset((a, b)))
                if conn_id is not None:
                    used.append(conn_id)

        self.connections = list(dict.fromkeys(used))
        return list(self.connections)

    def random_connections(self, rng: random.Random | None = None) -> list[int]:
        """Draw ``amount`` road ids at random, none of them an existing road."""
        rng = rng or random.Random()
        count = self.graph.connection_count()
        existing = set(self.existing)
        if self.amount > 0 and all(conn_id in existing for conn_id in range(count)):
            raise ValueError("every road already exists")
        roads: list[int] = []
        while len(roads) < self.amount:
            conn_id = rng.randrange(count)
            if conn_id not in existing:
                roads.append(conn_id)
        return roads