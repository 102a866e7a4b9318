"""Undirected complete graph of cities and the roads between them."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CityNode:
    """A named city with a position on the drawing plane."""

    name: str | None = None
    x: float = 0.0
    y: float = 0.0

    @property
    def is_set(self) -> bool:
        return self.name is not None

    def set_coord(self, x: float, y: float) -> None:
        self.x = x
        self.y = y


@dataclass
class Connection:
    """A road between two cities, identified by their indices, with a cost."""

    first: int = 0
    second: int = 0
    cost: int = 0

    def __post_init__(self) -> None:
        if self.first < 0:
            raise ValueError("first city ID is too small")
        if self.second < 0:
            raise ValueError("second city ID is too small")
        if self.cost < 0:
            raise ValueError("road cost is too small")


class Graph:
    """A fixed set of cities with one connection slot per pair of cities."""

    def __init__(self) -> None:
        self._size = 0
        self._cities: list[CityNode] = []
        self._connections: list[Connection] = []

    def set_size(self, size: int) -> None:
        """Allocate room for ``size`` cities and all their pairwise roads."""
        if self._size != 0:
            raise RuntimeError("the size has already been set")
        if size < 0:
            raise ValueError("size of cities array is too small")
        self._cities = [CityNode() for _ in range(size)]
        self._connections = [Connection() for _ in range(size * (size - 1) // 2)]
        self._size = size

    def _check_city_index(self, index: int) -> None:
        if not 0 <= index < self._size:
            raise IndexError(f"city index {index} is out of range")

    def _check_connection_index(self, index: int) -> None:
        if not 0 <= index < self.connection_count():
            raise IndexError(f"connection index {index} is out of range")

    def set_city(self, index: int, name: str) -> None:
        self._check_city_index(index)
        city = self._cities[index]
        if city.is_set:
            raise ValueError(f"city {index} has already been set")
        city.name = name

    def set_connection(self, index: int, cost: int, first: int, second: int) -> None:
        if cost < 0:
            raise ValueError(f"cost {cost} is too small")
        self._check_connection_index(index)
        if not 0 <= first < self._size:
            raise ValueError(f"invalid first city ID {first}")
        if not 0 <= second < self._size:
            raise ValueError(f"invalid second city ID {second}")
        self._connections[index] = Connection(first, second, cost)

    def city(self, index: int) -> CityNode:
        self._check_city_index(index)
        return self._cities[index]

    def connection(self, index: int) -> Connection:
        self._check_connection_index(index)
        return self._connections[index]

    def city_count(self) -> int:
        return self._size

    def connection_count(self) -> int:
        return self._size * (self._size - 1) // 2

    def _name(self, index: int) -> str:
        return self._cities[index].name or "NULL"

    def format_cities(self) -> str:
        """One line per city: ``name [index]``."""
        if not self._cities or not self._cities[0].is_set:
            raise ValueError("all cities are empty")
        return "".join(f"{city.name} [{i}]\n" for i, city in enumerate(self._cities))

    def format_connections(self) -> str:
        """One line per connection, in storage order."""
        return "".join(
            f"[{self._name(c.first)}] -> [{self._name(c.second)}] = {{{c.cost}}}\n"
            for c in self._connections
        )

    def format_connections_by_cost(self) -> str:
        """One line per connection, cheapest first; ties keep storage order."""
        ordered = sorted(self._connections, key=lambda c: c.cost)
        return "".join(
            f"[{self._name(c.first)}]->[{self._name(c.second)}]={{{c.cost}}}\n"
            for c in ordered
        )