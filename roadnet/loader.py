"""Reading city names and the distance table from text files."""

from __future__ import annotations

from collections.abc import Iterable
from os import PathLike

from .graph import Graph

CITY_COUNT = 69


def _tokens(line: str) -> list[str]:
    line = line.rstrip("\r\n")
    if not line:
        return []
    parts = line.split(",")
    if parts[-1] == "":
        parts.pop()
    return parts


def parse_connections(lines: Iterable[str], graph: Graph) -> int:
    """Fill the graph's roads from an upper-triangular comma-separated table.

    Row ``i`` lists the costs from city ``i`` to cities ``i+1``, ``i+2`` and
    so on. Returns the number of connections set.
    """
    index = 0
    for first, line in enumerate(lines):
        for second, token in enumerate(_tokens(line), start=first + 1):
            try:
                cost = int(token)
            except ValueError:
                raise ValueError(
                    f"invalid cost {token!r} in row {first}"
                ) from None
            graph.set_connection(index, cost, first, second)
            index += 1
    return index


def load_graph(
    cities_path: str | PathLike[str],
    connections_path: str | PathLike[str],
    city_count: int = CITY_COUNT,
) -> Graph:
    """Build a graph from a file of city names and a file of road costs."""
    graph = Graph()
    with open(cities_path, encoding="utf-8") as cities:
        graph.set_size(city_count)
        for index, line in zip(range(city_count), cities):
            graph.set_city(index, line.rstrip("\r\n"))
    with open(connections_path, encoding="utf-8") as connections:
        parse_connections(connections, graph)
    return graph