import random
from collections import deque

import pytest

from roadnet.graph import Graph
from roadnet.roads import AddRoads, CreateConnections, Kruskal


def make_graph(names, costs):
    graph = Graph()
    graph.set_size(len(names))
    for index, name in enumerate(names):
        graph.set_city(index, name)
    pairs = [
        (first, second)
        for first in range(len(names))
        for second in range(first + 1, len(names))
    ]
    for index, ((first, second), cost) in enumerate(zip(pairs, costs)):
        graph.set_connection(index, cost, first, second)
    return graph


def small_graph():
    # ids: 0 A-B, 1 A-C, 2 A-D, 3 B-C, 4 B-D, 5 C-D
    return make_graph(["A", "B", "C", "D"], [1, 4, 3, 2, 5, 6])


def larger_graph():
    names = [f"City{i}" for i in range(7)]
    rng = random.Random(7)
    count = len(names) * (len(names) - 1) // 2
    return make_graph(names, [rng.randint(1, 100) for _ in range(count)])


def reachable(graph, road_ids, start):
    neighbours = {i: [] for i in range(graph.city_count())}
    for conn_id in road_ids:
        road = graph.connection(conn_id)
        neighbours[road.first].append(road.second)
        neighbours[road.second].append(road.first)
    seen = {start}
    queue = deque([start])
    while queue:
        for nxt in neighbours[queue.popleft()]:
            if nxt not in seen:
                seen.add(nxt)
                queue.append(nxt)
    return seen


def test_kruskal_small_graph():
    assert Kruskal(small_graph()).create_tree() == [0, 3, 2]


def test_kruskal_spans_all_cities():
    graph = larger_graph()
    roads = Kruskal(graph).create_tree()
    assert len(roads) == graph.city_count() - 1
    assert len(set(roads)) == len(roads)
    assert reachable(graph, roads, 0) == set(range(graph.city_count()))


def test_kruskal_rejects_empty_graph():
    graph = Graph()
    graph.set_size(3)
    with pytest.raises(ValueError):
        Kruskal(graph)


def test_format_tree():
    graph = small_graph()
    kruskal = Kruskal(graph)
    kruskal.create_tree()
    text = kruskal.format_tree()
    lines = text.splitlines()
    assert lines[0] == "[0] -> [1] = {1}"
    assert lines[-1].startswith(f"[{len(kruskal.roads)}], ")
    firsts = [graph.connection(r).first for r in kruskal.roads]
    assert firsts == sorted(firsts)


@pytest.mark.parametrize(
    "graph, amount, existing",
    [(None, 1, [0]), (small_graph(), 0, [0]), (small_graph(), 2, [])],
)
def test_add_roads_rejects_bad_arguments(graph, amount, existing):
    with pytest.raises(ValueError):
        AddRoads(graph, amount, existing)


def test_set_basic_city_errors():
    add = AddRoads(small_graph(), 1, [0])
    with pytest.raises(ValueError):
        add.set_basic_city("")
    with pytest.raises(LookupError):
        add.set_basic_city("Nowhere")
    with pytest.raises(ValueError):
        add.set_amount(0)


def test_create_routes_without_basic_city():
    with pytest.raises(ValueError):
        AddRoads(small_graph(), 1, [0]).create_routes()


def test_create_routes_picks_new_roads_from_city():
    graph = larger_graph()
    existing = Kruskal(graph).create_tree()
    add = AddRoads(graph, 5, existing)
    add.set_basic_city("City2")
    many = add.create_routes()
    assert len(many) <= 5
    for conn_id in many:
        road = graph.connection(conn_id)
        assert 2 in (road.first, road.second)
        assert conn_id not in existing
    add.set_amount(1)
    assert add.create_routes() == many[:1]


@pytest.mark.parametrize(
    "graph, amount, targets",
    [(None, 1, [0]), (small_graph(), -1, [0]), (small_graph(), 5, [0]), (small_graph(), 1, [9])],
)
def test_create_connections_rejects_bad_arguments(graph, amount, targets):
    with pytest.raises(ValueError):
        CreateConnections(graph, amount, targets)


def test_random_connections_avoid_existing():
    graph = larger_graph()
    existing = Kruskal(graph).create_tree()
    conn = CreateConnections(graph, 5, [0, 1])
    conn.set_existing(existing)
    first = conn.random_connections(random.Random(3))
    assert len(first) == 5
    assert all(0 <= r < graph.connection_count() and r not in existing for r in first)
    assert conn.random_connections(random.Random(3)) == first


def test_random_connections_all_existing():
    graph = small_graph()
    conn = CreateConnections(graph, 1, [0])
    conn.set_existing(list(range(graph.connection_count())))
    with pytest.raises(ValueError):
        conn.random_connections(random.Random(1))


def test_set_existing_empty():
    with pytest.raises(ValueError):
        CreateConnections(small_graph(), 1, [0]).set_existing([])


def test_create_before_set_existing():
    with pytest.raises(RuntimeError):
        CreateConnections(small_graph(), 1, [0, 2]).create()


def test_create_list_only_targets():
    graph = larger_graph()
    conn = CreateConnections(graph, 1, [1, 4, 5])
    conn.set_existing(Kruskal(graph).create_tree())
    adjacency = conn.create_list()
    assert len(adjacency) == graph.city_count()
    for u, neighbours in enumerate(adjacency):
        if u in (1, 4, 5):
            assert sorted(v for v, _ in neighbours) == sorted({1, 4, 5} - {u})
            for v, w in neighbours:
                assert w == conn.cost[u][v] == conn.cost[v][u]
        else:
            assert neighbours == []


def test_create_small_round_trip():
    graph = small_graph()
    existing = Kruskal(graph).create_tree()
    conn = CreateConnections(graph, 1, [0, 2, 3])
    conn.set_existing(existing)
    result = conn.create()
    assert conn.tour == [0, 2, 3, 0]
    assert set(result) == set(existing)


def test_create_connects_targets():
    graph = larger_graph()
    existing = Kruskal(graph).create_tree()
    targets = [2, 0, 5, 6]
    conn = CreateConnections(graph, 1, targets)
    conn.set_existing(existing)
    result = conn.create()
    assert set(result) <= set(existing)
    assert len(set(result)) == len(result)
    assert set(targets) <= reachable(graph, result, targets[0])
    assert conn.tour[0] == conn.tour[-1] == targets[0]
    assert sorted(conn.tour[:-1]) == sorted(targets)


def test_create_single_target():
    graph = small_graph()
    conn = CreateConnections(graph, 1, [1])
    conn.set_existing(Kruskal(graph).create_tree())
    assert conn.create() == []


def test_create_unreachable_target():
    graph = small_graph()
    conn = CreateConnections(graph, 1, [0, 2])
    conn.set_existing([0])
    with pytest.raises(ValueError):
        conn.create()