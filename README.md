# roadnet

Plan a road network between cities. Given a complete graph of cities and the
distance between every pair, `roadnet` can:

- build a minimum spanning tree of roads (`roadnet.roads.Kruskal`);
- compute shortest distances, hop counts and paths from any city, over a
  chosen set of roads or over the whole graph (`roadnet.dijkstra.Dijkstra`);
- rank the roads out of one city that do not exist yet and keep the first few
  (`roadnet.roads.AddRoads`);
- draw random extra roads and build a round trip through a set of target
  cities over the existing roads (`roadnet.roads.CreateConnections`);
- show all of this on a map whose city markers can be dragged with the mouse
  (`roadnet.visualization.Window`, started by the `roadnet` command).

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Data files

A graph is read with `roadnet.loader.load_graph` from two text files:

- a file of city names, one per line;
- a file holding the upper triangle of the distance matrix: line *i* holds the
  comma-separated integer distances from city *i* to cities *i+1*, *i+2*, ….

```python
from roadnet.loader import load_graph

graph = load_graph("data/Cities.txt", "data/Connections.txt", 69)
print(graph.format_cities())
```

The number of cities defaults to 69. `roadnet.loader.parse_connections` fills
the roads of an already sized `roadnet.graph.Graph` from any iterable of lines
and returns how many it set. A cost that is not an integer raises
`ValueError`.

## Library use

```python
from roadnet.dijkstra import Dijkstra
from roadnet.roads import AddRoads, CreateConnections, Kruskal

tree = Kruskal(graph)
tree.create_tree()               # ids of the tree's roads
print(tree.format_tree())

extra = AddRoads(graph, 5, tree.roads)
extra.set_basic_city("Warszawa")
new_roads = extra.create_routes()

routes = Dijkstra(0, graph, tree.roads)
routes.find_route(True)          # True: only the given roads; False: every road
print(routes.format_route())
print(routes.jumps, routes.routes)

planner = CreateConnections(graph, 20, target_cities=[3, 5, 13, 14])
planner.set_existing(tree.roads + new_roads)
tour_roads = planner.create()    # ids of the roads the round trip uses
```

Roads are identified by their index in the graph, in the order of the
distance file. `CreateConnections.random_connections(rng)` draws `amount`
road ids that are not among the existing roads; pass a `random.Random` to make
the draw repeatable. Without `target_cities`, `CreateConnections` uses a fixed
list of city indices up to 68, so it then needs a graph of at least 69 cities.

## Map view

```
roadnet --data-dir path/to/data
```

The directory must hold `Cities.txt` and `Connections.txt`; it defaults to
`../data`, relative to the current directory. The data must describe 69
cities, one of them named `Warszawa`. On start the command prints the average
distance and number of hops from city 62 before and after the suggested roads
are added, and the total length of the target-city round trip; then it opens
a window with the cities laid out on a grid, ten per row.

- Keys `1`–`4` toggle the spanning tree (grey), the suggested roads (red), the
  random extra roads (green) and the round trip (orange).
- Drag a city with the left mouse button.
- The right mouse button prints the cursor position as a fraction of the
  window size.

## What the package does not do

No data files come with the package. The map view has no panning or zooming,
does not save moved city positions, and cannot edit the road plans; they are
computed once when the window opens, and the random extra roads differ from
run to run.