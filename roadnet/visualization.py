"""Interactive view of the planned road network."""

from __future__ import annotations

import argparse
import math
import random
import time
from os import PathLike
from pathlib import Path

import pygame

from .dijkstra import Dijkstra
from .graph import Graph
from .input import Input, InputState, KeyCode, MouseButton
from .loader import load_graph
from .roads import AddRoads, CreateConnections, Kruskal

WINDOW_SIZE = (1280, 720)
TITLE = "Visualization"

BACKGROUND = (255, 255, 255)
MST_COLOR = (130, 130, 130)
ADDED_COLOR = (230, 41, 55)
RANDOM_COLOR = (0, 228, 48)
GPS_COLOR = (255, 161, 0)
CITY_COLOR = (0, 228, 48)
TEXT_COLOR = (0, 0, 0)

ROAD_WIDTH = 3
CITY_RADIUS = 25
FONT_SIZE = 15
PICK_RADIUS = 20

BASIC_CITY = "Warszawa"
NEW_ROAD_COUNT = 5
REFERENCE_CITY = 62
RANDOM_ROAD_COUNT = 20


def layout_cities(graph: Graph) -> None:
    """Place cities on a grid, ten per row."""
    x, y = 75.0, 100.0
    for index in range(graph.city_count()):
        graph.city(index).set_coord(x, y)
        if (index + 1) % 10 == 0:
            x = 75.0
            y += 85.0
        else:
            x += 125.0


def _averages(search: Dijkstra) -> tuple[float, float]:
    others = len(search.route) - 1
    return sum(search.route) / others, sum(search.jumps) / others


class Window:
    """Computes the road plans and shows them; cities can be dragged around."""

    def __init__(self, data_dir: str | PathLike[str] = "../data") -> None:
        self.data_dir = Path(data_dir)
        self.window_size = WINDOW_SIZE
        self.graph = Graph()
        self.roads: list[int] = []
        self.additional_roads: list[int] = []
        self.new_connections: list[int] = []
        self.gps_connections: list[int] = []
        self.gps_sum = 0
        self.before: tuple[float, float] = (0.0, 0.0)
        self.after: tuple[float, float] = (0.0, 0.0)
        self.selected_city = -1
        self.input = Input()
        self.camera_offset = (self.window_size[0] * 0.5, self.window_size[1] * 0.5)
        self.rng = random.Random()
        self.mst_flag = True
        self.add_road_flag = True
        self.dpd_flag = True
        self.gps_flag = True
        self.running = False
        self.screen: pygame.Surface | None = None
        self._font: pygame.font.Font | None = None

    def init(self) -> None:
        """Load the data, plan every road set and open the window."""
        graph = load_graph(
            self.data_dir / "Cities.txt", self.data_dir / "Connections.txt"
        )
        self.graph = graph

        self.roads = Kruskal(graph).create_tree()
        adder = AddRoads(graph, NEW_ROAD_COUNT, self.roads)
        adder.set_basic_city(BASIC_CITY)
        self.additional_roads = adder.create_routes()

        search = Dijkstra(REFERENCE_CITY, graph, self.roads)
        search.find_route(True)
        self.before = _averages(search)
        network = self.roads + self.additional_roads
        search.set_roads(network)
        search.find_route(True)
        self.after = _averages(search)
        print(
            f"\nBefore: [{self.before[0]:.4f}]km, {self.before[1]:.2f} jumps\n"
            f"After: [{self.after[0]:.4f}]km, {self.after[1]:.2f} jumps"
        )

        planner = CreateConnections(graph, RANDOM_ROAD_COUNT)
        self.new_connections = planner.random_connections(self.rng)
        network = network + self.new_connections
        planner.set_existing(network)
        self.gps_connections = planner.create()
        self.gps_sum = sum(graph.connection(c).cost for c in self.gps_connections)
        print(f"GPS sum: {self.gps_sum}km\n\n")

        self.selected_city = -1
        layout_cities(graph)

        pygame.display.init()
        self.screen = pygame.display.set_mode(self.window_size)
        pygame.display.set_caption(TITLE)
        self.running = True

    def run(self) -> None:
        """Process frames until the window is closed."""
        if self.screen is None:
            raise RuntimeError("window has not been initialised")
        clock = pygame.time.Clock()
        delta_time = 1.0 / 30.0
        while self.running:
            start = time.perf_counter()
            events = pygame.event.get()
            if any(event.type == pygame.QUIT for event in events):
                self.running = False
                break
            self.input.handle(self.window_size, events)
            self.update(delta_time)
            self.camera_offset = (self.window_size[0] * 0.5, self.window_size[1] * 0.5)
            self.screen.fill(BACKGROUND)
            self.render_ui()
            pygame.display.flip()
            clock.tick(60)
            delta_time = min(time.perf_counter() - start, 1.0 / 60.0)

    def shutdown(self) -> None:
        self.running = False
        self.screen = None
        self._font = None
        pygame.quit()

    def update(self, delta_time: float) -> None:
        """Toggle layers with keys 1-4 and drag cities with the left button."""
        inp = self.input
        toggles = (
            (KeyCode.N1, "mst_flag"),
            (KeyCode.N2, "add_road_flag"),
            (KeyCode.N3, "dpd_flag"),
            (KeyCode.N4, "gps_flag"),
        )
        for key, flag in toggles:
            if inp.get_key(key, InputState.PRESSED):
                setattr(self, flag, not getattr(self, flag))

        rel_x, rel_y = inp.cursor_position()
        if inp.get_mouse_button(MouseButton.RIGHT, InputState.PRESSED):
            print(f"{{{rel_x:f}}}{{{rel_y:f}}}")
        x = rel_x * self.window_size[0]
        y = rel_y * self.window_size[1]

        if inp.get_mouse_button(MouseButton.LEFT, InputState.PRESSED):
            for index in range(self.graph.city_count()):
                city = self.graph.city(index)
                if math.hypot(x - city.x, y - city.y) < PICK_RADIUS:
                    self.selected_city = index
                    break
        if inp.get_mouse_button(MouseButton.LEFT, InputState.HELD) and self.selected_city != -1:
            self.graph.city(self.selected_city).set_coord(x, y)
        if inp.get_mouse_button(MouseButton.LEFT, InputState.RELEASED):
            self.selected_city = -1

    def _draw_roads(self, roads: list[int], color: tuple[int, int, int]) -> None:
        for conn_id in roads:
            road = self.graph.connection(conn_id)
            first = self.graph.city(road.first)
            second = self.graph.city(road.second)
            pygame.draw.line(
                self.screen, color, (first.x, first.y), (second.x, second.y), ROAD_WIDTH
            )

    def render_ui(self) -> None:
        """Draw the enabled road layers, then every city with its name."""
        if self.screen is None:
            raise RuntimeError("nothing to draw on")
        if self._font is None:
            pygame.font.init()
            self._font = pygame.font.Font(None, FONT_SIZE)
        if self.mst_flag:
            self._draw_roads(self.roads, MST_COLOR)
        if self.add_road_flag:
            self._draw_roads(self.additional_roads, ADDED_COLOR)
        if self.dpd_flag:
            self._draw_roads(self.new_connections, RANDOM_COLOR)
        if self.gps_flag:
            self._draw_roads(self.gps_connections, GPS_COLOR)
        for index in range(self.graph.city_count()):
            city = self.graph.city(index)
            pygame.draw.circle(self.screen, CITY_COLOR, (city.x, city.y), CITY_RADIUS)
            label = self._font.render(city.name or "NULL", True, TEXT_COLOR)
            self.screen.blit(label, (city.x - label.get_width() * 0.5, city.y - 8.5))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Show planned road networks.")
    parser.add_argument(
        "--data-dir",
        default="../data",
        help="directory holding Cities.txt and Connections.txt",
    )
    args = parser.parse_args(argv)
    window = Window(args.data_dir)
    window.init()
    try:
        window.run()
    finally:
        window.shutdown()
    return 0