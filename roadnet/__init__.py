"""Road network planning on a graph of cities, with an interactive map view."""

__version__ = "0.1.0"