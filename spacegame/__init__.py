"""A vector-graphics spaceship game on a small node and component scene graph, drawn with pygame."""

__version__ = "0.1.0"