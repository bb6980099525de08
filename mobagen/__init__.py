"""Game toolkit: random ranges, 2D points and vectors, transforms, polygons, colours and chess."""

__version__ = "0.0.1"