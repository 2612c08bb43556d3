"""Planecut - overlap classification and polygon cropping for 2D vector art.

Planecut is the geometry kernel behind plotter-art generators. It models points,
segments, open chains (multilines) and closed polygons, reports exactly how two
primitives touch (at a vertex, along part of an edge, entirely, or within an
area), and clips one polygon against another with a graph-based crop.

Example:
    >>> from planecut.domain import Polygon
    >>> from planecut.config import CropMode
    >>> subject = Polygon([(1, 1), (4, 1), (4, 4), (1, 4)])
    >>> frame = Polygon([(0, 0), (3, 0), (3, 3), (0, 3)])
    >>> subject.crop(frame, CropMode.INCLUSIVE)
    [Polygon(points=[Point(x=1.0, y=1.0), ...])]
"""

__version__ = "0.1.0"
__author__ = "Planecut contributors"

__all__ = ["__author__", "__version__"]
