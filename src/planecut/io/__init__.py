"""Shape document I/O layer for planecut.

This module handles reading and writing JSON shape documents. It provides a
clean abstraction layer between the on-disk format and the domain models.

Key responsibilities:
- Load and validate crop documents (pydantic models)
- Load single polygons
- Write crop results with the cropped naming convention

Key classes:
- ShapeReader: Load documents and extract jobs
- ShapeWriter: Save crop results
"""

from planecut.io.reader import CropDocument, CropJob, PolygonDocument, ShapeReader
from planecut.io.writer import ShapeWriter, polygon_to_points

__all__ = [
    "CropDocument",
    "CropJob",
    "PolygonDocument",
    "ShapeReader",
    "ShapeWriter",
    "polygon_to_points",
]
