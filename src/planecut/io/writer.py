"""Shape document writer.

This module provides the ShapeWriter class for writing crop results with
the cropped naming convention.
"""

import json
from pathlib import Path
from typing import Any

from planecut.domain import Polygon
from planecut.exceptions import ShapeSaveError


def polygon_to_points(polygon: Polygon) -> list[list[float]]:
    """Convert a polygon to a JSON-friendly point list."""
    return [[p.x, p.y] for p in polygon.points]


class ShapeWriter:
    """Collects crop results and writes them as one JSON document.

    Example:
        writer = ShapeWriter(Path("jobs-cropped.json"))
        writer.add_result("a", polygons)
        writer.save()
    """

    def __init__(self, output_path: Path) -> None:
        """Initialize the writer.

        Args:
            output_path: Path to save the document to
        """
        self._output_path = output_path
        self._results: list[dict[str, Any]] = []

    def add_result(self, name: str, polygons: list[Polygon]) -> None:
        """Record the polygons produced by one job."""
        self._results.append(
            {"name": name, "polygons": [polygon_to_points(pg) for pg in polygons]}
        )

    @property
    def result_count(self) -> int:
        return len(self._results)

    def to_document(self) -> dict[str, Any]:
        return {"results": list(self._results)}

    def save(self) -> Path:
        """Write the document.

        Returns:
            The path written to

        Raises:
            ShapeSaveError: If the file cannot be written
        """
        try:
            self._output_path.parent.mkdir(parents=True, exist_ok=True)
            with self._output_path.open("w", encoding="utf-8") as fh:
                json.dump(self.to_document(), fh, indent=2)
                fh.write("\n")
        except OSError as e:
            raise ShapeSaveError(str(self._output_path), str(e)) from e
        return self._output_path

    @staticmethod
    def get_output_path(input_path: Path, suffix: str = "-cropped") -> Path:
        """Generate output path with suffix.

        Args:
            input_path: Original document path
            suffix: Suffix to add before the extension

        Returns:
            Path with suffix added (e.g., "jobs.json" -> "jobs-cropped.json")
        """
        return input_path.parent / f"{input_path.stem}{suffix}{input_path.suffix or '.json'}"
