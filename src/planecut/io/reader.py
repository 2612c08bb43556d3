"""Shape document reader.

This module provides the ShapeReader class for loading JSON crop documents
and converting them into domain models.
"""

import json
from collections.abc import Iterator
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from planecut.config.settings import CropMode
from planecut.domain import Polygon
from planecut.exceptions import PlanecutError, ShapeLoadError

PointList = list[tuple[float, float]]


class CropJob(BaseModel):
    """One subject/frame pair to crop."""

    name: str = Field(min_length=1, description="Job name, used to match results")
    subject: PointList = Field(min_length=3, description="Subject polygon points")
    frame: PointList = Field(min_length=3, description="Frame polygon points")
    mode: CropMode | None = Field(
        default=None,
        description="Crop mode (processor default if omitted)",
    )

    def subject_polygon(self) -> Polygon:
        return Polygon(self.subject)

    def frame_polygon(self) -> Polygon:
        return Polygon(self.frame)


class CropDocument(BaseModel):
    """Top-level crop document: a list of jobs."""

    jobs: list[CropJob] = Field(default_factory=list)


class PolygonDocument(BaseModel):
    """A single polygon, as used by `planecut locate`."""

    points: PointList = Field(min_length=3)


class ShapeReader:
    """Loads crop documents and extracts jobs.

    Example:
        reader = ShapeReader(Path("jobs.json"))
        reader.load()
        for job in reader.iter_jobs():
            print(job.name)
    """

    def __init__(self, path: Path) -> None:
        """Initialize the reader.

        Args:
            path: Path to the JSON document
        """
        self._path = path
        self._document: CropDocument | None = None

    def _read_json(self) -> object:
        if not self._path.exists():
            raise ShapeLoadError(str(self._path), "file not found")
        try:
            with self._path.open(encoding="utf-8") as fh:
                return json.load(fh)
        except (OSError, json.JSONDecodeError) as e:
            raise ShapeLoadError(str(self._path), str(e)) from e

    def load(self) -> CropDocument:
        """Load and validate the document.

        Returns:
            The validated document

        Raises:
            ShapeLoadError: If the file is missing, is not JSON, or fails
                validation
        """
        raw = self._read_json()
        try:
            self._document = CropDocument.model_validate(raw)
        except ValidationError as e:
            raise ShapeLoadError(str(self._path), f"invalid crop document: {e}") from e
        return self._document

    @property
    def job_count(self) -> int:
        if self._document is None:
            raise RuntimeError("Document not loaded. Call load() first.")
        return len(self._document.jobs)

    def iter_jobs(self) -> Iterator[CropJob]:
        """Iterate over jobs in document order.

        Raises:
            RuntimeError: If the document has not been loaded yet
        """
        if self._document is None:
            raise RuntimeError("Document not loaded. Call load() first.")
        yield from self._document.jobs

    def read_polygon(self) -> Polygon:
        """Load the file as a single polygon.

        Accepts either `{"points": [[x, y], ...]}` or a bare point list.

        Raises:
            ShapeLoadError: If the file does not describe a valid polygon
        """
        raw = self._read_json()
        if isinstance(raw, list):
            raw = {"points": raw}
        try:
            doc = PolygonDocument.model_validate(raw)
            return Polygon(doc.points)
        except (ValidationError, PlanecutError) as e:
            raise ShapeLoadError(str(self._path), f"invalid polygon: {e}") from e
