"""Core algorithms for planecut.

This module contains the core algorithms for:

- Low-level geometry (signed angles, winding sums, line intersection)
- Overlap classification (how two shapes touch, as typed opinions)
- Opinion aggregation (coverage, merging, canonicalization)
- Polygon and segment cropping (directed crop graph)
- Batch crop processing

All functions are designed to be:
- Stateless apart from their own local accumulators
- Safe for use in worker processes

Key functions:
- segment_overlaps_segment, polygon_overlaps_segment, ...: Classifier
- totally_covers, overlaps: Coverage and contact predicates
- crop_polygon, crop_segment: Crop entry points
- crop_job: Picklable batch worker

Key classes:
- SegmentOpSet, MultilineOpSet, PolygonOpSet: Opinion aggregators
- CropGraph: Directed-graph polygon crop
- CropProcessor: Batch crop orchestrator
"""

from planecut.core.crop import crop_polygon, crop_segment
from planecut.core.crop_graph import CropGraph
from planecut.core.geometry import (
    abp,
    is_colinear_3,
    is_colinear_n,
    line_intersection,
    winding_sum,
)
from planecut.core.interpolate import extrapolate_2d, interpolate, interpolate_2d
from planecut.core.opinion_set import MultilineOpSet, PolygonOpSet, SegmentOpSet
from planecut.core.overlaps import (
    multiline_overlaps_multiline,
    multiline_overlaps_point,
    multiline_overlaps_segment,
    overlaps,
    point_overlaps_point,
    polygon_overlaps_multiline,
    polygon_overlaps_point,
    polygon_overlaps_polygon,
    polygon_overlaps_segment,
    segment_overlaps_point,
    segment_overlaps_segment,
    totally_covers,
)
from planecut.core.processor import CropProcessor, crop_job

__all__ = [
    # Crop
    "CropGraph",
    "crop_polygon",
    "crop_segment",
    # Processor
    "CropProcessor",
    "crop_job",
    # Opinion sets
    "MultilineOpSet",
    "PolygonOpSet",
    "SegmentOpSet",
    # Geometry functions
    "abp",
    "extrapolate_2d",
    "interpolate",
    "interpolate_2d",
    "is_colinear_3",
    "is_colinear_n",
    "line_intersection",
    "winding_sum",
    # Classifier
    "multiline_overlaps_multiline",
    "multiline_overlaps_point",
    "multiline_overlaps_segment",
    "overlaps",
    "point_overlaps_point",
    "polygon_overlaps_multiline",
    "polygon_overlaps_point",
    "polygon_overlaps_polygon",
    "polygon_overlaps_segment",
    "segment_overlaps_point",
    "segment_overlaps_segment",
    "totally_covers",
]
