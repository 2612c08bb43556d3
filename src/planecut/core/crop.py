"""Crop entry points for polygons and segments.

`crop_polygon` decides the easy cases (equal polygons, and polygons whose
boundaries never touch) directly, and hands everything else to `CropGraph`.
"""

import logging

from planecut.config.settings import CropMode
from planecut.core.crop_graph import CropGraph
from planecut.core.interpolate import interpolate_2d
from planecut.core.opinion import SegmentEntireOp, SegmentSubsegmentOp
from planecut.core.opinion_set import SegmentOpSet, describe
from planecut.core.overlaps import (
    polygon_overlaps_point,
    polygon_overlaps_segment,
    segment_overlaps_segment,
)
from planecut.domain import Polygon, Segment
from planecut.exceptions import InvariantViolationError, UnsupportedTopologyError

logger = logging.getLogger(__name__)


def _boundaries_touch(a: Polygon, b: Polygon) -> bool:
    b_edges = b.to_segments()
    return any(
        segment_overlaps_segment(ea, eb) is not None for ea in a.to_segments() for eb in b_edges
    )


def crop_polygon(subject: Polygon, frame: Polygon, mode: CropMode) -> list[Polygon]:
    """Crop `subject` against `frame`.

    Args:
        subject: Polygon being cropped
        frame: Polygon cropped against
        mode: INCLUSIVE keeps the part of `subject` inside `frame`;
            EXCLUSIVE keeps the part outside it

    Returns:
        Zero or more polygons

    Raises:
        UnsupportedTopologyError: If an exclusive crop would leave a hole in
            `subject`
        InvariantViolationError: If the shapes are in a configuration that
            cannot occur (including unresolvable graph walks)
    """
    mode = CropMode(mode)

    if subject == frame:
        return [subject] if mode is CropMode.INCLUSIVE else []

    if not _boundaries_touch(subject, frame):
        return _crop_disjoint_boundaries(subject, frame, mode)

    logger.debug(
        "Cropping %d-gon against %d-gon (%s)", len(subject), len(frame), mode.value
    )
    resultant = CropGraph(subject, frame, mode).run()
    logger.debug("Crop produced %d polygon(s)", len(resultant))
    return resultant


def _crop_disjoint_boundaries(subject: Polygon, frame: Polygon, mode: CropMode) -> list[Polygon]:
    """Crop when the two boundaries never touch: nested or apart."""
    subject_holds_frame = subject.totally_contains(frame)
    frame_holds_subject = frame.totally_contains(subject)
    apart = subject.contains_not_at_all(frame) and frame.contains_not_at_all(subject)

    if mode is CropMode.INCLUSIVE:
        if subject_holds_frame:
            return [frame]
        if frame_holds_subject:
            return [subject]
        if apart:
            return []
    else:
        if subject_holds_frame:
            raise UnsupportedTopologyError(
                "exclusive crop of a polygon by a frame inside it would need a cavity"
            )
        if frame_holds_subject:
            return []
        if apart:
            return [subject]

    raise InvariantViolationError(
        f"polygons {subject!r} and {frame!r} have disjoint boundaries "
        "but are neither nested nor apart"
    )


def crop_segment(segment: Segment, frame: Polygon, mode: CropMode) -> list[Segment]:
    """Crop a segment against a polygon.

    Args:
        segment: Segment being cropped
        frame: Polygon cropped against
        mode: INCLUSIVE keeps the pieces inside (or on) `frame`; EXCLUSIVE
            keeps the pieces outside it

    Returns:
        The kept pieces, in order along `segment`, each pointing the same way
    """
    mode = CropMode(mode)
    found = polygon_overlaps_segment(frame, segment)
    logger.debug("Segment contacts: %s", describe(found[1] if found else None))

    if mode is CropMode.INCLUSIVE:
        if found is None:
            return []
        _, sg_ops = found
        if sg_ops == [SegmentEntireOp()]:
            return [segment]
        pieces = [op.segment for op in sg_ops if isinstance(op, SegmentSubsegmentOp)]
        return sorted(pieces, key=lambda p: interpolate_2d(segment.i, segment.f, p.i))

    if found is None:
        return [segment]

    # Cut at every boundary contact and keep the pieces lying outside.
    sg_set = SegmentOpSet(segment)
    for op in found[1]:
        sg_set.add(op)
    cuts = sg_set.to_cuts()
    kept: list[Segment] = []
    for (start, _), (end, _) in zip(cuts, cuts[1:]):
        piece = Segment(start, end)
        if polygon_overlaps_point(frame, piece.midpoint) is not None:
            continue
        merged = kept[-1].try_add(piece) if kept else None
        if merged is not None:
            kept[-1] = merged
        else:
            kept.append(piece)
    return kept
