"""Exception hierarchy for Planecut."""

from typing import Any


class PlanecutError(Exception):
    """Base exception for all Planecut errors."""

    pass


class GeometryError(PlanecutError):
    """Errors in geometric construction or calculations."""

    pass


class ConstructionError(GeometryError):
    """A shape could not be built from the given points."""

    def __init__(self, kind: str, reason: str) -> None:
        self.kind = kind
        self.reason = reason
        super().__init__(f"Cannot construct {kind}: {reason}")


class InterpolationError(GeometryError):
    """A point could not be located along a segment."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Interpolation failed: {reason}")


class UnsupportedTopologyError(GeometryError):
    """The requested operation would produce a shape that cannot be represented.

    Raised, for example, when an exclusive crop would carve a cavity out of
    the interior of the subject polygon. Callers may catch this to choose a
    fallback strategy.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Unsupported topology: {reason}")


class InvariantViolationError(PlanecutError):
    """An internal consistency check failed.

    These signal a gap in the case analysis rather than bad input, and are
    never retried or defaulted away.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)


class OverlapCaseError(InvariantViolationError):
    """Two colinear segments produced an inconsistent endpoint classification."""

    def __init__(self, sa: Any, sb: Any, details: str) -> None:
        self.sa = sa
        self.sb = sb
        self.details = details
        super().__init__(f"Unclassifiable overlap between {sa!r} and {sb!r}: {details}")


class CropTraversalError(InvariantViolationError):
    """Crop graph extraction reached a branch it could not resolve."""

    def __init__(self, node: Any, choices: list[Any]) -> None:
        self.node = node
        self.choices = choices
        super().__init__(
            f"Cannot resolve crop graph branch at {node!r}: "
            f"{len(choices)} candidate(s) {choices!r}"
        )


class ShapeFileError(PlanecutError):
    """Errors related to reading or writing shape documents."""

    pass


class ShapeLoadError(ShapeFileError):
    """Error loading a shape document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load shapes '{path}': {reason}")


class ShapeSaveError(ShapeFileError):
    """Error saving a shape document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save shapes '{path}': {reason}")


class ProcessingCancelledError(PlanecutError):
    """Processing was cancelled by user."""

    def __init__(self, processed_count: int, pending_count: int) -> None:
        self.processed_count = processed_count
        self.pending_count = pending_count
        super().__init__(
            f"Processing cancelled: {processed_count} completed, {pending_count} pending"
        )
