"""Interpolation fractions along a segment."""

from dataclasses import dataclass
from typing import ClassVar

from planecut.exceptions import InterpolationError
from planecut.utils.fuzzy import approx_eq


@dataclass(frozen=True, slots=True, order=True)
class Percent:
    """A location along a segment as a fraction of its length.

    Exactly-at-an-endpoint is kept distinct from close-to-an-endpoint: values
    built through `Percent.new` that are within tolerance of 0 or 1 snap to
    `Percent.ZERO` or `Percent.ONE`, so `is_zero`/`is_one` are exact tests.

    Attributes:
        value: Fraction in [0, 1]
    """

    ZERO: ClassVar["Percent"]
    ONE: ClassVar["Percent"]

    value: float

    def __post_init__(self) -> None:
        value = float(self.value)
        if not 0.0 <= value <= 1.0:
            raise InterpolationError(f"percent {value} is outside [0, 1]")
        object.__setattr__(self, "value", value)

    @classmethod
    def new(cls, value: float) -> "Percent":
        """Build a percent, snapping near-endpoint values to the endpoint tags.

        Raises:
            InterpolationError: If the value is outside [0, 1] beyond tolerance
        """
        if approx_eq(value, 0.0):
            return cls.ZERO
        if approx_eq(value, 1.0):
            return cls.ONE
        if value < 0.0:
            raise InterpolationError(f"percent {value} is below zero")
        if value > 1.0:
            raise InterpolationError(f"percent {value} is above one")
        return cls(value)

    @property
    def is_zero(self) -> bool:
        return self.value == 0.0

    @property
    def is_one(self) -> bool:
        return self.value == 1.0

    @property
    def is_endpoint(self) -> bool:
        return self.is_zero or self.is_one


Percent.ZERO = Percent(0.0)
Percent.ONE = Percent(1.0)
