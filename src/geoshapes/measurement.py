"""
Unit-safe distance value.
"""

from dataclasses import dataclass

METERS_PER_KILOMETER = 1000.0
METERS_PER_MILE = 1609.344


@dataclass(frozen=True, order=True)
class Distance:
    """A distance stored in meters, with kilometer and mile conversions."""

    meters: float

    @classmethod
    def from_meters(cls, meters: float) -> "Distance":
        return cls(meters)

    @classmethod
    def from_kilometers(cls, kilometers: float) -> "Distance":
        return cls(kilometers * METERS_PER_KILOMETER)

    @classmethod
    def from_miles(cls, miles: float) -> "Distance":
        return cls(miles * METERS_PER_MILE)

    def in_meters(self) -> float:
        return self.meters

    def in_kilometers(self) -> float:
        return self.meters / METERS_PER_KILOMETER

    def in_miles(self) -> float:
        return self.meters / METERS_PER_MILE

    def __add__(self, other: "Distance") -> "Distance":
        if not isinstance(other, Distance):
            return NotImplemented
        return Distance(self.meters + other.meters)

    def __sub__(self, other: "Distance") -> "Distance":
        if not isinstance(other, Distance):
            return NotImplemented
        return Distance(self.meters - other.meters)

    def __repr__(self) -> str:
        return f"Distance({self.meters!r} m)"
