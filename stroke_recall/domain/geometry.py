"""Geometric value objects for stroke comparison."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Tuple, Union
import math


@dataclass(frozen=True)
class Point:
    """Immutable 2D point in input-device (pixel) coordinates."""
    x: float
    y: float

    def distance_to(self, other: Point) -> float:
        """Euclidean distance to another point."""
        dx = self.x - other.x
        dy = self.y - other.y
        return math.sqrt(dx * dx + dy * dy)

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Point:
        return Point(self.x * scalar, self.y * scalar)

    def lerp(self, other: Point, t: float) -> Point:
        """Point a fraction ``t`` of the way from this point to ``other``."""
        return Point(self.x + (other.x - self.x) * t,
                     self.y + (other.y - self.y) * t)

    def to_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def to_list(self) -> List[float]:
        """Convert to list for JSON serialization."""
        return [float(self.x), float(self.y)]

    def to_dict(self) -> Dict[str, float]:
        """Convert to the ``{"x": .., "y": ..}`` form used in saved sessions."""
        return {'x': float(self.x), 'y': float(self.y)}

    @classmethod
    def from_tuple(cls, t: Tuple[float, float]) -> Point:
        return cls(float(t[0]), float(t[1]))

    @classmethod
    def from_list(cls, lst: List[float]) -> Point:
        return cls(float(lst[0]), float(lst[1]))

    @classmethod
    def from_dict(cls, d: Dict[str, float]) -> Point:
        return cls(float(d['x']), float(d['y']))

    @classmethod
    def coerce(cls, value: PointLike) -> Point:
        """Accept a Point, an ``(x, y)`` pair or an ``{"x", "y"}`` mapping."""
        if isinstance(value, Point):
            return value
        if isinstance(value, dict):
            return cls.from_dict(value)
        if isinstance(value, (str, bytes)):
            raise TypeError(f"expected a point, got {type(value).__name__} {value!r}")
        return cls.from_tuple(value)


PointLike = Union[Point, Tuple[float, float], List[float], Dict[str, float]]


@dataclass(frozen=True)
class BBox:
    """Immutable axis-aligned bounding box."""
    x_min: float
    y_min: float
    x_max: float
    y_max: float

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min

    @property
    def center(self) -> Point:
        return Point(
            (self.x_min + self.x_max) / 2,
            (self.y_min + self.y_max) / 2
        )

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x_min, self.y_min, self.x_max, self.y_max)

    @classmethod
    def from_points(cls, points: List[Point]) -> BBox:
        """Bounding box containing all points.

        An empty point list has no meaningful extent; callers are expected
        to reject empty strokes before asking for their bounds.
        """
        if not points:
            return cls(0, 0, 0, 0)
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return cls(min(xs), min(ys), max(xs), max(ys))


@dataclass
class Stroke:
    """A freehand stroke as an ordered sequence of points (drawing order)."""
    points: List[Point] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, idx) -> Point:
        return self.points[idx]

    @property
    def start(self) -> Point:
        """First point of stroke."""
        return self.points[0] if self.points else Point(0, 0)

    @property
    def end(self) -> Point:
        """Last point of stroke."""
        return self.points[-1] if self.points else Point(0, 0)

    @property
    def bbox(self) -> BBox:
        return BBox.from_points(self.points)

    @property
    def is_degenerate(self) -> bool:
        """True for strokes with fewer than two points."""
        return len(self.points) < 2

    def length(self) -> float:
        """Total arc length of stroke."""
        total = 0.0
        for i in range(1, len(self.points)):
            total += self.points[i].distance_to(self.points[i - 1])
        return total

    def to_list(self) -> List[List[float]]:
        """Convert to nested list for JSON serialization."""
        return [p.to_list() for p in self.points]

    def to_dicts(self) -> List[Dict[str, float]]:
        return [p.to_dict() for p in self.points]

    @classmethod
    def from_list(cls, lst: List[List[float]]) -> Stroke:
        return cls([Point.from_list(p) for p in lst])

    @classmethod
    def from_tuples(cls, tuples: Iterable[Tuple[float, float]]) -> Stroke:
        return cls([Point.from_tuple(t) for t in tuples])

    @classmethod
    def from_dicts(cls, dicts: Iterable[Dict[str, float]]) -> Stroke:
        return cls([Point.from_dict(d) for d in dicts])

    @classmethod
    def coerce(cls, value: StrokeLike) -> Stroke:
        """Build a Stroke from a Stroke or any sequence of point-likes."""
        if isinstance(value, Stroke):
            return value
        return cls([Point.coerce(p) for p in value])


StrokeLike = Union[Stroke, Iterable[PointLike]]
