"""Domain objects for stroke comparison.

Geometry classes:
    Point: Immutable 2D point.
    BBox: Immutable axis-aligned bounding box.
    Stroke: Ordered sequence of points in drawing order.

Result classes:
    AnalysisResult: Immutable record of one trace/memory comparison.

Example usage::

    from stroke_recall.domain import Point, Stroke

    stroke = Stroke([Point(0, 0), Point(30, 40)])
    print(stroke.length())  # 50.0
"""

from .geometry import BBox, Point, PointLike, Stroke, StrokeLike
from .result import AnalysisResult

__all__ = [
    'Point', 'BBox', 'Stroke', 'PointLike', 'StrokeLike',
    'AnalysisResult',
]
