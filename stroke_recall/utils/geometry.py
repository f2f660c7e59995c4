"""Geometric utility functions.

This module supplements the methods on the domain objects with helpers that
produce display data for overlays.

The module provides the following functions:
    morph: Interpolate between two index-aligned strokes.
    path_to_svg_d: Serialize a stroke as an SVG path ``d`` attribute.

Example usage::

    from stroke_recall.utils.geometry import morph, path_to_svg_d

    halfway = morph(result.raw_memory, result.raw_trace, 0.5)
    d = path_to_svg_d(halfway)
"""

from __future__ import annotations

from ..domain.geometry import Stroke, StrokeLike


def morph(source: StrokeLike, target: StrokeLike, t: float) -> Stroke:
    """Blend two index-aligned strokes.

    Used by result views with a slider between the user's drawing and the
    reference: ``t=0`` returns the source, ``t=1`` returns the target.

    Args:
        source: Stroke at ``t=0`` (typically the raw memory stroke).
        target: Stroke at ``t=1`` (typically the raw trace stroke).
        t: Blend factor, clamped to [0, 1].

    Returns:
        New Stroke with the same number of points as the inputs.

    Raises:
        ValueError: If the strokes have different lengths.
    """
    a = Stroke.coerce(source)
    b = Stroke.coerce(target)
    if len(a) != len(b):
        raise ValueError(f"cannot morph strokes of {len(a)} and {len(b)} points")
    t = min(max(t, 0.0), 1.0)
    return Stroke([p.lerp(q, t) for p, q in zip(a, b)])


def path_to_svg_d(stroke: StrokeLike, offset_x: float = 0.0,
                  offset_y: float = 0.0, scale: float = 1.0) -> str:
    """Serialize a stroke as ``"M x y L x y ..."``.

    Each point is mapped to ``(x * scale + offset_x, y * scale + offset_y)``.

    Example:
        >>> path_to_svg_d([(0, 0), (10, 5)])
        'M 0 0 L 10 5'
    """
    s = Stroke.coerce(stroke)
    parts = []
    for i, p in enumerate(s):
        cmd = 'M' if i == 0 else 'L'
        x = p.x * scale + offset_x
        y = p.y * scale + offset_y
        parts.append(f"{cmd} {_fmt(x)} {_fmt(y)}")
    return ' '.join(parts)


def _fmt(value: float) -> str:
    """Format a coordinate without a trailing ``.0`` for whole numbers."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))
