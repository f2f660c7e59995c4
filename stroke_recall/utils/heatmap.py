"""Map per-point errors to heatmap colors.

Small errors are green, mid-range errors yellow and large errors red. The
ramp saturates at ``HEATMAP_SATURATION`` normalized units, so everything at
or beyond that distance is drawn full red.
"""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

from ..config import HEATMAP_SATURATION
from ..domain.result import AnalysisResult

RGB = Tuple[int, int, int]

_GREEN_LEVEL = 200  # green channel at zero error


def diff_to_color(diff: float, saturation: float = HEATMAP_SATURATION) -> RGB:
    """Color for a single normalized distance.

    Below half intensity the red channel ramps up (green to yellow); above
    it the green channel ramps down (yellow to red).
    """
    intensity = min(1.0, max(0.0, diff) / saturation)
    if intensity < 0.5:
        return (_round_half_up(255 * intensity * 2), _GREEN_LEVEL, 0)
    return (255, _round_half_up(_GREEN_LEVEL * (1 - (intensity - 0.5) * 2)), 0)


def heatmap_colors(diffs: Sequence[float],
                   saturation: float = HEATMAP_SATURATION) -> List[RGB]:
    """One color per diff, in stroke order."""
    return [diff_to_color(d, saturation) for d in diffs]


def result_colors(result: AnalysisResult,
                  saturation: float = HEATMAP_SATURATION) -> List[RGB]:
    """Heatmap colors for every point of an analysis result."""
    return heatmap_colors(result.diffs, saturation)


def to_css(color: RGB) -> str:
    """``rgb(r, g, b)`` string for SVG/CSS stroke attributes."""
    r, g, b = color
    return f"rgb({r}, {g}, {b})"


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
