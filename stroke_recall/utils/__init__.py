"""Utility functions for stroke display and overlays.

Geometry utilities:
    morph: Interpolate between two index-aligned strokes.
    path_to_svg_d: SVG path serialization.

Heatmap utilities:
    diff_to_color, heatmap_colors, result_colors, to_css: Map per-point
        errors to green/yellow/red colors.
"""

from .geometry import morph, path_to_svg_d
from .heatmap import diff_to_color, heatmap_colors, result_colors, to_css

__all__ = [
    'morph', 'path_to_svg_d',
    'diff_to_color', 'heatmap_colors', 'result_colors', 'to_css',
]
