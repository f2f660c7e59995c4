"""Shared configuration for stroke comparison.

This module centralizes the constants used by:
    - analysis.resample / analysis.normalize / analysis.compare
    - utils.heatmap
    - api.services and api.store

Functions that use these values accept keyword overrides, so the constants
here are the reproducible defaults rather than hard limits.
"""

# Number of equidistant points each stroke is resampled to before comparison
SAMPLE_COUNT = 100

# Longer bounding-box side of a normalized stroke, in canonical units
CANONICAL_SIZE = 100.0

# Linear score penalty per unit of mean normalized distance.
# Typical errors of 0-40 canonical units map onto the 100-0 score range.
SCORE_SENSITIVITY = 2.5

MAX_SCORE = 100.0

# Strokes shorter than this are rejected before comparison
MIN_STROKE_POINTS = 6

# Normalized distance at which the heatmap reaches full red
HEATMAP_SATURATION = 15.0

# Default session database
DB_PATH = 'stroke_recall.db'
