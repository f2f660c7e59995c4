"""Trace-then-recall stroke comparison.

A user traces a reference image freehand, then redraws it from memory. This
package resamples both strokes to the same number of equidistant points,
normalizes away position and size, and scores how closely the memory stroke
follows the trace.

The package is organized into the following modules:
    domain: Point, BBox, Stroke and AnalysisResult value objects.
    analysis: Resampling, normalization, comparison and error regions.
    utils: Overlay helpers (heatmap colors, morphing, SVG paths).
    api: ComparisonService and SessionStore for practice sessions.
    cli: ``stroke-recall`` command-line entry point.

Example usage::

    from stroke_recall import analyze, resample

    result = analyze([(0, 0), (100, 0)], [(0, 100), (50, 100)])
    print(result.score)  # 100.0

Attributes:
    __version__ (str): Package version string.
"""

from .analysis import analyze, normalize, resample, summarize_error_regions
from .api import ComparisonService, SessionStore
from .domain import AnalysisResult, BBox, Point, Stroke
from .exceptions import (
    NoReferenceError,
    NonFiniteStrokeError,
    SessionStoreError,
    StrokeRecallError,
    StrokeTooShortError,
)

__all__ = [
    # Core
    'resample', 'normalize', 'analyze', 'summarize_error_regions',
    # Domain objects
    'Point', 'BBox', 'Stroke', 'AnalysisResult',
    # Services
    'ComparisonService', 'SessionStore',
    # Errors
    'StrokeRecallError', 'StrokeTooShortError', 'NonFiniteStrokeError',
    'NoReferenceError', 'SessionStoreError',
]

__version__ = '1.0.0'
