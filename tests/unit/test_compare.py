"""Unit tests for trace/memory comparison.

Tests stroke_recall.analysis.compare:
    - analyze: Resample, normalize, diff and score two raw strokes
    - score_from_diffs: Linear penalty with clamping

Includes the reference scenarios (identical, shifted, half-scale and bent
strokes), score range and monotonicity checks.
"""

import random
import unittest

import numpy as np

from stroke_recall.analysis.compare import analyze, score_from_diffs
from stroke_recall.config import SAMPLE_COUNT, SCORE_SENSITIVITY
from stroke_recall.domain.geometry import Point
from stroke_recall.domain.result import AnalysisResult

LINE = [(0, 0), (100, 0)]


def peaked(height):
    """Line from (0, 0) to (100, 0) bent up to a peak of the given height."""
    return [(0, 0), (50, height), (100, 0)]


class TestReferenceScenarios(unittest.TestCase):
    """Known inputs with known outcomes."""

    def test_identical_lines(self):
        result = analyze(LINE, LINE)
        self.assertAlmostEqual(result.score, 100.0, places=9)
        for d in result.diffs:
            self.assertAlmostEqual(d, 0.0, places=9)

    def test_shifted_line(self):
        """Position offset is removed by normalization."""
        result = analyze(LINE, [(0, 100), (100, 100)])
        self.assertAlmostEqual(result.score, 100.0, places=9)

    def test_half_scale_line(self):
        """Size difference is removed by normalization."""
        result = analyze(LINE, [(0, 0), (50, 0)])
        self.assertAlmostEqual(result.score, 100.0, places=9)

    def test_bent_line_scores_lower(self):
        """A triangular path over the same span is a real shape error."""
        result = analyze(LINE, [(0, 0), (50, 50), (100, 0)])
        self.assertLess(result.score, 100.0)
        self.assertGreater(result.score, 0.0)
        # mean |y| of the normalized triangle is about a quarter of its height
        self.assertAlmostEqual(result.score, 100.0 - 12.5 * SCORE_SENSITIVITY, delta=1.0)

    def test_identical_complex_stroke(self):
        stroke = [(0, 0), (20, 40), (40, 0), (60, 40), (80, 0)]
        result = analyze(stroke, stroke)
        self.assertAlmostEqual(result.score, 100.0, places=9)
        self.assertTrue(all(abs(d) < 1e-9 for d in result.diffs))


class TestResultShape(unittest.TestCase):
    """Every sequence in the result has n entries."""

    def setUp(self):
        self.trace = [(10, 10), (40, 80), (90, 30), (120, 60), (150, 15), (160, 90)]
        self.memory = [(300, 300), (320, 350), (370, 320), (400, 345), (410, 390)]
        self.result = analyze(self.trace, self.memory)

    def test_returns_analysis_result(self):
        self.assertIsInstance(self.result, AnalysisResult)

    def test_lengths(self):
        r = self.result
        for seq in (r.diffs, r.normalized_trace, r.normalized_memory,
                    r.raw_trace, r.raw_memory):
            self.assertEqual(len(seq), SAMPLE_COUNT)

    def test_raw_endpoints_match_sources(self):
        r = self.result
        self.assertEqual(r.raw_trace[0], Point(10.0, 10.0))
        self.assertEqual(r.raw_trace[-1], Point(160.0, 90.0))
        self.assertEqual(r.raw_memory[0], Point(300.0, 300.0))
        self.assertEqual(r.raw_memory[-1], Point(410.0, 390.0))

    def test_raw_strokes_stay_in_canvas_coordinates(self):
        bbox = self.result.raw_memory.bbox
        self.assertGreaterEqual(bbox.x_min, 300.0)
        self.assertGreaterEqual(bbox.y_min, 300.0)

    def test_diffs_match_normalized_distances(self):
        r = self.result
        for i in (0, 17, 50, 99):
            expected = r.normalized_trace[i].distance_to(r.normalized_memory[i])
            self.assertAlmostEqual(r.diffs[i], expected, places=9)

    def test_hint_flag_unset(self):
        self.assertIsNone(self.result.is_hint_used)

    def test_custom_sample_count(self):
        r = analyze(self.trace, self.memory, n=20)
        self.assertEqual(len(r.diffs), 20)
        self.assertEqual(len(r.raw_trace), 20)

    def test_deterministic(self):
        again = analyze(self.trace, self.memory)
        self.assertEqual(self.result.to_dict(), again.to_dict())


class TestScoreBehaviour(unittest.TestCase):
    """Score range, monotonicity and sensitivity."""

    def test_monotonic_in_deviation(self):
        """Larger outward bends never score higher."""
        scores = [analyze(LINE, peaked(h)).score for h in (5, 10, 20, 40)]
        for better, worse in zip(scores, scores[1:]):
            self.assertGreater(better, worse)

    def test_score_range_random_strokes(self):
        rng = random.Random(1234)
        for _ in range(50):
            trace = [(rng.uniform(0, 500), rng.uniform(0, 500)) for _ in range(rng.randint(2, 30))]
            memory = [(rng.uniform(0, 500), rng.uniform(0, 500)) for _ in range(rng.randint(2, 30))]
            score = analyze(trace, memory).score
            self.assertGreaterEqual(score, 0.0)
            self.assertLessEqual(score, 100.0)

    def test_reversed_direction_clamps_to_zero(self):
        """Drawing the same line backwards is maximally wrong."""
        result = analyze(LINE, list(reversed(LINE)))
        self.assertEqual(result.score, 0.0)

    def test_rotation_is_penalized(self):
        result = analyze(LINE, [(0, 0), (0, 100)])
        self.assertLess(result.score, 50.0)

    def test_zero_sensitivity_is_perfect(self):
        result = analyze(LINE, peaked(40), sensitivity=0.0)
        self.assertEqual(result.score, 100.0)

    def test_higher_sensitivity_scores_lower(self):
        low = analyze(LINE, peaked(20), sensitivity=1.0).score
        high = analyze(LINE, peaked(20), sensitivity=4.0).score
        self.assertLess(high, low)

    def test_single_point_strokes_degrade_gracefully(self):
        result = analyze([(5, 5)], [(9, 9)])
        self.assertEqual(len(result.diffs), 1)
        self.assertEqual(result.score, 100.0)


class TestScoreFromDiffs(unittest.TestCase):

    def test_linear_penalty(self):
        self.assertAlmostEqual(score_from_diffs(np.full(10, 4.0)), 90.0)

    def test_clamped_at_zero(self):
        self.assertEqual(score_from_diffs(np.array([100.0])), 0.0)

    def test_empty_is_perfect(self):
        self.assertEqual(score_from_diffs(np.zeros(0)), 100.0)

    def test_custom_sensitivity(self):
        self.assertAlmostEqual(score_from_diffs(np.array([10.0]), sensitivity=1.0), 90.0)

    def test_returns_python_float(self):
        self.assertIs(type(score_from_diffs(np.array([1.0]))), float)

    def test_nan_mean_scores_zero(self):
        self.assertEqual(score_from_diffs(np.array([1.0, np.nan])), 0.0)

    def test_non_finite_point_keeps_score_in_range(self):
        result = analyze([(0, 0), (float('nan'), 1), (5, 5)], [(0, 0), (1, 1), (5, 5)])
        self.assertGreaterEqual(result.score, 0.0)
        self.assertLessEqual(result.score, 100.0)


if __name__ == '__main__':
    unittest.main()
