"""Unit tests for overlay helpers.

Tests stroke_recall.utils:
    - diff_to_color / heatmap_colors / result_colors / to_css
    - morph: Interpolation between index-aligned strokes
    - path_to_svg_d: SVG path serialization
"""

import unittest

from stroke_recall.analysis.compare import analyze
from stroke_recall.domain.geometry import Point
from stroke_recall.utils.geometry import morph, path_to_svg_d
from stroke_recall.utils.heatmap import diff_to_color, heatmap_colors, result_colors, to_css


class TestDiffToColor(unittest.TestCase):
    """Green at zero error, yellow at half saturation, red at saturation."""

    def test_zero_is_green(self):
        self.assertEqual(diff_to_color(0.0), (0, 200, 0))

    def test_quarter_intensity(self):
        self.assertEqual(diff_to_color(3.75), (128, 200, 0))

    def test_half_intensity_is_yellow(self):
        self.assertEqual(diff_to_color(7.5), (255, 200, 0))

    def test_three_quarter_intensity(self):
        self.assertEqual(diff_to_color(11.25), (255, 100, 0))

    def test_saturation_is_red(self):
        self.assertEqual(diff_to_color(15.0), (255, 0, 0))

    def test_beyond_saturation_clamped(self):
        self.assertEqual(diff_to_color(500.0), (255, 0, 0))

    def test_negative_treated_as_zero(self):
        self.assertEqual(diff_to_color(-4.0), (0, 200, 0))

    def test_custom_saturation(self):
        self.assertEqual(diff_to_color(1.0, saturation=2.0), (255, 200, 0))

    def test_css(self):
        self.assertEqual(to_css((255, 100, 0)), 'rgb(255, 100, 0)')


class TestHeatmapColors(unittest.TestCase):

    def test_one_color_per_diff(self):
        colors = heatmap_colors([0.0, 7.5, 15.0])
        self.assertEqual(colors, [(0, 200, 0), (255, 200, 0), (255, 0, 0)])

    def test_result_colors(self):
        result = analyze([(0, 0), (100, 0)], [(0, 0), (50, 30), (100, 0)], n=25)
        self.assertEqual(len(result_colors(result)), 25)


class TestMorph(unittest.TestCase):

    def setUp(self):
        self.memory = [(0, 0), (10, 10), (20, 0)]
        self.trace = [(0, 10), (10, 20), (20, 10)]

    def test_zero_is_source(self):
        out = morph(self.memory, self.trace, 0.0)
        self.assertEqual(out.to_list(), [[0, 0], [10, 10], [20, 0]])

    def test_one_is_target(self):
        out = morph(self.memory, self.trace, 1.0)
        self.assertEqual(out.to_list(), [[0, 10], [10, 20], [20, 10]])

    def test_halfway(self):
        out = morph(self.memory, self.trace, 0.5)
        self.assertEqual(out[1], Point(10, 15))

    def test_t_clamped(self):
        self.assertEqual(morph(self.memory, self.trace, 3.0).to_list(),
                         morph(self.memory, self.trace, 1.0).to_list())

    def test_length_mismatch(self):
        with self.assertRaises(ValueError):
            morph(self.memory, self.trace[:2], 0.5)


class TestPathToSvgD(unittest.TestCase):

    def test_basic(self):
        self.assertEqual(path_to_svg_d([(0, 0), (10, 5)]), 'M 0 0 L 10 5')

    def test_offset_and_scale(self):
        self.assertEqual(path_to_svg_d([(1, 2)], offset_x=10, offset_y=20, scale=2), 'M 12 24')

    def test_fractional(self):
        self.assertEqual(path_to_svg_d([(1.5, 2.25)]), 'M 1.5 2.25')

    def test_empty(self):
        self.assertEqual(path_to_svg_d([]), '')


if __name__ == '__main__':
    unittest.main()
