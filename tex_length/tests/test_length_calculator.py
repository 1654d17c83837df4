"""Tests covering the aspect-ratio word formulas."""
import unittest

from tex_length.model.elements import ColumnMode, FigureEnvironment, ImageUsage
from tex_length.model.length_guide import LengthGuide
from tex_length.parser.length_calculator import LengthCalculator
from tex_length.utils.errors import FatalMismatchError
from tex_length.utils.units import round_half_up


class LengthCalculatorTest(unittest.TestCase):
    """Validate image word-equivalents."""

    def setUp(self) -> None:
        self.calculator = LengthCalculator()

    def test_single_column_formula(self) -> None:
        estimate = self.calculator.estimate(ImageUsage("a.pdf", 150.0, 100.0), ColumnMode.SINGLE)
        self.assertEqual(estimate.aspect_ratio, 1.5)
        self.assertEqual(estimate.word_equivalent, 120)
        self.assertFalse(estimate.is_two_column)

    def test_double_column_formula(self) -> None:
        estimate = self.calculator.estimate(ImageUsage("b.pdf", 300.0, 100.0), ColumnMode.DOUBLE)
        self.assertEqual(estimate.aspect_ratio, 3.0)
        self.assertEqual(estimate.word_equivalent, 240)
        self.assertTrue(estimate.is_two_column)

    def test_result_rounds_up(self) -> None:
        # 150 / 1.6 + 20 = 113.75
        self.assertEqual(self.calculator.word_equivalent(1.6, ColumnMode.SINGLE), 114)

    def test_aspect_ratio_rounded_to_three_places(self) -> None:
        self.assertEqual(self.calculator.aspect_ratio(221.3985, 120.16223), 1.842)
        self.assertEqual(self.calculator.aspect_ratio(2.0, 3.0), 0.667)

    def test_scaling_leaves_estimate_unchanged(self) -> None:
        base = self.calculator.estimate(ImageUsage("c.pdf", 246.0, 171.0), ColumnMode.SINGLE)
        for factor in (0.5, 2.0, 7.25):
            scaled = self.calculator.estimate(ImageUsage("c.pdf", 246.0 * factor, 171.0 * factor), ColumnMode.SINGLE)
            self.assertEqual(scaled.aspect_ratio, base.aspect_ratio)
            self.assertEqual(scaled.word_equivalent, base.word_equivalent)

    def test_unknown_column_mode_is_fatal(self) -> None:
        with self.assertRaises(FatalMismatchError):
            self.calculator.word_equivalent(1.5, "triple")

    def test_zero_height_is_fatal(self) -> None:
        with self.assertRaises(FatalMismatchError):
            self.calculator.aspect_ratio(100.0, 0.0)

    def test_zero_width_is_fatal(self) -> None:
        with self.assertRaises(FatalMismatchError):
            self.calculator.estimate(ImageUsage("a.pdf", 0.0, 100.0), ColumnMode.SINGLE)

    def test_ratio_rounding_to_zero_is_fatal(self) -> None:
        # 0.04 / 100 rounds to 0.000
        with self.assertRaises(FatalMismatchError):
            self.calculator.estimate(ImageUsage("thin.pdf", 0.04, 100.0), ColumnMode.DOUBLE)

    def test_non_positive_ratio_is_fatal(self) -> None:
        with self.assertRaises(FatalMismatchError):
            self.calculator.word_equivalent(0.0, ColumnMode.SINGLE)

    def test_estimate_all_uses_paired_figure(self) -> None:
        images = [ImageUsage("a.pdf", 150.0, 100.0), ImageUsage("b.pdf", 300.0, 100.0)]
        figures = [
            FigureEnvironment(index=0, column_mode=ColumnMode.SINGLE, position=0),
            FigureEnvironment(index=1, column_mode=ColumnMode.DOUBLE, position=40),
        ]
        estimates = self.calculator.estimate_all(images, figures)
        self.assertEqual([estimate.word_equivalent for estimate in estimates], [120, 240])

    def test_custom_guide(self) -> None:
        guide = LengthGuide(single_column_words=100.0, single_column_offset=0.0)
        calculator = LengthCalculator(guide)
        self.assertEqual(calculator.word_equivalent(2.0, ColumnMode.SINGLE), 50)


class RoundHalfUpTest(unittest.TestCase):
    """Rounding ties go away from zero."""

    def test_ties(self) -> None:
        self.assertEqual(round_half_up(1.2345, 3), 1.235)
        self.assertEqual(round_half_up(0.0005, 3), 0.001)
        self.assertEqual(round_half_up(1.5, 0), 2.0)


if __name__ == "__main__":
    unittest.main()
