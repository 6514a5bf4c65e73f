"""
Tests for evaluating parsed expressions.

Author: xwest
"""

import math
import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, project_root)

from arithparse.evaluator import Evaluator, EvaluationError, EVALUATION_ERROR_CODES, evaluate
from arithparse.parser.ast_nodes import Number, Negative, Divide, Power
from arithparse.parser.errors import ParseError


class TestEvaluator(unittest.TestCase):
    """Test cases for the tree evaluator."""

    def test_basic_expressions(self):
        cases = {
            "(1 + 3) * 4": 16.0,
            "-1 + 3 * 4": 11.0,
            "1 + 3 * 2 + 7": 14.0,
            "2^3^2": 512.0,
            "-2^2": 4.0,
            "(1+2)(3+4)": 21.0,
            "8 / 4 / 2": 1.0,
            "10 - 4 - 3": 3.0,
        }
        for source, expected in cases.items():
            with self.subTest(source=source):
                self.assertEqual(evaluate(source), expected)

    def test_decimal_expression(self):
        result = evaluate("3.23 + 10.0993 - ((3*2)/24) ^ 2")
        self.assertTrue(math.isclose(result, 3.23 + 10.0993 - 0.0625))

    def test_evaluate_tree(self):
        """Test that hand-built trees can be evaluated."""
        tree = Negative(Power(Number(2.0), Number(10.0)))
        self.assertEqual(evaluate(tree), -1024.0)
        self.assertEqual(Evaluator().evaluate(Number(7.5)), 7.5)

    def test_division_by_zero(self):
        """Test that dividing by zero raises an evaluation error."""
        with self.assertRaises(EvaluationError) as ctx:
            evaluate("1 / (2 - 2)")

        self.assertEqual(ctx.exception.diagnostic.code, "E001")
        self.assertIsInstance(ctx.exception.node, Divide)
        self.assertIsNotNone(ctx.exception.diagnostic.location)

    def test_undefined_power(self):
        with self.assertRaises(EvaluationError) as ctx:
            evaluate("(-8) ^ 0.5")
        self.assertEqual(ctx.exception.diagnostic.code, "E002")

        with self.assertRaises(EvaluationError):
            evaluate("0 ^ -1")

    def test_power_overflow(self):
        with self.assertRaises(EvaluationError) as ctx:
            evaluate("10 ^ 400")
        self.assertIn("too large", ctx.exception.message)

    def test_arithmetic_overflow(self):
        """Test that every operator reports an overflowing result."""
        for source in ["10^308 * 10", "10^308 + 10^308", "-(10^308) - 10^308", "10^308 / 0.1"]:
            with self.subTest(source=source):
                with self.assertRaises(EvaluationError) as ctx:
                    evaluate(source)
                self.assertEqual(ctx.exception.diagnostic.code, "E003")
                self.assertIn("too large", ctx.exception.message)

    def test_infinite_literal_propagates(self):
        self.assertTrue(math.isinf(evaluate("9" * 400 + " + 1")))

    def test_deep_tree(self):
        """Test that a tree deeper than the recursion limit is an evaluation error."""
        tree = Number(1.0)
        for _ in range(sys.getrecursionlimit() * 2):
            tree = Negative(tree)

        with self.assertRaises(EvaluationError) as ctx:
            evaluate(tree)
        self.assertEqual(ctx.exception.diagnostic.code, "E004")

    def test_error_codes_are_registered(self):
        for source in ["1/0", "(-8) ^ 0.5", "10 ^ 400", "10^308 * 10"]:
            with self.subTest(source=source):
                with self.assertRaises(EvaluationError) as ctx:
                    evaluate(source)
                self.assertIn(ctx.exception.diagnostic.code, EVALUATION_ERROR_CODES)

    def test_error_without_span(self):
        """Test that errors on hand-built trees have no location line."""
        with self.assertRaises(EvaluationError) as ctx:
            evaluate(Divide(Number(1.0), Number(0.0)))

        self.assertIsNone(ctx.exception.diagnostic.location)
        self.assertNotIn("-->", str(ctx.exception))

    def test_parse_errors_propagate(self):
        with self.assertRaises(ParseError):
            evaluate("1 +")

    def test_evaluation_error_is_arithmetic_error(self):
        with self.assertRaises(ArithmeticError):
            evaluate("1/0")


if __name__ == '__main__':
    unittest.main()
