"""
Tests for the arithparse command line front end.

Author: xwest
"""

import io
import unittest
import sys
import os
from contextlib import redirect_stdout, redirect_stderr
from unittest import mock

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, project_root)

from arithparse import __version__
from arithparse.cli import main, format_number, process_expression


def run_cli(argv, stdin=""):
    out, err = io.StringIO(), io.StringIO()
    with mock.patch("sys.stdin", io.StringIO(stdin)), redirect_stdout(out), redirect_stderr(err):
        status = main(argv)
    return status, out.getvalue(), err.getvalue()


class TestCLI(unittest.TestCase):
    """Test cases for the command line interface."""

    def test_evaluate_argument(self):
        status, out, err = run_cli(["(1 + 3) * 4"])

        self.assertEqual(status, 0)
        self.assertEqual(out, "(1 + 3) * 4 = 16\n")
        self.assertEqual(err, "")

    def test_multiple_arguments(self):
        status, out, _ = run_cli(["-1 + 3 * 4", "2^3^2"])

        self.assertEqual(status, 0)
        self.assertEqual(out.splitlines(), ["-1 + 3 * 4 = 11", "2^3^2 = 512"])

    def test_reads_stdin(self):
        """Test that expressions are read line by line when no arguments are given."""
        status, out, _ = run_cli([], stdin="1 + 1\n\n  2 * 2.5  \n")

        self.assertEqual(status, 0)
        self.assertEqual(out.splitlines(), ["1 + 1 = 2", "2 * 2.5 = 5"])

    def test_tokens_mode(self):
        status, out, _ = run_cli(["--tokens", "1 + (2)"])

        self.assertEqual(status, 0)
        self.assertEqual(out.splitlines(), [
            "Parsing: 1 + (2)",
            "- Token: NUMBER(1.0)",
            "- Token: ADD",
            "- Token: OPEN_PAREN",
            "- Token: NUMBER(2.0)",
            "- Token: CLOSE_PAREN",
            "- Token: END",
        ])

    def test_ast_mode(self):
        status, out, _ = run_cli(["--ast", "-1 + 2"])

        self.assertEqual(status, 0)
        self.assertEqual(
            out.strip(),
            "Add(left=Negative(operand=Number(value=1.0)), right=Number(value=2.0))"
        )

    def test_error_exit_status(self):
        """Test that a failing expression prints a diagnostic and returns 1."""
        status, out, err = run_cli(["1 + 1", "(1 + 2"])

        self.assertEqual(status, 1)
        self.assertEqual(out, "1 + 1 = 2\n")
        self.assertIn("unmatched parenthesis", err)
        self.assertIn("<input>:1:7", err)

    def test_empty_argument_is_an_error(self):
        status, _, err = run_cli([""])
        self.assertEqual(status, 1)
        self.assertIn("no tokens", err)

    def test_lexical_and_evaluation_errors(self):
        status, _, err = run_cli(["cos(90)", "1/0"])

        self.assertEqual(status, 1)
        self.assertIn("invalid (or not supported) character 'c'", err)
        self.assertIn("division by zero", err)

    def test_tokens_mode_error(self):
        """Test that --tokens reports bad characters and keeps tokenizing."""
        status, out, err = run_cli(["--tokens", "2 $ 3"])

        self.assertEqual(status, 1)
        self.assertEqual(out.splitlines(), [
            "Parsing: 2 $ 3",
            "- Token: NUMBER(2.0)",
            "- Token: NUMBER(3.0)",
            "- Token: END",
        ])
        self.assertEqual(err, "- Error: found an invalid (or not supported) character '$'\n")

    def test_deep_nesting_is_reported(self):
        depth = sys.getrecursionlimit() * 2
        for mode in ([], ["--ast"]):
            with self.subTest(mode=mode):
                status, out, err = run_cli(mode + ["(" * depth + "1" + ")" * depth])

                self.assertEqual(status, 1)
                self.assertEqual(out, "")
                self.assertIn("nested too deeply", err)

    def test_modes_are_exclusive(self):
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                main(["--tokens", "--ast", "1"])
        self.assertEqual(ctx.exception.code, 2)

    def test_version(self):
        out = io.StringIO()
        with redirect_stdout(out):
            with self.assertRaises(SystemExit) as ctx:
                main(["--version"])
        self.assertEqual(ctx.exception.code, 0)
        self.assertIn(__version__, out.getvalue())

    def test_process_expression_streams(self):
        out, err = io.StringIO(), io.StringIO()

        self.assertTrue(process_expression("2 ^ 10", "evaluate", out, err))
        self.assertFalse(process_expression("2 +", "ast", out, err))
        self.assertEqual(out.getvalue(), "2 ^ 10 = 1024\n")
        self.assertTrue(err.getvalue().startswith("ERROR:"))

    def test_format_number(self):
        self.assertEqual(format_number(4.0), "4")
        self.assertEqual(format_number(-0.5), "-0.5")
        self.assertEqual(format_number(1e20), "1e+20")


if __name__ == '__main__':
    unittest.main()
