#!/usr/bin/env python3
"""
Main test runner for arithparse.

Author: xwest
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_pipeline_check():
    """Run a few expressions through the whole pipeline."""

    print("🚀 arithparse Test Suite")
    print("=" * 60)

    # Test if basic imports work
    try:
        from arithparse.lexer.tokenizer import tokenize_string
        from arithparse.parser.parser import parse_string
        from arithparse.parser.errors import ParseError
        from arithparse.evaluator import evaluate

        print("✅ All arithparse modules imported successfully")
        print()

    except ImportError as e:
        print(f"❌ Failed to import arithparse modules: {e}")
        return False

    print("Testing expression pipeline...")
    examples = {
        "(1 + 3) * 4": 16.0,
        "-1 + 3 * 4": 11.0,
        "2^3^2": 512.0,
        "(1+2)(3+4)": 21.0,
    }

    try:
        for expression, expected in examples.items():
            tokens = tokenize_string(expression)
            tree = parse_string(expression)
            result = evaluate(tree)
            if result != expected:
                print(f"  ❌ {expression} = {result}, expected {expected}")
                return False
            print(f"  ✅ {expression} = {result} ({len(tokens)} tokens)")

    except Exception as e:
        print(f"❌ Pipeline test FAILED: {e}")
        import traceback
        traceback.print_exc()
        return False

    # Test error handling
    print("  ❌ Testing error handling...")
    try:
        parse_string("(1 + 2")
        print("     ❌ Error handling test failed: expected an error but got none")
        return False
    except ParseError as e:
        print(f"     ✅ Error handling successful: {e.message}")

    print()
    return True


def run_unit_tests():
    """Discover and run the unit tests under tests/."""
    loader = unittest.TestLoader()
    suite = loader.discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=2).run(suite)
    return result.wasSuccessful()


def run_all_tests():
    """Run all arithparse tests."""
    if not run_pipeline_check():
        return False

    success = run_unit_tests()

    print()
    print("=" * 60)
    if success:
        print("🎉 All tests PASSED!")
    else:
        print("❌ Some tests FAILED")
    print("=" * 60)

    return success


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
