#!/usr/bin/env python3
"""
Main test runner for the loxscan scanner.

Runs a quick smoke scan, then the unittest suite under tests/.
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def smoke_scan():
    """Scan a small program and check the basics."""

    print("🚀 loxscan Test Suite")
    print("=" * 60)

    try:
        from loxscan.lexer import ErrorReporter, Scanner, TokenType
        print("✅ Scanner modules imported successfully")
    except ImportError as e:
        print(f"❌ Failed to import scanner modules: {e}")
        return False

    code = """
    fun add(a, b) {
        return a + b;  // sum
    }

    /* entry point */
    print add(5, 10.5) >= 15;
    """

    reporter = ErrorReporter()
    scanner = Scanner(code, filename="<smoke>", reporter=reporter)
    tokens = scanner.scan()
    print(f"  🔧 Generated {len(tokens)} tokens")

    if reporter.had_error:
        print(f"  ❌ Unexpected scan errors: {len(reporter.errors)}")
        return False
    if tokens[-1].type is not TokenType.EOF:
        print("  ❌ Token stream does not end with EOF")
        return False

    print("✅ Smoke scan PASSED")
    print()
    return True


def run_all_tests():
    if not smoke_scan():
        return False

    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    result = unittest.TextTestRunner(verbosity=2).run(suite)
    return result.wasSuccessful()


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
