#!/usr/bin/env python3
"""Test runner for gitfuns."""

import sys
import os
import subprocess


def run_pytest(extra_args=None):
    """Run all tests using pytest."""
    try:
        print("Running tests with pytest...")
        result = subprocess.run([
            sys.executable, "-m", "pytest",
            "tests/",
            "-v",
            "--tb=short"
        ] + list(extra_args or []), cwd=os.path.dirname(os.path.abspath(__file__)))

        return result.returncode == 0

    except FileNotFoundError:
        print("pytest not found. Install the test extra: pip install -e '.[test]'")
        return False


def run_coverage():
    """Run tests with coverage reporting (needs pytest-cov)."""
    print("\nRunning tests with coverage...")
    success = run_pytest([
        "--cov=gitfuns",
        "--cov-report=term-missing",
        "--cov-report=html:htmlcov",
    ])
    if success:
        print("\nCoverage report generated in htmlcov/")
    return success


if __name__ == "__main__":
    print("gitfuns - Test Runner")
    print("=" * 40)

    if len(sys.argv) > 1 and sys.argv[1] == "--coverage":
        success = run_coverage()
    else:
        success = run_pytest(sys.argv[1:])

    print(f"\n{'='*40}")
    if success:
        print("✓ All tests passed!")
    else:
        print("✗ Some tests failed!")

    sys.exit(0 if success else 1)
