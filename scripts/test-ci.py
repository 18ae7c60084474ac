#!/usr/bin/env python
"""
Local CI Check for OrderedTreeLib
=================================

Runs the checks a CI job would run before a push: the package imports, the
fast test suite passes, flake8 finds no syntax errors, black agrees with the
formatting and mypy accepts the annotations.

Usage:
    python scripts/test-ci.py
    python scripts/test-ci.py --strict   # Style and typing failures also fail
"""

import argparse
import importlib.util
import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent


def run_command(cmd, description, critical=True):
    """Run a command from the project root and return True if it succeeds."""
    print(f"\n[Testing] {description}...")
    print(f"  Command: {' '.join(cmd)}")

    result = subprocess.run(cmd, cwd=PROJECT_ROOT, capture_output=True, text=True)

    if result.returncode == 0:
        print("  PASSED")
        return True

    if critical:
        print("  FAILED - This will fail in CI!")
    else:
        print("  WARNING - Non-critical issue")
    output = (result.stdout + result.stderr).strip()
    if output:
        print(f"  Output: {output[:500]}")
    return False


def tool_available(module_name):
    return importlib.util.find_spec(module_name) is not None


def main(argv=None):
    parser = argparse.ArgumentParser(description="Local CI check for OrderedTreeLib")
    parser.add_argument("--strict", action="store_true",
                        help="Treat black and mypy findings as failures")
    args = parser.parse_args(argv)

    print("=" * 60)
    print("CI/CD LOCAL TESTER")
    print("=" * 60)

    python = sys.executable
    all_passed = True

    if not run_command([python, "-c", "import orderedtreelib"], "Basic import test"):
        print("\n  Fix: Check the package for import-time errors")
        all_passed = False

    if not run_command([python, "run_tests.py"], "Run fast tests (what CI runs)"):
        print("\n  Fix: Debug the failing tests")
        all_passed = False

    optional_checks = [
        ("flake8", [python, "-m", "flake8", "orderedtreelib", "tests",
                    "--count", "--select=E9,F63,F7,F82", "--show-source"],
         "Check for Python syntax errors", True),
        ("black", [python, "-m", "black", "--check", "--quiet", "orderedtreelib"],
         "Check formatting", args.strict),
        ("mypy", [python, "-m", "mypy", "orderedtreelib", "--ignore-missing-imports"],
         "Check type annotations", args.strict),
    ]

    for module_name, cmd, description, critical in optional_checks:
        if not tool_available(module_name):
            print(f"\n[Skipped] {module_name} not installed (pip install -e .[dev] to enable)")
            continue
        if not run_command(cmd, description, critical=critical) and critical:
            all_passed = False

    print("\n" + "=" * 60)
    if all_passed:
        print("SUCCESS: The checks CI runs all pass.")
    else:
        print("FAILURE: Fix the issues above before pushing.")
    print("=" * 60)

    return 0 if all_passed else 1


if __name__ == "__main__":
    sys.exit(main())
