#!/usr/bin/env python3
"""Run the yomi test suite.

Extra arguments go straight to pytest, e.g. ``./run_tests.py -k engine``.
``--quick`` stops at the first failure and drops the verbose listing.
"""

import argparse
import os
import subprocess
import sys
from typing import List, Optional

PROJECT_DIR = os.path.dirname(os.path.abspath(__file__))


def build_command(quick: bool = False, pytest_args: Optional[List[str]] = None) -> List[str]:
    command = [sys.executable, "-m", "pytest"]
    command += ["-x", "-q"] if quick else ["-v", "--tb=short", "--color=yes"]
    return command + (pytest_args or ["tests/"])


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Run the yomi tests with pytest.")
    parser.add_argument("--quick", action="store_true", help="Stop at the first failure, terse output")
    args, pytest_args = parser.parse_known_args(argv)

    print("🧪 Running yomi tests")
    result = subprocess.run(build_command(args.quick, pytest_args), cwd=PROJECT_DIR, check=False)
    if result.returncode == 0:
        print("\n✅ All tests passed!")
    elif result.returncode == 5:
        print("\n⚠️ No tests collected")
    else:
        print("\n❌ Some tests failed! (install the test extra with: pip install -e '.[test]')")
    return result.returncode


if __name__ == "__main__":
    sys.exit(main())
