#!/usr/bin/env python3
"""
Emoji resizer test runner

Usage:
    python tests/run_tests.py              # run every test
    python tests/run_tests.py -k sniffer   # only tests matching "sniffer"
    python tests/run_tests.py --e2e        # only the HTTP end-to-end tests

Quick start:
    pip install -e ".[test]"
    cd backend
    python tests/run_tests.py
"""

import os
import subprocess
import sys
from pathlib import Path

# Run from the backend directory
backend_dir = Path(__file__).parent.parent
os.chdir(backend_dir)


def main():
    cmd = [sys.executable, "-m", "pytest"]
    args = sys.argv[1:]

    if "--e2e" in args:
        args.remove("--e2e")
        cmd.append("tests/test_routes.py")
    else:
        cmd.append("tests/")

    if not any(arg.startswith("-v") or arg == "-q" for arg in args):
        cmd.append("-v")

    cmd.extend(args)

    print(f"\n{'=' * 60}")
    print("Emoji resizer tests")
    print(f"{'=' * 60}")
    print(f"Command: {' '.join(cmd)}")
    print(f"{'=' * 60}\n")

    result = subprocess.run(cmd)
    sys.exit(result.returncode)


if __name__ == "__main__":
    main()
