#!/usr/bin/env python3
"""Measure test coverage of the pcgrandom package.

Usage (from anywhere):
    python scripts/coverage_py.py           # terminal summary with missed lines
    python scripts/coverage_py.py --html    # also write coverage_py/html/
"""

import argparse
import subprocess
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parent.parent
DATA_FILE = ROOT_DIR / "coverage_py" / ".coverage"


def coverage(*args: str) -> None:
    cmd = [sys.executable, "-m", "coverage", *args, f"--data-file={DATA_FILE}"]
    returncode = subprocess.run(cmd, cwd=ROOT_DIR).returncode
    if returncode != 0:
        sys.exit(returncode)


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--html", action="store_true", help="Write an HTML report too"
    )
    args = parser.parse_args()

    DATA_FILE.parent.mkdir(exist_ok=True)
    coverage("erase")
    coverage("run", "--branch", "--source=pcgrandom", "-m", "pytest", "-q")
    coverage("report", "--show-missing")
    if args.html:
        html_dir = DATA_FILE.parent / "html"
        coverage("html", f"--directory={html_dir}")
        print(f"HTML report: {html_dir / 'index.html'}")


if __name__ == "__main__":
    main()
