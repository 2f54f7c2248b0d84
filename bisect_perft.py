#!/usr/bin/env python3
"""
Bisect a move generator's split perft against python-chess.

    ./bisect_perft.py path/to/your/splitperft-script -e suite.epd
"""

import os
import sys


def _add_repo_python_to_path() -> None:
    repo_root = os.path.dirname(os.path.abspath(__file__))
    python_dir = os.path.join(repo_root, "python")
    if python_dir not in sys.path:
        sys.path.insert(0, python_dir)


def main() -> int:
    _add_repo_python_to_path()

    from perft_bisect.cli import main as cli_main

    return cli_main()


if __name__ == "__main__":
    raise SystemExit(main())
