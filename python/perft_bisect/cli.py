"""
Command-line entry point: find where a move generator disagrees with
python-chess.
"""

import argparse
from typing import Any, Dict, List, Optional

from perft_bisect.config import SUBJECT_ENV, build_config
from perft_bisect.core.errors import SuiteFormatError
from perft_bisect.oracle import ReferenceOracle
from perft_bisect.subject import ScriptSubject
from perft_bisect.suite import STANDARD_EPD, SuiteCase, SuiteRunner, load_suite
from perft_bisect.suite.report import format_summary


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="perft-bisect",
        description="Locate the position where a move generator's split perft goes wrong",
    )
    parser.add_argument("subject", nargs="?", default=None,
                        help=f"Path to the split-perft script of the move generator under test "
                             f"(default: ${SUBJECT_ENV})")

    source = parser.add_mutually_exclusive_group()
    source.add_argument("-e", "--epd", type=str, default=str(STANDARD_EPD),
                        help="EPD perft suite (default: bundled standard.epd)")
    source.add_argument("--fen", type=str, default=None,
                        help="Check a single position instead of a suite (requires --depth)")
    parser.add_argument("--depth", type=int, default=None,
                        help="Perft depth for --fen")

    parser.add_argument("-s", "--skip", type=int, default=0,
                        help="Skip the first N suite records")
    parser.add_argument("-f", "--first", type=int, default=None,
                        help="Run only the first N suite records (after --skip)")
    parser.add_argument("--max-depth", type=int, default=None,
                        help="Ignore suite depths above this")
    parser.add_argument("--timeout", type=float, default=None,
                        help="Seconds to wait for one subject invocation (default: no limit)")

    parser.add_argument("--stop-on-failure", action="store_true",
                        help="Stop after the first case that fails or errors")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Print every narrowing step")
    parser.add_argument("--no-progress", action="store_true",
                        help="Disable the progress bar")
    parser.add_argument("--no-color", action="store_true",
                        help="Disable ANSI colors")
    return parser


def load_cases(cfg: Dict[str, Any]) -> List[SuiteCase]:
    suite_cfg = cfg["suite"]
    if suite_cfg["fen"]:
        return [SuiteCase(fen=suite_cfg["fen"], depth=suite_cfg["depth"], index=1)]
    return load_suite(
        suite_cfg["epd_file"],
        skip=suite_cfg["skip"],
        first=suite_cfg["first"],
        max_depth=suite_cfg["max_depth"],
    )


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.fen and args.depth is None:
        parser.error("--fen requires --depth")
    if args.depth is not None and args.depth < 0:
        parser.error("--depth must be non-negative")
    if args.skip < 0 or (args.first is not None and args.first < 0):
        parser.error("--skip and --first must be non-negative")

    cfg = build_config(args)
    if not cfg["subject"]["program"]:
        parser.error(f"no subject given (pass a path or set ${SUBJECT_ENV})")

    try:
        cases = load_cases(cfg)
    except (OSError, SuiteFormatError) as e:
        print(f"❌ Could not load suite: {e}")
        return 2

    if not cases:
        print("⚠️  No cases selected")
        return 0

    subject = ScriptSubject(cfg["subject"]["program"], timeout=cfg["subject"]["timeout"])
    runner = SuiteRunner(
        ReferenceOracle(),
        subject,
        stop_on_failure=cfg["report"]["stop_on_failure"],
        progress=cfg["report"]["progress"],
        verbose=cfg["report"]["verbose"],
        color=cfg["report"]["color"],
    )

    print(f"🔍 Checking {subject.name} on {len(cases)} case(s)")
    summary = runner.run(cases)
    print()
    print(format_summary(summary, color=cfg["report"]["color"]))

    return 0 if summary.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
