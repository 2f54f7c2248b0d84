import argparse
import os
import sys
from typing import Any, Dict, Optional

SUBJECT_ENV = "PERFT_BISECT_SUBJECT"


def resolve_subject(value: Optional[str]) -> Optional[str]:
    """The subject path from the command line, else from $PERFT_BISECT_SUBJECT."""
    if value:
        return value
    env = os.environ.get(SUBJECT_ENV)
    return env or None


def build_config(args: argparse.Namespace) -> Dict[str, Any]:
    timeout = float(args.timeout) if args.timeout is not None else None
    max_depth = int(args.max_depth) if args.max_depth is not None else None
    first = int(args.first) if args.first is not None else None

    return {
        "subject": {
            "program": resolve_subject(args.subject),
            "timeout": timeout,
        },
        "suite": {
            "epd_file": args.epd,
            "fen": args.fen,
            "depth": args.depth,
            "skip": int(args.skip),
            "first": first,
            "max_depth": max_depth,
        },
        "report": {
            "stop_on_failure": bool(args.stop_on_failure),
            "progress": not args.no_progress,
            "verbose": bool(args.verbose),
            "color": not args.no_color and sys.stdout.isatty(),
        },
    }
