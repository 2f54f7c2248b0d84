"""
EPD perft suites.

Each record is a FEN followed by ';'-separated depth annotations:

    rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1 ;D1 20 ;D2 400

Every "Dn <nodes>" annotation becomes one test case.
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple, Union

from perft_bisect.core.errors import SuiteFormatError

DEPTH_RE = re.compile(r"^D(\d+)\s+(\d+)$")
STANDARD_EPD = Path(__file__).resolve().parent.parent / "data" / "standard.epd"


@dataclass(frozen=True)
class SuiteCase:
    """One (fen, depth) pair to bisect, with the node count the suite expects."""

    fen: str
    depth: int
    expected: Optional[int] = None
    index: int = 0
    line: int = 0


def parse_record(record: str) -> Tuple[str, List[Tuple[int, int]]]:
    """Split one EPD record into its FEN and (depth, expected nodes) pairs."""
    parts = record.split(";")
    fen = parts[0].strip()
    if not fen:
        raise SuiteFormatError(f"missing FEN in {record!r}")

    tests: List[Tuple[int, int]] = []
    for part in parts[1:]:
        part = part.strip()
        if not part:
            continue
        if not part.startswith("D"):
            # Other EPD operations (id, bm, ...) carry nothing we use.
            continue
        match = DEPTH_RE.match(part)
        if not match:
            raise SuiteFormatError(f"invalid depth annotation {part!r} in {record!r}")
        tests.append((int(match.group(1)), int(match.group(2))))

    if not tests:
        raise SuiteFormatError(f"no depth annotations in {record!r}")
    return fen, tests


def read_records(path: Union[str, Path]) -> List[Tuple[int, str]]:
    """Return (line number, record) for every non-blank, non-comment line."""
    records: List[Tuple[int, str]] = []
    with Path(path).open("r", encoding="utf-8") as handle:
        for lineno, line in enumerate(handle, start=1):
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            records.append((lineno, line))
    return records


def load_suite(
    path: Union[str, Path] = STANDARD_EPD,
    skip: int = 0,
    first: Optional[int] = None,
    max_depth: Optional[int] = None,
) -> List[SuiteCase]:
    """
    Load an EPD suite as a flat list of cases.

    Args:
        path: EPD file
        skip: number of records to drop from the start
        first: keep only this many records after skipping (None keeps all)
        max_depth: drop annotations deeper than this (None keeps all)

    Returns:
        cases in file order, annotation order within a record
    """
    if skip < 0:
        raise ValueError(f"skip must be non-negative, got {skip}")
    if first is not None and first < 0:
        raise ValueError(f"first must be non-negative, got {first}")

    records = read_records(path)[skip:]
    if first is not None:
        records = records[:first]

    cases: List[SuiteCase] = []
    for lineno, record in records:
        try:
            fen, tests = parse_record(record)
        except SuiteFormatError as e:
            raise SuiteFormatError(f"{path}:{lineno}: {e}") from e
        for depth, expected in tests:
            if max_depth is not None and depth > max_depth:
                continue
            cases.append(SuiteCase(
                fen=fen,
                depth=depth,
                expected=expected,
                index=len(cases) + 1,
                line=lineno,
            ))
    return cases
