"""pytest configuration: import path plus shared fakes and fixtures"""
import sys
from pathlib import Path

import pytest

repo_root = Path(__file__).parent.parent
python_dir = repo_root / "python"

if str(python_dir) not in sys.path:
    sys.path.insert(0, str(python_dir))

from perft_bisect.core.types import Position, SplitResult  # noqa: E402

START_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
REFERENCE_SCRIPT = repo_root / "reference_split_perft.py"


class FakeSource:
    """In-process split-perft source answering from a table keyed by (moves, depth)."""

    def __init__(self, table):
        self.table = {(tuple(moves), depth): result for (moves, depth), result in table.items()}
        self.calls = []

    def split_perft(self, position: Position, depth: int) -> SplitResult:
        self.calls.append((position.moves, depth))
        return self.table[(position.moves, depth)]


def split(counts, total=None):
    """Build a SplitResult; the total defaults to the sum of counts."""
    return SplitResult(counts=dict(counts), total=sum(counts.values()) if total is None else total)


@pytest.fixture
def start_fen():
    return START_FEN


@pytest.fixture
def make_script(tmp_path):
    """Write a Python subject script and return the command that runs it."""

    def _make(name, body):
        path = tmp_path / name
        path.write_text(body, encoding="utf-8")
        return [sys.executable, str(path)]

    return _make


@pytest.fixture
def reference_command():
    return [sys.executable, str(REFERENCE_SCRIPT)]
