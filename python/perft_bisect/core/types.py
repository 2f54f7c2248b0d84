"""
Shared data model for split-perft comparison.

Every value here is immutable once built. A Position never changes; walking
deeper always produces a new one.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, Mapping, Optional, Tuple, Union

Move = str


@dataclass(frozen=True)
class Position:
    """A start descriptor plus the moves applied to it, in order."""

    fen: str
    moves: Tuple[Move, ...] = ()

    def child(self, move: Move) -> "Position":
        return Position(self.fen, self.moves + (move,))

    def __str__(self) -> str:
        if not self.moves:
            return self.fen
        return f"{self.fen} moves {' '.join(self.moves)}"


@dataclass(frozen=True)
class SplitResult:
    """Per-move node counts plus the total as it was reported."""

    counts: Mapping[Move, int] = field(default_factory=dict, hash=False)
    total: int = 0

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[Move, int]], total: int) -> "SplitResult":
        counts: Dict[Move, int] = {}
        for move, nodes in pairs:
            if move in counts:
                raise ValueError(f"duplicate move {move!r} in split result")
            counts[move] = nodes
        return cls(counts=counts, total=total)

    @property
    def moves(self) -> Tuple[Move, ...]:
        return tuple(sorted(self.counts))

    @property
    def moves_sum(self) -> int:
        """Sum of the per-move counts; may differ from ``total`` for a buggy subject."""
        return sum(self.counts.values())

    def __len__(self) -> int:
        return len(self.counts)


class DivergenceKind(Enum):
    TOTAL_MISMATCH = "total mismatch"
    MOVE_COUNT_MISMATCH = "move count mismatch"
    MOVE_MISSING_IN_SUBJECT = "move missing in subject"
    MOVE_EXTRA_IN_SUBJECT = "move extra in subject"


@dataclass(frozen=True)
class Divergence:
    """
    One representative disagreement between oracle and subject.

    For TOTAL_MISMATCH the counts are the two reported totals and ``move``
    is None. For a missing move ``subject_count`` is None, for an extra
    move ``oracle_count`` is None.
    """

    kind: DivergenceKind
    move: Optional[Move] = None
    oracle_count: Optional[int] = None
    subject_count: Optional[int] = None

    @property
    def is_drillable(self) -> bool:
        """Only a count mismatch under a known-legal move has a child to descend into."""
        return self.kind is DivergenceKind.MOVE_COUNT_MISMATCH

    def describe(self) -> str:
        if self.kind is DivergenceKind.MOVE_MISSING_IN_SUBJECT:
            return f"failed to generate legal move {self.move} (oracle count {self.oracle_count})"
        if self.kind is DivergenceKind.MOVE_EXTRA_IN_SUBJECT:
            return f"generated illegal move {self.move} (subject count {self.subject_count})"
        if self.kind is DivergenceKind.MOVE_COUNT_MISMATCH:
            return f"move {self.move}: subject {self.subject_count} != oracle {self.oracle_count}"
        return (
            f"total mismatch: subject reported {self.subject_count}, "
            f"oracle {self.oracle_count}"
        )


@dataclass(frozen=True)
class FullAgreement:
    """Subject and oracle agreed on the position at the requested depth."""

    fen: str = ""
    depth: int = 0
    nodes: Optional[int] = None

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """
    The minimal disagreement found by narrowing along ``path``.

    ``trace`` holds the divergence seen at each level on the way down, the
    last entry being ``divergence`` itself. ``nodes`` is the oracle's total
    at the start position.

    ``missing`` and ``extra`` list every move the two sides disagree on at
    the failing position, and ``generated`` is the subject's own move list
    there, all sorted.
    """

    path: Tuple[Move, ...]
    depth: int
    divergence: Divergence
    fen: str = ""
    trace: Tuple[Divergence, ...] = ()
    nodes: Optional[int] = None
    missing: Tuple[Move, ...] = ()
    extra: Tuple[Move, ...] = ()
    generated: Tuple[Move, ...] = ()

    @property
    def ok(self) -> bool:
        return False

    @property
    def position(self) -> Position:
        return Position(self.fen, self.path)


BisectionResult = Union[FullAgreement, Failure]
