"""
Recursive narrowing of a split-perft disagreement.

Both the oracle and the subject are anything with a
``split_perft(position, depth)`` method, so the algorithm can be driven by
in-process fakes as easily as by a spawned subject program.
"""

from typing import Callable, List, Optional, Protocol

from perft_bisect.core.comparator import compare
from perft_bisect.core.types import (
    BisectionResult,
    Divergence,
    Failure,
    FullAgreement,
    Move,
    Position,
    SplitResult,
)


class SplitPerftSource(Protocol):
    def split_perft(self, position: Position, depth: int) -> SplitResult:
        ...


class Bisector:
    """
    Narrow a failing position down to the shallowest disagreement.

    The bisector only descends when the divergence is a count mismatch
    under a move both sides agree is legal. Missing moves, extra moves and
    total-only mismatches are reported at the level where they appear.
    """

    def __init__(
        self,
        oracle: SplitPerftSource,
        subject: SplitPerftSource,
        log: Optional[Callable[[str], None]] = None,
    ):
        self.oracle = oracle
        self.subject = subject
        self.log = log

    def bisect(self, start_fen: str, depth: int) -> BisectionResult:
        """
        Compare subject and oracle from ``start_fen`` at ``depth``.

        Args:
            start_fen: FEN of the test position
            depth: perft depth, >= 0

        Returns:
            FullAgreement, or a Failure holding the path to the minimal
            divergence and the depth remaining there
        """
        if depth < 0:
            raise ValueError(f"depth must be non-negative, got {depth}")

        path: List[Move] = []
        trace: List[Divergence] = []
        current_depth = depth
        root_nodes: Optional[int] = None

        while True:
            position = Position(start_fen, tuple(path))
            oracle_result = self.oracle.split_perft(position, current_depth)
            subject_result = self.subject.split_perft(position, current_depth)
            if root_nodes is None:
                root_nodes = oracle_result.total

            divergence = compare(oracle_result, subject_result)
            if divergence is None:
                return FullAgreement(fen=start_fen, depth=depth, nodes=root_nodes)

            trace.append(divergence)
            self._log(position, current_depth, divergence)

            if current_depth <= 1 or not divergence.is_drillable:
                return Failure(
                    path=tuple(path),
                    depth=current_depth,
                    divergence=divergence,
                    fen=start_fen,
                    trace=tuple(trace),
                    nodes=root_nodes,
                    missing=tuple(sorted(set(oracle_result.counts) - set(subject_result.counts))),
                    extra=tuple(sorted(set(subject_result.counts) - set(oracle_result.counts))),
                    generated=subject_result.moves,
                )

            path.append(divergence.move)
            current_depth -= 1

    def _log(self, position: Position, depth: int, divergence: Divergence) -> None:
        if self.log is None:
            return
        line = " ".join(position.moves) or "(root)"
        self.log(f"  depth {depth} after {line}: {divergence.describe()}")


def bisect(
    start_fen: str,
    depth: int,
    oracle: SplitPerftSource,
    subject: SplitPerftSource,
) -> BisectionResult:
    """Run one bisection with a throwaway Bisector."""
    return Bisector(oracle, subject).bisect(start_fen, depth)
