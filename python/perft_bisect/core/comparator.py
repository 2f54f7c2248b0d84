"""
Structural diff of two split-perft results.
"""

from typing import List, Optional

from perft_bisect.core.types import Divergence, DivergenceKind, SplitResult


def compare(oracle: SplitResult, subject: SplitResult) -> Optional[Divergence]:
    """
    Compare a subject's split result against the oracle's.

    Returns None when both list the same moves with the same counts and
    report the same total. Otherwise returns exactly one divergence,
    picked in this order (smallest move text first within each step):

    1. a move the oracle counts as nonzero is missing from the subject
    2. the subject lists a move the oracle does not
    3. a shared move has a different count
    4. a move the oracle counts as zero is missing from the subject
    5. the reported totals differ

    Never looks at depth.
    """
    oracle_moves = set(oracle.counts)
    subject_moves = set(subject.counts)

    missing = sorted(oracle_moves - subject_moves)
    missing_nonzero = [m for m in missing if oracle.counts[m] != 0]
    if missing_nonzero:
        move = missing_nonzero[0]
        return Divergence(
            DivergenceKind.MOVE_MISSING_IN_SUBJECT,
            move=move,
            oracle_count=oracle.counts[move],
        )

    extra = sorted(subject_moves - oracle_moves)
    if extra:
        move = extra[0]
        return Divergence(
            DivergenceKind.MOVE_EXTRA_IN_SUBJECT,
            move=move,
            subject_count=subject.counts[move],
        )

    mismatched: List[str] = sorted(
        m for m in oracle_moves & subject_moves
        if oracle.counts[m] != subject.counts[m]
    )
    if mismatched:
        move = mismatched[0]
        return Divergence(
            DivergenceKind.MOVE_COUNT_MISMATCH,
            move=move,
            oracle_count=oracle.counts[move],
            subject_count=subject.counts[move],
        )

    # Only zero-count moves can be left here; they don't move the total.
    if missing:
        move = missing[0]
        return Divergence(
            DivergenceKind.MOVE_MISSING_IN_SUBJECT,
            move=move,
            oracle_count=oracle.counts[move],
        )

    if oracle.total != subject.total:
        return Divergence(
            DivergenceKind.TOTAL_MISMATCH,
            oracle_count=oracle.total,
            subject_count=subject.total,
        )

    return None
