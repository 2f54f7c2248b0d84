import pytest

from conftest import split
from perft_bisect.core.comparator import compare
from perft_bisect.core.types import DivergenceKind


def test_identical_results_agree():
    oracle = split({"e2e4": 20, "d2d4": 20, "g1f3": 20})
    subject = split({"g1f3": 20, "e2e4": 20, "d2d4": 20})
    assert compare(oracle, subject) is None


def test_empty_results_agree_at_depth_zero():
    assert compare(split({}, total=1), split({}, total=1)) is None


def test_count_mismatch_reports_both_counts():
    oracle = split({"e2e4": 20, "d2d4": 20})
    subject = split({"e2e4": 19, "d2d4": 20})

    divergence = compare(oracle, subject)

    assert divergence.kind is DivergenceKind.MOVE_COUNT_MISMATCH
    assert divergence.move == "e2e4"
    assert divergence.oracle_count == 20
    assert divergence.subject_count == 19
    assert divergence.is_drillable


def test_smallest_mismatched_move_wins():
    oracle = split({"h2h4": 20, "a2a3": 20, "e2e4": 20})
    subject = split({"h2h4": 21, "a2a3": 19, "e2e4": 22})
    assert compare(oracle, subject).move == "a2a3"


def test_missing_move_beats_count_mismatch_and_extra_move():
    oracle = split({"a2a3": 20, "g1f3": 420, "b1c3": 440})
    subject = split({"a2a3": 19, "b1c3": 440, "h7h8q": 5})

    divergence = compare(oracle, subject)

    assert divergence.kind is DivergenceKind.MOVE_MISSING_IN_SUBJECT
    assert divergence.move == "g1f3"
    assert divergence.oracle_count == 420
    assert divergence.subject_count is None
    assert not divergence.is_drillable


def test_extra_move_beats_count_mismatch():
    oracle = split({"a2a3": 20, "b2b3": 20})
    subject = split({"a2a3": 19, "b2b3": 20, "e1g1": 3, "d1d8": 1})

    divergence = compare(oracle, subject)

    assert divergence.kind is DivergenceKind.MOVE_EXTRA_IN_SUBJECT
    assert divergence.move == "d1d8"
    assert divergence.subject_count == 1
    assert divergence.oracle_count is None


def test_total_mismatch_when_moves_match():
    oracle = split({"e2e4": 20, "d2d4": 20})
    subject = split({"e2e4": 20, "d2d4": 20}, total=41)

    divergence = compare(oracle, subject)

    assert divergence.kind is DivergenceKind.TOTAL_MISMATCH
    assert divergence.move is None
    assert divergence.oracle_count == 40
    assert divergence.subject_count == 41


def test_total_is_taken_as_reported():
    # Per-move counts sum to the oracle total but the subject misreports it.
    oracle = split({"e2e4": 20}, total=20)
    subject = split({"e2e4": 20}, total=0)
    assert compare(oracle, subject).kind is DivergenceKind.TOTAL_MISMATCH


def test_depth_zero_total_mismatch():
    divergence = compare(split({}, total=1), split({}, total=0))
    assert divergence.kind is DivergenceKind.TOTAL_MISMATCH


def test_missing_zero_count_move_is_reported_after_count_mismatch():
    # A mating move has a zero subtree count one ply before the leaves.
    oracle = split({"d8h4": 0, "a7a6": 5, "b7b6": 5})
    only_missing = split({"a7a6": 5, "b7b6": 5})
    also_miscounted = split({"a7a6": 4, "b7b6": 5})

    divergence = compare(oracle, only_missing)
    assert divergence.kind is DivergenceKind.MOVE_MISSING_IN_SUBJECT
    assert divergence.move == "d8h4"
    assert divergence.oracle_count == 0

    assert compare(oracle, also_miscounted).kind is DivergenceKind.MOVE_COUNT_MISMATCH


@pytest.mark.parametrize(
    "oracle,subject",
    [
        (split({"e2e4": 20, "d2d4": 20}), split({"e2e4": 19, "d2d4": 20})),
        (split({"e2e4": 20, "d2d4": 20}), split({"e2e4": 20})),
        (split({"e2e4": 20}), split({"e2e4": 20, "e2e5": 1})),
        (split({"a2a3": 3, "b2b3": 4}), split({"a2a3": 4, "b2b3": 3})),
    ],
)
def test_swapping_sides_keeps_divergent_move(oracle, subject):
    forward = compare(oracle, subject)
    backward = compare(subject, oracle)

    assert forward.move == backward.move
    assert forward.oracle_count == backward.subject_count
    assert forward.subject_count == backward.oracle_count


def test_missing_and_extra_swap_roles():
    oracle = split({"e2e4": 20, "d2d4": 20})
    subject = split({"e2e4": 20})

    assert compare(oracle, subject).kind is DivergenceKind.MOVE_MISSING_IN_SUBJECT
    assert compare(subject, oracle).kind is DivergenceKind.MOVE_EXTRA_IN_SUBJECT


def test_compare_is_deterministic():
    oracle = split({"c2c4": 1, "b2b4": 2, "a2a4": 3})
    subject = split({"c2c4": 2, "b2b4": 3, "a2a4": 4})
    results = {compare(oracle, subject) for _ in range(5)}
    assert len(results) == 1
