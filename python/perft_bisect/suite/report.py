"""
Console rendering of bisection results.
"""

from typing import List, Optional, Sequence

from perft_bisect.core.types import Divergence, DivergenceKind, Failure, Move
from perft_bisect.suite.results import CaseResult, CaseStatus, SuiteSummary


def red(text, color: bool = True) -> str:
    return f"\033[91m{text}\033[0m" if color else str(text)


def green(text, color: bool = True) -> str:
    return f"\033[92m{text}\033[0m" if color else str(text)


def yellow(text, color: bool = True) -> str:
    return f"\033[93m{text}\033[0m" if color else str(text)


def lichess_url(fen: str) -> str:
    return f"https://lichess.org/analysis/standard/{fen.replace(' ', '_')}"


def format_path(path: Sequence[Move]) -> str:
    return " ".join(path) if path else "(none)"


def format_trace(trace: Sequence[Divergence]) -> List[str]:
    """One line per narrowing step, indented by level."""
    return [
        f"{'  ' * (level + 3)}{divergence.describe()}"
        for level, divergence in enumerate(trace)
    ]


def format_failure(
    failure: Failure,
    resulting_fen: Optional[str] = None,
    color: bool = False,
) -> List[str]:
    lines = [
        f"    {red(failure.divergence.describe(), color)}",
        f"    Applied moves: {format_path(failure.path)}",
        f"    Remaining depth: {failure.depth}",
    ]
    if failure.divergence.kind in (
        DivergenceKind.MOVE_MISSING_IN_SUBJECT,
        DivergenceKind.MOVE_EXTRA_IN_SUBJECT,
    ):
        if failure.missing:
            lines.append(f"    Failed to generate legal moves: {', '.join(failure.missing)}")
        if failure.extra:
            lines.append(f"    Generated illegal moves: {', '.join(failure.extra)}")
        lines.append(f"    Generated moves: {format_path(failure.generated)}")
    if resulting_fen:
        lines.append(f"    Resulting FEN: {resulting_fen}")
        lines.append(f"    Analysis: {lichess_url(resulting_fen)}")
    if len(failure.trace) > 1:
        lines.append("    Narrowing:")
        lines.extend(format_trace(failure.trace))
    return lines


def format_case(result: CaseResult, total: int = 0, color: bool = False) -> List[str]:
    """
    Render one case result as console lines.

    Args:
        result: the case outcome
        total: number of cases in the run, shown as "[i/total]" when nonzero
        color: wrap status words in ANSI colors

    Returns:
        lines without trailing newlines
    """
    case = result.case
    counter = f"{case.index}/{total}" if total else f"{case.index}"
    head = f"[{counter}] perft({case.depth}) {case.fen}"

    if result.status is CaseStatus.PASS:
        nodes = result.result.nodes if result.result is not None else None
        detail = f" ({nodes:,} nodes, {result.elapsed:.2f}s)" if nodes is not None else ""
        lines = [f"✅ {head}: {green('PASS', color)}{detail}"]
    elif result.status is CaseStatus.FAIL:
        lines = [f"❌ {head}: {red('FAIL', color)}"]
        lines.extend(format_failure(result.result, result.resulting_fen, color))
    else:
        lines = [f"⚠️  {head}: {yellow('ERROR', color)}"]
        lines.extend(f"    {line}" for line in str(result.error).splitlines())

    if result.expected_mismatch:
        lines.append(
            f"    {yellow('warning', color)}: suite expects {case.expected:,} nodes, "
            f"reference generator counts {result.result.nodes:,}"
        )
    return lines


def format_summary(summary: SuiteSummary, color: bool = False) -> str:
    parts = [
        green(f"{summary.passed} passed", color),
        red(f"{summary.failed} failed", color),
        yellow(f"{summary.errored} errored", color),
    ]
    line = f"{', '.join(parts)} in {summary.elapsed:.1f}s"
    if summary.stopped_early:
        line += " (stopped at first failure)"
    return line
