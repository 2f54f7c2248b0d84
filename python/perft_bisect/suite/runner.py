"""
Drive the bisector over a list of suite cases.
"""

import time
from typing import Callable, List, Optional, Sequence

from tqdm import tqdm

from perft_bisect.core.bisector import Bisector, SplitPerftSource
from perft_bisect.core.errors import PerftBisectError
from perft_bisect.core.types import Failure
from perft_bisect.suite.epd import SuiteCase
from perft_bisect.suite.report import format_case
from perft_bisect.suite.results import CaseResult, CaseStatus, SuiteSummary


class SuiteRunner:
    """
    Run every case to completion, one after another.

    Adapter and oracle errors only abort the case they happen in; the
    runner moves on to the next case unless ``stop_on_failure`` is set.
    """

    def __init__(
        self,
        oracle: SplitPerftSource,
        subject: SplitPerftSource,
        stop_on_failure: bool = False,
        progress: bool = True,
        verbose: bool = False,
        color: bool = False,
        write: Callable[[str], None] = tqdm.write,
    ):
        """
        Args:
            oracle: trusted split-perft source; if it has ``resulting_fen``
                the failing position's FEN is reported
            subject: split-perft source under test
            stop_on_failure: stop after the first case that does not pass
            progress: show a tqdm progress bar over cases
            verbose: print every narrowing step as it happens
            color: ANSI colors in the report
            write: sink for report lines
        """
        self.oracle = oracle
        self.subject = subject
        self.stop_on_failure = stop_on_failure
        self.progress = progress
        self.verbose = verbose
        self.color = color
        self.write = write

        self.bisector = Bisector(oracle, subject, log=write if verbose else None)

    def run_case(self, case: SuiteCase) -> CaseResult:
        start = time.perf_counter()
        try:
            result = self.bisector.bisect(case.fen, case.depth)
            resulting_fen = None
            if isinstance(result, Failure):
                resulting_fen = self._resulting_fen(result)
        except PerftBisectError as e:
            return CaseResult(
                case=case,
                status=CaseStatus.ERROR,
                error=e,
                elapsed=time.perf_counter() - start,
            )

        status = CaseStatus.PASS if result.ok else CaseStatus.FAIL
        return CaseResult(
            case=case,
            status=status,
            result=result,
            resulting_fen=resulting_fen,
            elapsed=time.perf_counter() - start,
        )

    def _resulting_fen(self, failure: Failure) -> Optional[str]:
        fen_for = getattr(self.oracle, "resulting_fen", None)
        if fen_for is None:
            return None
        return fen_for(failure.position)

    def run(self, cases: Sequence[SuiteCase]) -> SuiteSummary:
        summary = SuiteSummary()
        start = time.perf_counter()
        total = len(cases)

        results: List[CaseResult] = summary.results
        for case in tqdm(cases, desc="Bisecting", unit="case", disable=not self.progress):
            if self.verbose:
                self.write(f"perft({case.depth}) {case.fen}")
            result = self.run_case(case)
            results.append(result)
            for line in format_case(result, total=total, color=self.color):
                self.write(line)
            if self.stop_on_failure and result.status is not CaseStatus.PASS:
                summary.stopped_early = len(results) < total
                break

        summary.elapsed = time.perf_counter() - start
        return summary
