"""Outcome records produced by the suite runner."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from perft_bisect.core.errors import PerftBisectError
from perft_bisect.core.types import BisectionResult
from perft_bisect.suite.epd import SuiteCase


class CaseStatus(Enum):
    PASS = "pass"
    FAIL = "fail"
    ERROR = "error"


@dataclass(frozen=True)
class CaseResult:
    case: SuiteCase
    status: CaseStatus
    result: Optional[BisectionResult] = None
    error: Optional[PerftBisectError] = None
    resulting_fen: Optional[str] = None
    elapsed: float = 0.0

    @property
    def expected_mismatch(self) -> bool:
        """True when the suite's node count disagrees with the reference generator."""
        if self.case.expected is None or self.result is None or self.result.nodes is None:
            return False
        return self.case.expected != self.result.nodes


@dataclass
class SuiteSummary:
    results: List[CaseResult] = field(default_factory=list)
    elapsed: float = 0.0
    stopped_early: bool = False

    def _count(self, status: CaseStatus) -> int:
        return sum(1 for r in self.results if r.status is status)

    @property
    def passed(self) -> int:
        return self._count(CaseStatus.PASS)

    @property
    def failed(self) -> int:
        return self._count(CaseStatus.FAIL)

    @property
    def errored(self) -> int:
        return self._count(CaseStatus.ERROR)

    @property
    def ok(self) -> bool:
        return self.passed == len(self.results)
