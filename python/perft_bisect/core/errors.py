"""
Error taxonomy for perft bisection.

A divergence between subject and oracle is not an error: it is the
expected output of a failing case. These exceptions mark cases that could
not be judged at all.
"""

from typing import Optional


class PerftBisectError(RuntimeError):
    """Base class for everything that aborts a single test case."""


class AdapterProtocolError(PerftBisectError):
    """The subject's output does not follow the split-perft protocol."""

    def __init__(self, message: str, stdout: str = ""):
        super().__init__(message)
        self.stdout = stdout


class AdapterProcessError(PerftBisectError):
    """The subject process failed to launch, crashed, timed out or exited non-zero."""

    def __init__(
        self,
        message: str,
        returncode: Optional[int] = None,
        stderr: str = "",
    ):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


class OracleInternalError(PerftBisectError):
    """The reference generator rejected a FEN or a move on the bisection path."""


class SuiteFormatError(ValueError):
    """An EPD suite record could not be parsed."""
