"""
Adapter for the move generator under test.

The subject is an external program invoked as

    <program> <depth> <fen> [move_1] ... [move_n]

which prints one "<move> <count>" line per legal move, a single blank
line, and then the total node count.
"""

import re
import subprocess
from typing import List, Optional, Sequence, Tuple, Union

from perft_bisect.core.errors import AdapterProcessError, AdapterProtocolError
from perft_bisect.core.types import Position, SplitResult

MOVE_RE = re.compile(r"^[a-h][1-8][a-h][1-8][qrbn]?$")
COUNT_RE = re.compile(r"^[0-9]+$")


def parse_split_output(stdout: str) -> SplitResult:
    """
    Parse the subject's split-perft output.

    Raises:
        AdapterProtocolError: the output does not follow the protocol
    """
    lines = stdout.splitlines()
    while lines and not lines[-1].strip():
        lines.pop()

    if not lines:
        raise AdapterProtocolError("subject printed no total node count", stdout)

    total_line = lines[-1].strip()
    if not COUNT_RE.match(total_line):
        raise AdapterProtocolError(
            f"final line must be the total node count, got {total_line!r}", stdout
        )
    total = int(total_line)

    if len(lines) < 2 or lines[-2].strip():
        raise AdapterProtocolError(
            "missing blank line between the per-move counts and the total", stdout
        )

    pairs: List[Tuple[str, int]] = []
    for lineno, line in enumerate(lines[:-2], start=1):
        fields = line.split()
        if not fields:
            raise AdapterProtocolError(
                f"unexpected blank line {lineno} inside the per-move counts", stdout
            )
        if len(fields) != 2:
            raise AdapterProtocolError(
                f"line {lineno}: expected '<move> <count>', got {line!r}", stdout
            )
        move, count = fields
        if not MOVE_RE.match(move):
            raise AdapterProtocolError(f"line {lineno}: malformed move {move!r}", stdout)
        if not COUNT_RE.match(count):
            raise AdapterProtocolError(
                f"line {lineno}: non-numeric count {count!r} for {move}", stdout
            )
        pairs.append((move, int(count)))

    try:
        return SplitResult.from_pairs(pairs, total)
    except ValueError as e:
        raise AdapterProtocolError(str(e), stdout) from e


class ScriptSubject:
    """Runs the subject program once per split-perft query."""

    def __init__(
        self,
        program: Union[str, Sequence[str]],
        timeout: Optional[float] = None,
    ):
        """
        Args:
            program: path to the subject executable, or a command prefix
                such as [sys.executable, "script.py"]
            timeout: seconds to wait for one invocation (None waits forever)
        """
        if isinstance(program, str):
            self.command = [program]
        else:
            self.command = [str(part) for part in program]
        if not self.command:
            raise ValueError("subject command is empty")
        self.timeout = timeout

    @property
    def name(self) -> str:
        return " ".join(self.command)

    def build_args(self, position: Position, depth: int) -> List[str]:
        return [*self.command, str(depth), position.fen, *position.moves]

    def run(self, position: Position, depth: int) -> str:
        """Invoke the subject and return its stdout."""
        args = self.build_args(position, depth)
        try:
            proc = subprocess.run(
                args,
                capture_output=True,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise AdapterProcessError(
                f"{self.name} timed out after {self.timeout}s on {position}"
            ) from e
        except OSError as e:
            raise AdapterProcessError(f"failed to launch {self.name}: {e}") from e

        stderr = proc.stderr.decode("utf-8", errors="replace")
        if proc.returncode != 0:
            raise AdapterProcessError(
                f"{self.name} exited with status {proc.returncode} on {position}\n"
                f"{stderr.strip()}",
                returncode=proc.returncode,
                stderr=stderr,
            )
        try:
            return proc.stdout.decode("utf-8")
        except UnicodeDecodeError as e:
            raise AdapterProtocolError(
                f"{self.name} output is not valid UTF-8 on {position}: {e}",
                stdout=proc.stdout.decode("utf-8", errors="replace"),
            ) from e

    def split_perft(self, position: Position, depth: int) -> SplitResult:
        return parse_split_output(self.run(position, depth))
