"""
Reference move generator backed by python-chess.
"""

import chess

from perft_bisect.core.errors import OracleInternalError
from perft_bisect.core.types import Position, SplitResult


def perft(board: chess.Board, depth: int) -> int:
    """Count leaf nodes reachable from ``board`` in exactly ``depth`` plies."""
    if depth == 0:
        return 1
    if depth == 1:
        return board.legal_moves.count()
    nodes = 0
    for move in board.legal_moves:
        board.push(move)
        nodes += perft(board, depth - 1)
        board.pop()
    return nodes


def split_perft(board: chess.Board, depth: int) -> SplitResult:
    """Perft broken down by first move. Depth 0 lists no moves and counts one leaf."""
    if depth == 0:
        return SplitResult(counts={}, total=1)
    counts = {}
    for move in board.legal_moves:
        board.push(move)
        counts[move.uci()] = perft(board, depth - 1)
        board.pop()
    return SplitResult(counts=counts, total=sum(counts.values()))


class ReferenceOracle:
    """Trusted split-perft source used as ground truth during bisection."""

    def board_for(self, position: Position) -> chess.Board:
        """
        Rebuild the board for ``position``.

        Raises:
            OracleInternalError: the FEN does not parse, or a path move is
                not legal where it is applied
        """
        try:
            board = chess.Board(position.fen)
        except ValueError as e:
            raise OracleInternalError(f"invalid FEN {position.fen!r}: {e}") from e

        for uci in position.moves:
            try:
                move = board.parse_uci(uci)
            except ValueError as e:
                raise OracleInternalError(
                    f"move {uci!r} is not legal in {board.fen()!r} "
                    f"(path: {' '.join(position.moves)})"
                ) from e
            board.push(move)
        return board

    def split_perft(self, position: Position, depth: int) -> SplitResult:
        return split_perft(self.board_for(position), depth)

    def resulting_fen(self, position: Position) -> str:
        return self.board_for(position).fen()
