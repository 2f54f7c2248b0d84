#!/usr/bin/env python3
"""
Known-good split-perft script built on python-chess.

    reference_split_perft.py <depth> <fen> [move ...]

Prints "<move> <nodes>" for every legal move, a blank line, then the
total. Moves may be given as separate arguments or as one
space-separated argument.
"""
import sys

import chess


def perft(board, depth):
    if depth == 0:
        return 1
    nodes = 0
    for move in board.legal_moves:
        board.push(move)
        nodes += perft(board, depth - 1)
        board.pop()
    return nodes


def main(argv):
    if len(argv) < 3:
        print(f"Usage: {argv[0]} <depth> <fen> [moves]", file=sys.stderr)
        return 1

    try:
        depth = int(argv[1])
    except ValueError:
        print(f"Failed to parse {argv[1]!r} as depth value", file=sys.stderr)
        return 1

    try:
        board = chess.Board(argv[2])
        for arg in argv[3:]:
            for uci in arg.split():
                board.push(board.parse_uci(uci))
    except ValueError as e:
        print(e, file=sys.stderr)
        return 1

    total = 0
    if depth > 0:
        for move in board.legal_moves:
            board.push(move)
            nodes = perft(board, depth - 1)
            board.pop()
            print(f"{move.uci()}\t{nodes}")
            total += nodes
    else:
        total = 1

    print(f"\n{total}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
