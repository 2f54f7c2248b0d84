from .reference import ReferenceOracle, perft, split_perft

__all__ = [
    'ReferenceOracle',
    'perft',
    'split_perft',
]
