from .bisector import Bisector, SplitPerftSource, bisect
from .comparator import compare
from .errors import (
    AdapterProcessError,
    AdapterProtocolError,
    OracleInternalError,
    PerftBisectError,
    SuiteFormatError,
)
from .types import (
    BisectionResult,
    Divergence,
    DivergenceKind,
    Failure,
    FullAgreement,
    Move,
    Position,
    SplitResult,
)

__all__ = [
    'Bisector',
    'SplitPerftSource',
    'bisect',
    'compare',
    'AdapterProcessError',
    'AdapterProtocolError',
    'OracleInternalError',
    'PerftBisectError',
    'SuiteFormatError',
    'BisectionResult',
    'Divergence',
    'DivergenceKind',
    'Failure',
    'FullAgreement',
    'Move',
    'Position',
    'SplitResult',
]
