from .core import (
    AdapterProcessError,
    AdapterProtocolError,
    Bisector,
    Divergence,
    DivergenceKind,
    Failure,
    FullAgreement,
    OracleInternalError,
    PerftBisectError,
    Position,
    SplitResult,
    bisect,
    compare,
)
from .oracle import ReferenceOracle
from .subject import ScriptSubject

__version__ = "0.1.0"

__all__ = [
    'AdapterProcessError',
    'AdapterProtocolError',
    'Bisector',
    'Divergence',
    'DivergenceKind',
    'Failure',
    'FullAgreement',
    'OracleInternalError',
    'PerftBisectError',
    'Position',
    'SplitResult',
    'bisect',
    'compare',
    'ReferenceOracle',
    'ScriptSubject',
]
