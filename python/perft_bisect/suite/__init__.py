from .epd import STANDARD_EPD, SuiteCase, load_suite, parse_record
from .results import CaseResult, CaseStatus, SuiteSummary
from .runner import SuiteRunner

__all__ = [
    'STANDARD_EPD',
    'SuiteCase',
    'load_suite',
    'parse_record',
    'CaseResult',
    'CaseStatus',
    'SuiteSummary',
    'SuiteRunner',
]
