from .adapter import ScriptSubject, parse_split_output

__all__ = [
    'ScriptSubject',
    'parse_split_output',
]
