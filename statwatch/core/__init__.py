# statwatch/core/__init__.py

from .exceptions import (
    StatwatchError,
    ConfigurationError,
    FetchError,
    TransportError,
    UnexpectedStatus,
    ReadError,
    FormatError,
    ParseError
)
from .models import StatsRecord
from .parser import parse_stats

__all__ = [
    'StatwatchError',
    'ConfigurationError',
    'FetchError',
    'TransportError',
    'UnexpectedStatus',
    'ReadError',
    'FormatError',
    'ParseError',
    'StatsRecord',
    'parse_stats'
]
