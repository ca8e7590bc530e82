# statwatch/core/parser.py

import math
import re
from typing import Callable, List, Tuple, Union

from .exceptions import FormatError, ParseError
from .models import StatsRecord

_INT_PATTERN = re.compile(r'[+-]?[0-9]+')
_INT64_MIN = -(2 ** 63)
_INT64_MAX = 2 ** 63 - 1

Number = Union[int, float]


def parse_float(text: str) -> float:
    """Parse a decimal float. Raises ValueError on bad syntax or overflow."""
    # float() also takes non-ASCII digits such as fullwidth forms
    if not text or '_' in text or not text.isascii():
        raise ValueError("invalid syntax")
    value = float(text)
    # float() saturates to inf silently, an explicit 'inf' is the only way in
    if math.isinf(value) and 'inf' not in text.lower():
        raise ValueError("value out of range")
    return value


def parse_int64(text: str) -> int:
    """Parse a base-10 signed 64-bit integer. Raises ValueError otherwise."""
    if not _INT_PATTERN.fullmatch(text):
        raise ValueError("invalid syntax")
    value = int(text)
    if value < _INT64_MIN or value > _INT64_MAX:
        raise ValueError("value out of range")
    return value


# Positional layout of the stats body: (field name, converter)
FIELDS: List[Tuple[str, Callable[[str], Number]]] = [
    ('Load Average', parse_float),
    ('Total Memory', parse_int64),
    ('Used Memory', parse_int64),
    ('Total Disk', parse_int64),
    ('Used Disk', parse_int64),
    ('Total Network', parse_int64),
    ('Used Network', parse_int64),
]


def parse_stats(body: str) -> StatsRecord:
    """
    Parse a stats body of the form ``load,mem_total,mem_used,disk_total,disk_used,net_total,net_used``.

    Whitespace around the whole body and around each field is ignored.
    Fields are converted left to right and the first bad one aborts parsing.

    Args:
        body: Raw response text

    Returns:
        StatsRecord: Fully populated record

    Raises:
        FormatError: Field count is not 7
        ParseError: A field is not a valid number of its expected type
    """
    parts = body.strip().split(',')
    if len(parts) != len(FIELDS):
        raise FormatError(len(parts), len(FIELDS))

    values: List[Number] = []
    for (name, convert), raw in zip(FIELDS, parts):
        text = raw.strip()
        try:
            values.append(convert(text))
        except ValueError as e:
            raise ParseError(name, text, str(e)) from e

    return StatsRecord(*values)
