"""
Shareable Input Encoding
========================
Round-trips a PartialState through a flat query string, e.g.

    range=50.0&flight_time=4.0

Absent quantities are omitted, and so is a zero initial height; on the
way back a missing y0 reads as 0. This is the input boundary: text that
is not a finite number is rejected with ValueError before it can reach
the resolver.
"""

import math
from dataclasses import fields
from urllib.parse import parse_qsl, urlencode

from .state import PartialState


FIELD_NAMES = [f.name for f in fields(PartialState)]


def parse_number(text: str) -> float:
    """Parse a user-entered decimal, rejecting NaN and infinities."""
    try:
        value = float(text)
    except (TypeError, ValueError):
        raise ValueError(f"'{text}' is not a number") from None
    if not math.isfinite(value):
        raise ValueError(f"'{text}' is not a finite number")
    return value


def to_query(partial: PartialState) -> str:
    """Encode the present fields as key=value pairs in field order."""
    pairs = []
    for name in FIELD_NAMES:
        value = getattr(partial, name)
        if value is None:
            continue
        if name == 'y0' and value == 0:
            continue
        pairs.append((name, repr(float(value))))
    return urlencode(pairs)


def from_query(query: str) -> PartialState:
    """
    Decode a query string (leading '?' allowed) into a PartialState.
    Unknown keys are ignored; empty values count as absent.
    """
    values = {}
    for key, text in parse_qsl(query.lstrip('?'), keep_blank_values=True):
        if key not in FIELD_NAMES or text == '':
            continue
        values[key] = parse_number(text)

    values.setdefault('y0', 0.0)
    return PartialState(**values)
