"""
jsonmend Core Resolution Engine.

This module provides the strict parser and the response resolver.
"""

from .engine import load, loads, parse_strict, resolve
from .exceptions import JsonMendError, ParseError, RepairParseError, StrictParseError
from .outcome import Failed, Outcome, Parsed

__all__ = [
    'resolve', 'loads', 'load', 'parse_strict',
    'Parsed', 'Failed', 'Outcome',
    'JsonMendError', 'ParseError', 'StrictParseError', 'RepairParseError',
]
