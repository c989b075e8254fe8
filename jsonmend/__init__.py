"""
jsonmend - Tolerant JSON extraction and repair for language-model responses.

Chat-completion output often wraps the JSON you asked for in prose, stops
mid-object when the token limit hits, or leaves trailing commas behind.
jsonmend recovers a JSON value from such text with a small, predictable
pipeline:

1. Extract the candidate span (first ``{`` to last ``}``)
2. Parse it strictly
3. On failure, repair it (drop trailing commas and newlines before closers,
   append missing ``}`` and ``]``) and parse once more
4. Report ``Parsed(value)`` or ``Failed(raw_text)``

Quick Start:
    import jsonmend

    outcome = jsonmend.resolve('Here is your plan: {"meals": [1, 2,]} Enjoy!')
    if outcome.ok:
        plan = outcome.value
    else:
        print("Model returned:", outcome.raw_text)

    # Exception style
    plan = jsonmend.loads(response_text)  # raises RepairParseError
"""

from .core.engine import load, loads, parse_strict, resolve
from .core.exceptions import JsonMendError, ParseError, RepairParseError, StrictParseError
from .core.outcome import Failed, Outcome, Parsed
from .core.regex_engine import RegexTimeoutError
from .preprocessing.extractors import Extraction, extract, extract_candidate
from .preprocessing.pipeline import repair, repair_with_report
from .recovery.actions import RecoveryAction, RepairReport
from .utils.config import (
    ExtractionMode,
    ExtractionSettings,
    RegexSettings,
    RepairSettings,
    ResolveConfig,
)

__version__ = "0.1.0"
__author__ = "jsonmend contributors"

__all__ = [
    # Pipeline stages
    "extract", "extract_candidate", "parse_strict", "repair", "repair_with_report",
    # Resolution
    "resolve", "loads", "load", "Parsed", "Failed", "Outcome",
    # Configuration classes
    "ResolveConfig", "ExtractionMode", "ExtractionSettings", "RepairSettings",
    "RegexSettings",
    # Exception classes
    "JsonMendError", "ParseError", "StrictParseError", "RepairParseError",
    "RegexTimeoutError",
    # Reporting
    "Extraction", "RecoveryAction", "RepairReport",
]
