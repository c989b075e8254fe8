"""
Resolver for jsonmend - turns a raw model response into a JSON value.

The pipeline is strictly sequential and never re-enters a stage:

    extract -> strict parse -> (on failure) repair -> strict parse -> outcome
"""

import json
import logging
from typing import Any, NoReturn, Optional, TextIO, Union

from ..preprocessing.extractors import extract_candidate
from ..preprocessing.pipeline import RepairPipeline
from ..utils.config import ResolveConfig
from .exceptions import ParseError, RepairParseError, StrictParseError
from .outcome import Failed, Outcome, Parsed
from .regex_engine import RegexTimeoutError

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"{name} is not valid JSON")


def parse_strict(text: str) -> Any:
    """
    Parse ``text`` as standards-compliant JSON.

    Unlike ``json.loads`` this rejects ``NaN``, ``Infinity`` and
    ``-Infinity``.

    Returns:
        The decoded value (dict, list, str, int, float, bool or None)

    Raises:
        StrictParseError: On any syntax deviation, including empty text
    """
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise StrictParseError.from_decode_error(e) from e
    except ValueError as e:
        raise StrictParseError(str(e)) from e
    except RecursionError as e:
        raise StrictParseError("Nesting too deep") from e


def resolve(
    raw: Union[str, bytes, bytearray], config: Optional[ResolveConfig] = None
) -> Outcome:
    """
    Recover a JSON value from a model response.

    Args:
        raw: The response text. Bytes are decoded as UTF-8, with undecodable
            sequences replaced.
        config: Optional ResolveConfig for extraction and repair options

    Returns:
        ``Parsed`` if the candidate parsed strictly or after repair,
        otherwise ``Failed`` carrying ``raw`` unchanged. Malformed input
        never raises.
    """
    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8", errors="replace")
    if config is None:
        config = ResolveConfig()
    log = config.logger or logger

    extraction = extract_candidate(raw, config.extraction_mode)
    if extraction.miss:
        log.debug("No JSON object found in response; parsing it as-is")

    try:
        return Parsed(parse_strict(extraction.text))
    except StrictParseError as e:
        strict_error = e

    if not config.repair_enabled:
        return _fail(raw, strict_error, strict_error, config, log)

    log.debug("Strict parse failed (%s); attempting repair", strict_error)
    try:
        report = RepairPipeline.from_config(config).process_with_report(
            extraction.text, config.repair
        )
    except RegexTimeoutError as e:
        return _fail(raw, ParseError(str(e)), strict_error, config, log)

    try:
        value = parse_strict(report.text)
    except StrictParseError as e:
        return _fail(raw, e, strict_error, config, log)

    log.debug(
        "Recovered JSON after repair: %s",
        ", ".join(action.value for action in report.actions) or "no changes",
    )
    return Parsed(value, repaired=True, actions=tuple(report.actions))


def _fail(
    raw: str,
    error: ParseError,
    strict_error: StrictParseError,
    config: ResolveConfig,
    log: logging.Logger,
) -> Failed:
    failure = RepairParseError.after_repair(raw, error, strict_error)
    if config.log_failures:
        preview = raw[: config.preview_length]
        if len(raw) > config.preview_length:
            preview += "..."
        log.warning("Could not extract JSON from response (%s): %r", failure, preview)
    return Failed(raw, failure)


def loads(
    s: Union[str, bytes, bytearray], config: Optional[ResolveConfig] = None
) -> Any:
    """
    Recover a JSON value from a model response, raising on failure.

    Same pipeline as ``resolve()`` for callers that prefer the
    ``json.loads`` calling convention.

    Raises:
        RepairParseError: If neither the strict nor the repaired parse succeeds
    """
    if isinstance(s, (bytes, bytearray)):
        s = s.decode("utf-8")
    return resolve(s, config).unwrap()


def load(fp: TextIO, config: Optional[ResolveConfig] = None) -> Any:
    """Same as loads() but reads the response from a file-like object."""
    return loads(fp.read(), config)
