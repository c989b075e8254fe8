"""
Timeout-protected regex execution for the repair steps.

Repair patterns run on untrusted model output, so every substitution goes
through the ``regex`` module's native timeout support instead of the stdlib
``re`` module, which cannot interrupt a runaway match.

The engine holds only its configuration; patterns are compiled once at
module import time by the callers and passed in.
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional, Union

import regex  # type: ignore[import-untyped]

from ..utils.config import RegexSettings
from .exceptions import JsonMendError

Replacement = Union[str, Callable[["regex.Match[str]"], str]]


@dataclass
class RegexConfig:
    """Configuration for regex engine behavior."""

    timeout: Optional[float] = 1.0  # Seconds per operation, None = unbounded
    log_slow_patterns: bool = False
    slow_threshold_ms: float = 100.0
    logger: Optional[logging.Logger] = None

    @classmethod
    def from_settings(
        cls, settings: RegexSettings, logger: Optional[logging.Logger] = None
    ) -> "RegexConfig":
        """Build an engine configuration from resolve settings."""
        return cls(
            timeout=settings.timeout,
            log_slow_patterns=settings.log_slow_patterns,
            slow_threshold_ms=settings.slow_threshold_ms,
            logger=logger,
        )


class RegexTimeoutError(JsonMendError):
    """Raised when a regex operation exceeds its timeout."""

    def __init__(
        self,
        pattern: str,
        input_length: int,
        timeout: Optional[float],
        operation: str = "sub",
    ):
        self.pattern = pattern
        self.input_length = input_length
        self.timeout = timeout
        self.operation = operation

        pattern_display = pattern[:100] + "..." if len(pattern) > 100 else pattern

        message = (
            f"Regex {operation} timed out after {timeout}s\n"
            f"Pattern: {pattern_display}\n"
            f"Input length: {input_length} chars"
        )
        super().__init__(message)

    def __reduce__(self):
        return (
            self.__class__,
            (self.pattern, self.input_length, self.timeout, self.operation),
        )


def compile_pattern(pattern: str, flags: int = 0) -> "regex.Pattern[str]":
    """Compile a pattern with the regex module."""
    return regex.compile(pattern, flags)


class RegexEngine:
    """Runs precompiled patterns with timeout protection and slow-pattern logging."""

    def __init__(self, config: Optional[RegexConfig] = None):
        self.config = config or RegexConfig()
        self.logger = self.config.logger or logging.getLogger(__name__)

    def sub(
        self, pattern: "regex.Pattern[str]", repl: Replacement, string: str
    ) -> str:
        """Replace every match of ``pattern`` in ``string``.

        Raises:
            RegexTimeoutError: If the substitution exceeds the configured timeout.
        """
        start = time.perf_counter()
        try:
            result: str = pattern.sub(repl, string, timeout=self.config.timeout)
        except TimeoutError as e:
            self.logger.error(
                "Regex sub timed out on pattern: %s", pattern.pattern[:50]
            )
            raise RegexTimeoutError(
                pattern.pattern, len(string), self.config.timeout, "sub"
            ) from e
        self._check_duration("sub", pattern.pattern, start)
        return result

    def search(
        self, pattern: "regex.Pattern[str]", string: str
    ) -> "Optional[regex.Match[str]]":
        """Search for ``pattern`` in ``string`` with timeout protection."""
        start = time.perf_counter()
        try:
            match = pattern.search(string, timeout=self.config.timeout)
        except TimeoutError as e:
            self.logger.error(
                "Regex search timed out on pattern: %s", pattern.pattern[:50]
            )
            raise RegexTimeoutError(
                pattern.pattern, len(string), self.config.timeout, "search"
            ) from e
        self._check_duration("search", pattern.pattern, start)
        return match

    def _check_duration(self, operation: str, pattern_str: str, start: float) -> None:
        if not self.config.log_slow_patterns:
            return
        duration_ms = (time.perf_counter() - start) * 1000.0
        if duration_ms > self.config.slow_threshold_ms:
            self.logger.warning(
                "Slow regex %s detected (%.2fms): pattern=%s",
                operation,
                duration_ms,
                pattern_str[:50],
            )
