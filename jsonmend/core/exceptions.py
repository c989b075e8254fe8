"""
Error types raised by jsonmend.

Only two situations ever raise out of the library: the exception-style API
(``loads``/``load``) giving up on a response, and direct callers of the
lower-level stages (``parse_strict``, ``repair``). ``resolve`` converts all
of them into a ``Failed`` outcome.
"""

import json
from typing import Optional


class JsonMendError(Exception):
    """Base class for every error raised by jsonmend."""


class ParseError(JsonMendError, ValueError):
    """A JSON parse attempt failed."""

    def __init__(
        self, message: str, position: int = 0, line: int = 1, column: int = 1
    ):
        self.message = message
        self.position = position
        self.line = line
        self.column = column
        super().__init__(self._format())

    def _format(self) -> str:
        return (
            f"{self.message}: line {self.line} column {self.column} "
            f"(char {self.position})"
        )

    def __reduce__(self):
        # args only holds the formatted message, so rebuild from the fields
        return (self.__class__, (self.message, self.position, self.line, self.column))


class StrictParseError(ParseError):
    """The candidate text is not standards-compliant JSON."""

    @classmethod
    def from_decode_error(cls, error: json.JSONDecodeError) -> "StrictParseError":
        """Build a strict parse error from a stdlib decode error."""
        return cls(error.msg, error.pos, error.lineno, error.colno)


class RepairParseError(ParseError):
    """The repaired candidate still did not parse. Terminal."""

    def __init__(
        self,
        message: str,
        raw_text: str,
        position: int = 0,
        line: int = 1,
        column: int = 1,
        strict_error: Optional[StrictParseError] = None,
    ):
        self.raw_text = raw_text
        self.strict_error = strict_error
        super().__init__(message, position, line, column)

    def __reduce__(self):
        return (
            self.__class__,
            (
                self.message,
                self.raw_text,
                self.position,
                self.line,
                self.column,
                self.strict_error,
            ),
        )

    @classmethod
    def after_repair(
        cls,
        raw_text: str,
        error: ParseError,
        strict_error: Optional[StrictParseError] = None,
    ) -> "RepairParseError":
        """Wrap the final parse failure, keeping the original response."""
        return cls(
            error.message,
            raw_text,
            error.position,
            error.line,
            error.column,
            strict_error=strict_error,
        )
