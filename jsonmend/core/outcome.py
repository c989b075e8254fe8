"""
Tagged outcome of resolving a model response.

A response either parses (possibly after repair) or it does not. Failure is
an ordinary value here, not an exception: unparseable model output is the
common case, and callers should branch on it explicitly.

    outcome = resolve(text)
    if isinstance(outcome, Parsed):
        save(outcome.value)
    else:
        show_error(outcome.raw_text)
"""

from dataclasses import dataclass, field
from typing import Any, Optional, Union

from ..recovery.actions import RecoveryAction
from .exceptions import RepairParseError


@dataclass(frozen=True)
class Parsed:
    """The response yielded a JSON value."""

    value: Any
    repaired: bool = False
    actions: tuple[RecoveryAction, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> Any:
        """Return the parsed value."""
        return self.value

    def unwrap_or(self, _default: Any) -> Any:
        """Return the parsed value."""
        return self.value


@dataclass(frozen=True)
class Failed:
    """Neither the strict nor the repaired parse succeeded.

    ``raw_text`` is the response exactly as the caller supplied it, never an
    extracted or repaired intermediate.
    """

    raw_text: str
    error: Optional[RepairParseError] = None

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> Any:
        """Raise the failure as a ``RepairParseError``."""
        if self.error is not None:
            raise self.error
        raise RepairParseError("Could not extract JSON", self.raw_text)

    def unwrap_or(self, default: Any) -> Any:
        """Return ``default``."""
        return default


Outcome = Union[Parsed, Failed]
