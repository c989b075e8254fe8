"""
Textual repair steps for common language-model JSON mistakes.

Every step is purely textual: it does not know about string literals, so a
brace inside a quoted value counts like any other brace. Steps only ever
delete trailing commas and newlines sitting right before a closer, or append
closers at the very end. Opening delimiters are never removed and nothing is
inserted in the interior of the text.
"""

from ..core.regex_engine import compile_pattern
from ..recovery.actions import RecoveryAction
from ..utils.config import RepairSettings
from .base import RepairStepBase

# A run of commas (with any whitespace between and after them) right before a
# closer. Removing the run as a whole keeps the step at its fixed point.
# Each pattern may only start where a run starts and consumes it possessively,
# so a long run is scanned once instead of once per character.
TRAILING_COMMA_PATTERN = compile_pattern(r"(?<![\s,])(\s*+),[\s,]*+([}\]])")
NEWLINE_BEFORE_CLOSER_PATTERN = compile_pattern(r"(?<!\n)\n++(?=[}\]])")

# The same two rules at the end of the text, where a closer is about to be
# appended.
TRAILING_COMMA_AT_END_PATTERN = compile_pattern(r"(?<![\s,])(\s*+),[\s,]*+\Z")
NEWLINE_AT_END_PATTERN = compile_pattern(r"(?<!\n)\n++\Z")


class TrailingCommaRemover(RepairStepBase):
    """Removes commas that are followed only by whitespace and a closer."""

    action = RecoveryAction.REMOVED_TRAILING_COMMA

    def should_apply(self, settings: RepairSettings) -> bool:
        """Apply if trailing comma removal is enabled."""
        return settings.remove_trailing_commas

    def process(self, text: str, settings: RepairSettings) -> str:
        """Drop ``,`` before ``}`` or ``]``, along with the whitespace between."""
        return self.engine.sub(TRAILING_COMMA_PATTERN, r"\1\2", text)


class CloserNewlineRemover(RepairStepBase):
    """Removes newline characters directly in front of a closer."""

    action = RecoveryAction.REMOVED_NEWLINE

    def should_apply(self, settings: RepairSettings) -> bool:
        """Apply if newline cleanup is enabled."""
        return settings.remove_newlines_before_closers

    def process(self, text: str, settings: RepairSettings) -> str:
        """Drop ``\\n`` characters immediately preceding ``}`` or ``]``."""
        return self.engine.sub(NEWLINE_BEFORE_CLOSER_PATTERN, "", text)


class DelimiterBalancer(RepairStepBase):
    """Appends closers until the closer count reaches the opener count."""

    opener = ""
    closer = ""

    def process(self, text: str, settings: RepairSettings) -> str:
        """Append one closer per excess opener."""
        missing = text.count(self.opener) - text.count(self.closer)
        if missing <= 0:
            return text
        return self._prepare_tail(text, settings) + self.closer * missing

    def _prepare_tail(self, text: str, settings: RepairSettings) -> str:
        """Apply the comma and newline rules to the end of the text.

        Once a closer is appended, a trailing comma or newline at the end
        would sit directly in front of it. Unlike a plain append, this lets
        a response cut off right after a separator, such as ``{"a": 1,``,
        repair to valid JSON, and a second repair pass leaves it unchanged.
        """
        if settings.remove_trailing_commas:
            text = self.engine.sub(TRAILING_COMMA_AT_END_PATTERN, r"\1", text)
        if settings.remove_newlines_before_closers:
            text = self.engine.sub(NEWLINE_AT_END_PATTERN, "", text)
        return text


class BraceBalancer(DelimiterBalancer):
    """Closes unterminated objects."""

    action = RecoveryAction.CLOSED_BRACE
    opener = "{"
    closer = "}"

    def should_apply(self, settings: RepairSettings) -> bool:
        """Apply if brace balancing is enabled."""
        return settings.balance_braces


class BracketBalancer(DelimiterBalancer):
    """Closes unterminated arrays."""

    action = RecoveryAction.CLOSED_BRACKET
    opener = "["
    closer = "]"

    def should_apply(self, settings: RepairSettings) -> bool:
        """Apply if bracket balancing is enabled."""
        return settings.balance_brackets
