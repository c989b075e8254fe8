"""
Repair actions and the report describing which ones changed a candidate.
"""

from dataclasses import dataclass, field
from enum import Enum


class RecoveryAction(Enum):
    """Textual rewrites the repair pipeline can apply."""

    REMOVED_TRAILING_COMMA = "removed_trailing_comma"
    REMOVED_NEWLINE = "removed_newline"
    CLOSED_BRACE = "closed_brace"
    CLOSED_BRACKET = "closed_bracket"


@dataclass
class RepairReport:
    """Result of running the repair pipeline over one candidate."""

    original: str
    text: str
    actions: list[RecoveryAction] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        """Whether repair altered the candidate at all."""
        return self.text != self.original

    def record(self, action: RecoveryAction) -> None:
        """Record an action once, keeping first-applied order."""
        if action not in self.actions:
            self.actions.append(action)
