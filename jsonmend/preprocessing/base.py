"""
Base class for repair steps.

A repair step is a pure string-to-string rewrite. Steps are composed by
``RepairPipeline`` in a fixed order.
"""

from typing import Optional

from ..core.regex_engine import RegexEngine
from ..recovery.actions import RecoveryAction
from ..utils.config import RepairSettings


class RepairStepBase:
    """Base class for repair steps with common functionality."""

    action: Optional[RecoveryAction] = None

    def __init__(self, engine: Optional[RegexEngine] = None):
        self.engine = engine or RegexEngine()

    def should_apply(self, _settings: RepairSettings) -> bool:
        """Default implementation - always apply. Override in subclasses."""
        return True

    def process(self, text: str, _settings: RepairSettings) -> str:
        """Process the text. Must be implemented by subclasses."""
        raise NotImplementedError("Subclasses must implement process()")
