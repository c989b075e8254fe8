"""
Fixed-order repair pipeline.

Comma and newline cleanup always runs before balancing, so appended closers
land after trailing punctuation has been normalized. Braces are closed
before brackets.
"""

from typing import Optional

from ..core.regex_engine import RegexConfig, RegexEngine
from ..recovery.actions import RepairReport
from ..utils.config import RepairSettings, ResolveConfig
from .base import RepairStepBase
from .repairers import (
    BraceBalancer,
    BracketBalancer,
    CloserNewlineRemover,
    TrailingCommaRemover,
)


class RepairPipeline:
    """Manages the sequence of repair steps applied to a JSON candidate."""

    def __init__(self, steps: Optional[list[RepairStepBase]] = None):
        self.steps = steps or []

    def add_step(self, step: RepairStepBase) -> None:
        """Add a repair step to the pipeline."""
        self.steps.append(step)

    def process(self, text: str, settings: Optional[RepairSettings] = None) -> str:
        """Apply all applicable repair steps to the text."""
        return self.process_with_report(text, settings).text

    def process_with_report(
        self, text: str, settings: Optional[RepairSettings] = None
    ) -> RepairReport:
        """Apply all applicable steps and record which of them changed the text."""
        if settings is None:
            settings = RepairSettings()

        report = RepairReport(original=text, text=text)
        for step in self.steps:
            if not step.should_apply(settings):
                continue
            result = step.process(report.text, settings)
            if result != report.text and step.action is not None:
                report.record(step.action)
            report.text = result
        return report

    @classmethod
    def create_default_pipeline(
        cls, engine: Optional[RegexEngine] = None
    ) -> "RepairPipeline":
        """Create the standard four-step pipeline."""
        engine = engine or RegexEngine()
        pipeline = cls()

        # Punctuation cleanup
        pipeline.add_step(TrailingCommaRemover(engine))
        pipeline.add_step(CloserNewlineRemover(engine))

        # Balancing (append-only)
        pipeline.add_step(BraceBalancer(engine))
        pipeline.add_step(BracketBalancer(engine))

        return pipeline

    @classmethod
    def from_config(cls, config: ResolveConfig) -> "RepairPipeline":
        """Create the standard pipeline with the config's regex settings."""
        assert config.regex is not None
        engine = RegexEngine(RegexConfig.from_settings(config.regex, config.logger))
        return cls.create_default_pipeline(engine)


def repair_with_report(text: str, config: Optional[ResolveConfig] = None) -> RepairReport:
    """Repair ``text`` and report which actions changed it.

    Raises:
        RegexTimeoutError: If a repair pattern exceeds the configured timeout.
    """
    if config is None:
        config = ResolveConfig()
    pipeline = RepairPipeline.from_config(config)
    return pipeline.process_with_report(text, config.repair)


def repair(text: str, config: Optional[ResolveConfig] = None) -> str:
    """Apply the four textual repairs to ``text`` in their fixed order.

    Repair is idempotent and leaves clean, valid JSON untouched.

    Raises:
        RegexTimeoutError: If a repair pattern exceeds the configured timeout.
    """
    return repair_with_report(text, config).text
