"""
Configuration for jsonmend extraction and repair.

This module defines the settings that control how a language-model response
is narrowed down to a JSON candidate, which repair steps run, and how the
regex-backed steps are protected against runaway patterns.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ExtractionMode(Enum):
    """How the candidate JSON span is located inside a raw response."""

    GREEDY = "greedy"  # First "{" to last "}" (default)
    BALANCED = "balanced"  # First "{" to the brace that closes it


@dataclass
class ExtractionSettings:
    """Settings for candidate extraction."""
    mode: ExtractionMode = ExtractionMode.GREEDY


@dataclass
class RepairSettings:
    """Settings for the textual repair steps. Step order is fixed."""
    remove_trailing_commas: bool = True
    remove_newlines_before_closers: bool = True
    balance_braces: bool = True
    balance_brackets: bool = True


@dataclass
class RegexSettings:
    """Timeout and monitoring settings for regex-backed repair steps."""
    timeout: Optional[float] = 1.0
    log_slow_patterns: bool = False
    slow_threshold_ms: float = 100.0


@dataclass
class ResolveConfig:
    """Granular control over the extract / parse / repair pipeline."""

    extraction: Optional[ExtractionSettings] = None
    repair: Optional[RepairSettings] = None
    regex: Optional[RegexSettings] = None
    log_failures: bool = True
    preview_length: int = 200
    logger: Optional[logging.Logger] = None

    def __post_init__(self) -> None:
        if self.extraction is None:
            self.extraction = ExtractionSettings()
        if self.repair is None:
            self.repair = RepairSettings()
        if self.regex is None:
            self.regex = RegexSettings()

        if self.regex.timeout is not None and self.regex.timeout <= 0:
            raise ValueError("regex timeout must be positive")
        if self.preview_length < 0:
            raise ValueError("preview_length must not be negative")

    @property
    def extraction_mode(self) -> ExtractionMode:
        """The configured extraction mode."""
        assert self.extraction is not None
        return self.extraction.mode

    @property
    def repair_enabled(self) -> bool:
        """Whether any repair step is switched on."""
        assert self.repair is not None
        return (
            self.repair.remove_trailing_commas
            or self.repair.remove_newlines_before_closers
            or self.repair.balance_braces
            or self.repair.balance_brackets
        )

    @classmethod
    def default(cls) -> "ResolveConfig":
        """Greedy extraction with every repair step enabled."""
        return cls()

    @classmethod
    def balanced(cls) -> "ResolveConfig":
        """Bracket-depth extraction with every repair step enabled."""
        return cls(extraction=ExtractionSettings(mode=ExtractionMode.BALANCED))

    @classmethod
    def strict(cls) -> "ResolveConfig":
        """Extraction only; malformed candidates are not repaired."""
        return cls(
            repair=RepairSettings(
                remove_trailing_commas=False,
                remove_newlines_before_closers=False,
                balance_braces=False,
                balance_brackets=False,
            )
        )

    @classmethod
    def from_features(cls, enabled_features: set[str]) -> "ResolveConfig":
        """Create a configuration with only the named repair steps enabled.

        The extra feature name ``"balanced_extraction"`` switches the
        extractor to bracket-depth scanning. Unknown names raise ValueError.
        """
        config = cls.strict()
        assert config.repair is not None and config.extraction is not None

        repair_fields = {
            "remove_trailing_commas",
            "remove_newlines_before_closers",
            "balance_braces",
            "balance_brackets",
        }
        for feature_name in enabled_features:
            if feature_name in repair_fields:
                setattr(config.repair, feature_name, True)
            elif feature_name == "balanced_extraction":
                config.extraction.mode = ExtractionMode.BALANCED
            else:
                raise ValueError(f"Unknown feature: {feature_name}")

        return config
