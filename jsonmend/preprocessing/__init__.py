"""
Candidate extraction and textual repair.

This module narrows a raw model response down to a JSON candidate and applies
the fixed-order repair steps to candidates that fail a strict parse.
"""

from .base import RepairStepBase
from .extractors import (
    BalancedExtractor,
    Extraction,
    GreedyExtractor,
    extract,
    extract_candidate,
)
from .pipeline import RepairPipeline, repair, repair_with_report
from .repairers import (
    BraceBalancer,
    BracketBalancer,
    CloserNewlineRemover,
    DelimiterBalancer,
    TrailingCommaRemover,
)

__all__ = [
    "extract",
    "extract_candidate",
    "repair",
    "repair_with_report",
    "Extraction",
    "GreedyExtractor",
    "BalancedExtractor",
    "RepairPipeline",
    "RepairStepBase",
    "TrailingCommaRemover",
    "CloserNewlineRemover",
    "DelimiterBalancer",
    "BraceBalancer",
    "BracketBalancer",
]
