"""
jsonmend repair bookkeeping.

This module provides the action vocabulary used to describe repairs.
"""

from .actions import RecoveryAction, RepairReport

__all__ = ["RecoveryAction", "RepairReport"]
