"""Exclusion rules for filtering directory entries."""

from .base_rules import BaseExclusionRules
from .glob_rules import GlobExclusionRules

__all__ = [
    "BaseExclusionRules",
    "GlobExclusionRules",
]
