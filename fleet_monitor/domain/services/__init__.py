"""Pure domain services: memory parsing, status classification, filter matching"""

from .memory_size import MemorySize, parse_memory_size, is_low_memory
from .status_classifier import (
    ClassifierThresholds,
    DEFAULT_THRESHOLDS,
    classify,
    evaluate,
    minutes_since,
)
from .filter_matcher import matches, parse_selector

__all__ = [
    "MemorySize",
    "parse_memory_size",
    "is_low_memory",
    "ClassifierThresholds",
    "DEFAULT_THRESHOLDS",
    "classify",
    "evaluate",
    "minutes_since",
    "matches",
    "parse_selector",
]
