"""
Parsing of free-form storage capacity strings ("9.4 GB", "500MB") reported
by camera health and memory records.
"""
# Standard library imports
import math
import re
from dataclasses import dataclass
from typing import Optional

DEFAULT_LOW_MEMORY_THRESHOLD_GB = 10.0

_MEMORY_PATTERN = re.compile(r"^([\d.]+)\s*(G|GB|MB|KB|B)?$")

_GB_PER_UNIT = {
    "GB": 1.0,
    "MB": 1.0 / 1024,
    "KB": 1.0 / (1024 * 1024),
    "B": 1.0 / (1024 * 1024 * 1024),
}


@dataclass(frozen=True)
class MemorySize:
    """Capacity normalized to gigabytes. `value` is 0.0 whenever `is_valid` is False."""
    value: float
    is_valid: bool


INVALID_MEMORY_SIZE = MemorySize(value=0.0, is_valid=False)


def parse_memory_size(text: Optional[str]) -> MemorySize:
    """
    Parse a capacity string into gigabytes.

    The unit is optional and defaults to GB; `G` is accepted as GB.

    Args:
        text: Capacity string such as "9.4 GB", "500MB" or "12"

    Returns:
        MemorySize with the value in GB, or an invalid result when the
        string is absent, does not match, or has a non-finite number
    """
    if not text or not isinstance(text, str):
        return INVALID_MEMORY_SIZE

    match = _MEMORY_PATTERN.match(text.strip().upper())
    if not match:
        return INVALID_MEMORY_SIZE

    try:
        number = float(match.group(1))
    except ValueError:
        # e.g. "1.2.3" or a lone "."
        return INVALID_MEMORY_SIZE
    if not math.isfinite(number):
        return INVALID_MEMORY_SIZE

    unit = match.group(2) or "GB"
    if unit == "G":
        unit = "GB"

    return MemorySize(value=number * _GB_PER_UNIT[unit], is_valid=True)


def is_low_memory(
    memory_available: Optional[str],
    has_memory_assigned: bool,
    threshold_gb: float = DEFAULT_LOW_MEMORY_THRESHOLD_GB,
) -> bool:
    """
    Low memory = a valid reading, on a camera with memory assigned, below the threshold.

    An unparseable reading is never low memory.
    """
    if not has_memory_assigned:
        return False
    size = parse_memory_size(memory_available)
    return size.is_valid and size.value < threshold_gb
