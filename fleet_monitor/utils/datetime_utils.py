"""
Centralized DateTime Utilities
==============================

Provides consistent datetime handling for camera signals. Every parsed
timestamp is a timezone-aware UTC datetime; strings without zone
information are taken as UTC.

Functions:
- utc_now(): Current time as an aware UTC datetime
- ensure_utc(): Normalize naive/aware datetimes to aware UTC
- parse_iso(): Safely parse ISO 8601 strings (with or without zone)
- parse_legacy_timestamp(): Parse compact "YYYYMMDDHHMMSS" photo tokens
- parse_last_photo_time(): Resolve a camera's last-photo instant
- to_iso(): Convert datetime object to ISO 8601 string
"""
import re
from datetime import datetime, timedelta, timezone as dt_timezone
from typing import Optional, Union

_LEGACY_TOKEN_LENGTH = 14

# Fractional seconds followed by an optional offset
_FRACTION_RE = re.compile(r"\.(\d+)(?=[+-]\d{2}:?\d{2}$|$)")


def utc_now() -> datetime:
    """
    Get current UTC time as a timezone-aware datetime.
    """
    return datetime.now(dt_timezone.utc)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime into a timezone-aware UTC datetime.

    - If dt is None -> None
    - If dt is naive -> assume it represents UTC
    - If dt is aware -> convert to UTC
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=dt_timezone.utc)
    return dt.astimezone(dt_timezone.utc)


def parse_iso(dt_str: Optional[Union[str, datetime]]) -> Optional[datetime]:
    """
    Parse ISO 8601 string to a UTC datetime object.

    Handles "Z" suffixes, numeric offsets, "T" or space separators and
    fractional seconds. Strings without zone information are UTC.

    Args:
        dt_str: ISO 8601 string (e.g., "2025-12-24T10:30:00Z", "2025-12-24 10:30:00")

    Returns:
        timezone-aware UTC datetime, or None if parsing fails
    """
    if isinstance(dt_str, datetime):
        return ensure_utc(dt_str)
    if not dt_str or not isinstance(dt_str, str):
        return None

    normalized = dt_str.strip()
    if not normalized:
        return None
    if normalized.isdigit():
        # Compact tokens are not ISO basic format
        return parse_legacy_timestamp(normalized)
    if normalized.endswith(("Z", "z")):
        normalized = normalized[:-1] + "+00:00"
    # fromisoformat before 3.11 only accepts 3 or 6 fraction digits
    normalized = _FRACTION_RE.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), normalized)

    try:
        dt = datetime.fromisoformat(normalized)
    except ValueError:
        return None

    return ensure_utc(dt)


def parse_legacy_timestamp(value: Optional[str]) -> Optional[datetime]:
    """
    Parse a compact photo token such as "20251121105533" (UTC).

    Only the first 14 characters are read, so file names like
    "20251121105533.jpg" also work.
    """
    if not value or len(value) < _LEGACY_TOKEN_LENGTH:
        return None
    token = value[:_LEGACY_TOKEN_LENGTH]
    if not token.isdigit():
        return None
    try:
        return datetime.strptime(token, "%Y%m%d%H%M%S").replace(tzinfo=dt_timezone.utc)
    except ValueError:
        return None


def parse_last_photo_time(
    last_photo_time: Optional[str],
    last_photo: Optional[str] = None,
    offset_hours: float = 0.0,
) -> Optional[datetime]:
    """
    Resolve the instant of a camera's most recent photo.

    The explicit photo time wins; the legacy token embedded in the photo
    name is the fallback. A fixed correction of `offset_hours` is then
    added (negative values move the instant earlier).

    Args:
        last_photo_time: ISO 8601 time reported by the backend
        last_photo: Photo name / compact token
        offset_hours: Deployment-specific clock correction

    Returns:
        UTC datetime, or None if neither value parses
    """
    parsed = parse_iso(last_photo_time) or parse_legacy_timestamp(last_photo)
    if parsed is None:
        return None
    if offset_hours:
        parsed = parsed + timedelta(hours=offset_hours)
    return parsed


def to_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Convert datetime object to ISO 8601 string in UTC with a "Z" suffix.

    Args:
        dt: datetime object (timezone-aware or naive)

    Returns:
        ISO 8601 formatted string, or None if dt is None
    """
    if dt is None:
        return None
    return ensure_utc(dt).replace(microsecond=0).isoformat().replace("+00:00", "Z")
