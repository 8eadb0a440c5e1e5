"""
Custom exception hierarchy for the fleet monitor.

All package exceptions inherit from FleetMonitorError and carry a
user-facing message alongside the technical one.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class FleetMonitorError(Exception):
    """Base exception for all fleet monitor errors."""

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or "An error occurred. Please try again."
        self.details = details or {}


# -----------------------------------------------------------------------------
# Query validation
# -----------------------------------------------------------------------------


class InvalidFilterError(FleetMonitorError, ValueError):
    """Raised when a dashboard filter selector or sort mode is not recognized."""

    def __init__(self, value: Any, kind: str = "status filter"):
        super().__init__(
            f"Unknown {kind}: {value!r}",
            user_message=f"Unsupported {kind}.",
            details={"value": value, "kind": kind},
        )


# -----------------------------------------------------------------------------
# Writes
# -----------------------------------------------------------------------------


class CameraUpdateError(FleetMonitorError):
    """Raised when the backend rejects or fails a camera override/flag update."""
    pass
