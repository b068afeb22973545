"""
Bookstore Exception Handling

Single BookstoreException class for all bookstore errors.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional


class BookstoreException(Exception):
    """
    Unified exception for persistence and data errors.

    Usage:
        raise BookstoreException("Store data is malformed", "MALFORMED_STORE_DATA")
        raise BookstoreException("Cannot read", "STORE_READ_FAILED", {"path": "store.dat"})

    Error Codes:
        Store data:
            - MALFORMED_STORE_DATA

        Store file:
            - STORE_READ_FAILED
            - STORE_WRITE_FAILED
    """

    def __init__(
        self,
        message: str,
        code: str,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize bookstore exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "STORE_READ_FAILED")
            details: Additional error context (optional)
        """
        self.message = message
        self.code = code
        self.details = details or {}
        self.timestamp = datetime.now(timezone.utc).isoformat()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to a dictionary for diagnostics."""
        error_dict = {
            "code": self.code,
            "message": self.message,
            "timestamp": self.timestamp
        }

        if self.details:
            error_dict["details"] = self.details

        return error_dict


# ============================================
# CONVENIENCE FACTORY FUNCTIONS
# ============================================

def malformed_store_data(reason: str, position: Optional[int] = None) -> BookstoreException:
    """Create malformed store data exception."""
    details: Dict[str, Any] = {"reason": reason}
    if position is not None:
        details["token_position"] = position
    return BookstoreException(
        f"Malformed store data: {reason}",
        "MALFORMED_STORE_DATA",
        details
    )


def store_read_failed(path: str, reason: str) -> BookstoreException:
    """Create store read failure exception."""
    return BookstoreException(
        f"Failed to read store file {path}: {reason}",
        "STORE_READ_FAILED",
        {"path": path, "reason": reason}
    )


def store_write_failed(path: str, reason: str) -> BookstoreException:
    """Create store write failure exception."""
    return BookstoreException(
        f"Failed to save store content to {path}: {reason}",
        "STORE_WRITE_FAILED",
        {"path": path, "reason": reason}
    )
