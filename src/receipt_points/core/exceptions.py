# SPDX-License-Identifier: MPL-2.0
"""Custom exceptions for Receipt Points.

This module defines specific exception types for the error conditions the
service surfaces to its callers. Field-level parse failures inside the scoring
rules are not represented here: they contribute zero points and never raise.
"""

from typing import Any, Dict, Optional


class ReceiptPointsError(Exception):
    """Base exception for all Receipt Points errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        """Initialize the exception.

        Args:
            message: Error message
            details: Optional dictionary with additional error details
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ReceiptError(ReceiptPointsError):
    """Base exception for receipt-related errors."""

    pass


class InvalidReceiptError(ReceiptError):
    """Raised when a receipt document or identifier cannot be decoded."""

    pass


class ReceiptNotFoundError(ReceiptError):
    """Raised when no score was ever recorded for an identifier."""

    def __init__(self, receipt_id: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__("Receipt not found", details)
        self.receipt_id = receipt_id


class ConfigurationError(ReceiptPointsError):
    """Raised when configuration is invalid or missing."""

    pass
