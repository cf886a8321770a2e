# SPDX-License-Identifier: MPL-2.0
"""
Receipt Points - Reward points for purchase receipts.

This package scores submitted receipts against a fixed rule set, records each
score under an identifier derived from the receipt's own fields, and serves
the scores back by identifier.
"""

import contextlib
from importlib.metadata import version

# Set up version
__version__ = "0.1.0"

with contextlib.suppress(Exception):
    __version__ = version("receipt-points")


# Core components
from receipt_points.core import Ledger, Receipt, ReceiptProcessor, derive_receipt_id, score

# Public API
__all__ = [
    "Receipt",
    "score",
    "derive_receipt_id",
    "Ledger",
    "ReceiptProcessor",
    "__version__",
]
