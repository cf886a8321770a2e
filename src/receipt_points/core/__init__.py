# SPDX-License-Identifier: MPL-2.0
"""Core functionality for Receipt Points."""
from receipt_points.core.identifier import derive_receipt_id, receipt_id
from receipt_points.core.ledger import Ledger
from receipt_points.core.models import Item, Receipt, ScoredReceipt
from receipt_points.core.processor import ReceiptProcessor
from receipt_points.core.scoring import breakdown, score

__all__ = [
    "Item",
    "Receipt",
    "ScoredReceipt",
    "score",
    "breakdown",
    "derive_receipt_id",
    "receipt_id",
    "Ledger",
    "ReceiptProcessor",
]
