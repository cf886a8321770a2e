# SPDX-License-Identifier: MPL-2.0
"""Receipt processing service.

Composes scoring, identifier derivation and the ledger. Both the HTTP API and
the CLI drive receipts through a :class:`ReceiptProcessor`.
"""

import logging
from typing import Optional

from receipt_points.core.exceptions import InvalidReceiptError, ReceiptNotFoundError
from receipt_points.core import identifier
from receipt_points.core.ledger import Ledger
from receipt_points.core.models import Receipt, ScoredReceipt
from receipt_points.core.scoring import score

logger = logging.getLogger(__name__)


class ReceiptProcessor:
    """Scores receipts and answers points queries against a ledger."""

    def __init__(self, ledger: Optional[Ledger] = None) -> None:
        self.ledger = ledger if ledger is not None else Ledger()

    def process(self, receipt: Receipt) -> ScoredReceipt:
        """Score a receipt and record it under its derived identifier."""
        points = score(receipt)
        entry = self.ledger.record(identifier.receipt_id(receipt), points)
        logger.info(f"Processed receipt {entry.id} from {receipt.retailer!r}: {points} points")
        return entry

    def get_points(self, receipt_id: str) -> int:
        """Return the points recorded for an identifier.

        Raises:
            InvalidReceiptError: If the identifier is empty.
            ReceiptNotFoundError: If nothing was recorded for the identifier.
        """
        if not receipt_id:
            raise InvalidReceiptError("Missing receipt ID")
        points, found = self.ledger.lookup(receipt_id)
        if not found:
            raise ReceiptNotFoundError(receipt_id)
        return points
