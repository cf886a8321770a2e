# SPDX-License-Identifier: MPL-2.0
"""
In-memory ledger of scored receipts.

The ledger maps derived receipt identifiers to the points awarded for them.
It is the only shared mutable state in the service, so it owns the lock that
serialises access to it.
"""

import logging
import threading
from typing import Dict, Optional, Tuple

from receipt_points.core.models import ScoredReceipt

logger = logging.getLogger(__name__)


class Ledger:
    """
    Thread-safe mapping from receipt identifier to points.

    Entries are never evicted or expired. Recording an identifier that is
    already present replaces its entry, and concurrent records of the same
    identifier resolve as last-writer-wins.

    Attributes:
        _entries: Scored receipts keyed by identifier
        _lock: Thread lock guarding ``_entries``
    """

    def __init__(self) -> None:
        self._entries: Dict[str, ScoredReceipt] = {}
        self._lock = threading.Lock()

    def record(self, receipt_id: str, points: int) -> ScoredReceipt:
        """Store the points for an identifier, replacing any previous entry."""
        entry = ScoredReceipt(id=receipt_id, points=points)
        with self._lock:
            previous = self._entries.get(receipt_id)
            self._entries[receipt_id] = entry
        if previous is not None and previous.points != points:
            logger.warning(
                f"Receipt {receipt_id} re-recorded: {previous.points} -> {points} points"
            )
        return entry

    def lookup(self, receipt_id: str) -> Tuple[int, bool]:
        """Return ``(points, True)`` for a recorded identifier, else ``(0, False)``."""
        entry = self.get(receipt_id)
        if entry is None:
            return 0, False
        return entry.points, True

    def get(self, receipt_id: str) -> Optional[ScoredReceipt]:
        """Return the entry for an identifier, or ``None``."""
        with self._lock:
            return self._entries.get(receipt_id)

    def __contains__(self, receipt_id: object) -> bool:
        with self._lock:
            return receipt_id in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
