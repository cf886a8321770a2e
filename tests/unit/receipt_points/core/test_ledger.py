# SPDX-License-Identifier: MPL-2.0
"""Tests for the in-memory ledger."""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor

from receipt_points.core.ledger import Ledger
from receipt_points.core.models import ScoredReceipt


class TestLedger:
    """Test cases for the Ledger class."""

    def test_record_then_lookup(self):
        ledger = Ledger()
        ledger.record("abc", 28)
        assert ledger.lookup("abc") == (28, True)

    def test_lookup_unknown_identifier(self):
        ledger = Ledger()
        assert ledger.lookup("missing") == (0, False)
        assert ledger.get("missing") is None

    def test_record_returns_entry(self):
        ledger = Ledger()
        entry = ledger.record("abc", 5)
        assert entry == ScoredReceipt(id="abc", points=5)
        assert ledger.get("abc") == entry

    def test_record_overwrites(self, caplog):
        ledger = Ledger()
        ledger.record("abc", 28)
        with caplog.at_level(logging.WARNING, logger="receipt_points.core.ledger"):
            ledger.record("abc", 109)
        assert ledger.lookup("abc") == (109, True)
        assert len(ledger) == 1
        assert "re-recorded" in caplog.text

    def test_zero_points_are_found(self):
        ledger = Ledger()
        ledger.record("abc", 0)
        assert ledger.lookup("abc") == (0, True)

    def test_contains_and_len(self):
        ledger = Ledger()
        assert len(ledger) == 0
        ledger.record("a", 1)
        ledger.record("b", 2)
        assert "a" in ledger
        assert "c" not in ledger
        assert len(ledger) == 2

    def test_concurrent_record_and_lookup(self):
        ledger = Ledger()
        ids = [f"receipt-{i}" for i in range(500)]
        start = threading.Barrier(8)

        def worker(offset):
            start.wait()
            for i, rid in enumerate(ids):
                if i % 8 == offset:
                    ledger.record(rid, i)
                points, found = ledger.lookup(rid)
                assert not found or points == i

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(worker, range(8)))

        assert len(ledger) == len(ids)
        for i, rid in enumerate(ids):
            assert ledger.lookup(rid) == (i, True)

    def test_concurrent_writes_to_same_identifier(self):
        ledger = Ledger()
        scores = list(range(100))

        with ThreadPoolExecutor(max_workers=8) as pool:
            list(pool.map(lambda points: ledger.record("shared", points), scores))

        points, found = ledger.lookup("shared")
        assert found
        assert points in scores
        assert len(ledger) == 1
