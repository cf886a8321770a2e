# SPDX-License-Identifier: MPL-2.0
"""Prometheus metrics for the Receipt Points API."""

from prometheus_client import Counter, Histogram

RECEIPTS_PROCESSED = Counter(
    "receipts_processed", "receipts scored and recorded"
)
POINTS_AWARDED = Histogram(
    "receipt_points_awarded",
    "points awarded per receipt",
    buckets=(0, 10, 25, 50, 75, 100, 150, 250, 500),
)
POINTS_LOOKUPS = Counter(
    "receipt_points_lookups", "points lookups by outcome", ["outcome"]
)
