# SPDX-License-Identifier: MPL-2.0
"""Receipt endpoints.

Handlers are plain functions, so FastAPI runs them in its thread pool and
concurrent requests share the processor's ledger.
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from receipt_points.api.metrics import POINTS_AWARDED, POINTS_LOOKUPS, RECEIPTS_PROCESSED
from receipt_points.api.schemas import PointsResponse, ProcessResponse, ReceiptPayload
from receipt_points.core.exceptions import ReceiptNotFoundError
from receipt_points.core.processor import ReceiptProcessor

logger = logging.getLogger(__name__)

router = APIRouter()


def get_processor(request: Request) -> ReceiptProcessor:
    """Return the processor owned by the running application."""
    return request.app.state.processor


@router.get("/", response_class=PlainTextResponse, include_in_schema=False)
def root() -> str:
    """Liveness acknowledgement."""
    return "Server is running!"


@router.get("/health", tags=["Health"])
def health_check(processor: ReceiptProcessor = Depends(get_processor)) -> dict[str, str | int]:
    """Health check endpoint for monitoring and load balancers."""
    return {
        "status": "healthy",
        "service": "receipt-points",
        "receipts": len(processor.ledger),
    }


@router.post("/receipts/process", response_model=ProcessResponse, tags=["Receipts"])
def process_receipt(
    payload: ReceiptPayload,
    processor: ReceiptProcessor = Depends(get_processor),
) -> ProcessResponse:
    """Score a receipt and return its identifier."""
    entry = processor.process(payload.to_receipt())
    RECEIPTS_PROCESSED.inc()
    POINTS_AWARDED.observe(entry.points)
    return ProcessResponse(id=entry.id)


@router.get("/receipts/{receipt_id:path}/points", response_model=PointsResponse, tags=["Receipts"])
def get_points(
    receipt_id: str,
    processor: ReceiptProcessor = Depends(get_processor),
) -> PointsResponse:
    """Return the points awarded to a previously processed receipt."""
    try:
        points = processor.get_points(receipt_id)
    except ReceiptNotFoundError:
        POINTS_LOOKUPS.labels("not_found").inc()
        raise
    POINTS_LOOKUPS.labels("found").inc()
    return PointsResponse(points=points)
