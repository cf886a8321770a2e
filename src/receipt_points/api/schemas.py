# SPDX-License-Identifier: MPL-2.0
"""Request and response models for the Receipt Points API."""

from typing import List

from pydantic import BaseModel, Field

from receipt_points.core.models import Item, Receipt


class ItemPayload(BaseModel):
    """A line item as submitted over the wire."""

    shortDescription: str = ""
    price: str = ""


class ReceiptPayload(BaseModel):
    """A receipt as submitted over the wire.

    Fields are kept as text; scoring parses each field for the rule that
    needs it. Missing fields decode to empty values, while a field of the
    wrong JSON type fails validation.
    """

    retailer: str = ""
    purchaseDate: str = ""
    purchaseTime: str = ""
    items: List[ItemPayload] = Field(default_factory=list)
    total: str = ""

    def to_receipt(self) -> Receipt:
        return Receipt(
            retailer=self.retailer,
            purchase_date=self.purchaseDate,
            purchase_time=self.purchaseTime,
            items=tuple(
                Item(short_description=item.shortDescription, price=item.price)
                for item in self.items
            ),
            total=self.total,
        )


class ProcessResponse(BaseModel):
    """Response model for receipt submission."""

    id: str


class PointsResponse(BaseModel):
    """Response model for a points lookup."""

    points: int
