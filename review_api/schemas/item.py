"""
Item Pydantic Schemas

Schemas:
- ItemResponse: Item row as listed by /items
- ItemDetailResponse: Item plus its computed average rating
"""

import uuid

from pydantic import BaseModel, ConfigDict, Field


class ItemResponse(BaseModel):
    id: uuid.UUID = Field(..., description="Unique item identifier")
    name: str = Field(..., description="Item name")
    description: str = Field(..., description="Item description")

    model_config = ConfigDict(from_attributes=True)


class ItemDetailResponse(ItemResponse):
    """
    Item detail with the mean of all its review ratings.

    average_rating is null when the item has no reviews (not zero).
    """

    average_rating: float | None = Field(
        default=None,
        description="Mean review rating, or null if unreviewed",
        examples=[3.67, None],
    )
