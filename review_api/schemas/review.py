"""
Review Pydantic Schemas

Schemas:
- ReviewCreate: Create a new review
- ReviewUpdate: Update an existing review (partial)
- ReviewResponse: Review data for API responses

Business Rules:
- One review per user per item (enforced at database level)
- Users can only edit/delete their own reviews
"""

import uuid

from pydantic import BaseModel, ConfigDict, Field, field_validator

MIN_RATING = 0
MAX_RATING = 5


def reject_blank_text(v: str | None) -> str | None:
    """Reject whitespace-only text; None (field not sent) passes through."""
    if v is not None and not v.strip():
        raise ValueError("text must not be blank")
    return v


class ReviewCreate(BaseModel):
    """
    Schema for creating a new review.

    Example request body:
    {
        "text": "ok",
        "rating": 4
    }
    """

    text: str = Field(
        ...,
        min_length=1,
        description="Review text content",
        examples=["ok"],
    )
    rating: float = Field(
        ...,
        ge=MIN_RATING,
        le=MAX_RATING,
        description=f"Rating from {MIN_RATING} to {MAX_RATING}",
        examples=[4, 2.5],
    )

    @field_validator("text")
    @classmethod
    def text_must_not_be_blank(cls, v: str | None) -> str | None:
        return reject_blank_text(v)


class ReviewUpdate(BaseModel):
    """
    Schema for updating an existing review.

    All fields are optional; only the fields sent are changed.
    """

    text: str | None = Field(default=None, min_length=1)
    rating: float | None = Field(default=None, ge=MIN_RATING, le=MAX_RATING)

    @field_validator("text")
    @classmethod
    def text_must_not_be_blank(cls, v: str | None) -> str | None:
        return reject_blank_text(v)


class ReviewResponse(BaseModel):
    id: uuid.UUID = Field(..., description="Review ID")
    text: str = Field(..., description="Review text")
    rating: float = Field(..., description="Rating")
    user_id: uuid.UUID = Field(..., description="Owner of the review")
    item_id: uuid.UUID = Field(..., description="Reviewed item")

    model_config = ConfigDict(from_attributes=True)
