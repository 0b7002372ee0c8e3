"""
Comment Pydantic Schemas
"""

import uuid

from pydantic import BaseModel, ConfigDict, Field, field_validator

from review_api.schemas.review import reject_blank_text


class CommentCreate(BaseModel):
    text: str = Field(..., min_length=1, examples=["Totally agree"])

    @field_validator("text")
    @classmethod
    def text_must_not_be_blank(cls, v: str | None) -> str | None:
        return reject_blank_text(v)


class CommentUpdate(BaseModel):
    text: str = Field(..., min_length=1, examples=["Changed my mind"])

    @field_validator("text")
    @classmethod
    def text_must_not_be_blank(cls, v: str | None) -> str | None:
        return reject_blank_text(v)


class CommentResponse(BaseModel):
    id: uuid.UUID = Field(..., description="Comment ID")
    text: str = Field(..., description="Comment text")
    user_id: uuid.UUID = Field(..., description="Owner of the comment")
    review_id: uuid.UUID = Field(..., description="Review being commented on")

    model_config = ConfigDict(from_attributes=True)
