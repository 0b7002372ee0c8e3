"""
Items Router

Read-only catalog endpoints:
- GET /items - List items, optionally filtered by ?search=
- GET /items/{item_id} - Item detail with average rating
"""

import uuid

from fastapi import APIRouter, Query

from review_api.dependencies import DbSession
from review_api.schemas.item import ItemDetailResponse, ItemResponse
from review_api.services.items import get_item_with_average_rating, list_items

router = APIRouter(
    prefix="/items",
    tags=["Items"],
    responses={404: {"description": "Item not found"}},
)


@router.get(
    "",
    response_model=list[ItemResponse],
    summary="List items",
    description="List catalog items. `search` matches name or description, case-insensitively.",
)
def get_items(
    db: DbSession,
    search: str | None = Query(
        default=None,
        max_length=100,
        description="Substring to search for",
        examples=["foo"],
    ),
) -> list[ItemResponse]:
    items = list_items(db, search)
    return [ItemResponse.model_validate(item) for item in items]


@router.get(
    "/{item_id}",
    response_model=ItemDetailResponse,
    summary="Get an item",
    description="Get an item with the average rating of its reviews (null if none).",
)
def get_item(item_id: uuid.UUID, db: DbSession) -> ItemDetailResponse:
    return get_item_with_average_rating(db, item_id)
