"""
Reviews Router

Endpoints:
- GET /items/{item_id}/reviews - List reviews for an item
- POST /items/{item_id}/reviews - Create a review (authenticated)
- PUT /users/{user_id}/reviews/{review_id} - Update a review (owner only)
- DELETE /users/{user_id}/reviews/{review_id} - Delete a review (owner only)

Business Rules:
- One review per user per item (enforced by database constraint)
- The review's owner is always the authenticated caller on create
- Update/delete require the caller to be the {user_id} in the path, and
  the statement itself is scoped to that owner
"""

import uuid

from fastapi import APIRouter, status

from review_api.dependencies import CurrentUser, DbSession, OwnerUser
from review_api.schemas.review import ReviewCreate, ReviewResponse, ReviewUpdate
from review_api.services import reviews as review_service

router = APIRouter(
    tags=["Reviews"],
    responses={
        401: {"description": "Not authenticated or not the owner"},
        404: {"description": "Review or item not found"},
    },
)


@router.get(
    "/items/{item_id}/reviews",
    response_model=list[ReviewResponse],
    summary="List reviews for an item",
)
def list_item_reviews(item_id: uuid.UUID, db: DbSession) -> list[ReviewResponse]:
    reviews = review_service.list_reviews(db, item_id)
    return [ReviewResponse.model_validate(r) for r in reviews]


@router.post(
    "/items/{item_id}/reviews",
    response_model=ReviewResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a review",
    description="Create a review for an item. Requires authentication. One review per item per user.",
    responses={409: {"description": "Item already reviewed by this user"}},
)
def create_review(
    item_id: uuid.UUID,
    review_data: ReviewCreate,
    db: DbSession,
    current_user: CurrentUser,
) -> ReviewResponse:
    """
    Create a review owned by the caller.

    Raises:
        DuplicateReviewForUserItem: 409 if the caller already reviewed this item
        NotFound: 404 if the item does not exist
    """
    review = review_service.create_review(
        db,
        text=review_data.text,
        rating=review_data.rating,
        user_id=current_user.id,
        item_id=item_id,
    )
    return ReviewResponse.model_validate(review)


@router.put(
    "/users/{user_id}/reviews/{review_id}",
    response_model=ReviewResponse,
    summary="Update a review",
    description="Update your own review. Only the fields sent are changed.",
)
def update_review(
    review_id: uuid.UUID,
    review_data: ReviewUpdate,
    db: DbSession,
    owner: OwnerUser,
) -> ReviewResponse:
    fields = review_data.model_dump(exclude_unset=True, exclude_none=True)
    review = review_service.update_review(db, owner.id, review_id, fields)
    return ReviewResponse.model_validate(review)


@router.delete(
    "/users/{user_id}/reviews/{review_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a review",
    description="Delete your own review and every comment on it.",
)
def delete_review(
    review_id: uuid.UUID,
    db: DbSession,
    owner: OwnerUser,
) -> None:
    review_service.delete_review(db, owner.id, review_id)
