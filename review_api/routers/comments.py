"""
Comments Router

Endpoints:
- POST /items/{item_id}/reviews/{review_id}/comments - Comment on a review
- GET /comments/me - The caller's comments
- PUT /users/{user_id}/comments/{comment_id} - Update a comment (owner only)
- DELETE /users/{user_id}/comments/{comment_id} - Delete a comment (owner only)
"""

import uuid

from fastapi import APIRouter, status

from review_api.dependencies import CurrentUser, DbSession, OwnerUser
from review_api.errors import NotFound
from review_api.schemas.comment import CommentCreate, CommentResponse, CommentUpdate
from review_api.services import comments as comment_service
from review_api.services.reviews import get_review

router = APIRouter(
    tags=["Comments"],
    responses={
        401: {"description": "Not authenticated or not the owner"},
        404: {"description": "Comment or review not found"},
    },
)


@router.post(
    "/items/{item_id}/reviews/{review_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Comment on a review",
)
def create_comment(
    item_id: uuid.UUID,
    review_id: uuid.UUID,
    comment_data: CommentCreate,
    db: DbSession,
    current_user: CurrentUser,
) -> CommentResponse:
    """
    Create a comment owned by the caller.

    Raises:
        NotFound: 404 if the review does not exist or is not on that item
    """
    review = get_review(db, review_id)
    if review is None or review.item_id != item_id:
        raise NotFound(f"Review with id {review_id} not found")

    comment = comment_service.create_comment(
        db,
        text=comment_data.text,
        user_id=current_user.id,
        review_id=review_id,
    )
    return CommentResponse.model_validate(comment)


@router.get(
    "/comments/me",
    response_model=list[CommentResponse],
    summary="List my comments",
)
def list_my_comments(db: DbSession, current_user: CurrentUser) -> list[CommentResponse]:
    comments = comment_service.list_comments_by_user(db, current_user.id)
    return [CommentResponse.model_validate(c) for c in comments]


@router.put(
    "/users/{user_id}/comments/{comment_id}",
    response_model=CommentResponse,
    summary="Update a comment",
)
def update_comment(
    comment_id: uuid.UUID,
    comment_data: CommentUpdate,
    db: DbSession,
    owner: OwnerUser,
) -> CommentResponse:
    comment = comment_service.update_comment(db, owner.id, comment_id, comment_data.text)
    return CommentResponse.model_validate(comment)


@router.delete(
    "/users/{user_id}/comments/{comment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a comment",
)
def delete_comment(
    comment_id: uuid.UUID,
    db: DbSession,
    owner: OwnerUser,
) -> None:
    comment_service.delete_comment(db, owner.id, comment_id)
