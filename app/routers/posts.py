# =========================================================
# POSTS ROUTER
#
# PUBLIC:
# - Paginated listing of approved posts
# - Post detail by id
#
# BUSINESS OWNERS:
# - Submit, edit and delete their own posts
# - Approved posts are locked
#
# ADMINS / SUPERADMINS:
# - Pending queue and review
# - Review history (superadmin only)
# =========================================================

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from app.database import get_db
from app.core import workflow
from app.core.auth import get_current_user, require_roles
from app.core.config import settings
from app.core.exceptions import ConflictError, PermissionDeniedError, StoreError
from app.core.post_store import (
    delete_post_if_mutable,
    get_post,
    list_approved,
    list_owned,
    list_pending,
    list_reviewed,
    update_post_if,
)
from app.models.accounts import BUSINESS_OWNER, REVIEWER_ROLES, SUPERADMIN
from app.models.posts import APPROVED, PENDING
from app.schemas.post import (
    PostCreate,
    PostListResponse,
    PostResponse,
    PostUpdate,
    ReviewRequest,
)

router = APIRouter(prefix="/api/posts", tags=["Posts"])

logger = logging.getLogger("app")


# =========================================================
# PUBLIC LISTING
# =========================================================
@router.get("", response_model=PostListResponse)
def list_posts(
    page: int = 1,
    limit: int = settings.DEFAULT_PAGE_SIZE,
    db: Session = Depends(get_db),
):
    if page < 1:
        page = 1

    if limit < 1:
        limit = settings.DEFAULT_PAGE_SIZE

    limit = min(limit, settings.MAX_PAGE_SIZE)

    return list_approved(db, page, limit)


# =========================================================
# CREATE POST
# =========================================================
@router.post("/create", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
def create_post(
    post_data: PostCreate,
    db: Session = Depends(get_db),
    current_user=Depends(require_roles(BUSINESS_OWNER)),
):
    post = workflow.submit(post_data, current_user)

    try:
        db.add(post)
        db.commit()
        db.refresh(post)

    except SQLAlchemyError as exc:
        db.rollback()
        logger.error(f"Post creation failed for account {current_user.id}: {exc}")
        raise StoreError("Failed to create post", str(exc))

    logger.info(f"Post {post.id} submitted by account {current_user.id}")

    return post


# =========================================================
# OWNER'S POSTS (ALL STATUSES)
# =========================================================
@router.get("/user/posts", response_model=list[PostResponse])
def get_own_posts(
    db: Session = Depends(get_db),
    current_user=Depends(get_current_user),
):
    return list_owned(db, current_user.id)


# =========================================================
# ADMIN: PENDING QUEUE
# =========================================================
@router.get("/admin/pending", response_model=list[PostResponse])
def get_pending_posts(
    db: Session = Depends(get_db),
    current_user=Depends(require_roles(*REVIEWER_ROLES)),
):
    return list_pending(db)


# =========================================================
# ADMIN: REVIEW (APPROVE / REJECT)
# =========================================================
@router.put("/admin/review/{post_id}", response_model=PostResponse)
def review_post(
    post_id: int,
    review_data: ReviewRequest,
    db: Session = Depends(get_db),
    current_user=Depends(require_roles(*REVIEWER_ROLES)),
):
    # Malformed decisions fail before the post is looked up
    workflow.check_decision(review_data.status, review_data.rejection_reason)

    post = get_post(db, post_id)

    changes = workflow.review(
        post,
        review_data.status,
        review_data.rejection_reason,
        current_user,
    )

    try:
        # Only lands if the post is still pending at write time
        if not update_post_if(db, post_id, changes, expected_status=PENDING):
            db.rollback()
            raise ConflictError("Post has already been reviewed")

        db.commit()

    except SQLAlchemyError as exc:
        db.rollback()
        logger.error(f"Review of post {post_id} failed: {exc}")
        raise StoreError("Failed to review post", str(exc))

    db.refresh(post)

    logger.info(f"Post {post_id} {post.status} by account {current_user.id}")

    return post


# =========================================================
# SUPERADMIN: REVIEW HISTORY
# =========================================================
@router.get("/admin/history", response_model=list[PostResponse])
def get_review_history(
    db: Session = Depends(get_db),
    current_user=Depends(require_roles(SUPERADMIN)),
):
    return list_reviewed(db)


# =========================================================
# POST DETAIL
# =========================================================
@router.get("/{post_id}", response_model=PostResponse)
def get_post_by_id(
    post_id: int,
    db: Session = Depends(get_db),
):
    return get_post(db, post_id)


# =========================================================
# EDIT POST (OWNER, NOT APPROVED)
# =========================================================
@router.put("/{post_id}", response_model=PostResponse)
def update_post(
    post_id: int,
    post_data: PostUpdate,
    db: Session = Depends(get_db),
    current_user=Depends(require_roles(BUSINESS_OWNER)),
):
    post = get_post(db, post_id)

    changes = workflow.edit(post, post_data, current_user)

    try:
        if not update_post_if(db, post_id, changes, blocked_status=APPROVED):
            db.rollback()
            raise PermissionDeniedError("Approved posts cannot be edited. Please contact support.")

        db.commit()

    except SQLAlchemyError as exc:
        db.rollback()
        logger.error(f"Update of post {post_id} failed: {exc}")
        raise StoreError("Failed to update post", str(exc))

    db.refresh(post)

    logger.info(f"Post {post_id} edited by owner and returned to review")

    return post


# =========================================================
# DELETE POST (OWNER, NOT APPROVED)
# =========================================================
@router.delete("/{post_id}")
def delete_post(
    post_id: int,
    db: Session = Depends(get_db),
    current_user=Depends(require_roles(BUSINESS_OWNER)),
):
    post = get_post(db, post_id)

    workflow.check_delete(post, current_user)

    try:
        if not delete_post_if_mutable(db, post_id, current_user.id):
            db.rollback()
            raise PermissionDeniedError("Approved posts cannot be deleted")

        db.commit()

    except SQLAlchemyError as exc:
        db.rollback()
        logger.error(f"Deletion of post {post_id} failed: {exc}")
        raise StoreError("Failed to delete post", str(exc))

    logger.info(f"Post {post_id} deleted by owner")

    return {"message": "Post deleted successfully"}
