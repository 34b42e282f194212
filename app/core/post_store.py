# =========================================================
# POST STORE HELPERS
# Queries and guarded writes shared by the post routers.
# Every status transition is a single UPDATE/DELETE that carries
# its expected prior status, so two reviewers racing on the same
# post cannot both succeed.
# =========================================================

from math import ceil

from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError
from app.models.posts import APPROVED, PENDING, Post


def get_post(db: Session, post_id: int) -> Post:
    post = (
        db.query(Post)
        .filter(Post.id == post_id)
        .first()
    )

    if not post:
        raise NotFoundError("Post not found")

    return post


def update_post_if(
    db: Session,
    post_id: int,
    changes: dict,
    *,
    expected_status: str | None = None,
    blocked_status: str | None = None,
) -> bool:
    """Apply ``changes`` only while the stored status still satisfies the guard.

    Returns False when no row matched, i.e. the status moved underneath us.
    """
    query = db.query(Post).filter(Post.id == post_id)

    if expected_status is not None:
        query = query.filter(Post.status == expected_status)

    if blocked_status is not None:
        query = query.filter(Post.status != blocked_status)

    return query.update(changes, synchronize_session=False) == 1


def delete_post_if_mutable(db: Session, post_id: int, owner_id: int) -> bool:
    deleted = (
        db.query(Post)
        .filter(
            Post.id == post_id,
            Post.created_by == owner_id,
            Post.status != APPROVED,
        )
        .delete(synchronize_session=False)
    )
    return deleted == 1


def list_approved(db: Session, page: int, limit: int) -> dict:
    query = db.query(Post).filter(Post.status == APPROVED)

    total = query.count()

    posts = (
        query
        .order_by(Post.created_at.desc(), Post.id.desc())
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )

    return {
        "posts": posts,
        "totalPages": ceil(total / limit),
        "currentPage": page,
    }


def list_owned(db: Session, owner_id: int) -> list[Post]:
    return (
        db.query(Post)
        .filter(Post.created_by == owner_id)
        .order_by(Post.created_at.desc(), Post.id.desc())
        .all()
    )


def list_pending(db: Session) -> list[Post]:
    return (
        db.query(Post)
        .filter(Post.status == PENDING)
        .order_by(Post.created_at.desc(), Post.id.desc())
        .all()
    )


def list_reviewed(db: Session) -> list[Post]:
    return (
        db.query(Post)
        .filter(Post.status != PENDING)
        .order_by(Post.updated_at.desc(), Post.id.desc())
        .all()
    )
