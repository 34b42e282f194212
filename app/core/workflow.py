# =========================================================
# POST REVIEW WORKFLOW
#
# pending --review--> approved
# pending --review--> rejected
# pending | rejected --edit--> pending (review fields cleared)
#
# Approved posts are immutable: no edit, no delete.
# These functions never touch the database. They validate a
# requested transition and return the field changes to write.
# =========================================================

from app.core.exceptions import (
    ConflictError,
    PermissionDeniedError,
    ValidationError,
)
from app.models.accounts import Account
from app.models.posts import APPROVED, PENDING, REJECTED, Post


REVIEW_DECISIONS = (APPROVED, REJECTED)


def content_changes(content) -> dict:
    """Normalise submitted listing content into column values.

    ``title`` and ``business_name`` are synonyms: whichever one is supplied
    fills the other.
    """
    title = content.title or content.business_name
    business_name = content.business_name or content.title

    if not title:
        raise ValidationError("Title or business name is required")

    investment_needed = content.investment_needed or 0
    if investment_needed < 0:
        raise ValidationError("Investment needed cannot be negative")

    return {
        "title": title,
        "business_name": business_name,
        "description": content.description,
        "industry": content.industry,
        "location": content.location,
        "investment_needed": investment_needed,
    }


def submit(content, owner: Account) -> Post:
    # Status is always forced to pending, whatever the caller sent
    return Post(
        **content_changes(content),
        created_by=owner.id,
        status=PENDING,
        approved_by=None,
        rejection_reason=None,
    )


def ensure_owner(post: Post, account: Account, detail: str):
    if post.created_by != account.id:
        raise PermissionDeniedError(detail)


def ensure_pending(post: Post):
    if post.status != PENDING:
        raise ConflictError("Post has already been reviewed")


def ensure_mutable(post: Post, detail: str):
    if post.status == APPROVED:
        raise PermissionDeniedError(detail)


def check_decision(decision: str, reason: str | None):
    if decision not in REVIEW_DECISIONS:
        raise ValidationError("Invalid status")

    if decision == REJECTED and not (reason and reason.strip()):
        raise ValidationError("A rejection reason is required when rejecting a post")


def review(post: Post, decision: str, reason: str | None, reviewer: Account) -> dict:
    check_decision(decision, reason)

    ensure_pending(post)

    return {
        "status": decision,
        "approved_by": reviewer.id,
        "rejection_reason": reason if decision == REJECTED else None,
    }


def edit(post: Post, content, requester: Account) -> dict:
    ensure_owner(post, requester, "You are not authorized to update this post")
    ensure_mutable(post, "Approved posts cannot be edited. Please contact support.")

    changes = content_changes(content)

    # Any edit sends the post back through review
    changes.update(
        status=PENDING,
        approved_by=None,
        rejection_reason=None,
    )
    return changes


def check_delete(post: Post, requester: Account):
    ensure_owner(post, requester, "You are not authorized to delete this post")
    ensure_mutable(post, "Approved posts cannot be deleted")
