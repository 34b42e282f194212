# app/routers/investor.py

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from app.database import get_db
from app.core.auth import require_roles
from app.core.exceptions import ConflictError, NotFoundError, StoreError
from app.models.accounts import INVESTOR
from app.models.interests import Interest
from app.models.posts import APPROVED, Post
from app.models.saved_businesses import SavedBusiness
from app.schemas.ledger import (
    InterestCreate,
    InterestResponse,
    SaveBusinessRequest,
    SavedBusinessResponse,
)

router = APIRouter(prefix="/api/investor", tags=["Investor"])

logger = logging.getLogger("app")

NOT_SPECIFIED = "Not specified"


def get_approved_post(db: Session, business_id: int) -> Post:
    post = (
        db.query(Post)
        .filter(Post.id == business_id, Post.status == APPROVED)
        .first()
    )

    if not post:
        raise NotFoundError("Business post not found or not approved")

    return post


def insert_ledger_entry(db: Session, entry, duplicate_detail: str, failure_detail: str):
    """Insert one (investor, business) row; the unique constraint decides duplicates."""
    try:
        db.add(entry)
        db.commit()
        db.refresh(entry)

    except IntegrityError:
        db.rollback()
        raise ConflictError(duplicate_detail)

    except SQLAlchemyError as exc:
        db.rollback()
        logger.error(f"{failure_detail}: {exc}")
        raise StoreError(failure_detail, str(exc))

    return entry


# =========================================================
# SAVED BUSINESSES
# =========================================================
@router.get("/saved", response_model=list[SavedBusinessResponse])
def get_saved_businesses(
    db: Session = Depends(get_db),
    current_user=Depends(require_roles(INVESTOR)),
):
    return (
        db.query(SavedBusiness)
        .filter(SavedBusiness.investor_id == current_user.id)
        .order_by(SavedBusiness.created_at.desc(), SavedBusiness.id.desc())
        .all()
    )


@router.post("/saved", response_model=SavedBusinessResponse, status_code=status.HTTP_201_CREATED)
def save_business(
    save_data: SaveBusinessRequest,
    db: Session = Depends(get_db),
    current_user=Depends(require_roles(INVESTOR)),
):
    post = get_approved_post(db, save_data.business_id)

    existing = (
        db.query(SavedBusiness)
        .filter(
            SavedBusiness.investor_id == current_user.id,
            SavedBusiness.business_id == post.id,
        )
        .first()
    )
    if existing:
        raise ConflictError("Business already saved")

    # Display fields are a snapshot of the post at save time
    saved = SavedBusiness(
        investor_id=current_user.id,
        business_id=post.id,
        business_name=post.title,
        industry=post.industry or NOT_SPECIFIED,
        location=post.location or NOT_SPECIFIED,
        investment_needed=post.investment_needed or 0,
    )

    saved = insert_ledger_entry(db, saved, "Business already saved", "Failed to save business")

    logger.info(f"Investor {current_user.id} saved post {post.id}")

    return saved


@router.delete("/saved/{saved_id}")
def remove_saved_business(
    saved_id: int,
    db: Session = Depends(get_db),
    current_user=Depends(require_roles(INVESTOR)),
):
    saved = (
        db.query(SavedBusiness)
        .filter(
            SavedBusiness.id == saved_id,
            SavedBusiness.investor_id == current_user.id,
        )
        .first()
    )

    if not saved:
        raise NotFoundError("Saved business not found")

    try:
        db.delete(saved)
        db.commit()

    except SQLAlchemyError as exc:
        db.rollback()
        logger.error(f"Failed to remove saved business {saved_id}: {exc}")
        raise StoreError("Failed to remove saved business", str(exc))

    return {"message": "Business removed from saved list"}


# =========================================================
# INTERESTS
# =========================================================
@router.get("/interests", response_model=list[InterestResponse])
def get_interests(
    db: Session = Depends(get_db),
    current_user=Depends(require_roles(INVESTOR)),
):
    return (
        db.query(Interest)
        .filter(Interest.investor_id == current_user.id)
        .order_by(Interest.date_interested.desc(), Interest.id.desc())
        .all()
    )


@router.post("/interests", response_model=InterestResponse, status_code=status.HTTP_201_CREATED)
def express_interest(
    interest_data: InterestCreate,
    db: Session = Depends(get_db),
    current_user=Depends(require_roles(INVESTOR)),
):
    post = get_approved_post(db, interest_data.business_id)

    existing = (
        db.query(Interest)
        .filter(
            Interest.investor_id == current_user.id,
            Interest.business_id == post.id,
        )
        .first()
    )
    if existing:
        raise ConflictError("Interest already expressed for this business")

    interest = Interest(
        investor_id=current_user.id,
        business_id=post.id,
        business_name=post.title,
        industry=post.industry or NOT_SPECIFIED,
        contact_name=post.owner.name if post.owner else None,
        contact_email=post.owner.email if post.owner else None,
        message=interest_data.message,
        status="Pending",
    )

    interest = insert_ledger_entry(
        db,
        interest,
        "Interest already expressed for this business",
        "Failed to express interest",
    )

    logger.info(f"Investor {current_user.id} expressed interest in post {post.id}")

    return interest
