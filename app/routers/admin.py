# app/routers/admin.py

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError

from app.database import get_db
from app.core.auth import require_roles
from app.core.exceptions import ConflictError, NotFoundError, StoreError
from app.core.hashing import hash_password
from app.models.accounts import ADMIN, REVIEWER_ROLES, SUPERADMIN, Account
from app.models.posts import APPROVED, PENDING, Post
from app.schemas.account import AccountResponse, AdminCreate


router = APIRouter(prefix="/api/admin", tags=["Admin"])

logger = logging.getLogger("app")


# =========================================================
# DASHBOARD STATS
# =========================================================

@router.get("/stats")
def dashboard_stats(
    db: Session = Depends(get_db),
    admin=Depends(require_roles(*REVIEWER_ROLES)),
):
    pending_posts = db.query(func.count(Post.id)).filter(
        Post.status == PENDING
    ).scalar()

    total_businesses = db.query(func.count(Post.id)).filter(
        Post.status == APPROVED
    ).scalar()

    return {
        "pendingPosts": pending_posts,
        "totalBusinesses": total_businesses,
    }


# =========================================================
# ADMIN ACCOUNT MANAGEMENT (SUPERADMIN)
# =========================================================

@router.post("/create", response_model=AccountResponse, status_code=status.HTTP_201_CREATED)
def create_admin(
    admin_data: AdminCreate,
    db: Session = Depends(get_db),
    superadmin=Depends(require_roles(SUPERADMIN)),
):
    if db.query(Account).filter(Account.email == admin_data.email).first():
        raise ConflictError("Admin already exists")

    try:
        admin = Account(
            name=admin_data.name,
            email=admin_data.email,
            password_hash=hash_password(admin_data.password),
            role=ADMIN,
        )
        db.add(admin)
        db.commit()
        db.refresh(admin)

    except SQLAlchemyError as exc:
        db.rollback()
        logger.error(f"Admin creation failed for {admin_data.email}: {exc}")
        raise StoreError("Failed to create admin", str(exc))

    logger.info(f"Admin {admin.id} created by superadmin {superadmin.id}")

    return admin


@router.get("/list", response_model=list[AccountResponse])
def list_admins(
    db: Session = Depends(get_db),
    superadmin=Depends(require_roles(SUPERADMIN)),
):
    return (
        db.query(Account)
        .filter(Account.role == ADMIN)
        .order_by(Account.id.desc())
        .all()
    )


@router.delete("/{admin_id}")
def delete_admin(
    admin_id: int,
    db: Session = Depends(get_db),
    superadmin=Depends(require_roles(SUPERADMIN)),
):
    admin = db.query(Account).filter(Account.id == admin_id).first()

    if not admin or admin.role != ADMIN:
        raise NotFoundError("Admin not found")

    try:
        # Reviews stay on record without a reviewer reference
        db.query(Post).filter(Post.approved_by == admin.id).update(
            {"approved_by": None},
            synchronize_session=False,
        )
        db.delete(admin)
        db.commit()

    except SQLAlchemyError as exc:
        db.rollback()
        logger.error(f"Admin deletion failed for {admin_id}: {exc}")
        raise StoreError("Failed to delete admin", str(exc))

    logger.info(f"Admin {admin_id} deleted by superadmin {superadmin.id}")

    return {"message": "Admin deleted"}
