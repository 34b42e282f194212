import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.accounts import SUPERADMIN, Account
from app.core.config import settings
from app.core.exceptions import NotFoundError, PermissionDeniedError

router = APIRouter(prefix="/internal", tags=["Internal"])

logger = logging.getLogger("app")

@router.post("/bootstrap-superadmin")
def bootstrap_superadmin(
    email: str,
    secret: str,
    db: Session = Depends(get_db),
):
    # Protect this route with a secret key
    if secret != settings.INTERNAL_ADMIN_SECRET:
        logger.warning(f"Rejected superadmin bootstrap attempt for {email}")
        raise PermissionDeniedError("Unauthorized")

    account = db.query(Account).filter(Account.email == email).first()

    if not account:
        raise NotFoundError("User not found")

    account.role = SUPERADMIN
    db.commit()

    logger.info(f"Account {account.id} promoted to superadmin")

    return {"message": f"{email} promoted to superadmin"}
