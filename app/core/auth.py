# app/core/auth.py

from typing import Iterable

from fastapi import Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.accounts import Account
from app.core.jwt import decode_access_token
from app.core.oauth2 import oauth2_scheme


def has_role(account: Account | None, roles: Iterable[str]) -> bool:
    """Single role predicate used by every gated operation."""
    if account is None or not account.is_active:
        return False
    return account.role in set(roles)


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> Account:
    payload = decode_access_token(token)

    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    try:
        account_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token payload",
        )

    account = db.query(Account).filter(Account.id == account_id).first()

    if account is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
        )

    if not account.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Account is not active",
        )

    return account


def require_roles(*roles: str):
    """Build a dependency that admits only accounts holding one of ``roles``."""

    def role_gate(current_user: Account = Depends(get_current_user)) -> Account:
        if not has_role(current_user, roles):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Access denied",
            )
        return current_user

    return role_gate
