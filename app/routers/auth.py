import logging

from fastapi import APIRouter, Depends, HTTPException, status, Request
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from app.database import get_db
from app.models.accounts import Account
from app.schemas.account import AccountCreate, AccountLogin, AccountResponse, AuthResponse
from app.core.auth import get_current_user
from app.core.exceptions import ConflictError, StoreError, ValidationError
from app.core.hashing import hash_password, verify_password
from app.core.jwt import create_access_token
from app.core.rate_limiter import limiter

router = APIRouter(prefix="/api/auth", tags=["Authentication"])

logger = logging.getLogger("app")

COMMON_PASSWORDS = {
    "password",
    "password123",
    "12345678",
    "qwerty123",
    "admin123",
}


def check_password_strength(password: str):
    if password.lower() in COMMON_PASSWORDS:
        raise ValidationError("Password is too common. Please choose a stronger password.")

    if password.isdigit():
        raise ValidationError("Password cannot be numbers only.")


def issue_token(account: Account) -> dict:
    token = create_access_token(
        data={"sub": str(account.id), "role": account.role}
    )

    return {
        "token": token,
        "token_type": "bearer",
        "id": account.id,
        "name": account.name,
        "email": account.email,
        "role": account.role,
    }


# ---------------- REGISTER ----------------
@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit("3/minute")
def register(request: Request, account_data: AccountCreate, db: Session = Depends(get_db)):
    check_password_strength(account_data.password)

    if db.query(Account).filter(Account.email == account_data.email).first():
        raise ConflictError("Email already exists")

    try:
        account = Account(
            name=account_data.name,
            email=account_data.email,
            password_hash=hash_password(account_data.password),
            role=account_data.role,
        )
        db.add(account)
        db.commit()
        db.refresh(account)

    except SQLAlchemyError as exc:
        db.rollback()
        logger.error(f"Account creation failed for {account_data.email}: {exc}")
        raise StoreError("Unable to create account", str(exc))

    logger.info(f"Account {account.id} registered as {account.role}")

    return issue_token(account)


# ---------------- LOGIN (TOKEN-BASED) ----------------
@router.post("/login", response_model=AuthResponse)
@limiter.limit("5/minute")
def login(
    request: Request,
    credentials: AccountLogin,
    db: Session = Depends(get_db),
):
    account = db.query(Account).filter(Account.email == credentials.email).first()

    if not account or not verify_password(credentials.password, account.password_hash):
        raise HTTPException(status_code=401, detail="Invalid credentials")

    if not account.is_active:
        raise HTTPException(status_code=403, detail="Account is not active")

    return issue_token(account)


# ---------------- CURRENT ACCOUNT ----------------
@router.get("/me", response_model=AccountResponse)
def me(current_user: Account = Depends(get_current_user)):
    return current_user
