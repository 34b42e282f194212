# app/models/accounts.py

from sqlalchemy import CheckConstraint, Column, Integer, String, DateTime
from sqlalchemy.sql import func

from app.database import Base


SUPERADMIN = "superadmin"
ADMIN = "admin"
BUSINESS_OWNER = "business_owner"
INVESTOR = "investor"

REVIEWER_ROLES = (ADMIN, SUPERADMIN)


class Account(Base):
    __tablename__ = "accounts"

    __table_args__ = (
        CheckConstraint(
            "role IN ('superadmin', 'admin', 'business_owner', 'investor')",
            name="ck_account_role_valid",
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    password_hash = Column(String, nullable=False)

    role = Column(String, nullable=False, default=INVESTOR, index=True)
    status = Column(String, nullable=False, default="active")

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    @property
    def is_active(self) -> bool:
        return self.status == "active"
