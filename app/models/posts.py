# app/models/posts.py

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.database import Base


PENDING = "pending"
APPROVED = "approved"
REJECTED = "rejected"


class Post(Base):
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, index=True)

    title = Column(String, nullable=False)
    business_name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    industry = Column(String, nullable=True)
    location = Column(String, nullable=True)
    investment_needed = Column(Integer, nullable=False, default=0)

    created_by = Column(
        Integer,
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Review workflow
    status = Column(String, nullable=False, default=PENDING, index=True)
    approved_by = Column(Integer, ForeignKey("accounts.id", ondelete="SET NULL"), nullable=True)
    rejection_reason = Column(Text, nullable=True)

    created_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        index=True,
    )
    updated_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    owner = relationship("Account", foreign_keys=[created_by], lazy="joined")
    reviewer = relationship("Account", foreign_keys=[approved_by], lazy="joined")

    __table_args__ = (
        Index("ix_posts_status_created", "status", "created_at"),
        CheckConstraint(
            "status IN ('pending', 'approved', 'rejected')",
            name="ck_post_status_valid",
        ),
        CheckConstraint("investment_needed >= 0", name="ck_investment_needed_non_negative"),
    )
