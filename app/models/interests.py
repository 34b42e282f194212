# app/models/interests.py

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.sql import func

from app.database import Base


class Interest(Base):
    __tablename__ = "interests"

    id = Column(Integer, primary_key=True, index=True)

    investor_id = Column(Integer, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False, index=True)
    business_id = Column(Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False, index=True)

    # Copied from the post and its owner when the interest is expressed
    business_name = Column(String, nullable=True)
    industry = Column(String, nullable=True)
    contact_name = Column(String, nullable=True)
    contact_email = Column(String, nullable=True)

    # Independent of the post's review status
    status = Column(String, nullable=False, default="Pending")
    message = Column(Text, nullable=True)

    date_interested = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    __table_args__ = (
        UniqueConstraint("investor_id", "business_id", name="uq_interest_investor_business"),
        CheckConstraint(
            "status IN ('Pending', 'Contacted', 'In Discussion', 'Declined', 'Invested')",
            name="ck_interest_status_valid",
        ),
    )
