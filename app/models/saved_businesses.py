# app/models/saved_businesses.py

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.sql import func

from app.database import Base


class SavedBusiness(Base):
    __tablename__ = "saved_businesses"

    id = Column(Integer, primary_key=True, index=True)

    investor_id = Column(Integer, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False, index=True)
    business_id = Column(Integer, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False, index=True)

    # Copied from the post when saved; not refreshed on later edits
    business_name = Column(String, nullable=True)
    industry = Column(String, nullable=True)
    location = Column(String, nullable=True)
    investment_needed = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    __table_args__ = (
        UniqueConstraint("investor_id", "business_id", name="uq_saved_investor_business"),
    )
