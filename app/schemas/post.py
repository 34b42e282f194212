# schemas/post.py

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import List


class AccountBrief(BaseModel):
    id: int
    name: str
    email: str
    role: str

    class Config:
        from_attributes = True


class PostContent(BaseModel):
    title: str | None = None
    business_name: str | None = None
    description: str | None = None
    industry: str | None = None
    location: str | None = None
    investment_needed: int | None = Field(
        None,
        ge=0,
        description="Amount of investment sought; must not be negative",
    )

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class PostCreate(PostContent):
    pass


class PostUpdate(PostContent):
    pass


class ReviewRequest(BaseModel):
    status: str = Field(..., description="Either 'approved' or 'rejected'")
    rejection_reason: str | None = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class PostResponse(BaseModel):
    id: int
    title: str
    business_name: str
    description: str | None
    industry: str | None
    location: str | None
    investment_needed: int
    status: str
    rejection_reason: str | None
    created_by: int
    approved_by: int | None
    owner: AccountBrief | None = None
    reviewer: AccountBrief | None = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class PostListResponse(BaseModel):
    posts: List[PostResponse]
    totalPages: int
    currentPage: int
