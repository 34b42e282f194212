# schemas/ledger.py

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from datetime import datetime


class SaveBusinessRequest(BaseModel):
    business_id: int

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class InterestCreate(BaseModel):
    business_id: int
    message: str | None = Field(None, max_length=2000)

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class SavedBusinessResponse(BaseModel):
    id: int
    investor_id: int
    business_id: int
    business_name: str | None
    industry: str | None
    location: str | None
    investment_needed: int
    created_at: datetime

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True


class InterestResponse(BaseModel):
    id: int
    investor_id: int
    business_id: int
    business_name: str | None
    industry: str | None
    contact_name: str | None
    contact_email: str | None
    status: str
    message: str | None
    date_interested: datetime

    class Config:
        from_attributes = True
        alias_generator = to_camel
        populate_by_name = True
