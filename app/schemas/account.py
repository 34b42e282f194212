from pydantic import BaseModel, EmailStr, Field
from datetime import datetime
from typing import Literal

class AccountCreate(BaseModel):
    name: str = Field(..., min_length=1, description="Display name")
    email: EmailStr = Field(..., description="Account email address")
    password: str = Field(..., min_length=8, max_length=72, description="Plain password (will be hashed). Minimum 8 characters.")
    role: Literal["investor", "business_owner"] = Field("investor", description="Self-service accounts cannot register as admins")

class AdminCreate(BaseModel):
    name: str = Field(..., min_length=1)
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=72)

class AccountLogin(BaseModel):
    email: EmailStr
    password: str

class AccountResponse(BaseModel):
    id: int
    name: str
    email: EmailStr
    role: str
    status: str
    created_at: datetime

    class Config:
        from_attributes = True

class AuthResponse(BaseModel):
    token: str
    token_type: str = "bearer"
    id: int
    name: str
    email: EmailStr
    role: str
