"""
Pydantic schemas for user accounts and authentication
"""
from pydantic import BaseModel, field_validator
from typing import Optional, List
from datetime import datetime

from app.models.user import UserRole


class LoginRequest(BaseModel):
    email: str
    password: str

    @field_validator('email', mode='before')
    @classmethod
    def normalize_email(cls, v):
        """Emails are stored lower-case"""
        if isinstance(v, str):
            return v.strip().lower()
        return v


class UserResponse(BaseModel):
    id: str
    name: str
    email: str
    role: str
    is_active: Optional[bool] = True
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class UserCreate(BaseModel):
    """Schema for admins creating staff or candidate accounts"""
    name: str
    email: str
    password: str
    role: UserRole = UserRole.EMPLOYEE

    @field_validator('email', mode='before')
    @classmethod
    def normalize_email(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v


class LoginResponse(BaseModel):
    success: bool
    message: str
    token: Optional[str] = None
    user: Optional[UserResponse] = None


class UserListResponse(BaseModel):
    success: bool = True
    count: int
    data: List[UserResponse]
