"""
User and authentication schemas.
"""

from pydantic import BaseModel, EmailStr, Field
from typing import Optional, List
from datetime import datetime
from uuid import UUID

from infiniti_cms.models.user import UserRole, UserStatus


class UserBase(BaseModel):
    """Base user schema with common fields."""
    email: EmailStr
    username: Optional[str] = Field(None, max_length=100)
    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    department: Optional[str] = Field(None, max_length=100)
    role: UserRole = UserRole.VIEWER
    status: UserStatus = UserStatus.ACTIVE


class UserCreate(UserBase):
    """Schema for creating a user."""
    pass


class UserUpdate(BaseModel):
    """Schema for updating a user (all fields optional)."""
    username: Optional[str] = Field(None, max_length=100)
    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    department: Optional[str] = Field(None, max_length=100)
    role: Optional[UserRole] = None
    status: Optional[UserStatus] = None


class UserRoleUpdate(BaseModel):
    """Schema for changing a user's role."""
    role: UserRole


class UserResponse(UserBase):
    """Schema for user response."""
    id: UUID
    email: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class UserListResponse(BaseModel):
    """Schema for user list response."""
    items: List[UserResponse]
    total: int


class LoginRequest(BaseModel):
    """Login request. Identity is asserted by email only."""
    email: EmailStr


class TokenResponse(BaseModel):
    """JWT token response."""
    access_token: str
    token_type: str = "bearer"
    expires_in: int


class LoginResponse(BaseModel):
    """Login response with token and user info."""
    token: TokenResponse
    user: UserResponse
    permissions: List[str] = []


class CurrentUserResponse(UserResponse):
    """Authenticated user with the permissions granted by their role."""
    permissions: List[str] = []
