from pydantic import BaseModel, EmailStr, field_validator
from typing import Optional
from datetime import datetime


class UserBase(BaseModel):
    email: EmailStr
    name: str


class UserCreate(UserBase):
    password: str

    @field_validator('password')
    @classmethod
    def password_min_length(cls, v):
        if len(v) < 8:
            raise ValueError('Password must be at least 8 characters')
        return v


class UserUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[EmailStr] = None


class UserAdminUpdate(UserUpdate):
    is_active: Optional[bool] = None
    is_admin: Optional[bool] = None


class UserInDBBase(UserBase):
    id: str
    auth_type: str = "email"
    is_active: bool = True
    is_admin: bool = False
    email_confirmed_at: Optional[datetime] = None
    created_at: datetime


class UserInDB(UserInDBBase):
    hashed_password: str


class User(UserInDBBase):
    pass


class Session(BaseModel):
    """Authenticated session object handed to clients."""
    id: str
    email: EmailStr
    email_confirmed_at: Optional[datetime] = None


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"


class TokenPayload(BaseModel):
    sub: Optional[str] = None
