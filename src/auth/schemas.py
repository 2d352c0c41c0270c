from pydantic import EmailStr, Field
from typing import Optional
from datetime import datetime
from src.schemas import CamelModel

class UserBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr

class UserCreate(UserBase):
    password: str = Field(..., min_length=6, max_length=72)

class UserUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=6, max_length=72)

class User(UserBase):
    id: str
    created_at: datetime
    updated_at: datetime

class LoginRequest(CamelModel):
    email: EmailStr
    password: str

class AuthResponse(CamelModel):
    access_token: str
    token_type: str
    user: User
