from pydantic import BaseModel, Field
from typing import Optional

from ..models.user import Role

class UserBase(BaseModel):
    username: str = Field(min_length=1, max_length=150)

class UserCreate(UserBase):
    password: str = Field(min_length=1)

class UserLogin(BaseModel):
    username: str
    password: str

class User(UserBase):
    id: int
    role: Role

    class Config:
        from_attributes = True

class AuthResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: User

class SessionInfo(BaseModel):
    subject: str
    authority: Role
    expires_at: Optional[str] = None

class SessionResponse(BaseModel):
    session: Optional[SessionInfo] = None
