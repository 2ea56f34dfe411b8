from typing import Optional

from pydantic import BaseModel, EmailStr

from app.models.profile import UserType
from app.schemas.profile import Profile
from app.schemas.user import User


class Token(BaseModel):
    access_token: str
    refresh_token: str
    token_type: str


class TokenPayload(BaseModel):
    sub: Optional[str] = None


class SignUpRequest(BaseModel):
    email: EmailStr
    password: str
    confirm_password: str
    full_name: str
    user_type: UserType = UserType.FREELANCER


class SignInRequest(BaseModel):
    email: EmailStr
    password: str


class RefreshTokenRequest(BaseModel):
    refresh_token: str


class SessionInfo(BaseModel):
    user: User
    profile: Optional[Profile] = None
