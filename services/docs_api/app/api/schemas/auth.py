from pydantic import BaseModel
from typing import Optional


class GoogleLoginRequest(BaseModel):
    accessToken: Optional[str] = None


class UserClaims(BaseModel):
    googleId: Optional[str] = None
    email: Optional[str] = None
    name: Optional[str] = None
    picture: Optional[str] = None


class LoginResponse(BaseModel):
    token: str
    user: UserClaims


class TokenResponse(BaseModel):
    token: str


class ProfileResponse(BaseModel):
    user: UserClaims


class MessageResponse(BaseModel):
    message: str


class AuthUrlResponse(BaseModel):
    url: str
