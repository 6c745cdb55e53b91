from typing import Any

from pydantic import BaseModel, EmailStr


class LoginRequest(BaseModel):
    # Untyped so malformed input is reported as bad credentials.
    email: Any = None
    password: Any = None


class PublicUser(BaseModel):
    id: int
    email: EmailStr

    model_config = {"from_attributes": True}


class LoginResponse(BaseModel):
    message: str
    token: str
    user: PublicUser


class VerifyResponse(BaseModel):
    valid: bool
    user: PublicUser


class MessageResponse(BaseModel):
    message: str
