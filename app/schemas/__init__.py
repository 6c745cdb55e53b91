from app.schemas.auth import LoginRequest, LoginResponse, MessageResponse, PublicUser, VerifyResponse
from app.schemas.brand import BrandCreate, BrandRead, BrandUpdate
from app.schemas.response import RatingRead, RatingRequest, ResponseRead, ResponseWithRating

__all__ = [
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "PublicUser",
    "VerifyResponse",
    "BrandCreate",
    "BrandUpdate",
    "BrandRead",
    "ResponseRead",
    "ResponseWithRating",
    "RatingRequest",
    "RatingRead",
]
