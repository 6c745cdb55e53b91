from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.routers.deps import CurrentUser, get_current_user
from app.schemas.auth import LoginRequest, LoginResponse, MessageResponse, PublicUser, VerifyResponse
from app.services.auth import authenticate

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db)) -> LoginResponse:
    user, token = authenticate(db, payload.email, payload.password)
    return LoginResponse(message="Login successful", token=token, user=PublicUser.model_validate(user))


@router.post("/logout", response_model=MessageResponse)
def logout() -> MessageResponse:
    # Tokens are stateless; the client drops its copy.
    return MessageResponse(message="Logout successful")


@router.get("/verify", response_model=VerifyResponse)
def verify(current_user: CurrentUser = Depends(get_current_user)) -> VerifyResponse:
    return VerifyResponse(valid=True, user=PublicUser(id=current_user.id, email=current_user.email))
