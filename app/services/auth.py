import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.core.errors import InvalidCredentials
from app.core.security import create_access_token, verify_password
from app.models.user import User

logger = logging.getLogger(__name__)


def authenticate(db: Session, email: Any, password: Any) -> tuple[User, str]:
    if not isinstance(email, str) or not isinstance(password, str) or not email or not password:
        logger.info("login_rejected", extra={"reason": "malformed"})
        raise InvalidCredentials()
    user = db.scalar(select(User).where(User.email == email))
    if not user or not verify_password(password, user.password_hash):
        logger.info("login_rejected", extra={"email": email})
        raise InvalidCredentials()
    token = create_access_token(user.id, user.email)
    logger.info("login_succeeded", extra={"user_id": user.id})
    return user, token
