import logging

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app import models  # noqa: F401
from app.core.logging import configure_logging
from app.core.security import hash_password
from app.db.base import Base
from app.db.session import SessionLocal, engine
from app.models.user import User

logger = logging.getLogger(__name__)

DEMO_USERS = (
    ("user1@example.com", "password123"),
    ("admin@example.com", "admin123"),
)


def seed_demo_users(db: Session) -> int:
    """Insert the demo accounts when the users table is empty. Returns rows added."""
    existing = db.scalar(select(func.count(User.id))) or 0
    if existing:
        logger.info("seed_skipped", extra={"existing_users": int(existing)})
        return 0
    for email, password in DEMO_USERS:
        db.add(User(email=email, password_hash=hash_password(password)))
    db.commit()
    logger.info("seed_users_created", extra={"emails": [email for email, _ in DEMO_USERS]})
    return len(DEMO_USERS)


def init_db(seed: bool = True) -> None:
    Base.metadata.create_all(bind=engine)
    if not seed:
        return
    db = SessionLocal()
    try:
        seed_demo_users(db)
    finally:
        db.close()


def main() -> None:
    configure_logging()
    init_db()


if __name__ == "__main__":
    main()
