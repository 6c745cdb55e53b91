import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.core.errors import NotFound, ValidationError
from app.models.brand import Brand

logger = logging.getLogger(__name__)


def _require_name(name: Any) -> str:
    if not isinstance(name, str) or not name.strip():
        raise ValidationError("Brand name is required")
    return name


def get_owned_brand(db: Session, user_id: int, brand_id: int) -> Brand:
    brand = db.scalar(select(Brand).where(Brand.id == brand_id, Brand.user_id == user_id))
    if not brand:
        raise NotFound("Brand not found")
    return brand


def list_brands(db: Session, user_id: int) -> list[Brand]:
    stmt = select(Brand).where(Brand.user_id == user_id).order_by(Brand.created_at.desc(), Brand.id.desc())
    return list(db.scalars(stmt).all())


def create_brand(db: Session, user_id: int, name: Any, prompt: str | None = None) -> Brand:
    brand = Brand(user_id=user_id, name=_require_name(name), prompt=prompt or "")
    db.add(brand)
    db.commit()
    db.refresh(brand)
    logger.info("brand_created", extra={"user_id": user_id, "brand_id": brand.id})
    return brand


def update_brand(db: Session, user_id: int, brand_id: int, name: Any, prompt: str | None) -> Brand:
    # Lookup and write share the session transaction.
    brand = get_owned_brand(db, user_id, brand_id)
    brand.name = _require_name(name)
    brand.prompt = prompt
    db.add(brand)
    db.commit()
    db.refresh(brand)
    return brand


def delete_brand(db: Session, user_id: int, brand_id: int) -> None:
    brand = get_owned_brand(db, user_id, brand_id)
    db.delete(brand)
    db.commit()
    logger.info("brand_deleted", extra={"user_id": user_id, "brand_id": brand_id})
