import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import NotFound, ValidationError
from app.models.brand import Brand
from app.models.rating import Rating
from app.models.response import Response

logger = logging.getLogger(__name__)


def rate_response(db: Session, user_id: int, response_id: int, rating: Any) -> Rating:
    """Set the rating of an owned response, replacing any earlier one."""
    if not isinstance(rating, bool):
        raise ValidationError("Rating must be true or false")

    owned = db.scalar(
        select(Response.id).join(Brand, Response.brand_id == Brand.id).where(
            Response.id == response_id, Brand.user_id == user_id
        )
    )
    if owned is None:
        raise NotFound("Response not found")

    existing = db.scalar(select(Rating).where(Rating.response_id == response_id))
    if existing:
        existing.rating = rating
        db.add(existing)
        db.commit()
        db.refresh(existing)
        return existing

    created = Rating(response_id=response_id, rating=rating)
    db.add(created)
    try:
        db.commit()
    except IntegrityError:
        # A concurrent request inserted first; overwrite its value instead.
        db.rollback()
        logger.info("rating_insert_conflict", extra={"response_id": response_id})
        created = db.scalar(select(Rating).where(Rating.response_id == response_id))
        if created is None:
            raise NotFound("Response not found")
        created.rating = rating
        db.add(created)
        db.commit()
    db.refresh(created)
    return created
