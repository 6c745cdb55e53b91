from sqlalchemy import select
from sqlalchemy.orm import Session

from app.models.rating import Rating
from app.models.response import Response
from app.services.brands import get_owned_brand
from app.services.generator import generate_response_text


def list_responses_for_brand(db: Session, user_id: int, brand_id: int) -> list[dict]:
    """Responses of an owned brand, newest first, each with its rating or ``None``."""
    get_owned_brand(db, user_id, brand_id)
    stmt = (
        select(Response, Rating.rating, Rating.id)
        .outerjoin(Rating, Rating.response_id == Response.id)
        .where(Response.brand_id == brand_id)
        .order_by(Response.created_at.desc(), Response.id.desc())
    )
    return [
        {
            "id": response.id,
            "brand_id": response.brand_id,
            "response_text": response.response_text,
            "created_at": response.created_at,
            "rating": rating,
            "rating_id": rating_id,
        }
        for response, rating, rating_id in db.execute(stmt).all()
    ]


def generate_response(db: Session, user_id: int, brand_id: int) -> Response:
    brand = get_owned_brand(db, user_id, brand_id)
    response = Response(brand_id=brand.id, response_text=generate_response_text())
    db.add(response)
    db.commit()
    db.refresh(response)
    return response
