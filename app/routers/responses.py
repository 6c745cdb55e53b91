from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.rating import Rating
from app.models.response import Response
from app.routers.deps import CurrentUser, get_current_user
from app.schemas.response import RatingRead, RatingRequest, ResponseRead, ResponseWithRating
from app.services.ratings import rate_response
from app.services.responses import generate_response, list_responses_for_brand

router = APIRouter(prefix="/api/responses", tags=["responses"], dependencies=[Depends(get_current_user)])


@router.get("/brand/{brand_id}", response_model=list[ResponseWithRating])
def list_for_brand(
    brand_id: int,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
) -> list[dict]:
    return list_responses_for_brand(db, current_user.id, brand_id)


@router.post("/generate/{brand_id}", response_model=ResponseRead, status_code=status.HTTP_201_CREATED)
def generate(
    brand_id: int,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
) -> Response:
    return generate_response(db, current_user.id, brand_id)


@router.post("/{response_id}/rate", response_model=RatingRead)
def rate(
    response_id: int,
    payload: RatingRequest,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
) -> Rating:
    return rate_response(db, current_user.id, response_id, payload.rating)
