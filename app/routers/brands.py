from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.models.brand import Brand
from app.routers.deps import CurrentUser, get_current_user
from app.schemas.auth import MessageResponse
from app.schemas.brand import BrandCreate, BrandRead, BrandUpdate
from app.services import brands as brand_service

router = APIRouter(prefix="/api/brands", tags=["brands"], dependencies=[Depends(get_current_user)])


@router.get("", response_model=list[BrandRead])
def list_brands(db: Session = Depends(get_db), current_user: CurrentUser = Depends(get_current_user)) -> list[Brand]:
    return brand_service.list_brands(db, current_user.id)


@router.post("", response_model=BrandRead, status_code=status.HTTP_201_CREATED)
def create_brand(
    payload: BrandCreate,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
) -> Brand:
    return brand_service.create_brand(db, current_user.id, payload.name, payload.prompt)


@router.put("/{brand_id}", response_model=BrandRead)
def update_brand(
    brand_id: int,
    payload: BrandUpdate,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
) -> Brand:
    return brand_service.update_brand(db, current_user.id, brand_id, payload.name, payload.prompt)


@router.delete("/{brand_id}", response_model=MessageResponse)
def delete_brand(
    brand_id: int,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user),
) -> MessageResponse:
    brand_service.delete_brand(db, current_user.id, brand_id)
    return MessageResponse(message="Brand deleted successfully")
