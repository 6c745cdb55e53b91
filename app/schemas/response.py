from datetime import datetime
from typing import Any

from pydantic import BaseModel


class ResponseRead(BaseModel):
    id: int
    brand_id: int
    response_text: str
    created_at: datetime

    model_config = {"from_attributes": True}


class ResponseWithRating(ResponseRead):
    rating: bool | None = None
    rating_id: int | None = None


class RatingRequest(BaseModel):
    # Checked by the rating service so non-booleans get its error message.
    rating: Any = None


class RatingRead(BaseModel):
    id: int
    response_id: int
    rating: bool
    created_at: datetime

    model_config = {"from_attributes": True}
