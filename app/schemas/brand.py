from datetime import datetime
from typing import Any

from pydantic import BaseModel


class BrandCreate(BaseModel):
    # Checked by the brand service so a null or non-string name gets its message.
    name: Any = None
    prompt: str | None = None


class BrandUpdate(BaseModel):
    name: Any = None
    prompt: str | None = None


class BrandRead(BaseModel):
    id: int
    user_id: int
    name: str
    prompt: str | None
    created_at: datetime

    model_config = {"from_attributes": True}
