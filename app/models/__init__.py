from app.models.brand import Brand
from app.models.rating import Rating
from app.models.response import Response
from app.models.user import User

__all__ = ["User", "Brand", "Response", "Rating"]
