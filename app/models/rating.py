from sqlalchemy import Boolean, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base
from app.models.common import CreatedAtMixin, IntegerPrimaryKeyMixin


class Rating(IntegerPrimaryKeyMixin, CreatedAtMixin, Base):
    __tablename__ = "ratings"

    response_id: Mapped[int] = mapped_column(
        ForeignKey("responses.id", ondelete="CASCADE"), nullable=False, unique=True, index=True
    )
    rating: Mapped[bool] = mapped_column(Boolean, nullable=False)

    response = relationship("Response", back_populates="rating")
