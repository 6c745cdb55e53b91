from sqlalchemy import ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base
from app.models.common import CreatedAtMixin, IntegerPrimaryKeyMixin


class Response(IntegerPrimaryKeyMixin, CreatedAtMixin, Base):
    __tablename__ = "responses"

    brand_id: Mapped[int] = mapped_column(ForeignKey("brands.id", ondelete="CASCADE"), nullable=False, index=True)
    response_text: Mapped[str] = mapped_column(Text, nullable=False)

    brand = relationship("Brand", back_populates="responses")
    rating = relationship(
        "Rating", back_populates="response", uselist=False, cascade="all, delete-orphan", passive_deletes=True
    )
