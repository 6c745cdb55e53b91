from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base
from app.models.common import CreatedAtMixin, IntegerPrimaryKeyMixin


class Brand(IntegerPrimaryKeyMixin, CreatedAtMixin, Base):
    __tablename__ = "brands"

    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    prompt: Mapped[str | None] = mapped_column(Text, nullable=True)

    owner = relationship("User", back_populates="brands")
    responses = relationship("Response", back_populates="brand", cascade="all, delete-orphan", passive_deletes=True)
