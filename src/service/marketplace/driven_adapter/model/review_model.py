from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.platform.database.orm_db_setting import Base
from src.service.marketplace.driven_adapter.model._columns import new_id, utc_now


if TYPE_CHECKING:
    from src.service.marketplace.driven_adapter.model.product_model import ProductModel
    from src.service.marketplace.driven_adapter.model.user_model import UserModel


class ReviewModel(Base):
    __tablename__ = 'review'

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    product_id: Mapped[str] = mapped_column(
        String(36), ForeignKey('product.id', ondelete='CASCADE'), nullable=False, index=True
    )
    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey('user.id', ondelete='CASCADE'), nullable=False, index=True
    )
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    comment: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, onupdate=utc_now, nullable=False
    )

    # Relationships
    product: Mapped['ProductModel'] = relationship(
        'ProductModel', back_populates='reviews', lazy='raise'
    )
    user: Mapped['UserModel'] = relationship('UserModel', lazy='selectin')

    def __repr__(self):
        return f'<ReviewModel(id={self.id}, product_id={self.product_id}, rating={self.rating})>'
