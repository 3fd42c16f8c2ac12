from datetime import datetime
from typing import TYPE_CHECKING, List

from sqlalchemy import DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.platform.database.orm_db_setting import Base
from src.service.marketplace.driven_adapter.model._columns import new_id, utc_now


if TYPE_CHECKING:
    from src.service.marketplace.driven_adapter.model.product_model import ProductModel
    from src.service.marketplace.driven_adapter.model.user_model import UserModel


class SellerModel(Base):
    __tablename__ = 'seller'

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    # Unique: one seller profile per user, even under concurrent first listings
    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey('user.id', ondelete='CASCADE'), nullable=False, unique=True
    )
    business_name: Mapped[str] = mapped_column(String(255), nullable=False)
    rating: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    total_sales: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, nullable=False
    )

    # Relationships
    user: Mapped['UserModel'] = relationship(
        'UserModel', back_populates='seller', lazy='selectin'
    )
    products: Mapped[List['ProductModel']] = relationship(
        'ProductModel', back_populates='seller', lazy='raise'
    )

    def __repr__(self):
        return f'<SellerModel(id={self.id}, user_id={self.user_id})>'
