from datetime import datetime
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import JSON, DateTime, Float, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.platform.database.orm_db_setting import Base
from src.service.marketplace.driven_adapter.model._columns import new_id, utc_now


if TYPE_CHECKING:
    from src.service.marketplace.driven_adapter.model.review_model import ReviewModel
    from src.service.marketplace.driven_adapter.model.seller_model import SellerModel


class ProductModel(Base):
    __tablename__ = 'product'

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)
    seller_id: Mapped[str] = mapped_column(
        String(36), ForeignKey('seller.id', ondelete='CASCADE'), nullable=False, index=True
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False, index=True)
    brand: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    category: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    subcategory: Mapped[str] = mapped_column(String(100), nullable=False)
    condition: Mapped[str] = mapped_column(String(20), nullable=False)
    images: Mapped[list] = mapped_column(JSON, default=list, nullable=False)
    specifications: Mapped[dict] = mapped_column(JSON, default=dict, nullable=False)
    city: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    region: Mapped[str] = mapped_column(String(100), nullable=False)
    country: Mapped[str] = mapped_column(String(100), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, nullable=False, index=True
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, onupdate=utc_now, nullable=False
    )

    # Relationships
    seller: Mapped['SellerModel'] = relationship(
        'SellerModel', back_populates='products', lazy='selectin'
    )
    reviews: Mapped[List['ReviewModel']] = relationship(
        'ReviewModel',
        back_populates='product',
        lazy='raise',
        cascade='all, delete-orphan',
        passive_deletes=True,
    )

    def __repr__(self):
        return f'<ProductModel(id={self.id}, title={self.title}, price={self.price})>'
