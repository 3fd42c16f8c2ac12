"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.marketplace.driven_adapter.model.product_model import ProductModel
from src.service.marketplace.driven_adapter.model.review_model import ReviewModel
from src.service.marketplace.driven_adapter.model.seller_model import SellerModel
from src.service.marketplace.driven_adapter.model.user_model import UserModel

__all__ = [
    'ProductModel',
    'ReviewModel',
    'SellerModel',
    'UserModel',
]
