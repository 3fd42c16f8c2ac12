"""Application layer interfaces (Ports)"""

from src.service.marketplace.app.interface.i_password_hasher import IPasswordHasher
from src.service.marketplace.app.interface.i_product_command_repo import IProductCommandRepo
from src.service.marketplace.app.interface.i_product_query_repo import IProductQueryRepo
from src.service.marketplace.app.interface.i_review_command_repo import IReviewCommandRepo
from src.service.marketplace.app.interface.i_review_query_repo import IReviewQueryRepo
from src.service.marketplace.app.interface.i_seller_command_repo import ISellerCommandRepo
from src.service.marketplace.app.interface.i_seller_query_repo import ISellerQueryRepo
from src.service.marketplace.app.interface.i_token_service import ITokenService
from src.service.marketplace.app.interface.i_user_command_repo import IUserCommandRepo
from src.service.marketplace.app.interface.i_user_query_repo import IUserQueryRepo

__all__ = [
    'IPasswordHasher',
    'IProductCommandRepo',
    'IProductQueryRepo',
    'IReviewCommandRepo',
    'IReviewQueryRepo',
    'ISellerCommandRepo',
    'ISellerQueryRepo',
    'ITokenService',
    'IUserCommandRepo',
    'IUserQueryRepo',
]
