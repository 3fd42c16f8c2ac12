"""ORM model -> domain entity conversion shared by the repositories."""

from src.service.marketplace.domain.entity.product_entity import ProductEntity
from src.service.marketplace.domain.entity.review_entity import ReviewEntity
from src.service.marketplace.domain.entity.seller_entity import SellerEntity
from src.service.marketplace.domain.entity.user_entity import UserEntity
from src.service.marketplace.domain.value_object.rating_summary import RatingSummary
from src.service.marketplace.driven_adapter.model.product_model import ProductModel
from src.service.marketplace.driven_adapter.model.review_model import ReviewModel
from src.service.marketplace.driven_adapter.model.seller_model import SellerModel
from src.service.marketplace.driven_adapter.model.user_model import UserModel


def user_to_entity(user_model: UserModel) -> UserEntity:
    return UserEntity(
        id=user_model.id,
        email=user_model.email,
        hashed_password=user_model.hashed_password,
        first_name=user_model.first_name,
        last_name=user_model.last_name,
        phone=user_model.phone,
        city=user_model.city,
        region=user_model.region,
        country=user_model.country,
        is_verified=user_model.is_verified,
        is_seller=user_model.is_seller,
        created_at=user_model.created_at,
        updated_at=user_model.updated_at,
    )


def seller_to_entity(seller_model: SellerModel, *, with_user: bool = False) -> SellerEntity:
    return SellerEntity(
        id=seller_model.id,
        user_id=seller_model.user_id,
        business_name=seller_model.business_name,
        rating=seller_model.rating,
        total_sales=seller_model.total_sales,
        created_at=seller_model.created_at,
        user=user_to_entity(seller_model.user) if with_user else None,
    )


def product_to_entity(
    product_model: ProductModel, *, with_seller: bool = False
) -> ProductEntity:
    return ProductEntity(
        id=product_model.id,
        seller_id=product_model.seller_id,
        title=product_model.title,
        description=product_model.description,
        price=product_model.price,
        brand=product_model.brand,
        category=product_model.category,
        subcategory=product_model.subcategory,
        condition=product_model.condition,
        images=list(product_model.images or []),
        specifications=dict(product_model.specifications or {}),
        city=product_model.city,
        region=product_model.region,
        country=product_model.country,
        created_at=product_model.created_at,
        updated_at=product_model.updated_at,
        seller=seller_to_entity(product_model.seller, with_user=True) if with_seller else None,
    )


def review_to_entity(review_model: ReviewModel, *, with_user: bool = False) -> ReviewEntity:
    return ReviewEntity(
        id=review_model.id,
        product_id=review_model.product_id,
        user_id=review_model.user_id,
        rating=review_model.rating,
        comment=review_model.comment,
        created_at=review_model.created_at,
        updated_at=review_model.updated_at,
        user=user_to_entity(review_model.user) if with_user else None,
    )


def newest_first(models: list) -> list:
    # uuid7 ids break created_at ties in insertion order
    return sorted(models, key=lambda m: (m.created_at, m.id), reverse=True)


def attach_reviews(product: ProductEntity, review_models: list[ReviewModel]) -> ProductEntity:
    product.reviews = [review_to_entity(r, with_user=True) for r in newest_first(review_models)]
    product.rating = RatingSummary.from_ratings(r.rating for r in product.reviews)
    return product
