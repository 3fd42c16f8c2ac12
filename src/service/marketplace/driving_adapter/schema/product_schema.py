"""
Product request/response schemas

Seller user summaries differ per endpoint:
- listing: id, name, city, region
- create/update: adds email
- detail: adds email, phone and createdAt
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import ConfigDict

from src.service.marketplace.domain.entity.product_entity import ProductEntity, ProductUpdate
from src.service.marketplace.domain.entity.seller_entity import SellerEntity
from src.service.marketplace.domain.entity.user_entity import UserEntity
from src.service.marketplace.domain.value_object.product_query import ProductPage
from src.service.marketplace.driving_adapter.schema.base_schema import CamelModel, RequiredStr
from src.service.marketplace.driving_adapter.schema.review_schema import ReviewResponse


_PRODUCT_EXAMPLE = {
    'title': 'iPhone 14 Pro 256GB',
    'description': 'Deep purple, battery health 92%, original box',
    'price': 85000,
    'category': 'electronics',
    'subcategory': 'phones',
    'condition': 'used',
    'brand': 'Apple',
    'images': ['https://cdn.example.com/iphone-front.jpg'],
    'specifications': {'storage': '256GB', 'color': 'Deep Purple'},
    'city': 'Addis Ababa',
    'region': 'Addis Ababa',
}


# ============================ Requests ============================


class CreateProductRequest(CamelModel):
    title: RequiredStr
    description: RequiredStr
    price: float
    category: RequiredStr
    subcategory: RequiredStr
    condition: RequiredStr
    city: RequiredStr
    region: RequiredStr
    brand: Optional[str] = None
    images: Optional[List[str]] = None
    specifications: Optional[Dict[str, Any]] = None

    model_config = ConfigDict(json_schema_extra={'example': _PRODUCT_EXAMPLE})


class UpdateProductRequest(CamelModel):
    title: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    category: Optional[str] = None
    subcategory: Optional[str] = None
    condition: Optional[str] = None
    brand: Optional[str] = None
    images: Optional[List[str]] = None
    specifications: Optional[Dict[str, Any]] = None
    city: Optional[str] = None
    region: Optional[str] = None

    model_config = ConfigDict(json_schema_extra={'example': {'price': 79000, 'brand': None}})

    def to_update(self) -> ProductUpdate:
        return ProductUpdate(**self.sent_fields())


# ============================ Seller summaries ============================


class SellerUserSummary(CamelModel):
    id: str
    first_name: str
    last_name: str
    city: str
    region: str

    @classmethod
    def from_entity(cls, user: UserEntity) -> 'SellerUserSummary':
        return cls(
            id=user.id or '',
            first_name=user.first_name,
            last_name=user.last_name,
            city=user.city,
            region=user.region,
        )


class SellerUserContact(SellerUserSummary):
    email: str

    @classmethod
    def from_entity(cls, user: UserEntity) -> 'SellerUserContact':
        return cls(**SellerUserSummary.from_entity(user).model_dump(), email=user.email)


class SellerUserDetail(SellerUserContact):
    phone: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, user: UserEntity) -> 'SellerUserDetail':
        return cls(
            **SellerUserContact.from_entity(user).model_dump(),
            phone=user.phone,
            created_at=user.created_at,
        )


class SellerResponse(CamelModel):
    id: str
    user_id: str
    business_name: str
    rating: float
    total_sales: int
    created_at: Optional[datetime] = None
    user: SellerUserSummary

    @classmethod
    def _base(cls, seller: SellerEntity) -> dict[str, Any]:
        if seller.user is None:
            raise ValueError(f'Seller {seller.id} loaded without its user')
        return {
            'id': seller.id or '',
            'user_id': seller.user_id,
            'business_name': seller.business_name,
            'rating': seller.rating,
            'total_sales': seller.total_sales,
            'created_at': seller.created_at,
        }

    @classmethod
    def from_entity(cls, seller: SellerEntity) -> 'SellerResponse':
        return cls(**cls._base(seller), user=SellerUserSummary.from_entity(seller.user))


class SellerWithContactResponse(SellerResponse):
    user: SellerUserContact

    @classmethod
    def from_entity(cls, seller: SellerEntity) -> 'SellerWithContactResponse':
        return cls(**cls._base(seller), user=SellerUserContact.from_entity(seller.user))


class SellerDetailResponse(SellerResponse):
    user: SellerUserDetail

    @classmethod
    def from_entity(cls, seller: SellerEntity) -> 'SellerDetailResponse':
        return cls(**cls._base(seller), user=SellerUserDetail.from_entity(seller.user))


# ============================ Products ============================


def product_fields(product: ProductEntity) -> dict[str, Any]:
    return {
        'id': product.id or '',
        'seller_id': product.seller_id,
        'title': product.title,
        'description': product.description,
        'price': product.price,
        'brand': product.brand,
        'category': product.category,
        'subcategory': product.subcategory,
        'condition': product.condition.value,
        'images': product.images,
        'specifications': product.specifications,
        'city': product.city,
        'region': product.region,
        'country': product.country,
        'created_at': product.created_at,
        'updated_at': product.updated_at,
    }


def seller_of(product: ProductEntity) -> SellerEntity:
    if product.seller is None:
        raise ValueError(f'Product {product.id} loaded without its seller')
    return product.seller


class ProductFields(CamelModel):
    id: str
    seller_id: str
    title: str
    description: str
    price: float
    brand: Optional[str] = None
    category: str
    subcategory: str
    condition: str
    images: List[str]
    specifications: Dict[str, Any]
    city: str
    region: str
    country: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ProductResponse(ProductFields):
    """Returned by create and update."""

    seller: SellerWithContactResponse

    @classmethod
    def from_entity(cls, product: ProductEntity) -> 'ProductResponse':
        return cls(
            **product_fields(product),
            seller=SellerWithContactResponse.from_entity(seller_of(product)),
        )


class ProductListItem(ProductFields):
    seller: SellerResponse
    average_rating: float
    review_count: int

    @classmethod
    def from_entity(cls, product: ProductEntity) -> 'ProductListItem':
        return cls(
            **product_fields(product),
            seller=SellerResponse.from_entity(seller_of(product)),
            average_rating=product.rating.average_rating,
            review_count=product.rating.review_count,
        )


class ProductDetailResponse(ProductFields):
    seller: SellerDetailResponse
    reviews: List[ReviewResponse]
    average_rating: float
    review_count: int

    @classmethod
    def from_entity(cls, product: ProductEntity) -> 'ProductDetailResponse':
        return cls(
            **product_fields(product),
            seller=SellerDetailResponse.from_entity(seller_of(product)),
            reviews=[ReviewResponse.from_entity(r) for r in product.reviews],
            average_rating=product.rating.average_rating,
            review_count=product.rating.review_count,
        )


class PaginationResponse(CamelModel):
    page: int
    limit: int
    total: int
    total_pages: int


class ProductListResponse(CamelModel):
    products: List[ProductListItem]
    pagination: PaginationResponse

    @classmethod
    def from_page(cls, page: ProductPage) -> 'ProductListResponse':
        return cls(
            products=[ProductListItem.from_entity(p) for p in page.products],
            pagination=PaginationResponse(
                page=page.pagination.page,
                limit=page.pagination.limit,
                total=page.pagination.total,
                total_pages=page.pagination.total_pages,
            ),
        )
