from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.command.create_product_use_case import CreateProductUseCase
from src.service.marketplace.app.command.create_review_use_case import CreateReviewUseCase
from src.service.marketplace.app.command.delete_product_use_case import DeleteProductUseCase
from src.service.marketplace.app.command.update_product_use_case import UpdateProductUseCase
from src.service.marketplace.app.query.get_product_use_case import GetProductUseCase
from src.service.marketplace.app.query.list_products_use_case import ListProductsUseCase
from src.service.marketplace.domain.value_object.product_query import (
    PageRequest,
    ProductFilter,
    ProductSort,
)
from src.service.marketplace.domain.value_object.token_verification import TokenClaims
from src.service.marketplace.driving_adapter.http_controller.auth.bearer_auth import (
    get_current_claims,
)
from src.service.marketplace.driving_adapter.schema.base_schema import MessageResponse
from src.service.marketplace.driving_adapter.schema.product_schema import (
    CreateProductRequest,
    ProductDetailResponse,
    ProductListResponse,
    ProductResponse,
    UpdateProductRequest,
)
from src.service.marketplace.driving_adapter.schema.review_schema import (
    CreateReviewRequest,
    ReviewResponse,
)


router = APIRouter()


@router.get('', status_code=status.HTTP_200_OK)
@Logger.io
async def list_products(
    category: Optional[str] = None,
    subcategory: Optional[str] = None,
    condition: Optional[str] = None,
    city: Optional[str] = None,
    min_price: Optional[float] = Query(None, alias='minPrice'),
    max_price: Optional[float] = Query(None, alias='maxPrice'),
    search: Optional[str] = None,
    page: int = 1,
    limit: int = settings.DEFAULT_PAGE_SIZE,
    sort_by: str = Query('createdAt', alias='sortBy'),
    sort_order: str = Query('desc', alias='sortOrder'),
    use_case: ListProductsUseCase = Depends(ListProductsUseCase.depends),
) -> ProductListResponse:
    product_page = await use_case.list_products(
        product_filter=ProductFilter(
            category=category or None,
            subcategory=subcategory or None,
            condition=condition or None,  # type: ignore[arg-type]
            city=city or None,
            min_price=min_price,
            max_price=max_price,
            search=search or None,
        ),
        sort=ProductSort.parse(sort_by=sort_by, sort_order=sort_order),
        page_request=PageRequest(page=page, limit=limit),
    )
    return ProductListResponse.from_page(product_page)


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_product(
    request: CreateProductRequest,
    claims: TokenClaims = Depends(get_current_claims),
    use_case: CreateProductUseCase = Depends(CreateProductUseCase.depends),
) -> ProductResponse:
    product = await use_case.create(
        user_id=claims.user_id,
        title=request.title,
        description=request.description,
        price=request.price,
        category=request.category,
        subcategory=request.subcategory,
        condition=request.condition,
        city=request.city,
        region=request.region,
        brand=request.brand,
        images=request.images,
        specifications=request.specifications,
    )
    return ProductResponse.from_entity(product)


@router.get('/{product_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def get_product(
    product_id: str,
    use_case: GetProductUseCase = Depends(GetProductUseCase.depends),
) -> ProductDetailResponse:
    product = await use_case.get_by_id(product_id=product_id)
    return ProductDetailResponse.from_entity(product)


@router.put('/{product_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def update_product(
    product_id: str,
    request: UpdateProductRequest,
    claims: TokenClaims = Depends(get_current_claims),
    use_case: UpdateProductUseCase = Depends(UpdateProductUseCase.depends),
) -> ProductResponse:
    product = await use_case.update(
        product_id=product_id, user_id=claims.user_id, product_update=request.to_update()
    )
    return ProductResponse.from_entity(product)


@router.delete('/{product_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def delete_product(
    product_id: str,
    claims: TokenClaims = Depends(get_current_claims),
    use_case: DeleteProductUseCase = Depends(DeleteProductUseCase.depends),
) -> MessageResponse:
    await use_case.delete(product_id=product_id, user_id=claims.user_id)
    return MessageResponse(message='Product deleted successfully')


# ============================ Reviews ============================


@router.post('/{product_id}/reviews', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_review(
    product_id: str,
    request: CreateReviewRequest,
    claims: TokenClaims = Depends(get_current_claims),
    use_case: CreateReviewUseCase = Depends(CreateReviewUseCase.depends),
) -> ReviewResponse:
    review = await use_case.create(
        product_id=product_id,
        user_id=claims.user_id,
        rating=request.rating,
        comment=request.comment,
    )
    return ReviewResponse.from_entity(review)
