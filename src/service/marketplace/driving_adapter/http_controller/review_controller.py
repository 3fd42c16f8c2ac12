from fastapi import APIRouter, Depends, status

from src.platform.logging.loguru_io import Logger
from src.service.marketplace.app.command.delete_review_use_case import DeleteReviewUseCase
from src.service.marketplace.app.command.update_review_use_case import UpdateReviewUseCase
from src.service.marketplace.domain.value_object.token_verification import TokenClaims
from src.service.marketplace.driving_adapter.http_controller.auth.bearer_auth import (
    get_current_claims,
)
from src.service.marketplace.driving_adapter.schema.base_schema import MessageResponse
from src.service.marketplace.driving_adapter.schema.review_schema import (
    ReviewResponse,
    UpdateReviewRequest,
)


router = APIRouter()


@router.put('/{review_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def update_review(
    review_id: str,
    request: UpdateReviewRequest,
    claims: TokenClaims = Depends(get_current_claims),
    use_case: UpdateReviewUseCase = Depends(UpdateReviewUseCase.depends),
) -> ReviewResponse:
    review = await use_case.update(
        review_id=review_id, user_id=claims.user_id, review_update=request.to_update()
    )
    return ReviewResponse.from_entity(review)


@router.delete('/{review_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def delete_review(
    review_id: str,
    claims: TokenClaims = Depends(get_current_claims),
    use_case: DeleteReviewUseCase = Depends(DeleteReviewUseCase.depends),
) -> MessageResponse:
    await use_case.delete(review_id=review_id, user_id=claims.user_id)
    return MessageResponse(message='Review deleted successfully')
