from unittest.mock import AsyncMock

import attrs
import pytest

from src.platform.exception.exceptions import DomainError, ForbiddenError, NotFoundError
from src.service.marketplace.app.command.create_review_use_case import CreateReviewUseCase
from src.service.marketplace.app.command.delete_review_use_case import DeleteReviewUseCase
from src.service.marketplace.app.command.update_review_use_case import UpdateReviewUseCase
from src.service.marketplace.domain.entity.review_entity import ReviewEntity, ReviewUpdate
from test.service.marketplace.unit.helpers import make_product, make_review, make_user


REVIEWER_ID = 'buyer-1'


@pytest.fixture
def review_query_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.get_by_id.return_value = make_review()
    return repo


@pytest.fixture
def review_command_repo() -> AsyncMock:
    repo = AsyncMock()

    async def _create(review: ReviewEntity) -> ReviewEntity:
        return attrs.evolve(review, id='review-new')

    async def _update(review: ReviewEntity) -> ReviewEntity:
        return attrs.evolve(review, user=None)

    repo.create.side_effect = _create
    repo.update.side_effect = _update
    return repo


@pytest.fixture
def create_use_case(review_command_repo: AsyncMock) -> CreateReviewUseCase:
    product_query_repo = AsyncMock()
    product_query_repo.get_by_id.return_value = make_product()
    user_query_repo = AsyncMock()
    user_query_repo.get_by_id.return_value = make_user(id=REVIEWER_ID, first_name='Sara')
    return CreateReviewUseCase(
        product_query_repo=product_query_repo,
        review_command_repo=review_command_repo,
        user_query_repo=user_query_repo,
    )


@pytest.fixture
def update_use_case(
    review_query_repo: AsyncMock, review_command_repo: AsyncMock
) -> UpdateReviewUseCase:
    return UpdateReviewUseCase(
        review_query_repo=review_query_repo, review_command_repo=review_command_repo
    )


@pytest.fixture
def delete_use_case(
    review_query_repo: AsyncMock, review_command_repo: AsyncMock
) -> DeleteReviewUseCase:
    return DeleteReviewUseCase(
        review_query_repo=review_query_repo, review_command_repo=review_command_repo
    )


@pytest.mark.unit
class TestCreateReviewUseCase:
    async def test_create_success__attaches_reviewer(
        self, create_use_case: CreateReviewUseCase
    ) -> None:
        review = await create_use_case.create(
            product_id='product-1', user_id=REVIEWER_ID, rating=5, comment='Great'
        )

        assert review.id == 'review-new'
        assert review.rating == 5
        assert review.user is not None
        assert review.user.first_name == 'Sara'

    @pytest.mark.parametrize('rating', [0, 6, -1])
    async def test_rating_out_of_range(
        self, create_use_case: CreateReviewUseCase, review_command_repo: AsyncMock, rating: int
    ) -> None:
        with pytest.raises(DomainError, match='Rating must be between 1 and 5'):
            await create_use_case.create(product_id='product-1', user_id=REVIEWER_ID, rating=rating)

        review_command_repo.create.assert_not_awaited()

    async def test_product_not_found(self, create_use_case: CreateReviewUseCase) -> None:
        create_use_case.product_query_repo.get_by_id.return_value = None

        with pytest.raises(NotFoundError, match='Product not found'):
            await create_use_case.create(product_id='missing', user_id=REVIEWER_ID, rating=4)


@pytest.mark.unit
class TestUpdateReviewUseCase:
    async def test_author_updates_rating__comment_untouched(
        self, update_use_case: UpdateReviewUseCase
    ) -> None:
        review = await update_use_case.update(
            review_id='review-1', user_id=REVIEWER_ID, review_update=ReviewUpdate(rating=2)
        )

        assert review.rating == 2
        assert review.comment == 'Good phone'
        assert review.user is not None

    async def test_null_comment__cleared(self, update_use_case: UpdateReviewUseCase) -> None:
        review = await update_use_case.update(
            review_id='review-1', user_id=REVIEWER_ID, review_update=ReviewUpdate(comment=None)
        )

        assert review.comment is None

    async def test_zero_rating__nothing_written(
        self, update_use_case: UpdateReviewUseCase, review_command_repo: AsyncMock
    ) -> None:
        review = await update_use_case.update(
            review_id='review-1', user_id=REVIEWER_ID, review_update=ReviewUpdate(rating=0)
        )

        assert review.rating != 0
        review_command_repo.update.assert_not_awaited()

    @pytest.mark.parametrize('rating', [-1, 6])
    async def test_rating_out_of_range(
        self, update_use_case: UpdateReviewUseCase, review_command_repo: AsyncMock, rating: int
    ) -> None:
        with pytest.raises(DomainError, match='Rating must be between 1 and 5'):
            await update_use_case.update(
                review_id='review-1', user_id=REVIEWER_ID, review_update=ReviewUpdate(rating=rating)
            )

        review_command_repo.update.assert_not_awaited()

    async def test_non_author__forbidden_before_rating_check(
        self, update_use_case: UpdateReviewUseCase
    ) -> None:
        with pytest.raises(ForbiddenError, match='You can only update your own reviews'):
            await update_use_case.update(
                review_id='review-1', user_id='someone-else', review_update=ReviewUpdate(rating=9)
            )

    async def test_not_found(
        self, update_use_case: UpdateReviewUseCase, review_query_repo: AsyncMock
    ) -> None:
        review_query_repo.get_by_id.return_value = None

        with pytest.raises(NotFoundError, match='Review not found'):
            await update_use_case.update(
                review_id='missing', user_id=REVIEWER_ID, review_update=ReviewUpdate(rating=3)
            )


@pytest.mark.unit
class TestDeleteReviewUseCase:
    async def test_author_deletes(
        self, delete_use_case: DeleteReviewUseCase, review_command_repo: AsyncMock
    ) -> None:
        await delete_use_case.delete(review_id='review-1', user_id=REVIEWER_ID)

        review_command_repo.delete.assert_awaited_once_with(review_id='review-1')

    async def test_non_author__forbidden(
        self, delete_use_case: DeleteReviewUseCase, review_command_repo: AsyncMock
    ) -> None:
        with pytest.raises(ForbiddenError, match='You can only delete your own reviews'):
            await delete_use_case.delete(review_id='review-1', user_id='someone-else')

        review_command_repo.delete.assert_not_awaited()
