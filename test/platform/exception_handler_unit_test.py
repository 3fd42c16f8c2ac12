import json
from unittest.mock import MagicMock

from fastapi.exceptions import RequestValidationError
import pytest
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.platform.config.core_setting import settings
from src.platform.exception.exception_handlers import (
    custom_error_handler,
    general_500_exception_handler,
    http_exception_handler,
    validation_error_handler,
)
from src.platform.exception.exceptions import (
    AuthenticationError,
    ConflictError,
    DomainError,
    ForbiddenError,
    NotFoundError,
)


def _body(response) -> dict:
    return json.loads(response.body)


@pytest.mark.unit
class TestCustomErrorHandler:
    @pytest.mark.parametrize(
        'error,status_code',
        [
            (DomainError('Price must be greater than 0'), 400),
            (AuthenticationError('Invalid token'), 401),
            (ForbiddenError('Forbidden'), 403),
            (NotFoundError('Product not found'), 404),
            (ConflictError('User already exists'), 409),
        ],
    )
    async def test_status_and_message(self, error: Exception, status_code: int) -> None:
        response = await custom_error_handler(MagicMock(), error)

        assert response.status_code == status_code
        assert _body(response) == {'error': str(error)}


@pytest.mark.unit
class TestValidationErrorHandler:
    async def test_missing_field(self) -> None:
        error = RequestValidationError(
            [{'type': 'missing', 'loc': ('body', 'email'), 'msg': 'Field required'}]
        )

        response = await validation_error_handler(MagicMock(), error)

        assert response.status_code == 400
        body = _body(response)
        assert body['error'] == 'Missing required fields'
        assert body['details'][0]['loc'] == ['body', 'email']

    async def test_first_error_message(self) -> None:
        error = RequestValidationError(
            [
                {
                    'type': 'int_parsing',
                    'loc': ('query', 'page'),
                    'msg': 'Input should be a valid integer',
                }
            ]
        )

        response = await validation_error_handler(MagicMock(), error)

        assert _body(response)['error'] == 'page: Input should be a valid integer'


@pytest.mark.unit
class TestFallbackHandlers:
    async def test_http_exception(self) -> None:
        response = await http_exception_handler(MagicMock(), StarletteHTTPException(404))

        assert response.status_code == 404
        assert _body(response) == {'error': 'Not Found'}

    async def test_unhandled_exception(self) -> None:
        response = await general_500_exception_handler(MagicMock(), RuntimeError('boom'))

        assert response.status_code == 500
        assert _body(response)['error'] == 'Internal server error'

    async def test_unhandled_exception__stack_in_debug(self, monkeypatch) -> None:
        monkeypatch.setattr(settings, 'DEBUG', True)
        try:
            raise RuntimeError('boom')
        except RuntimeError as e:
            error = e

        response = await general_500_exception_handler(MagicMock(), error)

        details = _body(response)['details']
        assert details['message'] == 'RuntimeError: boom'
        assert details['stack'][0].startswith('Traceback')
        assert details['stack'][-1] == 'RuntimeError: boom\n'

    async def test_unhandled_exception__no_details_in_production(self, monkeypatch) -> None:
        monkeypatch.setattr(settings, 'DEBUG', False)

        response = await general_500_exception_handler(MagicMock(), RuntimeError('boom'))

        assert _body(response) == {'error': 'Internal server error'}
