from pydantic import SecretStr
import pytest

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger, redact
from src.platform.logging.loguru_io_config import MASK, access_log_level


@pytest.mark.unit
class TestRedact:
    def test_masks_sensitive_keys(self) -> None:
        kwargs = {'email': 'a@test.com', 'password': 'P@ssw0rd123', 'token': 'eyJhbGciOi'}

        assert redact(kwargs, truncate=False) == {
            'email': 'a@test.com',
            'password': MASK,
            'token': MASK,
        }

    def test_masks_rendered_reprs(self) -> None:
        entity_repr = "UserEntity(email='a@test.com', hashed_password='$2b$12$x')"

        rendered = redact((entity_repr,), truncate=False)

        assert '$2b$12$x' not in rendered[0]
        assert f"hashed_password='{MASK}'" in rendered[0]

    def test_masks_secret_str_repr(self) -> None:
        rendered = redact(f'password={SecretStr("P@ssw0rd123")!r}', truncate=False)

        assert 'SecretStr' not in rendered

    def test_truncates_long_content(self) -> None:
        rendered = redact('x' * 1500, truncate=True)

        assert rendered.endswith('... <500 more chars>')


@pytest.mark.unit
class TestAccessLogLevel:
    @pytest.mark.parametrize(
        'status,level',
        [(200, 'SUCCESS'), (201, 'SUCCESS'), (304, 'WARNING'), (404, 'ERROR'), (500, 'CRITICAL')],
    )
    def test_status_classes(self, status: int, level: str) -> None:
        line = f'127.0.0.1 - "GET /api/products HTTP/1.1" - {status} - 8ms'

        assert access_log_level(line) == level

    def test_other_messages(self) -> None:
        assert access_log_level('Starting granian (main PID: 1)') is None


@pytest.mark.unit
class TestLoggerIo:
    async def test_async_passthrough(self) -> None:
        @Logger.io
        async def add(a: int, b: int) -> int:
            return a + b

        assert await add(1, b=2) == 3

    def test_sync_error_logged_once_and_reraised(self) -> None:
        @Logger.io
        def missing() -> None:
            raise NotFoundError('Product not found')

        with pytest.raises(NotFoundError) as exc_info:
            missing()

        assert getattr(exc_info.value, '_has_logged', False) is True

    def test_no_reraise(self) -> None:
        @Logger.io(reraise=False)
        def boom() -> None:
            raise RuntimeError('boom')

        assert boom() is None
