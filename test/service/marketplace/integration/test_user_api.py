from typing import Any

from fastapi.testclient import TestClient
import pytest

from src.platform.constant.route_constant import AUTH_LOGIN, USER_GET, USER_UPDATE
from test.shared.utils import (
    assert_response_status,
    auth_headers,
    create_product,
    login_user,
)
from test.util_constant import (
    DEFAULT_PASSWORD,
    NON_EXISTENT_ID,
    TEST_BUYER_EMAIL,
    TEST_SELLER_EMAIL,
)


def _update(client: TestClient, user: dict[str, Any], body: dict[str, Any], token: str = ''):
    return client.put(
        USER_UPDATE.format(user_id=user['user']['id']),
        json=body,
        headers=auth_headers(token or user['token']),
    )


@pytest.mark.integration
class TestGetUser:
    def test_buyer_profile(self, client: TestClient, buyer_user: dict[str, Any]) -> None:
        response = client.get(USER_GET.format(user_id=buyer_user['user']['id']))

        assert_response_status(response, 200)
        body = response.json()
        assert body['email'] == TEST_BUYER_EMAIL
        assert body['isSeller'] is False
        assert body['seller'] is None
        assert 'hashedPassword' not in body

    def test_seller_profile_lists_products(
        self, client: TestClient, seller_user: dict[str, Any]
    ) -> None:
        product = create_product(client, seller_user['token'])

        body = client.get(USER_GET.format(user_id=seller_user['user']['id'])).json()

        assert body['isSeller'] is True
        assert body['seller']['businessName'] == f"{TEST_SELLER_EMAIL}'s Store"
        assert [p['id'] for p in body['seller']['products']] == [product['id']]
        assert 'description' not in body['seller']['products'][0]

    def test_not_found(self, client: TestClient) -> None:
        response = client.get(USER_GET.format(user_id=NON_EXISTENT_ID))

        assert_response_status(response, 404)
        assert response.json()['error'] == 'User not found'


@pytest.mark.integration
class TestUpdateUser:
    def test_update_self(self, client: TestClient, buyer_user: dict[str, Any]) -> None:
        response = _update(client, buyer_user, {'city': 'Adama', 'region': 'Oromia'})

        assert_response_status(response, 200)
        body = response.json()
        assert body['city'] == 'Adama'
        assert body['region'] == 'Oromia'
        assert body['firstName'] == 'Sara'

    def test_clear_phone(self, client: TestClient, buyer_user: dict[str, Any]) -> None:
        response = _update(client, buyer_user, {'phone': None})

        assert_response_status(response, 200)
        assert response.json()['phone'] is None

    def test_blank_values_leave_fields_untouched(
        self, client: TestClient, buyer_user: dict[str, Any]
    ) -> None:
        response = _update(
            client, buyer_user, {'firstName': '', 'phone': '', 'region': None, 'city': 'Adama'}
        )

        assert_response_status(response, 200)
        body = response.json()
        assert body['city'] == 'Adama'
        assert body['firstName'] == 'Sara'
        assert body['phone'] == buyer_user['user']['phone']
        assert body['region'] == buyer_user['user']['region']

    def test_empty_password_keeps_current(
        self, client: TestClient, buyer_user: dict[str, Any]
    ) -> None:
        response = _update(client, buyer_user, {'password': ''})

        assert_response_status(response, 200)
        login_user(client, TEST_BUYER_EMAIL, DEFAULT_PASSWORD)

    def test_change_password(self, client: TestClient, buyer_user: dict[str, Any]) -> None:
        response = _update(client, buyer_user, {'password': 'N3wP@ssword'})
        assert_response_status(response, 200)

        login_user(client, TEST_BUYER_EMAIL, 'N3wP@ssword')
        old = client.post(
            AUTH_LOGIN, json={'email': TEST_BUYER_EMAIL, 'password': DEFAULT_PASSWORD}
        )
        assert_response_status(old, 401)

    def test_other_user_forbidden(
        self, client: TestClient, buyer_user: dict[str, Any], seller_user: dict[str, Any]
    ) -> None:
        response = _update(client, buyer_user, {'city': 'Adama'}, token=seller_user['token'])

        assert_response_status(response, 403)
        assert response.json()['error'] == 'Forbidden: You can only update your own profile'

    def test_requires_token(self, client: TestClient, buyer_user: dict[str, Any]) -> None:
        response = client.put(
            USER_UPDATE.format(user_id=buyer_user['user']['id']), json={'city': 'Adama'}
        )

        assert_response_status(response, 401)
