from typing import Any, Dict

from fastapi.testclient import TestClient

from src.platform.constant.route_constant import (
    AUTH_LOGIN,
    AUTH_REGISTER,
    PRODUCT_CREATE,
    PRODUCT_REVIEW_CREATE,
)
from test.util_constant import (
    DEFAULT_CITY,
    DEFAULT_PASSWORD,
    DEFAULT_PRODUCT,
    DEFAULT_REGION,
)


def assert_response_status(response, expected_status: int, message: str | None = None):
    response_text = getattr(response, 'text', getattr(response, 'content', 'N/A'))
    assert response.status_code == expected_status, (
        message or f'Expected {expected_status}, got {response.status_code}: {response_text}'
    )


def auth_headers(token: str) -> Dict[str, str]:
    return {'Authorization': f'Bearer {token}'}


def build_register_data(email: str, **overrides: Any) -> Dict[str, Any]:
    data = {
        'email': email,
        'password': DEFAULT_PASSWORD,
        'firstName': 'Test',
        'lastName': 'User',
        'phone': '+251911000000',
        'city': DEFAULT_CITY,
        'region': DEFAULT_REGION,
    }
    data.update(overrides)
    return data


def register_user(
    client: TestClient, *, email: str, first_name: str = 'Test', **overrides: Any
) -> Dict[str, Any]:
    """Register and return the {'user', 'token'} body."""
    response = client.post(
        AUTH_REGISTER, json=build_register_data(email, firstName=first_name, **overrides)
    )
    assert_response_status(response, 201, f'Failed to register {email}')
    return response.json()


def login_user(client: TestClient, email: str, password: str = DEFAULT_PASSWORD) -> Any:
    response = client.post(AUTH_LOGIN, json={'email': email, 'password': password})
    assert_response_status(response, 200, f'Login failed: {response.text}')
    return response.json()


def create_product(client: TestClient, token: str, **overrides: Any) -> Dict[str, Any]:
    product_data = {**DEFAULT_PRODUCT, **overrides}
    response = client.post(PRODUCT_CREATE, json=product_data, headers=auth_headers(token))
    assert_response_status(response, 201, 'Failed to create product')
    return response.json()


def create_review(
    client: TestClient,
    token: str,
    product_id: str,
    rating: int,
    comment: str | None = None,
) -> Dict[str, Any]:
    response = client.post(
        PRODUCT_REVIEW_CREATE.format(product_id=product_id),
        json={'rating': rating, 'comment': comment},
        headers=auth_headers(token),
    )
    assert_response_status(response, 201, 'Failed to create review')
    return response.json()
