from typing import Any

from fastapi.testclient import TestClient
import pytest

from src.platform.constant.route_constant import SEARCH
from test.shared.utils import assert_response_status, create_product


def _search(client: TestClient, **params: Any) -> dict[str, Any]:
    response = client.get(SEARCH, params=params)
    assert_response_status(response, 200)
    return response.json()


@pytest.fixture
def catalogue(client: TestClient, seller_user: dict[str, Any]) -> None:
    token = seller_user['token']
    create_product(
        client,
        token,
        title='Samsung Galaxy S23',
        description='Flagship phone',
        brand='Samsung',
        price=45000,
        condition='new',
        specifications={'storage': '256GB'},
    )
    create_product(
        client,
        token,
        title='Smart TV 55 inch',
        description='Samsung panel, barely used',
        brand='Hisense',
        price=30000,
        subcategory='tv',
        specifications={'panel': 'QLED'},
    )
    create_product(
        client,
        token,
        title='Leather sofa',
        description='Three seater',
        brand=None,
        price=8000,
        category='furniture',
        subcategory='sofas',
        condition='refurbished',
        specifications={},
        city='Adama',
        region='Oromia',
    )


@pytest.mark.integration
@pytest.mark.usefixtures('catalogue')
class TestSearch:
    def test_relevance_ranking(self, client: TestClient) -> None:
        body = _search(client, q='samsung')

        assert [p['title'] for p in body['products']] == ['Samsung Galaxy S23', 'Smart TV 55 inch']
        assert body['totalCount'] == 2
        assert body['products'][0]['seller']['businessName'] == "seller@test.com's Store"

    def test_facets_over_all_matches(self, client: TestClient) -> None:
        body = _search(client, limit=1)

        facets = body['facets']
        assert len(body['products']) == 1
        assert body['totalCount'] == 3
        assert {(f['value'], f['count']) for f in facets['categories']} == {
            ('electronics', 2),
            ('furniture', 1),
        }
        assert {(f['value'], f['count']) for f in facets['brands']} == {
            ('Samsung', 1),
            ('Hisense', 1),
        }
        assert [(r['min'], r['max'], r['count']) for r in facets['priceRanges']] == [
            (0, 10000, 1),
            (25000, 50000, 2),
        ]

    def test_suggestions(self, client: TestClient) -> None:
        with_query = _search(client, q='samsung')
        without_query = _search(client)

        assert with_query['suggestions'] == ['Samsung Galaxy S23', 'Samsung']
        assert without_query['suggestions'] is None

    def test_specification_match(self, client: TestClient) -> None:
        body = _search(client, q='qled')

        assert [p['title'] for p in body['products']] == ['Smart TV 55 inch']

    def test_specification_key_not_matched(self, client: TestClient) -> None:
        body = _search(client, q='storage')

        assert body['products'] == []
        assert body['totalCount'] == 0

    def test_condition_list(self, client: TestClient) -> None:
        body = _search(client, condition='new,refurbished', sortBy='price-low')

        assert [p['title'] for p in body['products']] == ['Leather sofa', 'Samsung Galaxy S23']

    def test_brands_filter(self, client: TestClient) -> None:
        body = _search(client, brands='Hisense')

        assert [p['title'] for p in body['products']] == ['Smart TV 55 inch']

    def test_location_and_price(self, client: TestClient) -> None:
        in_adama = _search(client, location='Adama')
        mid_range = _search(client, priceMin=20000, priceMax=40000)

        assert [p['title'] for p in in_adama['products']] == ['Leather sofa']
        assert [p['title'] for p in mid_range['products']] == ['Smart TV 55 inch']

    def test_sort_price_high(self, client: TestClient) -> None:
        body = _search(client, sortBy='price-high')

        assert [p['price'] for p in body['products']] == [45000, 30000, 8000]

    def test_no_match(self, client: TestClient) -> None:
        body = _search(client, q='bicycle')

        assert body['products'] == []
        assert body['totalCount'] == 0
        assert body['facets']['categories'] == []
        assert body['suggestions'] == []


@pytest.mark.integration
class TestSearchErrors:
    @pytest.mark.parametrize('params', [{'page': 0}, {'limit': 0}, {'limit': 101}])
    def test_invalid_pagination(self, client: TestClient, params: dict[str, Any]) -> None:
        response = client.get(SEARCH, params=params)

        assert_response_status(response, 400)
        assert response.json()['error'] == 'Invalid pagination parameters'

    def test_invalid_sort(self, client: TestClient) -> None:
        response = client.get(SEARCH, params={'sortBy': 'cheapest'})

        assert_response_status(response, 400)
        assert response.json()['error'].startswith('Invalid sortBy: cheapest')

    def test_invalid_condition(self, client: TestClient) -> None:
        response = client.get(SEARCH, params={'condition': 'new,mint'})

        assert_response_status(response, 400)
