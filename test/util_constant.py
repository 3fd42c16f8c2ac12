DEFAULT_PASSWORD = 'P@ssw0rd123'
WRONG_PASSWORD = 'wrong_password'

TEST_SELLER_EMAIL = 'seller@test.com'
TEST_BUYER_EMAIL = 'buyer@test.com'
ANOTHER_BUYER_EMAIL = 'another_buyer@test.com'

DEFAULT_CITY = 'Addis Ababa'
DEFAULT_REGION = 'Addis Ababa'
DEFAULT_COUNTRY = 'Ethiopia'

DEFAULT_PRODUCT = {
    'title': 'iPhone 14 Pro',
    'description': 'Deep purple, battery health 92%',
    'price': 85000,
    'category': 'electronics',
    'subcategory': 'phones',
    'condition': 'used',
    'brand': 'Apple',
    'images': ['https://cdn.example.com/iphone.jpg'],
    'specifications': {'storage': '256GB', 'color': 'Deep Purple'},
    'city': DEFAULT_CITY,
    'region': DEFAULT_REGION,
}

NON_EXISTENT_ID = '01936d8f-5e73-7c4e-a9c5-000000000000'
