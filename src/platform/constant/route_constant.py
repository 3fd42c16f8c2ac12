# API Route Constants

# Base API
API_BASE = '/api'

# Auth routes
AUTH_BASE = f'{API_BASE}/auth'
AUTH_REGISTER = f'{AUTH_BASE}/register'
AUTH_LOGIN = f'{AUTH_BASE}/login'

# Product routes
PRODUCT_BASE = f'{API_BASE}/products'
PRODUCT_LIST = PRODUCT_BASE
PRODUCT_CREATE = PRODUCT_BASE
PRODUCT_GET = f'{PRODUCT_BASE}/{{product_id}}'
PRODUCT_UPDATE = f'{PRODUCT_BASE}/{{product_id}}'
PRODUCT_DELETE = f'{PRODUCT_BASE}/{{product_id}}'
PRODUCT_REVIEW_CREATE = f'{PRODUCT_BASE}/{{product_id}}/reviews'

# Review routes
REVIEW_BASE = f'{API_BASE}/reviews'
REVIEW_UPDATE = f'{REVIEW_BASE}/{{review_id}}'
REVIEW_DELETE = f'{REVIEW_BASE}/{{review_id}}'

# User routes
USER_BASE = f'{API_BASE}/users'
USER_GET = f'{USER_BASE}/{{user_id}}'
USER_UPDATE = f'{USER_BASE}/{{user_id}}'

# Search routes
SEARCH = f'{API_BASE}/search'

# Service routes
HEALTH = '/health'
METRICS = '/metrics'
