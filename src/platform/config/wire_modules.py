"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.marketplace.app.command import (
    create_product_use_case,
    create_review_use_case,
    delete_product_use_case,
    delete_review_use_case,
    login_use_case,
    register_user_use_case,
    update_product_use_case,
    update_review_use_case,
    update_user_profile_use_case,
)
from src.service.marketplace.app.query import (
    get_product_use_case,
    get_user_profile_use_case,
    list_products_use_case,
    search_products_use_case,
)
from src.service.marketplace.driving_adapter.http_controller.auth import bearer_auth


WIRE_MODULES: list[ModuleType] = [
    register_user_use_case,
    login_use_case,
    create_product_use_case,
    update_product_use_case,
    delete_product_use_case,
    create_review_use_case,
    update_review_use_case,
    delete_review_use_case,
    update_user_profile_use_case,
    list_products_use_case,
    get_product_use_case,
    get_user_profile_use_case,
    search_products_use_case,
    bearer_auth,
]
