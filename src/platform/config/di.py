"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.database.orm_db_setting import Database
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.service.marketplace.driven_adapter.repo.product_command_repo_impl import (
    ProductCommandRepoImpl,
)
from src.service.marketplace.driven_adapter.repo.product_query_repo_impl import (
    ProductQueryRepoImpl,
)
from src.service.marketplace.driven_adapter.repo.review_command_repo_impl import (
    ReviewCommandRepoImpl,
)
from src.service.marketplace.driven_adapter.repo.review_query_repo_impl import ReviewQueryRepoImpl
from src.service.marketplace.driven_adapter.repo.user_command_repo_impl import UserCommandRepoImpl
from src.service.marketplace.driven_adapter.repo.user_query_repo_impl import UserQueryRepoImpl
from src.service.marketplace.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from src.service.marketplace.driven_adapter.security.jwt_token_service import JwtTokenService


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Store handle (engine + session maker), created once per process
    database = providers.Singleton(Database)

    # Repositories (stateless - open a session per call from session_factory)
    user_command_repo = providers.Singleton(
        UserCommandRepoImpl, session_factory=database.provided.session
    )
    user_query_repo = providers.Singleton(
        UserQueryRepoImpl, session_factory=database.provided.session
    )
    product_command_repo = providers.Singleton(
        ProductCommandRepoImpl, session_factory=database.provided.session
    )
    product_query_repo = providers.Singleton(
        ProductQueryRepoImpl, session_factory=database.provided.session
    )
    review_command_repo = providers.Singleton(
        ReviewCommandRepoImpl, session_factory=database.provided.session
    )
    review_query_repo = providers.Singleton(
        ReviewQueryRepoImpl, session_factory=database.provided.session
    )

    # Multi-repository writes share one session per unit of work
    unit_of_work = providers.Factory(
        SqlAlchemyUnitOfWork, session_factory=database.provided.session
    )

    # Auth services
    password_hasher = providers.Singleton(BcryptPasswordHasher)
    token_service = providers.Singleton(JwtTokenService)


container = Container()


def setup() -> None:
    container.config_service()
    container.database()


async def cleanup() -> None:
    await container.database().dispose()
    container.reset_singletons()
