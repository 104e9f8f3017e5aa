"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi-sqlalchemy.html
"""

from dependency_injector import containers, providers

from src.platform.database.db_setting import Database
from src.service.event.driven_adapter.repo.event_command_repo_impl import EventCommandRepoImpl
from src.service.event.driven_adapter.repo.event_query_repo_impl import EventQueryRepoImpl
from src.service.event.driven_adapter.storage.s3_object_storage_impl import S3ObjectStorageImpl
from src.service.event.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


class Container(containers.DeclarativeContainer):
    # Database (uses AsyncEngineManager with module-level settings)
    database = providers.Singleton(Database)

    # Repositories (stateless - use session_factory per-request)
    event_command_repo = providers.Singleton(
        EventCommandRepoImpl, session_factory=database.provided.session
    )
    event_query_repo = providers.Singleton(
        EventQueryRepoImpl, session_factory=database.provided.session
    )

    # Object storage (boto3 client is created lazily on first use)
    object_storage = providers.Singleton(S3ObjectStorageImpl)

    # Auth service
    jwt_auth = providers.Singleton(JwtAuth)


container = Container()
