"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.

Containers are built per application instance and stored on the app
state, so several apps (for example test hosts) can live in one process
without sharing providers.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from dependency_injector import containers, providers

from src.application.models import SystemInfo
from src.application.use_cases.health_use_cases import (
    GetApplicationInfoUseCase,
    GetHealthReportUseCase,
)
from src.application.use_cases.item_use_cases import (
    CreateItemUseCase,
    DeleteItemUseCase,
    GetItemByIdUseCase,
    GetItemsUseCase,
)
from src.infrastructure.database import MongoDatabase
from src.infrastructure.repositories.item_repository import ItemRepository
from src.infrastructure.services.health_aggregator import create_health_aggregator
from src.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependecy-injector."""

    # Settings
    config = providers.Configuration()

    # Infrastructure
    mongo_database = providers.Singleton(
        MongoDatabase,
        mongo_uri=config.database.mongo_uri,
        db_name=config.database.database_name,
        timeout_ms=config.database.timeout_ms,
    )

    item_repository = providers.Singleton(
        ItemRepository,
        database=mongo_database,
    )

    health_aggregator = providers.Singleton(
        create_health_aggregator,
        mongo_database,
        redis_url=config.health.redis_url,
        http_dependencies=config.health.http_dependencies,
        default_timeout=config.health.default_timeout,
        http_timeout=config.health.http_timeout,
    )

    system_info = providers.Singleton(
        SystemInfo,
        title=config.service.title,
        description=config.service.description,
        version=config.service.version,
        environment=providers.Callable(
            lambda env: env.value if hasattr(env, "value") else str(env),
            config.environment,
        ),
        git_commit=config.service.git_commit,
        build_time=config.service.build_time,
        mongo_uri=config.database.mongo_uri,
        redis_url=config.health.redis_url,
    )

    # Application (use cases)
    create_item_use_case = providers.Factory(
        CreateItemUseCase,
        item_repository=item_repository,
    )

    get_items_use_case = providers.Factory(
        GetItemsUseCase,
        item_repository=item_repository,
    )

    get_item_by_id_use_case = providers.Factory(
        GetItemByIdUseCase,
        item_repository=item_repository,
    )

    delete_item_use_case = providers.Factory(
        DeleteItemUseCase,
        item_repository=item_repository,
    )

    get_health_report_use_case = providers.Factory(
        GetHealthReportUseCase,
        health_check_service=health_aggregator,
    )

    get_application_info_use_case = providers.Factory(
        GetApplicationInfoUseCase,
        health_check_service=health_aggregator,
        system_info=system_info,
    )


def build_container(settings: AppSettings) -> AppContainer:
    """Create a container configured from ``settings``."""
    container = AppContainer()
    container.config.from_pydantic(settings)
    return container


@asynccontextmanager
async def app_lifespan(container: AppContainer) -> AsyncIterator[AppContainer]:
    """
    Centralized lifecycle management for external resources.

    Prepares the document database on startup and closes it on shutdown,
    whichever exit path the body takes.
    """
    database = container.mongo_database()

    try:
        logger.info("container.database.ensure_indexes")
        await database.create_indexes()
        logger.info("container.resources.initialized")
        yield container
    finally:
        logger.info("container.database.close")
        database.close()
        logger.info("container.resources.shutdown")
