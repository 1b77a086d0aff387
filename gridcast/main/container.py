"""
Dependency container injection module - Main Layer

Composition root: wires settings, storage, the process-wide model
handle and the use cases together with dependency-injector.
"""

from contextlib import asynccontextmanager

from dependency_injector import containers, providers

from gridcast.application.use_cases.health_use_cases import GetHealthStatusUseCase
from gridcast.application.use_cases.model_performance_use_case import (
    ModelPerformanceUseCase,
)
from gridcast.application.use_cases.model_prediction_use_case import (
    ModelPredictionUseCase,
)
from gridcast.application.use_cases.model_training_use_case import (
    ModelTrainingUseCase,
)
from gridcast.application.use_cases.seed_demand_history_use_case import (
    SeedDemandHistoryUseCase,
)
from gridcast.domain.entities.forecast_model import ForecastModelHandle
from gridcast.infrastructure.database import MongoDatabase
from gridcast.infrastructure.repositories import DemandRepository, StationRepository
from gridcast.infrastructure.services import (
    HealthCheckService,
    SyntheticExogenousSource,
)
from gridcast.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    wiring_config = containers.WiringConfiguration(packages=["..presentation"])

    # Settings
    config = providers.Configuration()

    # Infrastructure
    mongo_database = providers.Singleton(
        MongoDatabase,
        mongo_uri=config.database.mongo_uri,
        db_name=config.database.database_name,
    )

    station_repository = providers.Singleton(
        StationRepository,
        mongo_database=mongo_database,
    )

    demand_repository = providers.Singleton(
        DemandRepository,
        mongo_database=mongo_database,
    )

    exogenous_source = providers.Singleton(
        SyntheticExogenousSource,
        temperature_range=providers.List(
            config.forecast.temperature_min, config.forecast.temperature_max
        ),
        humidity_range=providers.List(
            config.forecast.humidity_min, config.forecast.humidity_max
        ),
        prior_demand_range=providers.List(
            config.forecast.prior_demand_min, config.forecast.prior_demand_max
        ),
        seed=config.forecast.seed,
    )

    health_check_service = providers.Singleton(
        HealthCheckService,
        mongo_database=mongo_database,
    )

    # The one model of the process, shared by every use case below
    model_handle = providers.Singleton(ForecastModelHandle)

    # Application (use cases)
    model_training_use_case = providers.Factory(
        ModelTrainingUseCase,
        demand_repository=demand_repository,
        model_handle=model_handle,
        epochs=config.training.epochs,
        learning_rate=config.training.learning_rate,
        min_data_points=config.training.min_data_points,
        timeout_seconds=config.training.timeout_seconds,
    )

    model_prediction_use_case = providers.Factory(
        ModelPredictionUseCase,
        station_repository=station_repository,
        model_handle=model_handle,
        exogenous_source=exogenous_source,
    )

    model_performance_use_case = providers.Factory(
        ModelPerformanceUseCase,
        demand_repository=demand_repository,
        model_handle=model_handle,
    )

    get_health_status_use_case = providers.Factory(
        GetHealthStatusUseCase,
        health_check_service=health_check_service,
        model_handle=model_handle,
    )

    seed_demand_history_use_case = providers.Factory(
        SeedDemandHistoryUseCase,
        station_repository=station_repository,
        demand_repository=demand_repository,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Lifecycle of external resources.

    Ensures indexes on startup and closes the Mongo client on shutdown.
    """
    container = get_container()
    mongo_database = container.mongo_database()

    try:
        logger.info("container.mongo.ensure_indexes")
        await mongo_database.create_indexes()
        logger.info("container.resources.initialized")
        yield container
    finally:
        logger.info("container.mongo.close")
        mongo_database.close()
        logger.info("container.resources.shutdown")
