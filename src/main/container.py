"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

from dependency_injector import containers, providers

from src.application.models import SystemInfo
from src.application.use_cases.health_use_cases import (
    GetApplicationInfoUseCase,
    GetHealthStatusUseCase,
)
from src.application.use_cases.sales_forecast_use_case import (
    GenerateSalesForecastUseCase,
)
from src.infrastructure.gateways.supabase_order_gateway import SupabaseOrderGateway
from src.infrastructure.services.health_check_service import HealthCheckService
from src.shared import get_logger

from .config import AppSettings

logger = get_logger(__name__)


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    wiring_config = containers.WiringConfiguration(packages=["..presentation"])

    # Settings
    config = providers.Configuration()

    # Gateways
    order_store_gateway = providers.Singleton(
        SupabaseOrderGateway,
        base_url=config.supabase.url,
        api_key=config.supabase.api_key,
        table=config.supabase.orders_table,
        timeout=config.supabase.timeout,
        page_size=config.supabase.page_size,
    )

    # Infrastructure services
    health_check_service = providers.Singleton(
        HealthCheckService,
        order_store_gateway=order_store_gateway,
        orders_table=config.supabase.orders_table,
    )

    system_info = providers.Singleton(
        SystemInfo,
        title=config.ge.title,
        description=config.ge.description,
        version=config.ge.version,
        environment=providers.Callable(
            lambda env: env.value if hasattr(env, "value") else str(env),
            config.environment,
        ),
        git_commit=config.ge.git_commit,
        build_time=config.ge.build_time,
        order_store_url=config.supabase.url,
        orders_table=config.supabase.orders_table,
        lookback_years=config.forecast.lookback_years,
        excluded_status=config.forecast.excluded_status,
    )

    # Application (use cases)
    generate_sales_forecast_use_case = providers.Factory(
        GenerateSalesForecastUseCase,
        order_store_gateway=order_store_gateway,
        lookback_years=config.forecast.lookback_years,
        excluded_status=config.forecast.excluded_status,
        variance_scale=config.forecast.variance_scale,
        minimum_observations=config.forecast.minimum_observations,
        history_window=config.forecast.history_window,
    )

    get_health_status_use_case = providers.Factory(
        GetHealthStatusUseCase,
        health_check_service=health_check_service,
    )

    get_application_info_use_case = providers.Factory(
        GetApplicationInfoUseCase,
        health_check_service=health_check_service,
        system_info=system_info,
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
    logger.info(
        "container.initialized",
        order_store_table=settings.supabase.orders_table,
        lookback_years=settings.forecast.lookback_years,
    )
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container
