"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from food_scanner.adapters.supabase_product_repository import (
    SupabaseProductRepository,
)
from food_scanner.config import Settings
from food_scanner.services.products import ProductService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    product_service: ProductService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_key
    )
    product_repository = SupabaseProductRepository(
        supabase_client, table=resolved_settings.products_table
    )
    product_service = ProductService(
        repository=product_repository,
        zero_value_policy=resolved_settings.zero_value_policy,
        alternatives_limit=resolved_settings.alternatives_limit,
        trace_ranking=resolved_settings.trace_ranking,
    )

    async def close_resources() -> None:
        product_repository.close()

    return AppContainer(
        settings=resolved_settings,
        product_service=product_service,
        close_resources=close_resources,
    )
